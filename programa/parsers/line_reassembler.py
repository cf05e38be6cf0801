"""Line reassembly for wrapped entry records.

Text extraction upstream groups content by vertical position, so one entry
record can be split over several physical lines:

    5  SUNSET RIDER  BUT  54  PEREZ JUAN  L.BZ.  GOMEZ
    ANA  3

The reassembler joins those physical lines back into one logical line. It
knows nothing about either source format and runs once before segmentation.
"""

import re
from collections.abc import Iterable

from programa.constants import DAY_OF_WEEK_PATTERN

# 1-2 digit index, a run of >=2 whitespace, then a letter-leading token
ENTRY_START_PATTERN = re.compile(r"^\d{1,2}\s{2,}[A-ZÁÉÍÓÚÑ´'(]")

SECTION_KEYWORD_PATTERN = re.compile(
    r"^(?:JUEGOS|OBSERVACI|Junta|Hip[oó]dromo|Carrera\s+Prog|Reuni[oó]n|Premio"
    r"|N.?\s*Ejemplar)",
    re.IGNORECASE,
)

# "9  DOMINGO": meeting number followed by the day name
DAY_MARKER_PATTERN = re.compile(
    rf"^\d+\s{{2,}}(?:{DAY_OF_WEEK_PATTERN})", re.IGNORECASE
)

_CONTINUATION_MARKER = re.compile(r"^\.\s*")


def is_entry_start(line: str) -> bool:
    """Return True if the physical line opens a new entry record."""
    return bool(ENTRY_START_PATTERN.match(line)) and not DAY_MARKER_PATTERN.match(line)


def ends_entry(line: str) -> bool:
    """Return True if the physical line closes the current entry record."""
    stripped = line.strip()
    return (
        is_entry_start(line)
        or bool(SECTION_KEYWORD_PATTERN.match(stripped))
        or bool(DAY_MARKER_PATTERN.match(line))
    )


def reassemble_lines(lines: Iterable[str]) -> list[str]:
    """Join wrapped entry lines into logical lines.

    Two states: outside an entry, lines pass through untouched; inside an
    entry, each following non-blank line is appended (space-joined) until a
    line that starts a new entry, a section keyword or a day-of-week marker.
    Blank lines inside an entry are dropped without ending it.

    Args:
        lines: Physical text lines.

    Returns:
        Logical lines, in order. Never more than the input.
    """
    result: list[str] = []
    current: str | None = None

    for raw_line in lines:
        line = raw_line.rstrip()

        if current is not None:
            if not line.strip():
                continue
            if not ends_entry(line):
                continuation = _CONTINUATION_MARKER.sub("", line.lstrip())
                if continuation:
                    current = f"{current} {continuation}"
                continue
            result.append(current)
            current = None

        if is_entry_start(line):
            current = line
        else:
            result.append(line)

    if current is not None:
        result.append(current)

    return result


def reassemble_text(text: str) -> str:
    """Reassemble a whole document and return it as text again."""
    return "\n".join(reassemble_lines(text.splitlines()))
