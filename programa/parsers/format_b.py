"""Format B: Valencia track layout.

Each race block starts with "REUNION: N" and the entry table is vertical,
one field per line:

    1
    HORSE NAME
    SIRE - DAM
    B.L             (optional medication marker)
    0,00
    54-2
    JOCKEY NAME
    L.V.LA.OT.BB.GR
    TRAINER NAME
    7
    MED:
    2021
    PROP: ...
"""

import re

from programa.constants import DAY_OF_WEEK_PATTERN
from programa.models import GameType, PrizePool, SourceFormat
from programa.parsers.base import FormatStrategy
from programa.parsers.entry_table import VerticalEntryExtractor
from programa.parsers.meeting_header import MeetingHeaderExtractor
from programa.parsers.race_header import RaceHeaderExtractor
from programa.utils.text import parse_amount

_TIME = r"\d{1,2}:\d{2}\s*[ap]\.?\s*m\.?"

PERCENT_LABEL_LINE = re.compile(r"^%\s*(\d)\s*[º°o]?$")
PERCENT_VALUE_LINE = re.compile(r"^(\d{1,3})$")
PURSE_LINE_PATTERN = re.compile(r"^Bs\.?[ \t]+(\d[\d.,]*)", re.MULTILINE)

# The observations section marks offered games with an "X" on the next line.
MARKED_GAMES: tuple[tuple[str, GameType], ...] = (
    ("GANADOR", GameType.GANADOR),
    ("PLACE", GameType.PLACE),
    ("EXACTA", GameType.EXACTA),
    ("TRIFECTA", GameType.TRIFECTA),
    ("SUPERFECTA", GameType.SUPERFECTA),
    ("QUINELA", GameType.QUINELA),
)
PRESENT_GAMES: tuple[tuple[re.Pattern, GameType], ...] = (
    (re.compile(r"POOL\s+DE\s+4", re.IGNORECASE), GameType.POOL_4),
    (re.compile(r"DOBLE\s+PERFECTA", re.IGNORECASE), GameType.DOBLE_SELECCION),
)


class FormatBMeetingExtractor(MeetingHeaderExtractor):
    """Meeting header for format B, read from the first race block."""

    MEETING_NUMBER_PATTERN = re.compile(r"^REUNION:[ \t]*(\d{1,3})", re.MULTILINE)
    DAY_PATTERN = re.compile(
        rf"^DIA:[ \t]*({DAY_OF_WEEK_PATTERN})", re.IGNORECASE | re.MULTILINE
    )
    DATE_PATTERN = re.compile(
        r"^FECHA:[ \t]*(\d{1,2}/\d{1,2}/\d{2,4})", re.MULTILINE
    )


class FormatBRaceHeaderExtractor(RaceHeaderExtractor):
    """Race header for format B. There is no combined values line."""

    FIELD_PATTERNS = {
        "distance": re.compile(
            r"^DISTANCIA:[ \t]*\n?[ \t]*(\d{1,2}\.\d{3}|\d{3,4})\b",
            re.IGNORECASE | re.MULTILINE,
        ),
        "race_number": re.compile(
            r"^CARRERA DEL D[IÍ]A:[ \t]*\n?[ \t]*(\d{1,2})\b",
            re.IGNORECASE | re.MULTILINE,
        ),
        "call_number": re.compile(r"LLAMADO:[ \t]*(\d{1,2})\b", re.IGNORECASE),
        "annual_race_number": re.compile(
            r"^CARRERA DEL A[ÑN]O:[ \t]*\n?[ \t]*(\d{1,4})\b",
            re.IGNORECASE | re.MULTILINE,
        ),
        "scheduled_time": re.compile(
            rf"^HORA:[ \t]*({_TIME})", re.IGNORECASE | re.MULTILINE
        ),
    }

    def _read_prize_percentages(self, lines):
        placings: list[tuple[int, int]] = []
        last_index = None
        for index, line in enumerate(lines[:-1]):
            label = PERCENT_LABEL_LINE.match(line)
            if not label:
                continue
            value = PERCENT_VALUE_LINE.match(lines[index + 1])
            if not value:
                continue
            placings.append((int(label.group(1)), int(value.group(1))))
            last_index = index + 1
        return placings, None, last_index

    def _read_purse(self, block, lines, last_pct_index):
        match = PURSE_LINE_PATTERN.search(block)
        if not match:
            return PrizePool()
        return PrizePool(primary=parse_amount(match.group(1)) or 0.0)

    def _read_games(self, block):
        games: set[GameType] = set()
        for keyword, game in MARKED_GAMES:
            if re.search(rf"^{keyword}[ \t]*\n[ \t]*X[ \t]*$", block, re.MULTILINE):
                games.add(game)
        for pattern, game in PRESENT_GAMES:
            if pattern.search(block):
                games.add(game)
        return frozenset(games)


class FormatBStrategy(FormatStrategy):
    """Vertical fixed-cycle Valencia layout."""

    FORMAT = SourceFormat.FORMAT_B
    MEETING_EXTRACTOR_CLASS = FormatBMeetingExtractor
    RACE_HEADER_EXTRACTOR_CLASS = FormatBRaceHeaderExtractor
    ENTRY_TABLE_EXTRACTOR_CLASS = VerticalEntryExtractor

    def meeting_header_text(self, text, blocks):
        return blocks[0] if blocks else text
