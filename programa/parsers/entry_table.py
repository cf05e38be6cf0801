"""Entry table extraction.

Both layouts share the table boundaries: the table opens at the column-title
row and closes at the observations section. What lies between is read by one
of two strategies:

    ColumnEntryExtractor    one logical line per entry, columns separated by
                            runs of two or more spaces
    VerticalEntryExtractor  one field per physical line in a fixed cycle with
                            one optional line
"""

import re
from enum import Enum

from programa.constants import (
    MAX_DORSAL,
    MAX_POST_POSITION,
    MIN_DORSAL,
    MIN_ENTRY_COLUMNS,
    MIN_POST_POSITION,
    PRICE_SENTINEL,
    SENTINEL_SCAN_LIMIT,
    VERTICAL_FIELDS_AFTER_SENTINEL,
)
from programa.models import Entry, Horse, Person, PersonRole
from programa.parsers.line_reassembler import SECTION_KEYWORD_PATTERN
from programa.utils.text import clean
from programa.utils.weight import parse_weight
from programa.validation import ValidationCollector

# "N°  Ejemplar", "NºEJEMPLAR", "No Ejemplar"; the ordinal glyph varies
TABLE_HEADER_PATTERN = re.compile(r"^N.?\s*EJEMPLAR", re.IGNORECASE)
TABLE_END_PATTERN = re.compile(r"^OBSERVACI", re.IGNORECASE)

COLUMN_SEPARATOR = re.compile(r"\s{2,}")
_PIPE_ARTIFACT = re.compile(r"[ \t]*\|[ \t]*")
_SMALL_NUMBER = re.compile(r"[0-9]{1,3}")

BARE_DORSAL_PATTERN = re.compile(r"^[0-9]{1,2}$")
PERCENT_LABEL_PATTERN = re.compile(r"^%\s*\d")
VERTICAL_BOILERPLATE_PATTERN = re.compile(
    r"^(?:PROGRAMACION|INSTITUTO|HIPODROMO|JUNTA|CARRERA|%|Mtrs|MED:|PROP:)",
    re.IGNORECASE,
)


class TableState(Enum):
    BEFORE_TABLE = "before_table"
    IN_TABLE = "in_table"
    AFTER_TABLE = "after_table"


class EntryRejected(ValueError):
    """Raised while reading a record that fails a field constraint."""


def table_lines(lines: list[str]) -> list[str]:
    """Return the stripped lines between the table header and its end marker.

    Lines before the header and at or after the observations marker are
    dropped. Repeated header rows inside the table are dropped as well.
    """
    state = TableState.BEFORE_TABLE
    rows: list[str] = []

    for line in lines:
        stripped = line.strip()
        if state is TableState.BEFORE_TABLE:
            if TABLE_HEADER_PATTERN.match(stripped):
                state = TableState.IN_TABLE
            continue

        if TABLE_END_PATTERN.match(stripped):
            state = TableState.AFTER_TABLE
            break
        if TABLE_HEADER_PATTERN.match(stripped):
            continue
        rows.append(stripped)

    return rows


def parse_post_position(text: str) -> int:
    """Validate a post position token.

    Raises:
        EntryRejected: If the token is not an integer in range.
    """
    token = text.strip()
    if not _SMALL_NUMBER.fullmatch(token):
        raise EntryRejected(f"post position {token!r} is not a number")
    post_position = int(token)
    if not MIN_POST_POSITION <= post_position <= MAX_POST_POSITION:
        raise EntryRejected(f"post position {post_position} out of range")
    return post_position


class EntryTableExtractor:
    """Base class for entry table strategies.

    Subclasses implement _extract_entries(), which reads the rows of the
    table. Duplicate dorsal numbers are resolved here: the first entry wins
    and each later duplicate is dropped with a warning.
    """

    def extract(
        self, block: str, collector: ValidationCollector, label: str
    ) -> tuple[Entry, ...]:
        """Extract the entries of one race block.

        Args:
            block: The block text.
            collector: Warning collector.
            label: Block label used to prefix warnings (e.g. "Race 3").

        Returns:
            Entries in table order, unique by dorsal number.
        """
        rows = table_lines(block.splitlines())
        entries = self._extract_entries(rows, collector, label)

        seen: set[int] = set()
        unique: list[Entry] = []
        for entry in entries:
            if entry.dorsal_number in seen:
                collector.warn(
                    f"{label}: duplicate dorsal {entry.dorsal_number} ignored."
                )
                continue
            seen.add(entry.dorsal_number)
            unique.append(entry)
        return tuple(unique)

    def _extract_entries(
        self, rows: list[str], collector: ValidationCollector, label: str
    ) -> list[Entry]:
        raise NotImplementedError

    @staticmethod
    def _build_entry(
        dorsal: int,
        post_position: int,
        weight_raw: str,
        horse: Horse,
        jockey_name: str,
        trainer_name: str,
        medication: str | None,
        equipment: str | None,
        collector: ValidationCollector,
        label: str,
    ) -> Entry:
        if not horse.name:
            raise EntryRejected("empty horse name")
        if not jockey_name:
            raise EntryRejected("empty jockey name")
        if not trainer_name:
            raise EntryRejected("empty trainer name")

        weight = parse_weight(weight_raw)
        if weight is None:
            collector.warn(
                f"{label}: unparseable weight {weight_raw!r} for dorsal {dorsal}; using 0."
            )
            weight = 0.0

        return Entry(
            dorsal_number=dorsal,
            post_position=post_position,
            weight=weight,
            weight_raw=weight_raw,
            horse=horse,
            jockey=Person.from_name(jockey_name, PersonRole.JOCKEY),
            trainer=Person.from_name(trainer_name, PersonRole.TRAINER),
            medication=medication or None,
            equipment_codes=equipment or None,
        )


class ColumnEntryExtractor(EntryTableExtractor):
    """Column-oriented strategy.

    Column layout after splitting on runs of two or more spaces:

        [0] dorsal  [1] horse  [2] medication  [3] weight  [4] jockey
        [5] equipment  [6..n-2] trainer  [n-1] post position

    The trainer columns are rejoined with single spaces, so a trainer name
    split by an internal double space still reads correctly.

    Example:
        >>> extractor = ColumnEntryExtractor()
        >>> line = "5  SUNSET RIDER  BUT  54  PEREZ JUAN  L.BZ.  GOMEZ ANA  3"
        >>> extractor.parse_line(line, ValidationCollector(), "Race 1").horse.name
        'SUNSET RIDER'
    """

    def _extract_entries(self, rows, collector, label):
        entries: list[Entry] = []
        for row in rows:
            if SECTION_KEYWORD_PATTERN.match(row):
                continue
            line = _PIPE_ARTIFACT.sub("  ", row).strip()
            if not COLUMN_SEPARATOR.search(line):
                # free text inside the table (notes, page furniture)
                continue
            try:
                entries.append(self.parse_line(line, collector, label))
            except EntryRejected as e:
                collector.warn(f"{label}: entry line rejected ({e}): {line}")
        return entries

    def parse_line(
        self, line: str, collector: ValidationCollector, label: str
    ) -> Entry:
        """Parse one logical entry line.

        Raises:
            EntryRejected: If the line fails a column constraint.
        """
        columns = [c.strip() for c in COLUMN_SEPARATOR.split(line.strip()) if c.strip()]
        if len(columns) < MIN_ENTRY_COLUMNS:
            raise EntryRejected(
                f"expected at least {MIN_ENTRY_COLUMNS} columns, got {len(columns)}"
            )

        if not _SMALL_NUMBER.fullmatch(columns[0]):
            raise EntryRejected(f"dorsal {columns[0]!r} is not numeric")
        dorsal = int(columns[0])
        post_position = parse_post_position(columns[-1])

        return self._build_entry(
            dorsal=dorsal,
            post_position=post_position,
            weight_raw=columns[3],
            horse=Horse(name=clean(columns[1])),
            jockey_name=clean(columns[4]),
            trainer_name=clean(" ".join(columns[6:-1])),
            medication=clean(columns[2]),
            equipment=clean(columns[5]),
            collector=collector,
            label=label,
        )


class VerticalEntryExtractor(EntryTableExtractor):
    """Vertical fixed-cycle strategy.

    Each entry is laid out one field per line:

        dorsal
        HORSE NAME
        SIRE - DAM
        [medication marker]     optional
        0,00                    price placeholder
        weight
        JOCKEY
        equipment
        TRAINER
        post position

    Because the medication marker is optional, the weight is located by a
    bounded forward scan for the price placeholder rather than a fixed offset.
    """

    def _extract_entries(self, rows, collector, label):
        lines = rows[self.find_entries_start(rows):]
        entries: list[Entry] = []

        i = 0
        while i < len(lines):
            dorsal = self._match_dorsal(lines[i])
            if dorsal is None or not self._is_horse_line(lines, i + 1):
                i += 1
                continue
            try:
                entry, next_index = self.parse_record(lines, i, collector, label)
            except EntryRejected as e:
                collector.warn(f"{label}: dorsal {dorsal} rejected ({e}).")
                # advance one line only so a misaligned record can resync
                i += 1
                continue
            entries.append(entry)
            i = next_index

        return entries

    @staticmethod
    def find_entries_start(rows: list[str]) -> int:
        """Index of the first line after the repeated front matter.

        The front matter ends with the five prize-percentage label/value
        pairs; entries begin two lines past the last percentage label.
        """
        last_label = None
        for index, row in enumerate(rows):
            if PERCENT_LABEL_PATTERN.match(row):
                last_label = index
        return 0 if last_label is None else last_label + 2

    @staticmethod
    def scan_for_weight(lines: list[str], start: int) -> tuple[int, str | None] | None:
        """Find the weight line by scanning for the price placeholder.

        Args:
            lines: Table lines.
            start: Index of the first line after the pedigree line.

        Returns:
            (weight line index, medication marker or None), or None when the
            placeholder is not within SENTINEL_SCAN_LIMIT lines.
        """
        for offset in range(SENTINEL_SCAN_LIMIT):
            index = start + offset
            if index >= len(lines):
                return None
            if lines[index] == PRICE_SENTINEL:
                marker = clean(" ".join(lines[start:index])) or None
                return index + 1, marker
        return None

    def parse_record(
        self, lines: list[str], index: int, collector: ValidationCollector, label: str
    ) -> tuple[Entry, int]:
        """Parse the record whose dorsal line is at index.

        Returns:
            The entry and the index right after its post position line.

        Raises:
            EntryRejected: If the record fails a field constraint.
        """
        dorsal = int(lines[index])
        if index + 2 >= len(lines):
            raise EntryRejected("record truncated")
        horse = self._parse_horse(lines[index + 1], lines[index + 2])

        located = self.scan_for_weight(lines, index + 3)
        if located is None:
            raise EntryRejected(f"price placeholder {PRICE_SENTINEL} not found")
        weight_index, medication = located

        fields = lines[weight_index:weight_index + VERTICAL_FIELDS_AFTER_SENTINEL]
        if len(fields) < VERTICAL_FIELDS_AFTER_SENTINEL:
            raise EntryRejected("record truncated")
        weight_raw, jockey_name, equipment, trainer_name, post_text = fields

        if not weight_raw[:1].isdigit():
            raise EntryRejected(f"weight {weight_raw!r} does not start with a digit")
        post_position = parse_post_position(post_text)

        entry = self._build_entry(
            dorsal=dorsal,
            post_position=post_position,
            weight_raw=weight_raw,
            horse=horse,
            jockey_name=clean(jockey_name),
            trainer_name=clean(trainer_name),
            medication=medication,
            equipment=clean(equipment),
            collector=collector,
            label=label,
        )
        return entry, weight_index + VERTICAL_FIELDS_AFTER_SENTINEL

    @staticmethod
    def _match_dorsal(line: str) -> int | None:
        if not BARE_DORSAL_PATTERN.match(line):
            return None
        dorsal = int(line)
        if not MIN_DORSAL <= dorsal <= MAX_DORSAL:
            return None
        return dorsal

    @staticmethod
    def _is_horse_line(lines: list[str], index: int) -> bool:
        if index >= len(lines):
            return False
        line = lines[index]
        if not any(c.isalpha() for c in line):
            return False
        return not VERTICAL_BOILERPLATE_PATTERN.match(line)

    @staticmethod
    def _parse_horse(name_line: str, pedigree_line: str) -> Horse:
        sire, separator, dam = pedigree_line.partition(" - ")
        if not separator:
            return Horse(name=clean(name_line))
        return Horse(
            name=clean(name_line), sire=clean(sire) or None, dam=clean(dam) or None
        )
