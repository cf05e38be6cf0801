"""Race header extraction.

The numeric values of a race header usually share one grouped line that is
separate from the line carrying their labels. Extraction is an ordered list
of attempts: the precise combined values line first, then independent
label-anchored patterns, one per field. The first attempt that yields every
field wins; otherwise the partial results are merged field by field.
"""

import re
from collections.abc import Callable

from programa.constants import MAX_PRIZE_PERCENT_TOTAL, MIN_PRIZE_PERCENT_TOKENS
from programa.models import GameType, PrizeDistribution, PrizePool, Race
from programa.parsers.entry_table import TABLE_HEADER_PATTERN
from programa.utils.text import clean, parse_amount
from programa.validation import ValidationCollector

HEADER_FIELDS = (
    "distance",
    "race_number",
    "call_number",
    "annual_race_number",
    "scheduled_time",
)

CONDITIONS_START_PATTERN = re.compile(
    r"^(?:HANDICAP|PESOS|P\.?\s?E\.|COPA|CL[AÁ]SICO|RECLAMADO"
    r"|PARA\s+(?:CABALLOS|YEGUAS|POTROS|POTRANCAS|EJEMPLARES))",
    re.IGNORECASE,
)

CONDITIONS_END_PATTERN = re.compile(
    r"^(?:Premio\s+Bs|Bs\.?\s+\d|N.?\s*Ejemplar|JUEGOS|OBSERVACI|%"
    r"|\d[\d.,]*\s+\d[\d.,]*$)"
    r"|\d+\s*%\s*al\s",
    re.IGNORECASE,
)

_CONDITIONS_LABEL = re.compile(r"\s*Condici[oó]n:\s*", re.IGNORECASE)

TWO_NUMBER_LINE_PATTERN = re.compile(r"^(\d[\d.,]*)\s+(\d[\d.,]*)$")

# Checked in order for each token; the first hit wins.
GAME_TOKEN_PATTERNS: tuple[tuple[re.Pattern, GameType], ...] = (
    (re.compile(r"POOL\s+DE\s+4", re.IGNORECASE), GameType.POOL_4),
    (re.compile(r"DOBLE", re.IGNORECASE), GameType.DOBLE_SELECCION),
    (re.compile(r"SUPERFECTA", re.IGNORECASE), GameType.SUPERFECTA),
    (re.compile(r"TRIFECTA", re.IGNORECASE), GameType.TRIFECTA),
    (re.compile(r"EXACTA", re.IGNORECASE), GameType.EXACTA),
    (re.compile(r"QUINELA", re.IGNORECASE), GameType.QUINELA),
    (re.compile(r"PLACE", re.IGNORECASE), GameType.PLACE),
    (re.compile(r"GANADOR", re.IGNORECASE), GameType.GANADOR),
)


def block_label(race_number: int, block_index: int) -> str:
    """Human-readable label for warnings about one block."""
    if race_number:
        return f"Race {race_number}"
    return f"Race block {block_index}"


def map_game_token(token: str) -> GameType | None:
    """Map one wagering-game token to the closed GameType set."""
    for pattern, game in GAME_TOKEN_PATTERNS:
        if pattern.search(token):
            return game
    return None


def _to_int(text: str) -> int:
    return int(text.replace(".", ""))


class RaceHeaderExtractor:
    """Base extractor for race-level fields.

    Subclasses provide the layout's patterns and the three readers that
    differ between layouts: prize percentages, purse and wagering games.

    Attributes:
        COMBINED_VALUES_PATTERN: Values line with groups (distance, race
            number, call number, annual race number, scheduled time), or None.
        FIELD_PATTERNS: One label-anchored pattern per header field.
    """

    COMBINED_VALUES_PATTERN: re.Pattern | None = None
    FIELD_PATTERNS: dict[str, re.Pattern] = {}

    def extract(
        self, block: str, collector: ValidationCollector, block_index: int
    ) -> Race:
        """Extract the Race of one block.

        Args:
            block: The block text.
            collector: Warning collector.
            block_index: 1-based position of the block, for warnings.

        Returns:
            The Race. race_number is 0 when it could not be found.
        """
        fields = self.extract_header_fields(block)

        race_number = fields.get("race_number") or 0
        if not race_number:
            collector.warn(
                f"Race block {block_index}: race number not found; using 0."
            )
        label = block_label(race_number, block_index)

        lines = [line.strip() for line in block.splitlines()]
        placings, breeder_bonus, last_pct_index = self._read_prize_percentages(lines)
        distribution = self._build_distribution(
            placings, breeder_bonus, collector, label
        )

        return Race(
            race_number=race_number,
            distance=fields.get("distance") or 0,
            scheduled_time=fields.get("scheduled_time") or "",
            conditions=self.extract_conditions(lines),
            prize_pool=self._read_purse(block, lines, last_pct_index),
            annual_race_number=fields.get("annual_race_number"),
            call_number=fields.get("call_number"),
            prize_distribution=distribution,
            wagering_games=self._read_games(block),
        )

    # --- header fields -------------------------------------------------

    def header_attempts(self) -> tuple[Callable[[str], dict | None], ...]:
        """Ordered extraction attempts, most precise first."""
        return (self.match_combined_values_line, self.match_independent_fields)

    def extract_header_fields(self, block: str) -> dict:
        """Run the attempts in order and return the best field set."""
        merged: dict = {}
        for attempt in self.header_attempts():
            partial = attempt(block)
            if partial is None:
                continue
            if all(partial.get(name) is not None for name in HEADER_FIELDS):
                return partial
            for name, value in partial.items():
                if value is not None:
                    merged.setdefault(name, value)
        return merged

    def match_combined_values_line(self, block: str) -> dict | None:
        if self.COMBINED_VALUES_PATTERN is None:
            return None
        match = self.COMBINED_VALUES_PATTERN.search(block)
        if not match:
            return None
        return {
            "distance": _to_int(match.group(1)),
            "race_number": int(match.group(2)),
            "call_number": int(match.group(3)),
            "annual_race_number": int(match.group(4)),
            "scheduled_time": clean(match.group(5)),
        }

    def match_independent_fields(self, block: str) -> dict:
        fields: dict = {}
        for name in HEADER_FIELDS:
            pattern = self.FIELD_PATTERNS.get(name)
            if pattern is None:
                continue
            match = pattern.search(block)
            if not match:
                continue
            if name == "scheduled_time":
                fields[name] = clean(match.group(1))
            else:
                fields[name] = _to_int(match.group(1))
        return fields

    # --- conditions ----------------------------------------------------

    def extract_conditions(self, lines: list[str]) -> str:
        """Capture the wrapped conditions text.

        The window opens at the first class-of-race keyword line and closes
        at the purse line, the percentage line or the entry table header.
        """
        collected: list[str] = []
        for line in lines:
            if not collected:
                if TABLE_HEADER_PATTERN.match(line):
                    break
                if CONDITIONS_START_PATTERN.match(line):
                    collected.append(line)
                continue
            if CONDITIONS_END_PATTERN.search(line):
                break
            collected.append(line)

        text = _CONDITIONS_LABEL.sub(" ", " ".join(collected))
        return clean(text)

    # --- prize distribution --------------------------------------------

    def _read_prize_percentages(
        self, lines: list[str]
    ) -> tuple[list[tuple[int, int]], int | None, int | None]:
        """Return (placing, percent) pairs, the breeder bonus and the index
        of the last line that carried a percentage."""
        raise NotImplementedError

    def _build_distribution(
        self,
        placings: list[tuple[int, int]],
        breeder_bonus: int | None,
        collector: ValidationCollector,
        label: str,
    ) -> PrizeDistribution | None:
        if len(placings) < MIN_PRIZE_PERCENT_TOKENS:
            return None

        by_place: dict[int, int] = {}
        for place, percent in placings:
            if 1 <= place <= 5:
                by_place.setdefault(place, percent)

        distribution = PrizeDistribution(
            first=by_place.get(1, 0),
            second=by_place.get(2, 0),
            third=by_place.get(3, 0),
            fourth=by_place.get(4, 0),
            fifth=by_place.get(5, 0),
            breeder_bonus=breeder_bonus or 0,
        )
        if distribution.total > MAX_PRIZE_PERCENT_TOTAL:
            collector.warn(
                f"{label}: prize distribution adds up to {distribution.total}%; ignored."
            )
            return None
        return distribution

    # --- purse and games -----------------------------------------------

    def _read_purse(
        self, block: str, lines: list[str], last_pct_index: int | None
    ) -> PrizePool:
        raise NotImplementedError

    def _read_games(self, block: str) -> frozenset[GameType]:
        raise NotImplementedError

    @staticmethod
    def parse_two_number_line(line: str) -> tuple[float, float] | None:
        """Parse a "3600  37180" style purse line."""
        match = TWO_NUMBER_LINE_PATTERN.match(line)
        if not match:
            return None
        primary = parse_amount(match.group(1))
        secondary = parse_amount(match.group(2))
        if primary is None or secondary is None:
            return None
        return primary, secondary
