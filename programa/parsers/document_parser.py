"""Document parser: the single entry point of the engine.

Pipeline: reassemble wrapped lines, select the layout strategy, split into
race blocks, then extract the meeting, each race header and each entry table.
Every anomaly becomes a warning on the returned ParsedDocument; malformed
input never raises.
"""

import logging

from programa.config.formats import (
    BLOCK_ANCHORS,
    DETECTION_ORDER,
    FALLBACK_FORMAT,
    FORMAT_HINT_ALIASES,
)
from programa.models import ParsedDocument, ParsedRace, SourceFormat
from programa.parsers.base import FormatStrategy
from programa.parsers.format_a import FormatAStrategy
from programa.parsers.format_b import FormatBStrategy
from programa.parsers.line_reassembler import reassemble_text
from programa.parsers.race_header import block_label
from programa.utils.fingerprint import content_fingerprint
from programa.validation import ValidationCollector

logger = logging.getLogger(__name__)

STRATEGIES: dict[SourceFormat, type[FormatStrategy]] = {
    SourceFormat.FORMAT_A: FormatAStrategy,
    SourceFormat.FORMAT_B: FormatBStrategy,
}


def detect_format(text: str) -> SourceFormat | None:
    """Return the first format whose block anchor occurs in the text.

    Args:
        text: Document text.

    Returns:
        The detected SourceFormat, or None if no anchor occurs.
    """
    for source_format in DETECTION_ORDER:
        if BLOCK_ANCHORS[source_format].search(text):
            return source_format
    return None


class DocumentParser:
    """Parser for race program documents.

    The parser holds no per-document state, so one instance can be shared
    between threads.

    Example:
        >>> parser = DocumentParser()
        >>> document = parser.parse(text, format_hint="format-a")
        >>> document.races[0].race.race_number
        1
    """

    def parse(
        self,
        raw_text: str | bytes,
        format_hint: SourceFormat | str | None = None,
    ) -> ParsedDocument:
        """Parse one document.

        Args:
            raw_text: Extracted document text. Bytes are decoded as UTF-8
                with replacement characters.
            format_hint: "format-a", "format-b", "auto" or None (auto-detect).

        Returns:
            The ParsedDocument, possibly with no races and some warnings.

        Raises:
            TypeError: If raw_text is neither str nor bytes.
        """
        text = self._decode(raw_text)
        collector = ValidationCollector()

        reassembled = reassemble_text(text)
        source_format = self._resolve_format(reassembled, format_hint, collector)
        strategy = STRATEGIES[source_format]()

        blocks = strategy.split_blocks(reassembled)
        logger.debug("Parsing as %s: %d race blocks", source_format.value, len(blocks))

        meeting = strategy.extract_meeting(reassembled, blocks, collector)
        if not blocks:
            collector.warn("No race blocks detected.")
        races = self._parse_blocks(strategy, blocks, collector)

        return ParsedDocument(
            meeting=meeting,
            races=tuple(races),
            raw_text_fingerprint=content_fingerprint(text),
            warnings=collector.warnings,
            source_format=source_format,
        )

    @staticmethod
    def _decode(raw_text: str | bytes) -> str:
        if isinstance(raw_text, bytes):
            return raw_text.decode("utf-8", errors="replace")
        if not isinstance(raw_text, str):
            raise TypeError(f"Expected str or bytes, got {type(raw_text).__name__}")
        return raw_text

    @staticmethod
    def _resolve_format(
        text: str,
        format_hint: SourceFormat | str | None,
        collector: ValidationCollector,
    ) -> SourceFormat:
        if isinstance(format_hint, SourceFormat):
            return format_hint

        if format_hint is not None:
            key = format_hint.strip().lower()
            if key in FORMAT_HINT_ALIASES:
                hinted = FORMAT_HINT_ALIASES[key]
                if hinted is not None:
                    return hinted
            else:
                collector.warn(f"Unknown format hint {format_hint!r}; auto-detecting.")

        detected = detect_format(text)
        if detected is None:
            collector.warn(
                f"No known block anchor found; assuming {FALLBACK_FORMAT.value}."
            )
            return FALLBACK_FORMAT
        return detected

    @staticmethod
    def _parse_blocks(
        strategy: FormatStrategy, blocks: list[str], collector: ValidationCollector
    ) -> list[ParsedRace]:
        races: list[ParsedRace] = []
        seen_numbers: set[int] = set()

        for index, block in enumerate(blocks, start=1):
            try:
                race = strategy.extract_race(block, collector, index)
                label = block_label(race.race_number, index)
                entries = strategy.extract_entries(block, collector, label)
            except (ValueError, IndexError) as e:
                logger.warning("Race block %d could not be parsed: %s", index, e)
                collector.warn(f"Race block {index}: skipped ({e}).")
                continue

            # race number 0 marks a block whose number was not found
            if race.race_number:
                if race.race_number in seen_numbers:
                    collector.warn(
                        f"{label}: appears more than once; later block ignored."
                    )
                    continue
                seen_numbers.add(race.race_number)
            races.append(ParsedRace(race=race, entries=entries))

        return races


def parse(
    raw_text: str | bytes, format_hint: SourceFormat | str | None = None
) -> ParsedDocument:
    """Parse one document with a default DocumentParser."""
    return DocumentParser().parse(raw_text, format_hint)
