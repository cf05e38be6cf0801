"""Base format strategy.

A strategy bundles everything that depends on the source layout: the block
anchor and the meeting, race header and entry table extractors. The
orchestrator selects one strategy per document and never inspects the
layout itself.
"""

import re

from programa.config.formats import BLOCK_ANCHORS, DEFAULT_TRACKS
from programa.models import Entry, Meeting, Race, SourceFormat
from programa.parsers.block_segmenter import split_blocks
from programa.parsers.entry_table import EntryTableExtractor
from programa.parsers.meeting_header import MeetingHeaderExtractor
from programa.parsers.race_header import RaceHeaderExtractor
from programa.validation import ValidationCollector


class FormatStrategy:
    """Base class for source layout strategies.

    Subclasses set FORMAT and the three extractor classes.

    Attributes:
        FORMAT: The SourceFormat handled by the strategy.
        MEETING_EXTRACTOR_CLASS: MeetingHeaderExtractor subclass.
        RACE_HEADER_EXTRACTOR_CLASS: RaceHeaderExtractor subclass.
        ENTRY_TABLE_EXTRACTOR_CLASS: EntryTableExtractor subclass.
    """

    FORMAT: SourceFormat
    MEETING_EXTRACTOR_CLASS: type[MeetingHeaderExtractor]
    RACE_HEADER_EXTRACTOR_CLASS: type[RaceHeaderExtractor]
    ENTRY_TABLE_EXTRACTOR_CLASS: type[EntryTableExtractor]

    def __init__(self) -> None:
        self.meeting_extractor = self.MEETING_EXTRACTOR_CLASS(
            DEFAULT_TRACKS[self.FORMAT]
        )
        self.race_header_extractor = self.RACE_HEADER_EXTRACTOR_CLASS()
        self.entry_table_extractor = self.ENTRY_TABLE_EXTRACTOR_CLASS()

    @property
    def anchor(self) -> re.Pattern:
        return BLOCK_ANCHORS[self.FORMAT]

    def split_blocks(self, text: str) -> list[str]:
        return split_blocks(text, self.anchor)

    def meeting_header_text(self, text: str, blocks: list[str]) -> str:
        """Text that carries the meeting header. The whole document by default."""
        return text

    def extract_meeting(
        self, text: str, blocks: list[str], collector: ValidationCollector
    ) -> Meeting:
        return self.meeting_extractor.extract(
            self.meeting_header_text(text, blocks), text, collector
        )

    def extract_race(
        self, block: str, collector: ValidationCollector, block_index: int
    ) -> Race:
        return self.race_header_extractor.extract(block, collector, block_index)

    def extract_entries(
        self, block: str, collector: ValidationCollector, label: str
    ) -> tuple[Entry, ...]:
        return self.entry_table_extractor.extract(block, collector, label)
