"""Parsed document DTOs.

The ParsedDocument is the only output of the parser. It is created once per
parse call and never mutated afterwards.
"""

from dataclasses import dataclass
from enum import Enum

from programa.models.entry import Entry
from programa.models.meeting import Meeting
from programa.models.race import Race


class SourceFormat(str, Enum):
    """Supported program document layouts."""

    FORMAT_A = "format-a"
    FORMAT_B = "format-b"


@dataclass(frozen=True)
class ParsedRace:
    """A race header together with its field of entries."""

    race: Race
    entries: tuple[Entry, ...] = ()

    def to_dict(self) -> dict:
        return {
            "race": self.race.to_dict(),
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class ParsedDocument:
    """Represents a complete parsed race program.

    Attributes:
        meeting: The meeting the document describes.
        races: Parsed races in document order.
        raw_text_fingerprint: Deterministic hash of the raw input text.
        warnings: Ordered, human-readable anomaly descriptions.
        source_format: The layout the document was parsed as.
    """

    meeting: Meeting
    races: tuple[ParsedRace, ...]
    raw_text_fingerprint: str
    warnings: tuple[str, ...]
    source_format: SourceFormat

    @property
    def entry_count(self) -> int:
        return sum(len(parsed.entries) for parsed in self.races)

    def to_dict(self) -> dict:
        return {
            "source_format": self.source_format.value,
            "meeting": self.meeting.to_dict(),
            "races": [parsed.to_dict() for parsed in self.races],
            "raw_text_fingerprint": self.raw_text_fingerprint,
            "warnings": list(self.warnings),
        }
