"""Interface of the merge layer that persists parsed documents.

The merge layer is an external collaborator: it upserts Track, Meeting,
Race, Horse, Person and Entry records by their natural keys, so ingesting the
same document twice is idempotent. This module only defines the contract and
the keys; it performs no I/O.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from programa.models import Entry, Horse, Meeting, ParsedDocument, Person, Race, Track


@dataclass(frozen=True)
class IngestResult:
    """Aggregate outcome reported by the merge layer.

    Attributes:
        track_id: Persistent id of the upserted track.
        meeting_id: Persistent id of the upserted meeting.
        races_upserted: Number of races written.
        entries_upserted: Number of entries written.
        warnings: Parser warnings followed by the merge layer's own.
    """

    track_id: str
    meeting_id: str
    races_upserted: int
    entries_upserted: int
    warnings: tuple[str, ...] = ()


class MergeLayer(Protocol):
    """Anything that can persist a ParsedDocument."""

    def ingest(self, document: ParsedDocument) -> IngestResult:
        ...


def track_key(track: Track) -> tuple[str, str]:
    return track.identity_key


def meeting_key(meeting: Meeting) -> tuple[tuple[str, str], datetime | None, int]:
    return (track_key(meeting.track), meeting.date, meeting.meeting_number)


def race_key(meeting: Meeting, race: Race) -> tuple:
    return (meeting_key(meeting), race.race_number)


def entry_key(meeting: Meeting, race: Race, entry: Entry) -> tuple:
    return (race_key(meeting, race), entry.dorsal_number)


def person_key(person: Person) -> tuple[str, str]:
    return person.identity_key


def horse_key(horse: Horse) -> str:
    return horse.identity_key
