"""Track and meeting DTOs.

This module provides immutable data transfer objects for the meeting-level
part of a parsed race program.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Track:
    """Represents a racetrack.

    Attributes:
        name: The track name (upper case).
        location: The track location (upper case).
        country: ISO country code.
    """

    name: str
    location: str
    country: str

    @property
    def identity_key(self) -> tuple[str, str]:
        """Natural key used by the merge layer."""
        return (self.name, self.country)

    def to_dict(self) -> dict:
        return {"name": self.name, "location": self.location, "country": self.country}


@dataclass(frozen=True)
class Meeting:
    """Represents one day's card of races at one track.

    Attributes:
        track: The track hosting the meeting.
        date: The meeting date at 12:00 UTC, or None if not found.
        meeting_number: The meeting number (0 when unknown).
        day_of_week: The day-of-week token as printed (optional).
    """

    track: Track
    date: datetime | None
    meeting_number: int
    day_of_week: str | None = None

    def to_dict(self) -> dict:
        return {
            "track": self.track.to_dict(),
            "date": self.date.isoformat() if self.date else None,
            "meeting_number": self.meeting_number,
            "day_of_week": self.day_of_week,
        }
