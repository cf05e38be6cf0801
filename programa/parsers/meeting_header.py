"""Meeting header extraction.

Labels and values sit on different physical lines in both layouts, so the
extractor captures values positionally: the group order of each pattern
encodes the field order.
"""

import logging
import re

from programa.models import Meeting, Track
from programa.utils.date_parser import find_date_token, parse_meeting_date
from programa.utils.text import clean
from programa.validation import ValidationCollector

logger = logging.getLogger(__name__)


class MeetingHeaderExtractor:
    """Base extractor for meeting-level fields.

    Subclasses set the class-level patterns for their layout. A pattern left
    as None is simply not tried.

    Attributes:
        MEETING_DAY_PATTERN: Combined pattern, groups (meeting number, day).
        MEETING_NUMBER_PATTERN: Label-anchored meeting number, group 1.
        DAY_PATTERN: Label-anchored day of week, group 1.
        DATE_PATTERN: Label-anchored date token, group 1.
        TRACK_PATTERN: Track name, group 1.
    """

    MEETING_DAY_PATTERN: re.Pattern | None = None
    MEETING_NUMBER_PATTERN: re.Pattern | None = None
    DAY_PATTERN: re.Pattern | None = None
    DATE_PATTERN: re.Pattern | None = None
    TRACK_PATTERN: re.Pattern | None = None

    def __init__(self, default_track: Track) -> None:
        self.default_track = default_track

    def extract(
        self, header_text: str, document_text: str, collector: ValidationCollector
    ) -> Meeting:
        """Extract the meeting from the document.

        Args:
            header_text: Text that carries the meeting header (whole document
                or first block, depending on the layout).
            document_text: The whole document, searched for a date token
                when the header has none.
            collector: Warning collector.

        Returns:
            The Meeting. meeting_number is 0 when it could not be found.
        """
        meeting_number, day_of_week = self._extract_number_and_day(header_text)
        if meeting_number is None:
            collector.warn("Meeting number not found; using 0.")
            meeting_number = 0

        return Meeting(
            track=self._extract_track(header_text),
            date=self._extract_date(header_text, document_text, collector),
            meeting_number=meeting_number,
            day_of_week=day_of_week,
        )

    def _extract_number_and_day(self, text: str) -> tuple[int | None, str | None]:
        if self.MEETING_DAY_PATTERN is not None:
            match = self.MEETING_DAY_PATTERN.search(text)
            if match:
                return int(match.group(1)), match.group(2).upper()

        meeting_number = None
        if self.MEETING_NUMBER_PATTERN is not None:
            match = self.MEETING_NUMBER_PATTERN.search(text)
            if match:
                meeting_number = int(match.group(1))

        day_of_week = None
        if self.DAY_PATTERN is not None:
            match = self.DAY_PATTERN.search(text)
            if match:
                day_of_week = match.group(1).upper()

        return meeting_number, day_of_week

    def _extract_track(self, text: str) -> Track:
        if self.TRACK_PATTERN is None:
            return self.default_track

        match = self.TRACK_PATTERN.search(text)
        if not match:
            return self.default_track

        name = clean(match.group(1)).upper()
        if not name:
            return self.default_track
        return Track(name=name, location=name, country=self.default_track.country)

    def _extract_date(self, header_text, document_text, collector):
        token = None
        if self.DATE_PATTERN is not None:
            match = self.DATE_PATTERN.search(header_text)
            if match:
                token = match.group(1)
        if token is None:
            token = find_date_token(document_text)

        if token is None:
            collector.warn("Meeting date not found.")
            return None

        try:
            return parse_meeting_date(token)
        except ValueError:
            logger.debug("Unresolvable meeting date token %r", token)
            collector.warn(f"Invalid meeting date: {token}")
            return None
