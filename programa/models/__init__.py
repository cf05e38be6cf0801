"""データモデルパッケージ"""

from programa.models.document import ParsedDocument, ParsedRace, SourceFormat
from programa.models.entry import Entry, Horse, Person, PersonRole
from programa.models.meeting import Meeting, Track
from programa.models.race import GameType, PrizeDistribution, PrizePool, Race

__all__ = [
    "Entry",
    "GameType",
    "Horse",
    "Meeting",
    "ParsedDocument",
    "ParsedRace",
    "Person",
    "PersonRole",
    "PrizeDistribution",
    "PrizePool",
    "Race",
    "SourceFormat",
    "Track",
]
