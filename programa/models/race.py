"""Race DTOs.

This module provides immutable data transfer objects for race-level
information read from a race block header.
"""

from dataclasses import dataclass, field
from enum import Enum


class GameType(str, Enum):
    """Wagering games offered on a race."""

    GANADOR = "GANADOR"
    PLACE = "PLACE"
    EXACTA = "EXACTA"
    TRIFECTA = "TRIFECTA"
    SUPERFECTA = "SUPERFECTA"
    QUINELA = "QUINELA"
    POOL_4 = "POOL_4"
    DOBLE_SELECCION = "DOBLE_SELECCION"


@dataclass(frozen=True)
class PrizePool:
    """Purse of a race.

    Attributes:
        primary: The purse in local currency.
        secondary: The bonus amount (0 when absent).
    """

    primary: float = 0.0
    secondary: float = 0.0


@dataclass(frozen=True)
class PrizeDistribution:
    """Percentage of the purse paid to each placing."""

    first: int
    second: int
    third: int
    fourth: int
    fifth: int
    breeder_bonus: int = 0

    @property
    def total(self) -> int:
        return (
            self.first + self.second + self.third + self.fourth + self.fifth
            + self.breeder_bonus
        )


@dataclass(frozen=True)
class Race:
    """Represents a single race of a meeting.

    This is an immutable dataclass to ensure data integrity.

    Attributes:
        race_number: The race number within the meeting (0 when unknown).
        distance: The race distance in meters (0 when unknown).
        scheduled_time: The post time as printed (e.g. "01:25 p. m.").
        conditions: The conditions text, whitespace-collapsed.
        prize_pool: The purse.
        annual_race_number: The race number within the year (optional).
        call_number: The call ("llamado") number (optional).
        prize_distribution: Purse split by placing (optional).
        wagering_games: Games offered on the race.
    """

    race_number: int
    distance: int
    scheduled_time: str
    conditions: str
    prize_pool: PrizePool = field(default_factory=PrizePool)
    annual_race_number: int | None = None
    call_number: int | None = None
    prize_distribution: PrizeDistribution | None = None
    wagering_games: frozenset[GameType] = frozenset()

    def to_dict(self) -> dict:
        distribution = None
        if self.prize_distribution is not None:
            distribution = {
                "first": self.prize_distribution.first,
                "second": self.prize_distribution.second,
                "third": self.prize_distribution.third,
                "fourth": self.prize_distribution.fourth,
                "fifth": self.prize_distribution.fifth,
                "breeder_bonus": self.prize_distribution.breeder_bonus,
            }
        return {
            "race_number": self.race_number,
            "annual_race_number": self.annual_race_number,
            "call_number": self.call_number,
            "distance": self.distance,
            "scheduled_time": self.scheduled_time,
            "conditions": self.conditions,
            "prize_pool": {
                "primary": self.prize_pool.primary,
                "secondary": self.prize_pool.secondary,
            },
            "prize_distribution": distribution,
            # Enumの定義順で出力（frozensetの順序は不定のため）
            "wagering_games": [g.value for g in GameType if g in self.wagering_games],
        }
