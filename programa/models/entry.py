"""Entry DTOs for race entry data.

This module provides immutable data transfer objects for race entries
and the horse and people attached to them.
"""

from dataclasses import dataclass
from enum import Enum

from programa.utils.text import make_license_id, normalize_name


class PersonRole(str, Enum):
    """Role of a person attached to an entry."""

    JOCKEY = "jockey"
    TRAINER = "trainer"


@dataclass(frozen=True)
class Person:
    """A jockey or trainer.

    Attributes:
        name: The name as printed, whitespace-collapsed.
        role: Jockey or trainer.
        license_id: Registry license, or an id derived from role and name.
    """

    name: str
    role: PersonRole
    license_id: str

    @classmethod
    def from_name(
        cls, name: str, role: PersonRole, license_id: str | None = None
    ) -> "Person":
        """Build a person, deriving the license id when none is given."""
        if not license_id:
            license_id = make_license_id(name, role.value)
        return cls(name=name, role=role, license_id=license_id)

    @property
    def identity_key(self) -> tuple[str, str]:
        return (self.license_id, self.role.value)

    def to_dict(self) -> dict:
        return {"name": self.name, "role": self.role.value, "license_id": self.license_id}


@dataclass(frozen=True)
class Horse:
    """A horse and its (optional) pedigree."""

    name: str
    sire: str | None = None
    dam: str | None = None

    @property
    def identity_key(self) -> str:
        return normalize_name(self.name)

    def to_dict(self) -> dict:
        return {"name": self.name, "pedigree": {"sire": self.sire, "dam": self.dam}}


@dataclass(frozen=True)
class Entry:
    """Represents a single race entry (horse).

    This is an immutable dataclass to ensure data integrity.

    Attributes:
        dorsal_number: The saddle-cloth number, unique within the race.
        post_position: The starting-gate slot (1-30).
        weight: The carried weight in kg after apprentice allowance.
        weight_raw: The weight token exactly as printed.
        horse: The horse.
        jockey: The jockey.
        trainer: The trainer.
        medication: The medication code or marker (optional).
        equipment_codes: The equipment ("implementos") codes (optional).
    """

    dorsal_number: int
    post_position: int
    weight: float
    weight_raw: str
    horse: Horse
    jockey: Person
    trainer: Person
    medication: str | None = None
    equipment_codes: str | None = None

    def to_dict(self) -> dict:
        return {
            "dorsal_number": self.dorsal_number,
            "post_position": self.post_position,
            "weight": self.weight,
            "weight_raw": self.weight_raw,
            "medication": self.medication,
            "equipment_codes": self.equipment_codes,
            "horse": self.horse.to_dict(),
            "jockey": self.jockey.to_dict(),
            "trainer": self.trainer.to_dict(),
        }
