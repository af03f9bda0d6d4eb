from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


# -----------------------------
# Base records (small atoms)
# -----------------------------

class Sex(str, Enum):
    MALE = "M"
    FEMALE = "F"

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["Sex"]:
        """Map a SEX value to the enum; anything but M/F stays unknown."""
        try:
            return cls((value or "").strip().upper())
        except ValueError:
            return None


@dataclass(slots=True)
class PersonName:
    """
    Name as extracted from a NAME line.

    ``given``/``surname`` are only set when the value follows ``Given /Surname/``.
    """
    full_name: str = "Unknown"
    given: Optional[str] = None
    surname: Optional[str] = None


@dataclass(slots=True)
class EventDetail:
    """Birth, death, burial or marriage: normalized display date and verbatim place."""
    date: Optional[str] = None
    place: Optional[str] = None


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Individual:
    id: str
    name: PersonName = field(default_factory=PersonName)
    sex: Optional[Sex] = None

    birth: Optional[EventDetail] = None
    death: Optional[EventDetail] = None
    burial: Optional[EventDetail] = None

    # Family ids captured during assembly
    families: List[str] = field(default_factory=list)  # FAMS
    parents: List[str] = field(default_factory=list)   # FAMC

    # Derivation pass
    age: Optional[int] = None
    alive: Optional[bool] = None

    # Relationship linker; None until linked
    spouse: Optional[List[str]] = None
    children: Optional[List[str]] = None

    @property
    def full_name(self) -> str:
        return self.name.full_name


@dataclass(slots=True)
class Family:
    id: str
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    marriage: Optional[EventDetail] = None

    def add_child(self, child_id: str) -> None:
        if child_id not in self.children:
            self.children.append(child_id)


# -----------------------------
# Dataset
# -----------------------------

@dataclass
class GedcomDataset:
    """
    Arena of parsed records.

    Records keep source order in ``individuals``/``families``; relationships
    are id lists resolved through the id indexes, never object references.
    When an id occurs twice, the index resolves to the first record.
    """
    individuals: List[Individual] = field(default_factory=list)
    families: List[Family] = field(default_factory=list)

    _individual_index: Dict[str, Individual] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _family_index: Dict[str, Family] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for ind in self.individuals:
            self._individual_index.setdefault(ind.id, ind)
        for fam in self.families:
            self._family_index.setdefault(fam.id, fam)

    def add_individual(self, ind: Individual) -> bool:
        """Append ``ind``; returns False when its id was already present."""
        self.individuals.append(ind)
        if ind.id in self._individual_index:
            return False
        self._individual_index[ind.id] = ind
        return True

    def add_family(self, fam: Family) -> bool:
        """Append ``fam``; returns False when its id was already present."""
        self.families.append(fam)
        if fam.id in self._family_index:
            return False
        self._family_index[fam.id] = fam
        return True

    def get_individual(self, individual_id: Optional[str]) -> Optional[Individual]:
        if not individual_id:
            return None
        return self._individual_index.get(individual_id)

    def get_family(self, family_id: Optional[str]) -> Optional[Family]:
        if not family_id:
            return None
        return self._family_index.get(family_id)

    def is_empty(self) -> bool:
        return not self.individuals and not self.families
