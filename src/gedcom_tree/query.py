"""
Read-only views over a parsed dataset.

Every helper tolerates dangling ids: anything that does not resolve is
left out of the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Union

from gedcom_tree.registry import Family, GedcomDataset, Individual

IndividualSource = Union[GedcomDataset, Sequence[Individual]]


@dataclass
class FamilyMembers:
    individual: Individual
    parents: List[Individual] = field(default_factory=list)
    spouses: List[Individual] = field(default_factory=list)
    children: List[Individual] = field(default_factory=list)


def build_index(individuals: Iterable[Individual]) -> Dict[str, Individual]:
    """Map id -> individual; the first record wins for a repeated id."""
    index: Dict[str, Individual] = {}
    for ind in individuals:
        index.setdefault(ind.id, ind)
    return index


def _individuals_of(source: IndividualSource) -> Sequence[Individual]:
    if isinstance(source, GedcomDataset):
        return source.individuals
    return source


def find_by_id(source: IndividualSource, individual_id: Optional[str]) -> Optional[Individual]:
    if not individual_id:
        return None
    if isinstance(source, GedcomDataset):
        return source.get_individual(individual_id)
    return build_index(source).get(individual_id)


def search_by_name(source: IndividualSource, term: str) -> List[Individual]:
    """
    Case-insensitive substring search.

    ``full_name``, ``given`` and ``surname`` are checked independently; one
    hit is enough.
    """
    needle = (term or "").lower()
    matches = []
    for ind in _individuals_of(source):
        fields = (ind.name.full_name, ind.name.given, ind.name.surname)
        if any(value is not None and needle in value.lower() for value in fields):
            matches.append(ind)
    return matches


def _resolve(index: Dict[str, Individual], ids: Optional[Iterable[Optional[str]]]) -> List[Individual]:
    return [index[i] for i in ids or [] if i and i in index]


def family_members_of(
    individuals: IndividualSource,
    families: Sequence[Family],
    individual_id: str,
) -> Optional[FamilyMembers]:
    """
    Resolve parents, spouses and children of ``individual_id``.

    Parents come from the husband/wife of each parent-family; spouses and
    children from the linked id lists. Returns None for an unknown id.
    """
    index = build_index(_individuals_of(individuals))
    individual = index.get(individual_id)
    if individual is None:
        return None

    family_index: Dict[str, Family] = {}
    for fam in families:
        family_index.setdefault(fam.id, fam)

    parents: List[Individual] = []
    for family_id in individual.parents:
        fam = family_index.get(family_id)
        if fam is None:
            continue
        parents.extend(_resolve(index, (fam.husband, fam.wife)))

    return FamilyMembers(
        individual=individual,
        parents=parents,
        spouses=_resolve(index, individual.spouse),
        children=_resolve(index, individual.children),
    )


def birth_places(source: IndividualSource) -> List[str]:
    """Distinct birth places in first-seen order, as handed to the geocoder."""
    places: List[str] = []
    seen = set()
    for ind in _individuals_of(source):
        place = ind.birth.place if ind.birth else None
        if place and place not in seen:
            seen.add(place)
            places.append(place)
    return places
