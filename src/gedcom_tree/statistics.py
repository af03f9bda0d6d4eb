"""
Summary statistics over a parsed dataset.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from gedcom_tree.dates import resolve_point
from gedcom_tree.registry import GedcomDataset, Individual, Sex

TOP_N = 10


@dataclass
class FamilyStatistics:
    total_individuals: int = 0
    living_individuals: int = 0
    deceased_individuals: int = 0
    male_count: int = 0
    female_count: int = 0
    unknown_sex_count: int = 0
    average_age: int = 0
    oldest_person: Optional[Individual] = None
    youngest_living: Optional[Individual] = None
    total_families: int = 0
    most_children: Optional[Tuple[Individual, int]] = None
    birth_decades: Dict[str, int] = field(default_factory=dict)
    common_surnames: List[Tuple[str, int]] = field(default_factory=list)
    birthplaces: List[Tuple[str, int]] = field(default_factory=list)
    average_lifespan: int = 0


def _rounded_mean(values: List[int]) -> int:
    if not values:
        return 0
    return round(sum(values) / len(values))


def _birth_decade(ind: Individual) -> Optional[str]:
    if not ind.birth or not ind.birth.date:
        return None
    point = resolve_point(ind.birth.date)
    if point is None:
        return None
    return f"{(point.year // 10) * 10}s"


def compute_statistics(dataset: GedcomDataset) -> FamilyStatistics:
    individuals = dataset.individuals
    stats = FamilyStatistics(
        total_individuals=len(individuals),
        total_families=len(dataset.families),
    )
    if not individuals:
        return stats

    living = [i for i in individuals if i.alive]
    deceased = [i for i in individuals if not i.alive]
    stats.living_individuals = len(living)
    stats.deceased_individuals = len(deceased)

    stats.male_count = sum(1 for i in individuals if i.sex is Sex.MALE)
    stats.female_count = sum(1 for i in individuals if i.sex is Sex.FEMALE)
    stats.unknown_sex_count = sum(1 for i in individuals if i.sex is None)

    stats.average_age = _rounded_mean([i.age for i in individuals if i.age is not None])
    stats.average_lifespan = _rounded_mean([i.age for i in deceased if i.age is not None])

    with_age = [i for i in individuals if i.age is not None]
    if with_age:
        stats.oldest_person = max(with_age, key=lambda i: i.age)

    living_with_age = [i for i in living if i.age is not None]
    if living_with_age:
        stats.youngest_living = min(living_with_age, key=lambda i: i.age)

    top_parent = max(individuals, key=lambda i: len(i.children or []))
    stats.most_children = (top_parent, len(top_parent.children or []))

    decades = Counter(d for d in (_birth_decade(i) for i in individuals) if d)
    stats.birth_decades = dict(sorted(decades.items()))

    surnames = Counter(i.name.surname for i in individuals if i.name.surname)
    stats.common_surnames = surnames.most_common(TOP_N)

    places = Counter(i.birth.place for i in individuals if i.birth and i.birth.place)
    stats.birthplaces = places.most_common(TOP_N)

    return stats
