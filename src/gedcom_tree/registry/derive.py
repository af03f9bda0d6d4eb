from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from gedcom_tree.dates import calculate_age
from gedcom_tree.registry.entities import Individual


def derive_individual(ind: Individual, today: Optional[date] = None) -> None:
    """
    Set ``age`` and ``alive`` from the assembled vital events.

    ``alive`` only means "no death date recorded"; there is no plausibility
    cut-off on elapsed time since birth.
    """
    birth_date = ind.birth.date if ind.birth else None
    death_date = ind.death.date if ind.death else None

    ind.age = calculate_age(birth_date, death_date, today=today)
    ind.alive = not death_date


def derive_vitals(individuals: Iterable[Individual], today: Optional[date] = None) -> None:
    """
    Derivation pass over every individual.

    Reads only assembled fields, so it can run before or after linking and
    any number of times.
    """
    today = today or date.today()
    for ind in individuals:
        derive_individual(ind, today=today)
