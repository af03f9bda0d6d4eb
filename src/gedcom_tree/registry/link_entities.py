from __future__ import annotations

from typing import List

from gedcom_tree.registry.entities import GedcomDataset, Individual


def _append_unique(target: List[str], value: str) -> None:
    if value not in target:
        target.append(value)


def _link_spouse(ind: Individual, other_spouse_id, child_ids: List[str]) -> None:
    if other_spouse_id:
        _append_unique(ind.spouse, other_spouse_id)
    for child_id in child_ids:
        _append_unique(ind.children, child_id)


def link_relationships(dataset: GedcomDataset) -> None:
    """
    Back-fill ``spouse`` and ``children`` on individuals from family records.

    Design:
      - assembly is finished first
      - each family contributes the other spouse and all children to both
        of its spouses
      - ids that do not resolve to an individual are skipped, never raised

    Idempotent:
      - clears derived fields before rebuilding them
    """
    for ind in dataset.individuals:
        ind.spouse = []
        ind.children = []

    for fam in dataset.families:
        husband = dataset.get_individual(fam.husband)
        wife = dataset.get_individual(fam.wife)

        if husband is not None:
            _link_spouse(husband, fam.wife, fam.children)

        if wife is not None:
            _link_spouse(wife, fam.husband, fam.children)
