# src/gedcom_tree/tree/projector.py

"""
Projection of the relationship graph onto a rooted display tree.

The graph is not a tree: remarriage and shared ancestry create cross-links
and even cycles. Expansion is depth-first with a visited set that is copied
at every fork (it is an immutable ``frozenset``), so:

  * an individual is never expanded twice along one descent path, which
    bounds every path by the number of individuals;
  * sibling branches do not see each other's visits, so the same person may
    legitimately show up in structurally distinct branches. The spouse and
    the children of a couple are such siblings: a spouse who is also a
    descendant is drawn in both places.

Only the first resolvable spouse of an individual is rendered. The couple is
drawn as ``COUPLE(person, spouse, FAMILY_UNIT(children...))``; the
family-unit node carries no person and is meant to be invisible in a UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Sequence

from gedcom_tree.config import get_config
from gedcom_tree.dates import resolve_point
from gedcom_tree.logging import get_logger
from gedcom_tree.registry import Individual

log = get_logger("tree.projector")


class NodeKind(str, Enum):
    PERSON = "person"
    COUPLE = "couple"
    FAMILY_UNIT = "family-unit"


@dataclass
class TreeNode:
    label: str
    kind: NodeKind = NodeKind.PERSON
    person: Optional[Individual] = field(default=None, repr=False)
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def person_id(self) -> Optional[str]:
        return self.person.id if self.person is not None else None

    @property
    def is_connector(self) -> bool:
        """Connector nodes (couple/family-unit) carry no person data."""
        return self.kind is not NodeKind.PERSON

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def person_ids(self) -> List[str]:
        return [n.person_id for n in self.iter_nodes() if n.person_id]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "kind": self.kind.value,
            "person_id": self.person_id,
            "children": [c.to_dict() for c in self.children],
        }

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        ref = f" {self.person_id}" if self.person_id else ""
        return f"<TreeNode {self.kind.value}{ref} {self.label!r} children={len(self.children)}>"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _index(individuals: Sequence[Individual]) -> Dict[str, Individual]:
    index: Dict[str, Individual] = {}
    for ind in individuals:
        index.setdefault(ind.id, ind)
    return index


def _resolve_all(index: Dict[str, Individual], ids: Optional[List[str]]) -> List[Individual]:
    return [index[i] for i in ids or [] if i in index]


def _birth_sort_key(ind: Individual):
    point = resolve_point(ind.birth.date) if ind.birth and ind.birth.date else None
    return (point is None, point or date.min, ind.full_name.casefold())


def find_root_candidates(individuals: Sequence[Individual]) -> List[Individual]:
    """
    Individuals with no recorded parent-family, earliest parsable birth first.

    Undated (or unparsable) individuals follow, ordered by name.
    """
    roots = [ind for ind in individuals if not ind.parents]
    return sorted(roots, key=_birth_sort_key)


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

class TreeProjector:
    def __init__(self, individuals: Sequence[Individual], config=None):
        cfg = config if config is not None else get_config()
        self.individuals = individuals
        self.index = _index(individuals)
        self.root_label = cfg.tree["root_label"]
        self.couple_label = cfg.tree["couple_label"]
        self.family_label = cfg.tree["family_label"]

    def expand(self, ind: Individual, visited: FrozenSet[str] = frozenset()) -> Optional[TreeNode]:
        """
        Expand ``ind`` with the visited set of its own descent path.

        Returns None when ``ind`` is already on the path.
        """
        if ind.id in visited:
            return None
        visited = visited | {ind.id}

        person_node = TreeNode(label=ind.full_name, kind=NodeKind.PERSON, person=ind)

        spouses = _resolve_all(self.index, ind.spouse)
        spouse = spouses[0] if spouses else None
        if spouse is not None and spouse.id in visited:
            spouse = None

        child_nodes: List[TreeNode] = []
        for child in _resolve_all(self.index, ind.children):
            if child.id in visited:
                continue
            node = self.expand(child, visited)
            if node is not None:
                child_nodes.append(node)

        if spouse is None:
            person_node.children = child_nodes
            return person_node

        return TreeNode(
            label=self.couple_label,
            kind=NodeKind.COUPLE,
            children=[
                person_node,
                TreeNode(label=spouse.full_name, kind=NodeKind.PERSON, person=spouse),
                TreeNode(label=self.family_label, kind=NodeKind.FAMILY_UNIT, children=child_nodes),
            ],
        )

    def project(self, root: Optional[Individual] = None) -> TreeNode:
        if root is not None:
            # An empty path always expands.
            return self.expand(root)  # type: ignore[return-value]

        if not self.individuals:
            return TreeNode(label=self.root_label, kind=NodeKind.FAMILY_UNIT)

        forest = [
            node
            for node in (self.expand(r) for r in find_root_candidates(self.individuals))
            if node is not None
        ]
        log.debug("Projected forest with %d roots", len(forest))

        if len(forest) > 1:
            return TreeNode(label=self.root_label, kind=NodeKind.FAMILY_UNIT, children=forest)
        if len(forest) == 1:
            return forest[0]

        # Everybody has a parent-family: fall back to the first individual.
        return self.expand(self.individuals[0])  # type: ignore[return-value]


def project_tree(root: Optional[Individual], individuals: Sequence[Individual]) -> TreeNode:
    """
    Build the display tree rooted at ``root``.

    Without a root, every individual lacking parent-families becomes a root;
    several roots hang under a virtual family-unit node.
    """
    return TreeProjector(individuals).project(root)
