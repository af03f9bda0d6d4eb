from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from gedcom_tree.dates import resolve_point
from gedcom_tree.parser_core import GEDCOMParser
from gedcom_tree.registry import GedcomDataset, Individual
from gedcom_tree.tree import NodeKind, TreeNode

console = Console()


def load_gedcom(path: Path, *, verbose: bool = False) -> GedcomDataset:
    """
    Read, parse, derive and link a GEDCOM file.
    """
    t0 = time.perf_counter()

    dataset = GEDCOMParser().parse_file(path)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return dataset


def require_individual(dataset: GedcomDataset, individual_id: str) -> Individual:
    """Look up ``individual_id`` or exit with status 1."""
    ind = dataset.get_individual(individual_id.strip("@"))
    if ind is None:
        console.print(f"[red]No individual with id {individual_id!r}[/red]")
        raise typer.Exit(code=1)
    return ind


def _year(event) -> str:
    point = resolve_point(event.date) if event and event.date else None
    return str(point.year) if point is not None else ""


def life_span(ind: Individual) -> str:
    """``1900-1980``, ``1900-`` or ``-1980``; unparsable dates contribute nothing."""
    birth_year = _year(ind.birth)
    death_year = _year(ind.death)
    if birth_year or death_year:
        return f"{birth_year}-{death_year}"
    return ""


def person_label(ind: Individual) -> str:
    parts = [f"[bold]{escape(ind.full_name)}[/bold]"]
    span = life_span(ind)
    if span:
        parts.append(f"({span})")
    if ind.alive and ind.age is not None:
        parts.append(f"Age: {ind.age}")
    parts.append(f"[dim]{ind.id}[/dim]")
    return " ".join(parts)


def _attach(branch: Tree, node: TreeNode) -> None:
    if node.kind is NodeKind.PERSON:
        sub = branch.add(person_label(node.person))
        for child in node.children:
            _attach(sub, child)
        return

    if node.kind is NodeKind.COUPLE:
        persons = [c for c in node.children if c.kind is NodeKind.PERSON]
        units = [c for c in node.children if c.kind is NodeKind.FAMILY_UNIT]
        sub = branch.add(" + ".join(person_label(p.person) for p in persons))
        for unit in units:
            for child in unit.children:
                _attach(sub, child)
        return

    # Family-unit connectors are not drawn.
    for child in node.children:
        _attach(branch, child)


def render_tree(root: TreeNode) -> Tree:
    """Render a projected tree with connector nodes hidden."""
    if root.kind is NodeKind.FAMILY_UNIT:
        tree = Tree(f"[bold]{root.label}[/bold]")
        for child in root.children:
            _attach(tree, child)
        return tree

    tree = Tree("", hide_root=True)
    _attach(tree, root)
    return tree
