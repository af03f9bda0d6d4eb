from __future__ import annotations

from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from gedcom_tree.cli.utils import load_gedcom, person_label, require_individual
from gedcom_tree.query import family_members_of
from gedcom_tree.registry import EventDetail, Individual

console = Console()


def _event_text(event: EventDetail | None) -> str:
    if event is None:
        return ""
    return ", ".join(part for part in (event.date, event.place) if part)


def _members_text(members: List[Individual]) -> str:
    return "\n".join(person_label(m) for m in members) or "-"


def person_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    individual_id: str = typer.Argument(..., help="Individual id, with or without @ delimiters"),
):
    """
    Show one individual with their parents, spouses and children.
    """
    dataset = load_gedcom(gedcom)
    ind = require_individual(dataset, individual_id)
    members = family_members_of(dataset, dataset.families, ind.id)

    table = Table(title=ind.full_name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("ID", ind.id)
    table.add_row("Sex", ind.sex.value if ind.sex else "Unknown")
    table.add_row("Born", _event_text(ind.birth))
    table.add_row("Died", _event_text(ind.death))
    table.add_row("Buried", _event_text(ind.burial))
    table.add_row("Age", "" if ind.age is None else str(ind.age))
    table.add_row("Status", "Living" if ind.alive else "Deceased")
    table.add_row("Parents", _members_text(members.parents))
    table.add_row("Spouses", _members_text(members.spouses))
    table.add_row("Children", _members_text(members.children))

    console.print(table)
