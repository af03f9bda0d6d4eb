from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_tree.cli.utils import life_span, load_gedcom
from gedcom_tree.query import search_by_name

console = Console()


def search_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    term: str = typer.Argument(..., help="Name fragment (case-insensitive)"),
):
    """
    Find individuals whose full name, given name or surname contains TERM.
    """
    matches = search_by_name(load_gedcom(gedcom), term)

    table = Table(title=f"Matches for {term!r}")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Years")
    table.add_column("Status")

    for ind in matches:
        table.add_row(ind.id, ind.full_name, life_span(ind), "Living" if ind.alive else "Deceased")

    console.print(table)
    console.print(f"{len(matches)} match(es)")
