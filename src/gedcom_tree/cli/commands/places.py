from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gedcom_tree.cli.utils import load_gedcom
from gedcom_tree.query import birth_places

console = Console()


def places_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
):
    """
    List distinct birthplaces (the input a geocoder would resolve).
    """
    for place in birth_places(load_gedcom(gedcom)):
        console.print(place, highlight=False, markup=False)
