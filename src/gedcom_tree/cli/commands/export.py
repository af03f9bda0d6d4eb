from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_tree.cli.utils import load_gedcom
from gedcom_tree.exporter import export_dataset_json, serialize_dataset_to_json_string

console = Console(stderr=True)


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export parsed individuals and families to JSON (stdout by default).
    """
    dataset = load_gedcom(gedcom, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    indent = 2 if pretty else None
    if out:
        export_dataset_json(dataset, out, indent=indent)
    else:
        print(serialize_dataset_to_json_string(dataset, indent=indent))

    if verbose:
        console.log("Export complete")
