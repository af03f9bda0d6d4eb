from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_tree.cli.utils import load_gedcom, render_tree, require_individual
from gedcom_tree.tree import project_tree

console = Console()


def tree_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        help="Individual id to root the tree at (default: full forest)",
    ),
):
    """
    Draw the family tree, rooted at one individual or at every root ancestor.
    """
    dataset = load_gedcom(gedcom)
    root_individual = require_individual(dataset, root) if root else None

    console.print(render_tree(project_tree(root_individual, dataset.individuals)))
