"""
CLI command modules for gedcom_tree.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_tree.cli.commands.export import export_command
from gedcom_tree.cli.commands.person import person_command
from gedcom_tree.cli.commands.places import places_command
from gedcom_tree.cli.commands.search import search_command
from gedcom_tree.cli.commands.stats import stats_command
from gedcom_tree.cli.commands.tree import tree_command

__all__ = [
    "export_command",
    "person_command",
    "places_command",
    "search_command",
    "stats_command",
    "tree_command",
]
