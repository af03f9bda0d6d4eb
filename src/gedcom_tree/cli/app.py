from __future__ import annotations

import typer

from gedcom_tree.cli.commands import (
    export_command,
    person_command,
    places_command,
    search_command,
    stats_command,
    tree_command,
)

app = typer.Typer(
    name="gedcom-tree",
    help="GEDCOM family tree parser, explorer, and exporter",
    add_completion=False,
)

app.command("export")(export_command)
app.command("stats")(stats_command)
app.command("search")(search_command)
app.command("person")(person_command)
app.command("tree")(tree_command)
app.command("places")(places_command)


def main():
    app()


if __name__ == "__main__":
    main()
