from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_tree.cli.utils import load_gedcom
from gedcom_tree.statistics import compute_statistics

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    stats = compute_statistics(load_gedcom(gedcom, verbose=verbose))

    table = Table(title="Family Statistics")
    table.add_column("Statistic", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Individuals", str(stats.total_individuals))
    table.add_row("Living", str(stats.living_individuals))
    table.add_row("Deceased", str(stats.deceased_individuals))
    table.add_row("Male", str(stats.male_count))
    table.add_row("Female", str(stats.female_count))
    table.add_row("Unknown sex", str(stats.unknown_sex_count))
    table.add_row("Families", str(stats.total_families))
    table.add_row("Average age", str(stats.average_age))
    table.add_row("Average lifespan", str(stats.average_lifespan))
    if stats.oldest_person is not None:
        table.add_row("Oldest person", f"{stats.oldest_person.full_name} ({stats.oldest_person.age})")
    if stats.youngest_living is not None:
        table.add_row("Youngest living", f"{stats.youngest_living.full_name} ({stats.youngest_living.age})")
    if stats.most_children is not None:
        ind, count = stats.most_children
        table.add_row("Most children", f"{ind.full_name} ({count})")

    console.print(table)

    if stats.common_surnames:
        surnames = Table(title="Common Surnames")
        surnames.add_column("Surname")
        surnames.add_column("Count", justify="right")
        for name, count in stats.common_surnames:
            surnames.add_row(name, str(count))
        console.print(surnames)

    if stats.birthplaces:
        places = Table(title="Birthplaces")
        places.add_column("Place")
        places.add_column("Count", justify="right")
        for place, count in stats.birthplaces:
            places.add_row(place, str(count))
        console.print(places)

    if stats.birth_decades:
        decades = Table(title="Births per Decade")
        decades.add_column("Decade")
        decades.add_column("Births", justify="right")
        for decade, count in stats.birth_decades.items():
            decades.add_row(decade, str(count))
        console.print(decades)
