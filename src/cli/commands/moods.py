"""List available mood categories."""

import click
from rich.console import Console
from rich.table import Table

from mood.categories import CATEGORIES

console = Console()


@click.command()
def moods():
    """Show the mood categories and their scores."""
    table = Table(show_header=True, title="Moods")
    table.add_column("", justify="center")
    table.add_column("Mood")
    table.add_column("Score", justify="right")
    table.add_column("Color")

    for category in CATEGORIES.values():
        table.add_row(
            category.glyph,
            category.label,
            str(category.score),
            f"[{category.color}]██[/] {category.color}",
        )

    console.print(table)
