"""Mood history CLI command."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, run
from mood.categories import get_category

console = Console()


@click.command()
@click.option("-n", "--limit", type=click.IntRange(min=1), default=None, help="Max entries to show")
def history(limit: Optional[int]):
    """Show logged moods, most recent first."""
    c = get_components()
    if limit is None:
        limit = c["config"].display.history_limit

    records = run(c["history"].recent(limit=limit))
    if not records:
        console.print("[yellow]No moods saved yet![/]")
        return

    table = Table(show_header=True, title="Mood History")
    table.add_column("Mood")
    table.add_column("Note")
    table.add_column("Date", style="dim")

    for record in records:
        category = get_category(record.mood)
        table.add_row(
            f"{category.glyph} {record.mood}",
            record.note or "[dim]No note added.[/]",
            record.display_date,
        )

    console.print(table)
