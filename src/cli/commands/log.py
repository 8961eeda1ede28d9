"""Mood logging CLI command."""

import sys

import click
from rich.console import Console

from cli.utils import get_components, run
from mood.categories import MOOD_LABELS, get_category
from mood.history import InvalidMoodError

console = Console()


@click.command("log")
@click.argument("mood_label", metavar="MOOD", type=click.Choice(MOOD_LABELS, case_sensitive=False))
@click.option("-n", "--note", default="", help="Optional note to attach")
def log(mood_label: str, note: str):
    """Log how you feel right now."""
    c = get_components()

    try:
        result = run(c["history"].add(mood_label, note))
    except InvalidMoodError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    category = get_category(result.record.mood)
    console.print(f"[green]Mood saved![/] {category.glyph} {category.label}")

    if result.milestone:
        console.print(f"[bold magenta]{result.milestone.title}[/] {result.milestone.message}")
