"""Mood analytics CLI command."""

import json
import re
from datetime import datetime

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, run
from mood.aggregator import (
    DAYS,
    category_frequencies,
    hour_labels,
    hourly_distribution,
    summarize,
    week_comparison,
    weekly_averages,
)

console = Console()

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def _bar(value: float, scale: float = 1.0, color: str = "cyan") -> str:
    width = min(int(round(value * scale)), 40)
    return f"[{color}]{'█' * width}[/]" if width else "[dim]·[/]"


def _swatch(color: str) -> str:
    # rich only parses full six-digit hex colors
    return f"[{color}]██[/]" if _HEX_COLOR.match(color) else "[dim]██[/]"


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print all views as JSON")
def analytics(as_json: bool):
    """Show mood averages, frequency, hourly pattern and weekly comparison."""
    c = get_components()
    step = c["config"].display.hour_label_step
    records = run(c["history"].load())
    now = datetime.now()

    if as_json:
        click.echo(json.dumps(summarize(records, now, hour_label_step=step), indent=2, ensure_ascii=False))
        return

    if not records:
        console.print("[yellow]No moods saved yet! Log one with [bold]moodlog log[/].[/]")
        return

    # Weekday averages across all history
    table = Table(title="Mood Averages by Weekday", show_header=True)
    table.add_column("Day")
    table.add_column("Avg", justify="right")
    table.add_column("", min_width=10)
    for day, avg in zip(DAYS, weekly_averages(records)):
        table.add_row(day, f"{avg:.2f}", _bar(avg, scale=2, color="magenta"))
    console.print(table)

    table = Table(title="Mood Frequency", show_header=True)
    table.add_column("Mood")
    table.add_column("Count", justify="right")
    table.add_column("")
    for entry in category_frequencies(records):
        table.add_row(f"{_swatch(entry.color)} {entry.label}", str(entry.count), _bar(entry.count))
    console.print(table)

    table = Table(title="Moods by Hour", show_header=True)
    table.add_column("Hour", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("")
    for hour, (label, count) in enumerate(zip(hour_labels(step), hourly_distribution(records))):
        table.add_row(label or f"[dim]{hour}[/]", str(count), _bar(count, color="blue"))
    console.print(table)

    comparison = week_comparison(records, now)
    delta = comparison.delta
    trend = "[green]up[/]" if delta > 0 else "[red]down[/]" if delta < 0 else "[dim]flat[/]"
    console.print(
        f"\n[bold]This week:[/] {comparison.this_week:.2f}  |  "
        f"[bold]Last week:[/] {comparison.last_week:.2f}  ({trend} {delta:+.2f})"
    )
