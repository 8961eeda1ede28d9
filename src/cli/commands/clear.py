"""Clear mood history CLI command."""

import click
from rich.console import Console

from cli.utils import get_components, run

console = Console()


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def clear(yes: bool):
    """Delete the whole mood history."""
    if not yes:
        if not click.confirm("This will delete all your mood entries. Continue?"):
            return

    c = get_components()
    count = run(c["history"].clear())
    console.print(f"[green]Mood history cleared![/] ({count} entries removed)")
