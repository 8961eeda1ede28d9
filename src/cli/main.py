"""CLI entry point for moodlog."""

import sys
from pathlib import Path

import click
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import analytics, clear, history, log, moods
from cli.config import load_config
from cli.logging_config import setup_logging

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """moodlog - log how you feel and see the patterns."""
    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    level = "DEBUG" if verbose else config.logging.level
    setup_logging(json_mode=config.logging.json_mode, level=level)


cli.add_command(log)
cli.add_command(history)
cli.add_command(analytics)
cli.add_command(clear)
cli.add_command(moods)


if __name__ == "__main__":
    cli()
