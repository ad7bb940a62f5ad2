"""DevKB command-line interface."""

import logging
import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import add, ask, index, init, list_entries, search, stats
from cli.config import load_config_model
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="1.0.0", prog_name="devkb")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """DevKB - index and query your codebase and team knowledge."""
    setup_logging(level="DEBUG" if verbose else "WARNING")
    if not verbose:
        logging.getLogger().setLevel(load_config_model().logging.level)


cli.add_command(init)
cli.add_command(index)
cli.add_command(search)
cli.add_command(ask)
cli.add_command(add)
cli.add_command(list_entries)
cli.add_command(stats)


if __name__ == "__main__":
    cli()
