"""Stats CLI command."""

import json
from collections import Counter

import click
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.utils import get_components

console = Console()
logger = structlog.get_logger()


@click.command()
def stats():
    """Show DevKB statistics."""
    c = get_components()
    paths = c["paths"]

    if not paths["data_dir"].exists():
        console.print('[yellow]DevKB not initialized. Run "devkb init" first.[/]')
        return

    try:
        indexed_files = c["file_index"].count()
    except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError) as e:
        logger.warning("index.unreadable", error=str(e))
        indexed_files = 0

    records = c["knowledge"].list_entries()
    by_type = Counter(str(r.get("type", "?")) for r in records)

    console.print("\n[blue bold]DevKB Statistics[/]\n")
    console.print(f"[dim]Indexed files:     [/]{indexed_files}")
    console.print(f"[dim]Knowledge entries: [/]{len(records)}")
    console.print(f"[dim]Data directory:    [/]{escape(c['config_model'].data_dir)}")

    if by_type:
        table = Table(show_header=True)
        table.add_column("Type", style="cyan")
        table.add_column("Entries", justify="right")
        for entry_type, count in sorted(by_type.items()):
            table.add_row(escape(entry_type), str(count))
        console.print()
        console.print(table)
    console.print()
