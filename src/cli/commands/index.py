"""File index CLI commands: build the index and search file names."""

import json
import sys

import click
import structlog
from rich.console import Console
from rich.markup import escape

from cli.utils import get_components, split_csv
from indexer import IndexNotFoundError, build_index

console = Console()
logger = structlog.get_logger()


@click.command()
@click.option("-p", "--paths", "paths_opt", help="Comma-separated paths to index")
@click.option("-f", "--force", is_flag=True, help="Rebuild an existing index")
def index(paths_opt: str | None, force: bool):
    """Index codebase files for searching."""
    c = get_components()
    config = c["config_model"]
    file_index = c["file_index"]

    if file_index.exists() and not force:
        console.print("[yellow]Index already exists.[/] Run with --force to rebuild it.")
        return

    roots = split_csv(paths_opt) or config.index_paths
    try:
        with console.status("Indexing codebase..."):
            files = build_index(
                roots,
                exclude_patterns=config.exclude_patterns,
                include_extensions=config.include_extensions,
                max_file_size=config.max_file_size,
            )
            file_index.save(files)
    except OSError as e:
        logger.error("index.failed", error=str(e))
        console.print(f"[red]Indexing failed:[/] {escape(str(e))}")
        sys.exit(1)

    console.print(f"[green]✓[/] Indexed {len(files)} files")
    console.print(f"[dim]Index written to {escape(str(file_index.index_file))}[/]")


@click.command()
@click.argument("query")
@click.option("-t", "--type", "file_type", help="Filter by file extension (e.g. ts or .md)")
@click.option("-l", "--limit", default=10, type=click.IntRange(min=1), help="Max results")
def search(query: str, file_type: str | None, limit: int):
    """Search indexed file names."""
    c = get_components()

    try:
        results = c["file_index"].search(query, ext=file_type, limit=limit)
    except IndexNotFoundError:
        console.print('[yellow]No index found. Run "devkb index" first.[/]')
        return
    except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError) as e:
        logger.warning("index.unreadable", error=str(e))
        console.print('[red]Index is unreadable.[/] Run "devkb index --force" to rebuild it.')
        return

    if not results:
        console.print("[yellow]No results found.[/]")
        return

    console.print(f'\n[blue]Found {len(results)} results for "{escape(query)}":[/]\n')
    for i, item in enumerate(results, 1):
        console.print(f"[cyan]{i}.[/] {escape(item.path)}")
        console.print(f"[dim]   Type: {escape(item.ext or '(none)')}[/]\n")
