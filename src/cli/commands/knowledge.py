"""Knowledge entry CLI commands backed by the flat-file knowledge directory."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.utils import get_components, split_csv
from knowledge.ask import answer_question
from shared_types import KnowledgeEntryType

console = Console()

ENTRY_TYPES = [t.value for t in KnowledgeEntryType]

TYPE_STYLES = {
    "code": "green",
    "decision": "yellow",
    "architecture": "magenta",
}


@click.command()
@click.argument("entry_type", metavar="TYPE", type=click.Choice(ENTRY_TYPES, case_sensitive=False))
@click.option("-t", "--title", help="Entry title")
@click.option("-c", "--content", help="Entry content")
@click.option("--tags", help="Comma-separated tags")
def add(entry_type: str, title: str | None, content: str | None, tags: str | None):
    """Add a knowledge entry."""
    c = get_components()
    record = c["knowledge"].add(
        entry_type,
        title=title,
        content=content,
        tags=split_csv(tags),
    )
    console.print(f"\n[green]✓[/] Added {record['type']} entry: {escape(record['title'])}")
    console.print(f"[dim]id: {record['id']}[/]")


@click.command("list")
@click.option(
    "-t", "--type", "entry_type",
    type=click.Choice(ENTRY_TYPES, case_sensitive=False),
    help="Filter by type",
)
def list_entries(entry_type: str | None):
    """List knowledge entries."""
    c = get_components()
    records = c["knowledge"].list_entries(entry_type=entry_type)

    if not records:
        console.print("[yellow]No knowledge entries found.[/]")
        return

    table = Table(title=f"Knowledge Entries ({len(records)})", show_header=True)
    table.add_column("Type")
    table.add_column("Title")
    table.add_column("Tags", style="dim")
    table.add_column("ID", style="dim")

    for r in records:
        rtype = str(r.get("type", "?"))
        style = TYPE_STYLES.get(rtype, "white")
        table.add_row(
            f"[{style}]{escape(rtype)}[/]",
            escape(str(r.get("title", ""))),
            escape(", ".join(r.get("tags") or [])),
            str(r.get("id", "")),
        )

    console.print(table)


@click.command()
@click.argument("question")
def ask(question: str):
    """Ask a question about your knowledge entries."""
    c = get_components()
    console.print(f"\n[blue]Question:[/] {escape(question)}\n")

    result = answer_question(question, c["knowledge"].as_entries())

    console.print("[green]Answer:[/]")
    console.print(escape(result.answer))
    if result.sources:
        console.print(f"\n[dim]Sources: {', '.join(result.sources)}[/]")
    else:
        console.print('\n[yellow]Tip:[/] Add entries with "devkb add" to grow your knowledge base.')
