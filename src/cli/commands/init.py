"""Init CLI command."""

import click
from rich.console import Console

from cli.config import STARTER_CONFIG, find_config, get_paths, write_config
from cli.config_models import DevKBConfig

console = Console()


@click.command()
def init():
    """Initialize DevKB in the current directory."""
    console.print("[blue]Initializing DevKB...[/]")

    config_path = write_config(STARTER_CONFIG, find_config())
    paths = get_paths(DevKBConfig.from_dict(STARTER_CONFIG))
    for name in ("knowledge_dir", "index_dir"):
        paths[name].mkdir(parents=True, exist_ok=True)

    console.print("[green]✓[/] DevKB initialized successfully!")
    console.print("[dim]Created:[/]")
    console.print(f"[dim]  - {config_path.name}[/]")
    console.print(f"[dim]  - {STARTER_CONFIG['dataDir']}/knowledge/[/]")
    console.print(f"[dim]  - {STARTER_CONFIG['dataDir']}/index/[/]")
