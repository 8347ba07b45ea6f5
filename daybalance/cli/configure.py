"""Setup command for DayBalance CLI."""

import click
from rich.panel import Panel

from daybalance.cli.common import console
from daybalance.config import create_template_config, get_config_path


@click.command(name="init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config.")
def init(force: bool) -> None:
    """Create a template configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(Panel(
            f"Config already exists at [cyan]{config_path}[/cyan]\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Config Exists[/bold yellow]",
            border_style="yellow",
        ))
        return

    path = create_template_config()
    console.print(Panel(
        f"Created config at [cyan]{path}[/cyan]\n\n"
        "Point [cyan]data.entries_file[/cyan] at your journal export.",
        title="[bold green]Config Created[/bold green]",
        border_style="green",
    ))
