"""Helpers shared by the DayBalance CLI commands."""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from daybalance.config import (
    ConfigError,
    InsightsSettings,
    get_insights_settings,
    load_config,
)
from daybalance.data import EntryFileError, load_entries
from daybalance.insights import TimeRange, build_insights_from_entries, resolve_time_range
from daybalance.models import DayEntry, InsightsData

console = Console()

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


def print_error(message: str, title: str = "Error") -> None:
    """Print an error panel in the CLI's standard style."""
    console.print(Panel(
        message,
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def load_settings() -> InsightsSettings:
    """Load settings, exiting with an error panel on invalid config values."""
    try:
        return get_insights_settings(load_config())
    except ConfigError as e:
        print_error(
            f"[red]Invalid configuration.[/red]\n\n{e}\n\n"
            "Fix the values or recreate the file with "
            "[cyan]daybalance init --force[/cyan].",
        )
        raise SystemExit(1)


def range_options(func):
    """Attach the --file/--range/--from/--to options to a command."""
    func = click.option(
        "--to", "to_date", type=DATE_TYPE, default=None,
        help="Range end (YYYY-MM-DD). Defaults to today.",
    )(func)
    func = click.option(
        "--from", "from_date", type=DATE_TYPE, default=None,
        help="Range start (YYYY-MM-DD). Overrides --range.",
    )(func)
    func = click.option(
        "--range", "-r", "time_range",
        type=click.Choice([t.value for t in TimeRange]),
        default=None,
        help="Preset range (default from config, else last-30-days).",
    )(func)
    func = click.option(
        "--file", "-f", "entries_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Entries JSON export (default from config).",
    )(func)
    return func


def _as_date(value: Optional[datetime]) -> Optional[date]:
    return value.date() if value is not None else None


def load_insights(
    entries_file: Optional[Path],
    time_range: Optional[str],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
) -> tuple[InsightsData, list[DayEntry]]:
    """Load entries and build insights for the requested range.
    
    Exits with status 1 after printing an error panel when the entries
    file cannot be loaded or the range is inverted.
    
    Returns:
        Tuple of (insights, entries).
    """
    settings = load_settings()
    path = entries_file or settings.entries_file

    try:
        entries = load_entries(path)
    except EntryFileError as e:
        print_error(
            f"[red]Could not load entries.[/red]\n\n{e}\n\n"
            "Pass [cyan]--file[/cyan] or set [cyan]data.entries_file[/cyan] "
            "in the config ([cyan]daybalance init[/cyan]).",
        )
        raise SystemExit(1)

    end = _as_date(to_date) or date.today()
    start = _as_date(from_date)
    if start is None:
        preset = TimeRange(time_range) if time_range else settings.default_range
        start, _ = resolve_time_range(preset, end, entries)

    if start > end:
        print_error(f"[red]Range start {start} is after range end {end}.[/red]")
        raise SystemExit(1)

    return build_insights_from_entries(entries, start, end), entries


def format_optional(value: Optional[float], precision: int = 1) -> str:
    """Format an optional average, showing a dash for missing data."""
    if value is None:
        return "[dim]-[/dim]"
    return f"{value:.{precision}f}"


def format_delta(value: float) -> str:
    """Format a signed delta with green for positive, amber otherwise."""
    color = "green" if value > 0 else "yellow"
    sign = "+" if value > 0 else ""
    return f"[{color}]{sign}{value:.1f}[/{color}]"
