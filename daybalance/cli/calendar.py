"""Calendar command for DayBalance CLI.

Shows a month grid shaded by day intensity.
"""

import calendar as calendar_lib
from datetime import date
from pathlib import Path
from typing import Optional

import click
from rich.table import Table

from daybalance.cli.common import console, load_settings, print_error
from daybalance.data import EntryFileError, load_entries
from daybalance.insights import calculate_day_intensity, intensity_level
from daybalance.models import DayEntry

LEVEL_STYLES = ["dim", "green", "bold green", "black on green", "black on bright_green"]


def month_intensities(entries: list[DayEntry], year: int, month: int) -> dict[date, int]:
    """Map each logged date of a month to its intensity level (0-4)."""
    return {
        entry.date: intensity_level(calculate_day_intensity(entry))
        for entry in entries
        if entry.date.year == year and entry.date.month == month
    }


def _parse_month(value: Optional[str]) -> tuple[int, int]:
    if value is None:
        today = date.today()
        return today.year, today.month
    year, month = value.split("-")
    return int(year), int(month)


@click.command(name="calendar")
@click.option(
    "--file", "-f", "entries_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Entries JSON export (default from config).",
)
@click.option("--month", "-m", default=None, help="Month to show (YYYY-MM). Defaults to current.")
def calendar(entries_file: Optional[Path], month: Optional[str]) -> None:
    """Show a month calendar shaded by day intensity."""
    try:
        year, month_number = _parse_month(month)
        calendar_lib.monthrange(year, month_number)
    except (ValueError, calendar_lib.IllegalMonthError):
        print_error(f"[red]Invalid month '{month}'. Use YYYY-MM.[/red]")
        raise SystemExit(1)

    settings = load_settings()
    try:
        entries = load_entries(entries_file or settings.entries_file)
    except EntryFileError as e:
        print_error(f"[red]Could not load entries.[/red]\n\n{e}")
        raise SystemExit(1)

    levels = month_intensities(entries, year, month_number)

    table = Table(
        title=f"{calendar_lib.month_name[month_number]} {year}",
        show_header=True,
        header_style="bold cyan",
    )
    for name in ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]:
        table.add_column(name, justify="center")

    for week in calendar_lib.Calendar().monthdatescalendar(year, month_number):
        cells = []
        for day in week:
            if day.month != month_number:
                cells.append("")
                continue
            level = levels.get(day, 0)
            cells.append(f"[{LEVEL_STYLES[level]}]{day.day:>2}[/{LEVEL_STYLES[level]}]")
        table.add_row(*cells)

    console.print(table)
