"""Correlation command for DayBalance CLI."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from daybalance.cli.common import (
    console,
    format_delta,
    format_optional,
    load_insights,
    load_settings,
    range_options,
)
from daybalance.insights import compute_correlations
from daybalance.models import CorrelationReport


def build_category_mood_table(report: CorrelationReport, limit: int) -> Table:
    """Build the category to mood table."""
    table = Table(title="Investment ↔ Mood", show_header=True, header_style="bold cyan")
    table.add_column("Category", style="bold")
    table.add_column("Mood Δ", justify="right")
    table.add_column("Pattern")

    for corr in report.category_mood[:limit]:
        label = corr.category.label
        direction = "Higher" if corr.mood_delta > 0 else "Lower"
        table.add_row(
            label,
            format_delta(corr.mood_delta),
            f"{direction} {label.lower()} investment days show better mood",
        )
    return table


def build_tag_table(report: CorrelationReport, limit: int) -> Table:
    """Build the tag to mood/energy table."""
    table = Table(title="Tag ↔ Mood & Energy", show_header=True, header_style="bold cyan")
    table.add_column("Tag", style="bold")
    table.add_column("Days", justify="right")
    table.add_column("Mood", justify="right")
    table.add_column("Energy", justify="right")

    for corr in report.tags[:limit]:
        table.add_row(
            f"#{corr.tag}",
            str(corr.day_count),
            format_optional(corr.mood_average),
            format_optional(corr.energy_average),
        )
    return table


def build_mvd_table(report: CorrelationReport) -> Table:
    """Build the MVD versus regular days comparison table."""
    mvd = report.mvd
    table = Table(title="MVD vs Non-MVD", show_header=True, header_style="bold cyan")
    table.add_column("", style="bold")
    table.add_column("MVD days", justify="right")
    table.add_column("Regular days", justify="right")

    table.add_row("Days", str(mvd.mvd_count), str(mvd.regular_count))
    table.add_row("Mood", format_optional(mvd.mvd_mood_avg), format_optional(mvd.regular_mood_avg))
    table.add_row(
        "Energy", format_optional(mvd.mvd_energy_avg), format_optional(mvd.regular_energy_avg)
    )
    table.add_row(
        "Investment",
        format_optional(mvd.mvd_investment_avg),
        format_optional(mvd.regular_investment_avg),
    )
    return table


@click.command(name="correlations")
@range_options
@click.option("--limit", type=int, default=3, show_default=True, help="Rows per section.")
def correlations(
    entries_file: Optional[Path],
    time_range: Optional[str],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
    limit: int,
) -> None:
    """Show correlations between investments, tags, MVD days and mood.
    
    \b
    Examples:
      daybalance correlations -r last-90-days
      daybalance correlations --limit 6
    """
    data, _ = load_insights(entries_file, time_range, from_date, to_date)
    settings = load_settings()

    report = compute_correlations(data.days, min_days=settings.correlation_min_days)
    if report is None:
        console.print(Panel(
            "[dim]Not enough data to compute correlations for this period. "
            f"Log at least {settings.correlation_min_days} days.[/dim]",
            title="[bold]Correlations & Patterns[/bold]",
            border_style="dim",
        ))
        return

    if report.category_mood:
        console.print(build_category_mood_table(report, limit))
    if report.tags:
        console.print(build_tag_table(report, limit))
    if report.mvd.mvd_count > 0 and report.mvd.regular_count > 0:
        console.print(build_mvd_table(report))
