"""Insights commands for DayBalance CLI.

Handles the range overview, streaks, tag usage and narrative summary.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from daybalance.cli.common import (
    console,
    format_optional,
    load_insights,
    load_settings,
    range_options,
)
from daybalance.data import dump_insights
from daybalance.insights import (
    calculate_coverage,
    calculate_mvd_breakdown,
    calculate_streaks,
    calculate_tag_analytics,
    narrative_or_placeholder,
)
from daybalance.models import INVESTMENT_CATEGORIES, InsightsData


def _range_title(data: InsightsData) -> str:
    return f"{data.date_range.from_date.isoformat()} → {data.date_range.to_date.isoformat()}"


def build_overview_table(data: InsightsData) -> Table:
    """Build the key metrics table for a range."""
    aggregates = data.aggregates
    streaks = calculate_streaks(data.days)
    mvd = calculate_mvd_breakdown(data.days)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row(
        "Days logged",
        f"{aggregates.total_days_logged} of {len(data.days)} "
        f"[dim]({calculate_coverage(data.days):.0f}% coverage)[/dim]",
    )
    table.add_row("Average mood", format_optional(aggregates.average_mood))
    table.add_row("Average energy", format_optional(aggregates.average_energy))
    table.add_row(
        "Minimum viable days",
        f"{aggregates.mvd_count} [dim]({mvd.mvd_percentage:.0f}% of logged days)[/dim]",
    )
    table.add_row("Current streak", f"{streaks.current_streak} days")
    table.add_row("Longest streak", f"{streaks.longest_streak} days")
    return table


def build_category_table(data: InsightsData) -> Table:
    """Build the per-category totals table."""
    aggregates = data.aggregates

    table = Table(
        title="Category Balance",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Category", style="bold")
    table.add_column("Total", justify="right")
    table.add_column("Average", justify="right")
    table.add_column("Days", justify="right")

    for category in INVESTMENT_CATEGORIES:
        agg = aggregates.category_aggregates[category]
        label = category.label
        if category == aggregates.most_invested_category:
            label = f"[green]{label} ▲[/green]"
        elif category == aggregates.least_invested_category:
            label = f"[yellow]{label} ▼[/yellow]"
        table.add_row(label, str(agg.total), f"{agg.average:.1f}", str(agg.day_count))

    return table


def print_narrative(data: InsightsData, min_days: int) -> None:
    """Print the narrative summary panel."""
    sentences = narrative_or_placeholder(data, min_days=min_days)
    console.print(Panel(
        "\n".join(sentences),
        title="[bold]Summary[/bold]",
        border_style="cyan",
    ))


@click.command(name="insights")
@range_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Print insights as JSON.")
def insights(
    entries_file: Optional[Path],
    time_range: Optional[str],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
    as_json: bool,
) -> None:
    """Show the insights overview for a date range.
    
    \b
    Examples:
      daybalance insights                   # Default range
      daybalance insights -r last-7-days
      daybalance insights --from 2024-01-01 --to 2024-01-31 --json
    """
    data, _ = load_insights(entries_file, time_range, from_date, to_date)

    if as_json:
        click.echo(dump_insights(data))
        return

    settings = load_settings()

    console.print(Panel(
        build_overview_table(data),
        title=f"[bold]Insights[/bold] [dim]{_range_title(data)}[/dim]",
        border_style="cyan",
    ))

    if data.aggregates.total_days_logged == 0:
        console.print("[dim]No logged days in this period yet.[/dim]")
        return

    console.print(build_category_table(data))
    print_narrative(data, settings.narrative_min_days)


@click.command(name="streaks")
@range_options
def streaks(
    entries_file: Optional[Path],
    time_range: Optional[str],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
) -> None:
    """Show consistency and streaks for a date range."""
    data, _ = load_insights(entries_file, time_range, from_date, to_date)
    result = calculate_streaks(data.days)

    console.print(Panel(
        f"[bold]Days logged:[/bold] {data.aggregates.total_days_logged} of {len(data.days)}\n"
        f"[bold]Current streak:[/bold] {result.current_streak} days\n"
        f"[bold]Longest streak:[/bold] {result.longest_streak} days\n\n"
        "[dim]Consistency is about showing up, not perfection.[/dim]",
        title=f"[bold]Consistency & Streaks[/bold] [dim]{_range_title(data)}[/dim]",
        border_style="cyan",
    ))


@click.command(name="tags")
@range_options
@click.option("--top", type=int, default=None, help="Only show the N most used tags.")
def tags(
    entries_file: Optional[Path],
    time_range: Optional[str],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
    top: Optional[int],
) -> None:
    """Show tag usage with average mood and energy."""
    data, _ = load_insights(entries_file, time_range, from_date, to_date)
    analytics = calculate_tag_analytics(data.days)

    if not analytics:
        console.print(Panel(
            "[dim]No tags used in this period yet.[/dim]",
            title="[bold]Tags[/bold]",
            border_style="dim",
        ))
        return

    if top is not None:
        analytics = analytics[:top]

    table = Table(title="Tags", show_header=True, header_style="bold cyan")
    table.add_column("Tag", style="bold")
    table.add_column("Days", justify="right")
    table.add_column("Avg Mood", justify="right")
    table.add_column("Avg Energy", justify="right")

    for item in analytics:
        table.add_row(
            item.tag,
            str(item.count),
            format_optional(item.avg_mood),
            format_optional(item.avg_energy),
        )

    console.print(table)


@click.command(name="summary")
@range_options
def summary(
    entries_file: Optional[Path],
    time_range: Optional[str],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
) -> None:
    """Show the narrative summary for a date range."""
    data, _ = load_insights(entries_file, time_range, from_date, to_date)
    settings = load_settings()
    print_narrative(data, settings.narrative_min_days)
