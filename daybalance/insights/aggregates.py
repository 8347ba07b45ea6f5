"""Range-level aggregate calculations.

Computes averages, category totals and the most/least invested
categories over a gap-free DaySummary sequence.
"""

import logging
from datetime import date
from typing import Optional

from daybalance.insights.stats import is_logged, mean_or_none
from daybalance.insights.summary import build_day_summaries
from daybalance.models import (
    INVESTMENT_CATEGORIES,
    CategoryAggregate,
    DateRange,
    DayEntry,
    DaySummary,
    InsightsAggregates,
    InsightsData,
    InvestmentCategory,
    MvdBreakdown,
)

logger = logging.getLogger(__name__)


def calculate_category_aggregates(
    days: list[DaySummary],
) -> dict[InvestmentCategory, CategoryAggregate]:
    """Calculate per-category totals over logged days.
    
    The average divides by the number of days on which the category
    scored above zero, so zero days never lower it.
    
    Args:
        days: Day summaries for the range.
        
    Returns:
        Mapping with an aggregate for every category.
    """
    logged = [d for d in days if is_logged(d)]
    aggregates = {}

    for category in INVESTMENT_CATEGORIES:
        scores = [d.category_scores[category] for d in logged]
        total = sum(scores)
        day_count = sum(1 for s in scores if s > 0)
        aggregates[category] = CategoryAggregate(
            total=total,
            average=total / day_count if day_count > 0 else 0.0,
            day_count=day_count,
        )

    return aggregates


def find_most_and_least_invested(
    category_aggregates: dict[InvestmentCategory, CategoryAggregate],
) -> tuple[Optional[InvestmentCategory], Optional[InvestmentCategory]]:
    """Pick the categories with the highest and lowest nonzero total.
    
    Categories are scanned in enumeration order with strict comparisons,
    so the first of several tied categories wins.
    
    Returns:
        Tuple of (most_invested, least_invested). Both None when every
        category total is zero.
    """
    most: Optional[InvestmentCategory] = None
    least: Optional[InvestmentCategory] = None
    max_total = 0
    min_total = float("inf")

    for category in INVESTMENT_CATEGORIES:
        total = category_aggregates[category].total
        if total <= 0:
            continue
        if total > max_total:
            max_total = total
            most = category
        if total < min_total:
            min_total = total
            least = category

    return most, least


def compute_aggregates(days: list[DaySummary]) -> InsightsAggregates:
    """Compute the aggregate block for a DaySummary sequence.
    
    Mood and energy averages cover every day with a recorded value.
    The MVD count covers the whole range, including days without any
    investment; category figures only cover logged days.
    
    Args:
        days: Day summaries for the range.
        
    Returns:
        InsightsAggregates for the range.
    """
    category_aggregates = calculate_category_aggregates(days)
    most, least = find_most_and_least_invested(category_aggregates)

    return InsightsAggregates(
        average_mood=mean_or_none(d.mood for d in days if d.mood is not None),
        average_energy=mean_or_none(d.energy for d in days if d.energy is not None),
        total_days_logged=sum(1 for d in days if is_logged(d)),
        mvd_count=sum(1 for d in days if d.is_minimum_viable_day),
        category_aggregates=category_aggregates,
        most_invested_category=most,
        least_invested_category=least,
    )


def build_insights_from_entries(
    entries: list[DayEntry],
    from_date: date,
    to_date: date,
) -> InsightsData:
    """Transform journal entries into InsightsData for a date range.
    
    Args:
        entries: Journal entries to analyze.
        from_date: Range start (inclusive).
        to_date: Range end (inclusive).
        
    Returns:
        InsightsData with the gap-filled days, aggregates and the range.
    """
    days = build_day_summaries(entries, from_date, to_date)
    aggregates = compute_aggregates(days)

    logger.debug(
        "Aggregated %d days: %d logged, %d MVD",
        len(days), aggregates.total_days_logged, aggregates.mvd_count,
    )

    return InsightsData(
        days=days,
        aggregates=aggregates,
        date_range=DateRange(from_date=from_date, to_date=to_date),
    )


def calculate_coverage(days: list[DaySummary]) -> float:
    """Percentage of days in the range that were logged."""
    if not days:
        return 0.0
    return sum(1 for d in days if is_logged(d)) / len(days) * 100


def calculate_mvd_breakdown(days: list[DaySummary]) -> MvdBreakdown:
    """Split a range into minimum viable days and regular logged days.
    
    Args:
        days: Day summaries for the range.
        
    Returns:
        MvdBreakdown; the percentage is relative to logged days.
    """
    logged = sum(1 for d in days if is_logged(d))
    mvd_count = sum(1 for d in days if d.is_minimum_viable_day)

    return MvdBreakdown(
        mvd_count=mvd_count,
        regular_count=max(0, logged - mvd_count),
        days_with_investment=logged,
        mvd_percentage=(mvd_count / logged * 100) if logged > 0 else 0.0,
    )
