"""Correlations between investments, tags, MVD days and mood/energy.

Every calculation here only looks at logged days (total investment
above zero). The functions impose their own small per-metric minimums;
the overall sample-size gate lives in compute_correlations.
"""

import logging
from typing import Optional

from daybalance.insights.stats import is_logged, mean_or_none
from daybalance.insights.tags import group_days_by_tag
from daybalance.models import (
    INVESTMENT_CATEGORIES,
    CategoryMoodCorrelation,
    CorrelationReport,
    DaySummary,
    MvdCorrelation,
    TagCorrelation,
)

logger = logging.getLogger(__name__)

# Logged days required before any correlation is reported
MIN_CORRELATION_DAYS = 5

# Minimum size of each side of a category split
MIN_GROUP_SIZE = 2

# Minimum number of logged days a tag must appear on
MIN_TAG_DAYS = 2


def compute_category_mood_correlations(
    days: list[DaySummary],
) -> list[CategoryMoodCorrelation]:
    """Compare mood on above-average days of each category with the rest.
    
    For each category, logged days with a mood are split into days
    scoring strictly above the category's average score and days at or
    below it. Categories whose average is zero, or whose split leaves
    fewer than two days on either side, are skipped.
    
    Args:
        days: Day summaries for the range.
        
    Returns:
        Correlations sorted by absolute mood delta, largest first.
    """
    logged = [d for d in days if is_logged(d)]
    if not logged:
        return []

    with_mood = [d for d in logged if d.mood is not None]
    results = []

    for category in INVESTMENT_CATEGORIES:
        average = sum(d.category_scores[category] for d in logged) / len(logged)
        if average == 0:
            continue

        above = [d.mood for d in with_mood if d.category_scores[category] > average]
        below = [d.mood for d in with_mood if d.category_scores[category] <= average]

        if len(above) < MIN_GROUP_SIZE or len(below) < MIN_GROUP_SIZE:
            continue

        results.append(
            CategoryMoodCorrelation(
                category=category,
                mood_delta=sum(above) / len(above) - sum(below) / len(below),
                above_count=len(above),
                below_count=len(below),
            )
        )

    return sorted(results, key=lambda c: abs(c.mood_delta), reverse=True)


def compute_tag_mood_energy_correlations(
    days: list[DaySummary],
) -> list[TagCorrelation]:
    """Average mood and energy on the days each recurring tag was used.
    
    Args:
        days: Day summaries for the range.
        
    Returns:
        One entry per tag seen on at least two logged days, sorted by
        day count descending.
    """
    results = [
        TagCorrelation(
            tag=tag,
            day_count=len(tagged),
            mood_average=mean_or_none(d.mood for d in tagged if d.mood is not None),
            energy_average=mean_or_none(d.energy for d in tagged if d.energy is not None),
        )
        for tag, tagged in group_days_by_tag(days).items()
        if len(tagged) >= MIN_TAG_DAYS
    ]
    return sorted(results, key=lambda t: t.day_count, reverse=True)


def compute_mvd_correlations(days: list[DaySummary]) -> MvdCorrelation:
    """Compare minimum viable days with regular logged days.
    
    Args:
        days: Day summaries for the range.
        
    Returns:
        MvdCorrelation with counts and per-group averages. Averages of
        an empty group, or of a group with no recorded values, are None.
    """
    logged = [d for d in days if is_logged(d)]
    mvd = [d for d in logged if d.is_minimum_viable_day]
    regular = [d for d in logged if not d.is_minimum_viable_day]

    return MvdCorrelation(
        mvd_count=len(mvd),
        regular_count=len(regular),
        mvd_mood_avg=mean_or_none(d.mood for d in mvd if d.mood is not None),
        regular_mood_avg=mean_or_none(d.mood for d in regular if d.mood is not None),
        mvd_energy_avg=mean_or_none(d.energy for d in mvd if d.energy is not None),
        regular_energy_avg=mean_or_none(d.energy for d in regular if d.energy is not None),
        mvd_investment_avg=mean_or_none(d.total_investment for d in mvd),
        regular_investment_avg=mean_or_none(d.total_investment for d in regular),
    )


def compute_correlations(
    days: list[DaySummary],
    min_days: int = MIN_CORRELATION_DAYS,
) -> Optional[CorrelationReport]:
    """Run every correlation once enough days have been logged.
    
    Args:
        days: Day summaries for the range.
        min_days: Logged days required before reporting anything.
        
    Returns:
        CorrelationReport, or None when fewer than min_days days were
        logged.
    """
    logged_count = sum(1 for d in days if is_logged(d))
    if logged_count < min_days:
        logger.debug("Skipping correlations: %d logged days < %d", logged_count, min_days)
        return None

    return CorrelationReport(
        category_mood=compute_category_mood_correlations(days),
        tags=compute_tag_mood_energy_correlations(days),
        mvd=compute_mvd_correlations(days),
    )
