"""Insights aggregation engine.

Pure functions that turn journal entries into day summaries, range
aggregates, streaks, tag analytics, correlations and narrative text.
"""

from daybalance.insights.aggregates import (
    build_insights_from_entries,
    calculate_category_aggregates,
    calculate_coverage,
    calculate_mvd_breakdown,
    compute_aggregates,
    find_most_and_least_invested,
)
from daybalance.insights.correlations import (
    compute_category_mood_correlations,
    compute_correlations,
    compute_mvd_correlations,
    compute_tag_mood_energy_correlations,
)
from daybalance.insights.narrative import (
    NOT_ENOUGH_DATA_MESSAGE,
    generate_narrative_summary,
    narrative_or_placeholder,
)
from daybalance.insights.ranges import TimeRange, filter_insights, resolve_time_range
from daybalance.insights.scoring import calculate_day_intensity, intensity_level
from daybalance.insights.streaks import calculate_streaks
from daybalance.insights.summary import build_day_summaries
from daybalance.insights.tags import calculate_tag_analytics

__all__ = [
    "build_insights_from_entries",
    "calculate_category_aggregates",
    "calculate_coverage",
    "calculate_mvd_breakdown",
    "compute_aggregates",
    "find_most_and_least_invested",
    "compute_category_mood_correlations",
    "compute_correlations",
    "compute_mvd_correlations",
    "compute_tag_mood_energy_correlations",
    "NOT_ENOUGH_DATA_MESSAGE",
    "generate_narrative_summary",
    "narrative_or_placeholder",
    "TimeRange",
    "filter_insights",
    "resolve_time_range",
    "calculate_day_intensity",
    "intensity_level",
    "calculate_streaks",
    "build_day_summaries",
    "calculate_tag_analytics",
]
