"""Data models for DayBalance."""

from daybalance.models.category import (
    CATEGORY_INFO,
    INVESTMENT_CATEGORIES,
    InvestmentCategory,
    zero_scores,
)
from daybalance.models.entry import DayEntry, Investment
from daybalance.models.insights import (
    CategoryAggregate,
    DateRange,
    DaySummary,
    InsightsAggregates,
    InsightsData,
    MvdBreakdown,
    Streaks,
    TagAnalytics,
)
from daybalance.models.correlation import (
    CategoryMoodCorrelation,
    CorrelationReport,
    MvdCorrelation,
    TagCorrelation,
)

__all__ = [
    "CATEGORY_INFO",
    "INVESTMENT_CATEGORIES",
    "InvestmentCategory",
    "zero_scores",
    "DayEntry",
    "Investment",
    "CategoryAggregate",
    "DateRange",
    "DaySummary",
    "InsightsAggregates",
    "InsightsData",
    "MvdBreakdown",
    "Streaks",
    "TagAnalytics",
    "CategoryMoodCorrelation",
    "CorrelationReport",
    "MvdCorrelation",
    "TagCorrelation",
]
