"""Derived insight data models."""

from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from daybalance.models.category import InvestmentCategory


_CONFIG = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}


class DaySummary(BaseModel):
    """Normalized view of one calendar date, logged or not."""

    date: date_type = Field(..., description="Calendar date")
    mood: Optional[int] = Field(default=None, description="Mood, None if not recorded")
    energy: Optional[int] = Field(default=None, description="Energy, None if not recorded")
    total_investment: int = Field(default=0, ge=0, description="Sum of category scores")
    category_scores: dict[InvestmentCategory, int] = Field(
        ..., description="Score per category, 0 when absent"
    )
    is_minimum_viable_day: bool = Field(default=False, description="MVD flag")
    tags: list[str] = Field(default_factory=list, description="Day tags")

    model_config = _CONFIG


class CategoryAggregate(BaseModel):
    """Totals for one category across the logged days of a range."""

    total: int = Field(default=0, ge=0, description="Sum of scores")
    average: float = Field(default=0.0, ge=0, description="Average over days scored > 0")
    day_count: int = Field(default=0, ge=0, description="Days with a score > 0")

    model_config = _CONFIG


class InsightsAggregates(BaseModel):
    """Range-level aggregate block."""

    average_mood: Optional[float] = None
    average_energy: Optional[float] = None
    total_days_logged: int = Field(default=0, ge=0)
    mvd_count: int = Field(default=0, ge=0)
    category_aggregates: dict[InvestmentCategory, CategoryAggregate]
    most_invested_category: Optional[InvestmentCategory] = None
    least_invested_category: Optional[InvestmentCategory] = None

    model_config = _CONFIG


class DateRange(BaseModel):
    """Inclusive calendar date range."""

    from_date: date_type = Field(..., alias="from")
    to_date: date_type = Field(..., alias="to")

    model_config = {"frozen": True, "populate_by_name": True}


class InsightsData(BaseModel):
    """Full output bundle of the aggregation engine."""

    days: list[DaySummary]
    aggregates: InsightsAggregates
    date_range: DateRange

    model_config = _CONFIG


class Streaks(BaseModel):
    """Current and longest runs of invested days."""

    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)

    model_config = _CONFIG


class TagAnalytics(BaseModel):
    """Usage and mood/energy averages for one tag."""

    tag: str
    count: int = Field(..., ge=0)
    avg_mood: Optional[float] = None
    avg_energy: Optional[float] = None

    model_config = _CONFIG


class MvdBreakdown(BaseModel):
    """Minimum viable day share of a range."""

    mvd_count: int = Field(default=0, ge=0)
    regular_count: int = Field(default=0, ge=0)
    days_with_investment: int = Field(default=0, ge=0)
    mvd_percentage: float = Field(default=0.0, ge=0)

    model_config = _CONFIG
