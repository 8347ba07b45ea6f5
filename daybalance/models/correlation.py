"""Correlation result models."""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from daybalance.models.category import InvestmentCategory


_CONFIG = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}


class CategoryMoodCorrelation(BaseModel):
    """Mood difference between above-average and other days of a category."""

    category: InvestmentCategory
    mood_delta: float = Field(..., description="mean(mood | above) - mean(mood | at or below)")
    above_count: int = Field(..., ge=2)
    below_count: int = Field(..., ge=2)

    model_config = _CONFIG


class TagCorrelation(BaseModel):
    """Mood and energy averages on days carrying a tag."""

    tag: str
    day_count: int = Field(..., ge=2)
    mood_average: Optional[float] = None
    energy_average: Optional[float] = None

    model_config = _CONFIG


class MvdCorrelation(BaseModel):
    """Comparison of minimum viable days against regular days."""

    mvd_count: int = Field(default=0, ge=0)
    regular_count: int = Field(default=0, ge=0)
    mvd_mood_avg: Optional[float] = None
    regular_mood_avg: Optional[float] = None
    mvd_energy_avg: Optional[float] = None
    regular_energy_avg: Optional[float] = None
    mvd_investment_avg: Optional[float] = None
    regular_investment_avg: Optional[float] = None

    model_config = _CONFIG


class CorrelationReport(BaseModel):
    """All correlation results for a range."""

    category_mood: list[CategoryMoodCorrelation] = Field(default_factory=list)
    tags: list[TagCorrelation] = Field(default_factory=list)
    mvd: MvdCorrelation = Field(default_factory=MvdCorrelation)

    model_config = _CONFIG
