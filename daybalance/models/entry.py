"""Investment and DayEntry data models."""

from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from daybalance.models.category import InvestmentCategory


class Investment(BaseModel):
    """A score given to one category on one day."""

    category: InvestmentCategory = Field(..., description="Life category")
    score: int = Field(..., ge=0, le=3, description="Investment score (0-3)")
    comment: Optional[str] = Field(default=None, description="Optional comment")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}


class DayEntry(BaseModel):
    """Represents a user's journal record for one calendar date."""

    id: Optional[str] = Field(default=None, description="Record identifier")
    date: date_type = Field(..., description="Entry date")
    mood: Optional[int] = Field(default=None, ge=1, le=5, description="Mood (1-5)")
    energy: Optional[int] = Field(default=None, ge=1, le=5, description="Energy (1-5)")
    note: Optional[str] = Field(default=None, description="Free-text reflection")
    is_minimum_viable_day: bool = Field(
        default=False, description="Whether only baseline self-care was achieved"
    )
    investments: list[Investment] = Field(
        default_factory=list, description="At most one investment per category"
    )
    tags: list[str] = Field(default_factory=list, description="Free-form day tags")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @model_validator(mode="after")
    def check_unique_categories(self) -> "DayEntry":
        seen = set()
        for investment in self.investments:
            if investment.category in seen:
                raise ValueError(
                    f"duplicate investment category: {investment.category.value}"
                )
            seen.add(investment.category)
        return self
