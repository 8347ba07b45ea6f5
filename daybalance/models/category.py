"""InvestmentCategory enumeration."""

from enum import Enum


class InvestmentCategory(str, Enum):
    """The fixed set of life categories a day can be invested in.

    Member order is significant: it is the tie-break order for the
    most/least invested category selection.
    """

    CAREER = "career"
    HEALTH = "health"
    RELATIONSHIPS = "relationships"
    WELLBEING = "wellbeing"
    MEANING = "meaning"
    ENVIRONMENT = "environment"

    @property
    def label(self) -> str:
        """Human-readable label used in summaries."""
        return CATEGORY_INFO[self]["label"]

    @property
    def description(self) -> str:
        return CATEGORY_INFO[self]["description"]


CATEGORY_INFO: dict[InvestmentCategory, dict[str, str]] = {
    InvestmentCategory.CAREER: {"label": "Career", "description": "career, money, skills"},
    InvestmentCategory.HEALTH: {"label": "Health", "description": "physical health"},
    InvestmentCategory.RELATIONSHIPS: {
        "label": "Relationships",
        "description": "family, friends, social",
    },
    InvestmentCategory.WELLBEING: {
        "label": "Wellbeing",
        "description": "mental/emotional health",
    },
    InvestmentCategory.MEANING: {
        "label": "Meaning",
        "description": "values, purpose, spirituality",
    },
    InvestmentCategory.ENVIRONMENT: {
        "label": "Environment",
        "description": "order, decluttering, surroundings",
    },
}

INVESTMENT_CATEGORIES: tuple[InvestmentCategory, ...] = tuple(InvestmentCategory)


def zero_scores() -> dict[InvestmentCategory, int]:
    """Return a score mapping with every category set to 0."""
    return {category: 0 for category in INVESTMENT_CATEGORIES}
