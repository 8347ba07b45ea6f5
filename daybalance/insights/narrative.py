"""Rule-based narrative summaries.

Each generator looks at one aspect of a range and returns a single
sentence, or None when its rule does not fire.
"""

from typing import Optional

from daybalance.insights.stats import mean_or_none, round_half_up
from daybalance.insights.tags import calculate_tag_analytics
from daybalance.models import DaySummary, InsightsAggregates, InsightsData, TagAnalytics

# Logged days required before a narrative is shown
MIN_NARRATIVE_DAYS = 3

NOT_ENOUGH_DATA_MESSAGE = "Log a few more days to unlock personalized summaries."

HIGH_LEVEL = 4
LOW_LEVEL = 2.5

MOST_INVESTED_RATIO = 1.3
LEAST_INVESTED_RATIO = 0.7

HEAVY_MVD_PERCENT = 40
STABLE_MVD_PERCENT = 10

DOMINANT_TAG_PERCENT = 40


def _level_sentence(average: Optional[float], high: str, low: str, balanced: str) -> Optional[str]:
    if average is None:
        return None
    if average >= HIGH_LEVEL:
        return high
    if average <= LOW_LEVEL:
        return low
    return balanced


def generate_mood_summary(days: list[DaySummary]) -> Optional[str]:
    """Describe the average mood of the range."""
    return _level_sentence(
        mean_or_none(d.mood for d in days if d.mood is not None),
        high="Your mood has been consistently high this period.",
        low="Mood has been lower than usual lately.",
        balanced="Your mood has been balanced this period.",
    )


def generate_energy_summary(days: list[DaySummary]) -> Optional[str]:
    """Describe the average energy of the range."""
    return _level_sentence(
        mean_or_none(d.energy for d in days if d.energy is not None),
        high="Your energy levels have been strong throughout this period.",
        low="Energy has been lower than usual lately, rest may be needed.",
        balanced="Your energy levels have been moderate this period.",
    )


def generate_category_summary(aggregates: InsightsAggregates) -> Optional[str]:
    """Call out a category that stands out from the average total.
    
    The most invested category is checked first; the least invested one
    is only mentioned when the first rule does not fire.
    """
    most = aggregates.most_invested_category
    if most is None:
        return None

    totals = {cat: agg.total for cat, agg in aggregates.category_aggregates.items()}
    average_total = sum(totals.values()) / len(totals)

    if totals[most] >= average_total * MOST_INVESTED_RATIO:
        return f"You invested most in {most.label} this period."

    least = aggregates.least_invested_category
    if least is not None and totals[least] <= average_total * LEAST_INVESTED_RATIO:
        return f"{least.label} received less attention than usual."

    return None


def generate_mvd_summary(mvd_count: int, total_days: int) -> Optional[str]:
    """Describe how many of the logged days were minimum viable days.
    
    Args:
        mvd_count: Number of minimum viable days.
        total_days: Number of logged days.
        
    Returns:
        Sentence, or None when nothing was logged.
    """
    if total_days == 0:
        return None

    mvd_percentage = mvd_count / total_days * 100
    if mvd_percentage > HEAVY_MVD_PERCENT:
        return "This was a heavy period with many minimum viable days."
    if mvd_percentage < STABLE_MVD_PERCENT:
        return "You had very few MVD days, great stability."
    return "You balanced productive days with self-care."


def generate_tag_summary(tag_analytics: list[TagAnalytics], total_days: int) -> Optional[str]:
    """Highlight the top tag when it appears on a large share of logged days.
    
    Args:
        tag_analytics: Tag analytics sorted by count descending.
        total_days: Number of logged days.
    """
    if not tag_analytics or total_days == 0:
        return None

    top = tag_analytics[0]
    percentage = top.count / total_days * 100
    if percentage < DOMINANT_TAG_PERCENT:
        return None

    return (
        f'"{top.tag}" was your most common tag, appearing on '
        f"{round_half_up(percentage)}% of logged days."
    )


def generate_narrative_summary(data: InsightsData) -> list[str]:
    """Combine every rule into an ordered list of sentences.
    
    Sentence order is fixed: mood, energy, category, MVD, tag.
    
    Args:
        data: Insights for the range.
        
    Returns:
        Between zero and five sentences.
    """
    aggregates = data.aggregates
    candidates = [
        generate_mood_summary(data.days),
        generate_energy_summary(data.days),
        generate_category_summary(aggregates),
        generate_mvd_summary(aggregates.mvd_count, aggregates.total_days_logged),
        generate_tag_summary(
            calculate_tag_analytics(data.days), aggregates.total_days_logged
        ),
    ]
    return [sentence for sentence in candidates if sentence]


def narrative_or_placeholder(
    data: InsightsData,
    min_days: int = MIN_NARRATIVE_DAYS,
) -> list[str]:
    """Narrative summary, or the placeholder when too little was logged."""
    if data.aggregates.total_days_logged < min_days:
        return [NOT_ENOUGH_DATA_MESSAGE]
    return generate_narrative_summary(data) or [NOT_ENOUGH_DATA_MESSAGE]
