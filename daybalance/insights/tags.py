"""Tag usage analytics."""

from daybalance.insights.stats import is_logged, mean_or_none
from daybalance.models import DaySummary, TagAnalytics


def group_days_by_tag(days: list[DaySummary]) -> dict[str, list[DaySummary]]:
    """Group logged days by tag, in tag encounter order.
    
    A tag listed twice on the same day counts that day once.
    """
    groups: dict[str, list[DaySummary]] = {}
    for day in days:
        if not is_logged(day):
            continue
        for tag in dict.fromkeys(day.tags):
            groups.setdefault(tag, []).append(day)
    return groups


def calculate_tag_analytics(days: list[DaySummary]) -> list[TagAnalytics]:
    """Calculate usage count and mood/energy averages per tag.
    
    Only logged days are considered.
    
    Args:
        days: Day summaries for the range.
        
    Returns:
        Tag analytics sorted by count descending. Ties keep the order
        in which the tags were first seen.
    """
    analytics = [
        TagAnalytics(
            tag=tag,
            count=len(tagged),
            avg_mood=mean_or_none(d.mood for d in tagged if d.mood is not None),
            avg_energy=mean_or_none(d.energy for d in tagged if d.energy is not None),
        )
        for tag, tagged in group_days_by_tag(days).items()
    ]
    return sorted(analytics, key=lambda t: t.count, reverse=True)
