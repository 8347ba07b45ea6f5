"""Streak calculation over a DaySummary sequence."""

from daybalance.insights.stats import is_logged
from daybalance.models import DaySummary, Streaks


def calculate_current_streak(days: list[DaySummary]) -> int:
    """Count consecutive logged days at the end of the sequence."""
    streak = 0
    for day in reversed(days):
        if not is_logged(day):
            break
        streak += 1
    return streak


def calculate_longest_streak(days: list[DaySummary]) -> int:
    """Length of the longest run of consecutive logged days."""
    longest = 0
    running = 0
    for day in days:
        if is_logged(day):
            running += 1
            longest = max(longest, running)
        else:
            running = 0
    return longest


def calculate_streaks(days: list[DaySummary]) -> Streaks:
    """Calculate current and longest streaks.
    
    A gap-filled day breaks a streak exactly like a logged day with no
    investment.
    
    Args:
        days: Day summaries sorted by date ascending.
        
    Returns:
        Streaks with current and longest run lengths.
    """
    return Streaks(
        current_streak=calculate_current_streak(days),
        longest_streak=calculate_longest_streak(days),
    )
