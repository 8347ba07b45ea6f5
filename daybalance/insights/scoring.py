"""Day intensity scoring for calendar views."""

from daybalance.insights.stats import round_half_up
from daybalance.models import DayEntry


def calculate_day_intensity(entry: DayEntry) -> int:
    """Combine investment scores (0-18) and mood (0-5) into one number.
    
    Args:
        entry: Journal entry for the day.
        
    Returns:
        Intensity from 0 to 6.
    """
    investment_sum = sum(inv.score for inv in entry.investments)
    return round_half_up((investment_sum + (entry.mood or 0)) / 4)


def intensity_level(intensity: int) -> int:
    """Bucket an intensity into a 0-4 shade level."""
    if intensity == 0:
        return 0
    if intensity <= 2:
        return 1
    if intensity <= 4:
        return 2
    if intensity <= 6:
        return 3
    return 4
