"""Named time ranges and sub-range filtering."""

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from daybalance.insights.aggregates import compute_aggregates
from daybalance.models import DateRange, DayEntry, InsightsData


class TimeRange(str, Enum):
    """Preset ranges offered on the insights view."""

    LAST_7_DAYS = "last-7-days"
    LAST_30_DAYS = "last-30-days"
    LAST_90_DAYS = "last-90-days"
    ALL_TIME = "all-time"


RANGE_DAYS = {
    TimeRange.LAST_7_DAYS: 7,
    TimeRange.LAST_30_DAYS: 30,
    TimeRange.LAST_90_DAYS: 90,
}


def resolve_time_range(
    time_range: TimeRange,
    today: date,
    entries: Optional[list[DayEntry]] = None,
) -> tuple[date, date]:
    """Turn a preset into an inclusive (from, to) date pair.
    
    The last-N-days presets start N days before today, so the window
    holds N + 1 calendar days. All-time starts at the earliest entry.
    
    Args:
        time_range: Preset to resolve.
        today: Reference date, used as the range end.
        entries: Entries used to find the start of all-time.
        
    Returns:
        Tuple of (from_date, to_date).
    """
    time_range = TimeRange(time_range)
    if time_range == TimeRange.ALL_TIME:
        earliest = min((e.date for e in entries or []), default=today)
        return min(earliest, today), today

    return today - timedelta(days=RANGE_DAYS[time_range]), today


def filter_insights(data: InsightsData, from_date: date, to_date: date) -> InsightsData:
    """Restrict insights to a sub-window and recompute the aggregates.
    
    Args:
        data: Insights built for a wider range.
        from_date: Window start (inclusive).
        to_date: Window end (inclusive).
        
    Returns:
        New InsightsData covering only the days inside the window.
    """
    days = [d for d in data.days if from_date <= d.date <= to_date]
    return InsightsData(
        days=days,
        aggregates=compute_aggregates(days),
        date_range=DateRange(from_date=from_date, to_date=to_date),
    )
