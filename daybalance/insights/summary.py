"""Day summary construction.

Turns a sparse list of journal entries into a gap-free, ascending
sequence of DaySummary objects covering every date of a range.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, Optional

from daybalance.models import DayEntry, DaySummary, zero_scores

logger = logging.getLogger(__name__)


def iter_dates(from_date: date, to_date: date) -> Iterable[date]:
    """Yield every calendar date in the inclusive range, ascending.
    
    Args:
        from_date: First date of the range.
        to_date: Last date of the range.
        
    Returns:
        Iterator of dates. Empty if from_date is after to_date.
    """
    current = from_date
    while current <= to_date:
        yield current
        current += timedelta(days=1)


def summarize_entry(entry: DayEntry) -> DaySummary:
    """Build the DaySummary for a single logged entry."""
    category_scores = zero_scores()
    for investment in entry.investments:
        category_scores[investment.category] = investment.score

    return DaySummary(
        date=entry.date,
        mood=entry.mood,
        energy=entry.energy,
        total_investment=sum(category_scores.values()),
        category_scores=category_scores,
        is_minimum_viable_day=entry.is_minimum_viable_day,
        tags=list(entry.tags),
    )


def empty_summary(day: date) -> DaySummary:
    """Build the zero-filled DaySummary for a date with no entry."""
    return DaySummary(
        date=day,
        mood=None,
        energy=None,
        total_investment=0,
        category_scores=zero_scores(),
        is_minimum_viable_day=False,
        tags=[],
    )


def build_day_summaries(
    entries: list[DayEntry],
    from_date: date,
    to_date: date,
) -> list[DaySummary]:
    """Build one DaySummary per date in the range.
    
    Dates without an entry are filled with null mood/energy, zero
    scores, no tags and MVD unset. Entries outside the range are
    ignored; when two entries share a date the later one wins.
    
    Args:
        entries: Journal entries, in any order.
        from_date: Range start (inclusive).
        to_date: Range end (inclusive).
        
    Returns:
        List of day summaries sorted by date ascending.
    """
    entry_map: dict[date, DayEntry] = {}
    for entry in entries:
        entry_map[entry.date] = entry

    days = []
    for day in iter_dates(from_date, to_date):
        matched: Optional[DayEntry] = entry_map.get(day)
        days.append(summarize_entry(matched) if matched is not None else empty_summary(day))

    logger.debug(
        "Built %d day summaries from %d entries (%s..%s)",
        len(days), len(entries), from_date, to_date,
    )
    return days
