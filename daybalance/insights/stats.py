"""Small numeric helpers shared by the insight calculations."""

import math
from typing import Iterable, Optional


def mean_or_none(values: Iterable[float]) -> Optional[float]:
    """Arithmetic mean, or None for an empty input.

    None means "no data", which callers must keep distinct from an
    average of zero.
    """
    items = list(values)
    if not items:
        return None
    return sum(items) / len(items)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity."""
    return math.floor(value + 0.5)


def is_logged(day) -> bool:
    """A day counts as logged when it has any investment."""
    return day.total_investment > 0
