"""Property-based tests for day summary construction.

**Feature: insights-engine**
"""

from datetime import date, timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from daybalance.insights import build_day_summaries
from daybalance.models import (
    INVESTMENT_CATEGORIES,
    DayEntry,
    Investment,
    InvestmentCategory,
)

from strategies import START, entry_lists


class TestRangeCoverage:
    """
    **Property: every date of the range appears exactly once, ascending**
    """

    @given(
        entries=entry_lists(),
        length=st.integers(min_value=1, max_value=60),
    )
    @settings(max_examples=100)
    def test_one_summary_per_day(self, entries: list[DayEntry], length: int):
        """*For any* range, output length equals the inclusive day count."""
        to_date = START + timedelta(days=length - 1)
        days = build_day_summaries(entries, START, to_date)

        assert len(days) == length
        assert [d.date for d in days] == [START + timedelta(days=i) for i in range(length)]
        assert len({d.date for d in days}) == length

    @given(entries=entry_lists())
    @settings(max_examples=50)
    def test_builder_is_idempotent(self, entries: list[DayEntry]):
        """*For any* input, two calls produce identical output."""
        to_date = START + timedelta(days=29)
        assert build_day_summaries(entries, START, to_date) == build_day_summaries(
            entries, START, to_date
        )

    @given(entries=entry_lists())
    @settings(max_examples=50)
    def test_total_equals_sum_of_scores(self, entries: list[DayEntry]):
        """*For any* input, total investment is the sum of the six scores."""
        days = build_day_summaries(entries, START, START + timedelta(days=29))
        for day in days:
            assert set(day.category_scores) == set(INVESTMENT_CATEGORIES)
            assert day.total_investment == sum(day.category_scores.values())

    def test_inverted_range_is_empty(self):
        """A range whose start is after its end yields no days."""
        assert build_day_summaries([], date(2024, 1, 5), date(2024, 1, 1)) == []

    def test_single_day_range(self):
        days = build_day_summaries([], START, START)
        assert len(days) == 1
        assert days[0].date == START


class TestSummaryContent:
    """Example-based tests for summary values."""

    def test_gap_between_entries_is_zero_filled(self):
        """Entries on the 1st and 3rd leave a zero-filled 2nd."""
        entries = [
            DayEntry(
                date=date(2024, 1, 1),
                mood=5,
                investments=[
                    Investment(category=InvestmentCategory.CAREER, score=3),
                    Investment(category=InvestmentCategory.HEALTH, score=2),
                ],
            ),
            DayEntry(
                date=date(2024, 1, 3),
                mood=2,
                investments=[Investment(category=InvestmentCategory.CAREER, score=0)],
            ),
        ]

        days = build_day_summaries(entries, date(2024, 1, 1), date(2024, 1, 3))

        assert len(days) == 3
        first, gap, last = days
        assert first.total_investment == 5
        assert first.category_scores[InvestmentCategory.CAREER] == 3
        assert first.category_scores[InvestmentCategory.MEANING] == 0
        assert first.mood == 5

        assert gap.date == date(2024, 1, 2)
        assert gap.mood is None
        assert gap.energy is None
        assert gap.total_investment == 0
        assert gap.tags == []
        assert gap.is_minimum_viable_day is False
        assert all(score == 0 for score in gap.category_scores.values())

        assert last.total_investment == 0
        assert last.mood == 2

    def test_entry_fields_are_copied(self):
        entry = DayEntry(
            date=START,
            energy=4,
            note="quiet day",
            is_minimum_viable_day=True,
            tags=["rest", "social"],
        )
        (day,) = build_day_summaries([entry], START, START)

        assert day.mood is None
        assert day.energy == 4
        assert day.is_minimum_viable_day is True
        assert day.tags == ["rest", "social"]
        assert day.total_investment == 0

    def test_entries_outside_range_are_ignored(self):
        entries = [
            DayEntry(
                date=date(2023, 12, 31),
                investments=[Investment(category=InvestmentCategory.HEALTH, score=3)],
            ),
        ]
        days = build_day_summaries(entries, START, START + timedelta(days=1))
        assert all(d.total_investment == 0 for d in days)

    def test_later_entry_wins_for_duplicate_date(self):
        entries = [
            DayEntry(date=START, mood=1),
            DayEntry(date=START, mood=4),
        ]
        (day,) = build_day_summaries(entries, START, START)
        assert day.mood == 4
