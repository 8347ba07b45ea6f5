"""Property-based tests for streak calculation.

**Feature: insights-engine**
"""

from datetime import date, timedelta

from hypothesis import given, settings

from daybalance.insights import build_insights_from_entries, calculate_streaks
from daybalance.models import DayEntry, DaySummary, Investment, InvestmentCategory

from strategies import day_summaries, days_from_totals


class TestStreakInvariants:
    """
    **Property: current <= longest, current == 0 when the last day is empty**
    """

    @given(days=day_summaries())
    @settings(max_examples=200)
    def test_current_never_exceeds_longest(self, days: list[DaySummary]):
        streaks = calculate_streaks(days)
        assert streaks.current_streak <= streaks.longest_streak

    @given(days=day_summaries())
    @settings(max_examples=200)
    def test_current_zero_when_last_day_empty(self, days: list[DaySummary]):
        streaks = calculate_streaks(days)
        if not days or days[-1].total_investment == 0:
            assert streaks.current_streak == 0
        else:
            assert streaks.current_streak >= 1

    @given(days=day_summaries())
    @settings(max_examples=200)
    def test_longest_matches_run_lengths(self, days: list[DaySummary]):
        """The longest streak equals the longest run in a string rendering."""
        rendered = "".join("1" if d.total_investment > 0 else "0" for d in days)
        expected = max((len(run) for run in rendered.split("0")), default=0)
        assert calculate_streaks(days).longest_streak == expected


class TestStreakExamples:
    """Example-based streak scenarios."""

    def test_empty_sequence(self):
        streaks = calculate_streaks([])
        assert streaks.current_streak == 0
        assert streaks.longest_streak == 0

    def test_all_logged(self):
        streaks = calculate_streaks(days_from_totals([1, 2, 3, 1]))
        assert streaks.current_streak == 4
        assert streaks.longest_streak == 4

    def test_trailing_run(self):
        streaks = calculate_streaks(days_from_totals([1, 1, 1, 0, 2, 2]))
        assert streaks.current_streak == 2
        assert streaks.longest_streak == 3

    def test_gap_day_breaks_streak(self):
        """A missing date breaks a streak like an empty logged day."""
        entries = [
            DayEntry(
                date=date(2024, 1, 1) + timedelta(days=offset),
                investments=[Investment(category=InvestmentCategory.HEALTH, score=2)],
            )
            for offset in (0, 1, 3, 4, 5)
        ]
        data = build_insights_from_entries(entries, date(2024, 1, 1), date(2024, 1, 6))
        streaks = calculate_streaks(data.days)

        assert streaks.current_streak == 3
        assert streaks.longest_streak == 3

    def test_last_day_with_zero_investment(self):
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
        data = build_insights_from_entries(entries, date(2024, 1, 1), date(2024, 1, 3))
        streaks = calculate_streaks(data.days)

        assert streaks.current_streak == 0
        assert streaks.longest_streak == 1
