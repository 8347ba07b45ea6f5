"""Tests for the narrative summary rules.

**Feature: insights-engine**
"""

import pytest

from daybalance.insights import (
    NOT_ENOUGH_DATA_MESSAGE,
    build_insights_from_entries,
    generate_narrative_summary,
    narrative_or_placeholder,
)
from daybalance.insights.narrative import (
    generate_category_summary,
    generate_energy_summary,
    generate_mood_summary,
    generate_mvd_summary,
    generate_tag_summary,
)
from daybalance.models import (
    INVESTMENT_CATEGORIES,
    CategoryAggregate,
    DayEntry,
    InsightsAggregates,
    Investment,
    InvestmentCategory,
    TagAnalytics,
)

from strategies import START, make_day

HIGH_MOOD = "Your mood has been consistently high this period."
LOW_MOOD = "Mood has been lower than usual lately."
BALANCED_MOOD = "Your mood has been balanced this period."


def aggregates_with_totals(totals: list[int]) -> InsightsAggregates:
    """Build aggregates whose category totals follow enumeration order."""
    category_aggregates = {
        category: CategoryAggregate(total=total, average=0.0, day_count=0)
        for category, total in zip(INVESTMENT_CATEGORIES, totals)
    }
    nonzero = [(c, t) for c, t in zip(INVESTMENT_CATEGORIES, totals) if t > 0]
    most = least = None
    if nonzero:
        most = max(nonzero, key=lambda item: item[1])[0]
        least = min(nonzero, key=lambda item: item[1])[0]
    return InsightsAggregates(
        category_aggregates=category_aggregates,
        most_invested_category=most,
        least_invested_category=least,
    )


class TestMoodAndEnergySummary:
    """Threshold wording for mood and energy."""

    @pytest.mark.parametrize(
        "moods, expected",
        [
            ([4, 4, 4, 4, 5], HIGH_MOOD),
            ([4, 4], HIGH_MOOD),
            ([2, 2], LOW_MOOD),
            ([2, 3], LOW_MOOD),
            ([3, 3, 3, 3, 3, 3, 3, 4, 4, 4], BALANCED_MOOD),
        ],
    )
    def test_mood_thresholds(self, moods: list[int], expected: str):
        days = [make_day(i, mood=m) for i, m in enumerate(moods)]
        assert generate_mood_summary(days) == expected

    def test_no_mood_data(self):
        assert generate_mood_summary([make_day(0), make_day(1, energy=3)]) is None

    def test_mood_ignores_missing_values(self):
        days = [make_day(0, mood=5), make_day(1), make_day(2, mood=4)]
        assert generate_mood_summary(days) == HIGH_MOOD

    def test_energy_is_independent_of_mood(self):
        days = [make_day(0, mood=5, energy=1), make_day(1, mood=5, energy=2)]

        assert generate_mood_summary(days) == HIGH_MOOD
        assert generate_energy_summary(days) == (
            "Energy has been lower than usual lately, rest may be needed."
        )

    def test_energy_moderate_and_strong(self):
        assert generate_energy_summary([make_day(0, energy=3)]) == (
            "Your energy levels have been moderate this period."
        )
        assert generate_energy_summary([make_day(0, energy=5)]) == (
            "Your energy levels have been strong throughout this period."
        )


class TestCategorySummary:
    """Most/least invested category sentences."""

    def test_most_invested_stands_out(self):
        aggregates = aggregates_with_totals([10, 1, 1, 1, 1, 1])
        assert generate_category_summary(aggregates) == (
            "You invested most in Career this period."
        )

    def test_least_invested_when_most_does_not_stand_out(self):
        aggregates = aggregates_with_totals([4, 4, 4, 4, 4, 1])
        assert generate_category_summary(aggregates) == (
            "Environment received less attention than usual."
        )

    def test_even_totals_produce_nothing(self):
        assert generate_category_summary(aggregates_with_totals([5] * 6)) is None

    def test_no_investment_produces_nothing(self):
        assert generate_category_summary(aggregates_with_totals([0] * 6)) is None


class TestMvdSummary:
    """MVD share wording."""

    @pytest.mark.parametrize(
        "mvd_count, total_days, expected",
        [
            (5, 10, "This was a heavy period with many minimum viable days."),
            (0, 10, "You had very few MVD days, great stability."),
            (1, 10, "You balanced productive days with self-care."),
            (4, 10, "You balanced productive days with self-care."),
        ],
    )
    def test_thresholds(self, mvd_count: int, total_days: int, expected: str):
        assert generate_mvd_summary(mvd_count, total_days) == expected

    def test_no_logged_days(self):
        assert generate_mvd_summary(3, 0) is None


class TestTagSummary:
    """Dominant tag sentence."""

    def test_tag_at_forty_percent(self):
        analytics = [TagAnalytics(tag="rest", count=2)]
        assert generate_tag_summary(analytics, 5) == (
            '"rest" was your most common tag, appearing on 40% of logged days.'
        )

    def test_percentage_rounds_half_up(self):
        analytics = [TagAnalytics(tag="focused", count=5)]
        assert "63%" in generate_tag_summary(analytics, 8)

    def test_uncommon_tag(self):
        assert generate_tag_summary([TagAnalytics(tag="social", count=1)], 3) is None

    def test_no_tags(self):
        assert generate_tag_summary([], 4) is None


class TestNarrativeSummary:
    """Combined narrative and its placeholder gate."""

    def _entries(self) -> list[DayEntry]:
        career = InvestmentCategory.CAREER
        health = InvestmentCategory.HEALTH
        return [
            DayEntry(
                date=START.replace(day=1 + i),
                mood=5,
                energy=3,
                is_minimum_viable_day=(i == 0),
                investments=[
                    Investment(category=career, score=3),
                    Investment(category=health, score=1),
                ],
                tags=["deep-work"],
            )
            for i in range(4)
        ]

    def test_sentence_order(self):
        data = build_insights_from_entries(
            self._entries(), START, START.replace(day=4)
        )
        assert generate_narrative_summary(data) == [
            HIGH_MOOD,
            "Your energy levels have been moderate this period.",
            "You invested most in Career this period.",
            "You balanced productive days with self-care.",
            '"deep-work" was your most common tag, appearing on 100% of logged days.',
        ]

    def test_placeholder_below_minimum(self):
        data = build_insights_from_entries(
            self._entries()[:2], START, START.replace(day=4)
        )
        assert narrative_or_placeholder(data) == [NOT_ENOUGH_DATA_MESSAGE]

    def test_no_sentences_without_data(self):
        data = build_insights_from_entries([], START, START.replace(day=4))
        assert generate_narrative_summary(data) == []
