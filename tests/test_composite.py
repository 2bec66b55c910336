"""Tests for the comprehensive health score."""

import pytest

from health_scoring.domain.errors import InvalidEntryError
from health_scoring.domain.scores import DailyNutritionProfile
from health_scoring.services.composite import (
    macro_balance_score,
    micronutrient_score,
    score_comprehensive,
)
from health_scoring.services.insights import DEFAULT_RECOMMENDATION
from tests.conftest import make_profile, make_wellness


def test_full_week_of_logging_is_full_consistency() -> None:
    score = score_comprehensive(make_profile(), make_wellness(), consistency_days=7)

    assert score.breakdown.consistency == 100


def test_no_logging_history_is_zero_consistency() -> None:
    score = score_comprehensive(make_profile(), make_wellness())

    assert score.breakdown.consistency == 0


@pytest.mark.parametrize(("days", "expected"), [(3, 43), (14, 100)])
def test_consistency_is_share_of_week(days: int, expected: int) -> None:
    score = score_comprehensive(make_profile(), make_wellness(), consistency_days=days)

    assert score.breakdown.consistency == expected


def test_overall_weights_nutrition_wellness_and_consistency() -> None:
    wellness = make_wellness(mood=5.0, energy=5.0, focus=5.0, sleep_hours=8.0)

    consistent = score_comprehensive(make_profile(), wellness, consistency_days=7)
    inconsistent = score_comprehensive(make_profile(), wellness, consistency_days=0)

    assert consistent.nutrition == 100
    assert consistent.wellness == 100
    assert consistent.overall == 100
    assert inconsistent.overall == 85


def test_negative_consistency_days_is_rejected() -> None:
    with pytest.raises(InvalidEntryError):
        score_comprehensive(make_profile(), make_wellness(), consistency_days=-1)


def test_macro_balance_close_to_target() -> None:
    assert round(macro_balance_score(make_profile())) == 96


def test_macro_balance_is_neutral_without_macros() -> None:
    profile = make_profile(total_protein=0.0, total_carbs=0.0, total_fat=0.0)

    assert macro_balance_score(profile) == 50


def test_macro_balance_is_clamped_at_zero() -> None:
    profile = make_profile(total_protein=0.0, total_carbs=0.0, total_fat=100.0)

    assert macro_balance_score(profile) == 0


@pytest.mark.parametrize(
    ("total_sugar", "expected"),
    [(25.0, 100), (26.0, 75), (50.0, 75), (75.0, 50), (100.0, 25), (101.0, 0)],
)
def test_sugar_intake_breakdown(total_sugar: float, expected: int) -> None:
    score = score_comprehensive(make_profile(total_sugar=total_sugar), make_wellness())

    assert score.breakdown.sugar_intake == expected


def test_micronutrients_from_fiber_and_variety() -> None:
    assert micronutrient_score(make_profile()) == 80
    assert micronutrient_score(make_profile(total_fiber=30.0, food_item_count=5)) == 100
    assert micronutrient_score(DailyNutritionProfile.empty()) == 50


@pytest.mark.parametrize(
    ("ratings", "expected"),
    [((4.0, 4.0, 4.0), 80), ((1.0, 1.0, 1.0), 20), ((5.0, 4.0, 4.0), 87)],
)
def test_mental_wellbeing(ratings: tuple[float, float, float], expected: int) -> None:
    mood, energy, focus = ratings
    wellness = make_wellness(mood=mood, energy=energy, focus=focus)

    score = score_comprehensive(make_profile(), wellness)

    assert score.breakdown.mental_wellbeing == expected


@pytest.mark.parametrize(
    ("sleep_hours", "expected"),
    [(8.0, 100), (6.0, 75), (10.5, 50), (4.0, 25), (11.5, 25)],
)
def test_sleep_quality(sleep_hours: float, expected: int) -> None:
    score = score_comprehensive(make_profile(), make_wellness(sleep_hours=sleep_hours))

    assert score.breakdown.sleep_quality == expected


def test_empty_day_still_produces_messages() -> None:
    score = score_comprehensive(DailyNutritionProfile.empty(), make_wellness())

    assert score.nutrition == 0
    assert score.breakdown.macro_balance == 50
    assert score.insights
    assert score.recommendations


def test_day_without_wellness_log_uses_neutral_wellness() -> None:
    score = score_comprehensive(make_profile(), None, consistency_days=7)

    assert score.wellness == 47
    assert score.overall == 79
    assert score.breakdown.mental_wellbeing == 60
    assert score.breakdown.sleep_quality == 50
    assert score.recommendations == [DEFAULT_RECOMMENDATION]
