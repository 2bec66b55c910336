"""Tests for single food item scoring."""

import pytest

from health_scoring.domain.entries import FoodEntry
from health_scoring.domain.errors import InvalidEntryError
from health_scoring.services.item_scoring import score_food_entry
from tests.conftest import make_food


def plain_food(**overrides: object) -> FoodEntry:
    """A 200 kcal entry that earns no bonuses or penalties."""
    values: dict[str, object] = {
        "calories": 200.0,
        "protein_g": 0.0,
        "carbs_g": 0.0,
        "fat_g": 0.0,
        "fiber_g": 0.0,
        "sugar_g": 0.0,
        "saturated_fat_g": 0.0,
        "sodium_mg": 0.0,
    }
    values.update(overrides)
    return make_food(**values)


def test_lean_high_fiber_item_scores_95() -> None:
    entry = make_food(
        calories=200.0,
        protein_g=20.0,
        fiber_g=6.0,
        sugar_g=2.0,
        added_sugar_g=2.0,
        natural_sugar_g=0.0,
        saturated_fat_g=1.0,
        sodium_mg=100.0,
    )

    assert score_food_entry(entry) == 95


def test_plain_item_scores_base() -> None:
    assert score_food_entry(plain_food()) == 70


def test_zero_calories_is_rejected() -> None:
    with pytest.raises(InvalidEntryError) as exc_info:
        score_food_entry(plain_food(calories=0.0))

    assert exc_info.value.field == "calories"


def test_missing_added_sugar_falls_back_to_total_sugar() -> None:
    # 20 g sugar is 40% of 200 kcal
    assert score_food_entry(plain_food(sugar_g=20.0)) == 40
    assert score_food_entry(plain_food(sugar_g=20.0, added_sugar_g=0.0)) == 70


def test_natural_sugar_penalty_is_muted() -> None:
    entry = plain_food(
        calories=100.0, sugar_g=12.0, added_sugar_g=0.0, natural_sugar_g=12.0
    )

    assert score_food_entry(entry) == 65


@pytest.mark.parametrize(
    ("protein_g", "expected"),
    [(6.0, 70), (6.2, 75), (10.2, 80), (16.2, 85)],
)
def test_protein_density_tiers(protein_g: float, expected: int) -> None:
    assert score_food_entry(plain_food(protein_g=protein_g)) == expected


@pytest.mark.parametrize(
    ("sodium_mg", "expected"),
    [(400.0, 70), (401.0, 66), (601.0, 63), (801.0, 60)],
)
def test_sodium_tiers(sodium_mg: float, expected: int) -> None:
    assert score_food_entry(plain_food(sodium_mg=sodium_mg)) == expected


@pytest.mark.parametrize(
    ("saturated_fat_g", "expected"),
    [(1.5, 70), (1.6, 65), (2.3, 60), (3.4, 55)],
)
def test_saturated_fat_tiers(saturated_fat_g: float, expected: int) -> None:
    assert score_food_entry(plain_food(saturated_fat_g=saturated_fat_g)) == expected


def test_large_portion_penalty() -> None:
    assert score_food_entry(plain_food(calories=601.0)) == 65


def test_worst_case_item_stays_in_range() -> None:
    entry = plain_food(
        calories=700.0,
        sugar_g=100.0,
        natural_sugar_g=80.0,
        saturated_fat_g=20.0,
        sodium_mg=1000.0,
    )

    assert score_food_entry(entry) == 5


def test_more_added_sugar_never_raises_score() -> None:
    base = {"protein_g": 12.0, "fiber_g": 4.0, "sodium_mg": 450.0}
    scores = [
        score_food_entry(plain_food(sugar_g=grams, **base))
        for grams in range(0, 80, 2)
    ]

    assert scores == sorted(scores, reverse=True)
    assert all(0 <= score <= 100 for score in scores)
