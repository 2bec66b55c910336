"""Tests for the food analysis contract."""

import asyncio

import pytest
from pydantic import ValidationError

from health_scoring.domain.analysis import FoodAnalysis, FoodAnalyzer
from health_scoring.services.item_scoring import score_food_entry
from tests.conftest import NOW


class FakeAnalyzer:
    def __init__(self, analysis: FoodAnalysis) -> None:
        self.analysis = analysis
        self.calls: list[bytes] = []

    async def analyze(self, image_bytes: bytes) -> FoodAnalysis:
        self.calls.append(image_bytes)
        return self.analysis


def test_analysis_converts_to_scorable_entry() -> None:
    analysis = FoodAnalysis(
        food_name="Greek yogurt",
        calories=200,
        protein_g=20,
        fiber_g=6,
        sugar_g=2,
        added_sugar_g=2,
        natural_sugar_g=0,
        saturated_fat_g=1,
        sodium_mg=100,
        confidence=0.9,
    )
    analyzer: FoodAnalyzer = FakeAnalyzer(analysis)

    result = asyncio.run(analyzer.analyze(b"jpeg"))
    entry = result.to_food_entry(NOW, entry_id="meal-1")

    assert entry.id == "meal-1"
    assert entry.name == "Greek yogurt"
    assert entry.timestamp == NOW
    assert score_food_entry(entry) == 95


def test_analysis_without_sugar_split_falls_back_to_total() -> None:
    analysis = FoodAnalysis(food_name="Cola", calories=140, sugar_g=39, confidence=0.8)

    entry = analysis.to_food_entry(NOW)

    assert entry.added_sugar == 39
    assert entry.natural_sugar == 0


@pytest.mark.parametrize(
    "overrides",
    [{"confidence": 1.5}, {"calories": -1}, {"sodium_mg": -10}],
)
def test_analysis_rejects_out_of_range_values(overrides: dict[str, float]) -> None:
    values: dict[str, object] = {
        "food_name": "Toast",
        "calories": 80,
        "confidence": 0.5,
    }
    values.update(overrides)

    with pytest.raises(ValidationError):
        FoodAnalysis(**values)  # type: ignore[arg-type]
