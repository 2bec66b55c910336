"""Shared test fixtures."""

from datetime import UTC, date, datetime

import pytest

from health_scoring.config import Settings
from health_scoring.containers import AppContainer
from health_scoring.domain.entries import FoodEntry, WellnessEntry
from health_scoring.domain.scores import DailyNutritionProfile
from health_scoring.services.reports import HealthReportService

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


def make_food(**overrides: object) -> FoodEntry:
    """Build a modest snack-sized food entry logged at ``NOW``."""
    values: dict[str, object] = {
        "calories": 200.0,
        "protein_g": 10.0,
        "carbs_g": 20.0,
        "fat_g": 5.0,
        "fiber_g": 2.0,
        "sugar_g": 5.0,
        "saturated_fat_g": 1.0,
        "sodium_mg": 100.0,
        "timestamp": NOW,
    }
    values.update(overrides)
    return FoodEntry(**values)  # type: ignore[arg-type]


def make_wellness(day: date | str = NOW.date(), **overrides: float) -> WellnessEntry:
    values = {"mood": 4.0, "energy": 4.0, "focus": 4.0, "sleep_hours": 8.0}
    values.update(overrides)
    return WellnessEntry(day=day, **values)  # type: ignore[arg-type]


def make_profile(**overrides: object) -> DailyNutritionProfile:
    """Build a well-balanced 2000 kcal day."""
    values: dict[str, object] = {
        "day": NOW.date(),
        "total_calories": 2000.0,
        "total_protein": 150.0,
        "total_carbs": 200.0,
        "total_fat": 70.0,
        "total_sugar": 20.0,
        "total_fiber": 28.0,
        "total_sodium": 1800.0,
        "total_saturated_fat": 15.0,
        "food_item_count": 3,
    }
    values.update(overrides)
    return DailyNutritionProfile(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(timezone="UTC", default_window_days=7, consistency_window_days=7)


@pytest.fixture
def report_service(settings: Settings) -> HealthReportService:
    return HealthReportService(
        timezone_name=settings.timezone,
        default_window_days=settings.default_window_days,
        consistency_window_days=settings.consistency_window_days,
        clock=lambda: NOW,
    )


@pytest.fixture
def container(
    settings: Settings, report_service: HealthReportService
) -> AppContainer:
    return AppContainer(settings=settings, report_service=report_service)
