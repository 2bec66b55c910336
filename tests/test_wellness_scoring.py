"""Tests for wellness scoring."""

import pytest

from health_scoring.services.wellness_scoring import score_wellness, wellness_averages
from tests.conftest import make_wellness


def test_perfect_day_scores_100() -> None:
    entry = make_wellness(mood=5.0, energy=5.0, focus=5.0, sleep_hours=8.0)

    assert score_wellness(entry) == 100


def test_lowest_ratings_score_19() -> None:
    entry = make_wellness(mood=1.0, energy=1.0, focus=1.0, sleep_hours=2.0)

    assert score_wellness(entry) == 19


@pytest.mark.parametrize(
    ("sleep_hours", "points"),
    [
        (7.0, 30),
        (9.0, 30),
        (6.5, 20),
        (10.0, 20),
        (5.0, 10),
        (11.0, 10),
        (4.9, 5),
        (0.0, 5),
    ],
)
def test_sleep_bands(sleep_hours: float, points: int) -> None:
    entry = make_wellness(mood=5.0, energy=5.0, focus=5.0, sleep_hours=sleep_hours)

    assert score_wellness(entry) == 70 + points


def test_half_points_round_up() -> None:
    entry = make_wellness(mood=4.5, energy=4.0, focus=4.0, sleep_hours=8.0)

    assert score_wellness(entry) == 89


def test_averages_of_no_entries_are_zero() -> None:
    averages = wellness_averages([])

    assert averages.entry_count == 0
    assert averages.mood == 0
    assert averages.sleep_hours == 0


def test_averages_across_entries() -> None:
    entries = [
        make_wellness(day="2026-03-09", mood=2.0, energy=3.0, sleep_hours=6.0),
        make_wellness(day="2026-03-10", mood=4.0, energy=5.0, sleep_hours=8.0),
    ]

    averages = wellness_averages(entries)

    assert averages.entry_count == 2
    assert averages.mood == 3.0
    assert averages.energy == 4.0
    assert averages.focus == 4.0
    assert averages.sleep_hours == 7.0
