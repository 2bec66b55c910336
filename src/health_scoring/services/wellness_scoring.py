"""Wellness score and summaries for self-rated wellness entries."""

from collections.abc import Iterable

from health_scoring.domain.entries import WellnessEntry
from health_scoring.domain.scores import WellnessAverages
from health_scoring.services.rules import (
    Ladder,
    at_least,
    between,
    first_match,
    otherwise,
    round_half_up,
)

MOOD_POINTS = 25
ENERGY_POINTS = 25
FOCUS_POINTS = 20

_SLEEP_POINTS: Ladder = (
    between(7, 9, 30),
    between(6, 10, 20),
    at_least(5, 10),
    otherwise(5),
)


def score_wellness(entry: WellnessEntry) -> int:
    """Score mood, energy, focus and sleep from 0 to 100."""
    score = (
        entry.mood / 5 * MOOD_POINTS
        + entry.energy / 5 * ENERGY_POINTS
        + entry.focus / 5 * FOCUS_POINTS
        + first_match(entry.sleep_hours, _SLEEP_POINTS)
    )
    return round_half_up(score)


def wellness_averages(entries: Iterable[WellnessEntry]) -> WellnessAverages:
    """Average each wellness rating; all zeros when there are no entries."""
    collected = list(entries)
    count = len(collected)
    if count == 0:
        return WellnessAverages(
            mood=0, energy=0, focus=0, sleep_hours=0, entry_count=0
        )
    return WellnessAverages(
        mood=sum(entry.mood for entry in collected) / count,
        energy=sum(entry.energy for entry in collected) / count,
        focus=sum(entry.focus for entry in collected) / count,
        sleep_hours=sum(entry.sleep_hours for entry in collected) / count,
        entry_count=count,
    )
