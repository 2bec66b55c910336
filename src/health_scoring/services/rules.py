"""Threshold ladders shared by the scorers.

A ladder is an ordered tuple of tiers. Tiers are checked top to bottom and the
first matching tier supplies the adjustment, so reordering a ladder changes
behaviour even when the thresholds overlap.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Tier:
    """A predicate on a measured value and the adjustment it earns."""

    matches: Callable[[float], bool]
    adjustment: float


Ladder = tuple[Tier, ...]


def above(threshold: float, adjustment: float) -> Tier:
    return Tier(lambda value: value > threshold, adjustment)


def at_least(threshold: float, adjustment: float) -> Tier:
    return Tier(lambda value: value >= threshold, adjustment)


def below(threshold: float, adjustment: float) -> Tier:
    return Tier(lambda value: value < threshold, adjustment)


def at_most(threshold: float, adjustment: float) -> Tier:
    return Tier(lambda value: value <= threshold, adjustment)


def between(low: float, high: float, adjustment: float) -> Tier:
    """Match ``low <= value <= high``."""
    return Tier(lambda value: low <= value <= high, adjustment)


def otherwise(adjustment: float) -> Tier:
    return Tier(lambda _value: True, adjustment)


def first_match(value: float, ladder: Ladder, default: float = 0) -> float:
    """Return the adjustment of the first tier matching ``value``."""
    for tier in ladder:
        if tier.matches(value):
            return tier.adjustment
    return default


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def percent_of_calories(grams: float, kcal_per_gram: float, calories: float) -> float:
    """Share of ``calories`` supplied by ``grams`` of a nutrient, in percent."""
    return grams * kcal_per_gram / calories * 100
