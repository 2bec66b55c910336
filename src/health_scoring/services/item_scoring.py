"""Health score for a single logged food item."""

from health_scoring.domain.entries import FoodEntry
from health_scoring.domain.errors import InvalidEntryError
from health_scoring.services.rules import (
    Ladder,
    above,
    at_least,
    clamp,
    first_match,
    percent_of_calories,
    round_half_up,
)

BASE_SCORE = 70

# grams of protein per 100 kcal
_PROTEIN_DENSITY: Ladder = (above(8, 15), above(5, 10), above(3, 5))
_FIBER: Ladder = (at_least(5, 10), at_least(3, 6), at_least(1, 3))
# percent of calories
_ADDED_SUGAR: Ladder = (above(30, -30), above(20, -20), above(10, -10), above(5, -5))
_NATURAL_SUGAR: Ladder = (above(40, -5),)
_SATURATED_FAT: Ladder = (above(15, -15), above(10, -10), above(7, -5))
# milligrams
_SODIUM: Ladder = (above(800, -10), above(600, -7), above(400, -4))
_CALORIE_DENSITY: Ladder = (above(600, -5),)


def score_food_entry(entry: FoodEntry) -> int:
    """Score one food item from 0 to 100 based on its nutrient density.

    Protein and fiber earn bonuses; added sugar, natural sugar, saturated fat,
    sodium and very high calorie counts are penalised. Entries without
    calories cannot be scored because every ratio is relative to calories.

    Raises:
        InvalidEntryError: if ``entry.calories`` is not positive.
    """
    calories = entry.calories
    if calories <= 0:
        raise InvalidEntryError("calories", "must be greater than 0 to score an item")

    score = BASE_SCORE
    score += first_match(entry.protein_g / (calories / 100), _PROTEIN_DENSITY)
    score += first_match(entry.fiber_g, _FIBER)
    score += first_match(
        percent_of_calories(entry.added_sugar, 4, calories), _ADDED_SUGAR
    )
    score += first_match(
        percent_of_calories(entry.natural_sugar, 4, calories), _NATURAL_SUGAR
    )
    score += first_match(
        percent_of_calories(entry.saturated_fat_g, 9, calories), _SATURATED_FAT
    )
    score += first_match(entry.sodium_mg, _SODIUM)
    score += first_match(calories, _CALORIE_DENSITY)
    return round_half_up(clamp(score))
