"""Health score for one day of aggregated nutrition."""

from health_scoring.domain.scores import DailyNutritionProfile
from health_scoring.services.rules import (
    Ladder,
    above,
    at_least,
    at_most,
    below,
    between,
    clamp,
    first_match,
    percent_of_calories,
    round_half_up,
)

BASE_SCORE = 70

_CALORIES: Ladder = (between(1600, 2400, 10), below(1200, -10), above(3000, -10))
_PROTEIN_SHARE: Ladder = (between(25, 35, 8), below(15, -8))
_CARBS_SHARE: Ladder = (between(35, 50, 7), above(65, -10))
_FAT_SHARE: Ladder = (between(20, 35, 5), above(40, -7))
# The later tiers of the next three ladders are shadowed by earlier ones
# (e.g. 120 g of sugar already matches "> 75"). Order is kept as is.
_SUGAR: Ladder = (at_most(25, 10), at_most(50, 5), above(75, -15), above(100, -25))
_FIBER: Ladder = (at_least(25, 10), at_least(15, 5), below(10, -5))
_SODIUM: Ladder = (at_most(2000, 5), above(3000, -10), above(4000, -20))
_SATURATED_FAT: Ladder = (below(7, 5), above(10, -10), above(13, -15))


def score_daily_nutrition(profile: DailyNutritionProfile) -> int:
    """Score a day's nutrition totals from 0 to 100.

    A day without logged food scores 0. The macro section is skipped when the
    day has no macro calories, and the saturated fat section when it has no
    calories at all.
    """
    if profile.food_item_count == 0:
        return 0

    score = BASE_SCORE
    score += first_match(profile.total_calories, _CALORIES)

    macro_calories = profile.macro_calories
    if macro_calories > 0:
        protein = profile.total_protein * 4 / macro_calories * 100
        carbs = profile.total_carbs * 4 / macro_calories * 100
        fat = profile.total_fat * 9 / macro_calories * 100
        score += first_match(protein, _PROTEIN_SHARE)
        score += first_match(carbs, _CARBS_SHARE)
        score += first_match(fat, _FAT_SHARE)

    score += first_match(profile.total_sugar, _SUGAR)
    score += first_match(profile.total_fiber, _FIBER)
    score += first_match(profile.total_sodium, _SODIUM)

    if profile.total_calories > 0:
        saturated_fat = percent_of_calories(
            profile.total_saturated_fat, 9, profile.total_calories
        )
        score += first_match(saturated_fat, _SATURATED_FAT)

    return round_half_up(clamp(score))
