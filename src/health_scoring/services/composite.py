"""Composite health score combining nutrition, wellness and consistency."""

from datetime import date

from health_scoring.domain.entries import WellnessEntry
from health_scoring.domain.errors import InvalidEntryError
from health_scoring.domain.scores import (
    ComprehensiveHealthScore,
    DailyNutritionProfile,
    ScoreBreakdown,
)
from health_scoring.services.insights import (
    generate_insights,
    generate_recommendations,
)
from health_scoring.services.nutrition_scoring import score_daily_nutrition
from health_scoring.services.rules import (
    Ladder,
    at_least,
    at_most,
    between,
    clamp,
    first_match,
    otherwise,
    round_half_up,
)
from health_scoring.services.wellness_scoring import score_wellness

NUTRITION_WEIGHT = 0.45
WELLNESS_WEIGHT = 0.40
CONSISTENCY_WEIGHT = 0.15
CONSISTENCY_TARGET_DAYS = 7

# target share of macro calories and the penalty per percentage point off it
_MACRO_TARGETS = {"protein": (30, 2.0), "carbs": (40, 1.5), "fat": (30, 2.0)}
NEUTRAL_MACRO_BALANCE = 50
# stand-ins for a day without a wellness log
NEUTRAL_RATING = 3
NEUTRAL_SLEEP_QUALITY = 50

_SUGAR_INTAKE: Ladder = (
    at_most(25, 100),
    at_most(50, 75),
    at_most(75, 50),
    at_most(100, 25),
    otherwise(0),
)
_FIBER_VARIETY: Ladder = (at_least(30, 30), at_least(20, 20), at_least(10, 10))
_FOOD_VARIETY: Ladder = (at_least(5, 20), at_least(3, 10))
_SLEEP_QUALITY: Ladder = (
    between(7, 9, 100),
    between(6, 10, 75),
    between(5, 11, 50),
    otherwise(25),
)


def score_comprehensive(
    profile: DailyNutritionProfile,
    wellness: WellnessEntry | None,
    consistency_days: int = 0,
) -> ComprehensiveHealthScore:
    """Combine a day's nutrition and wellness into an overall health score.

    The overall score weights nutrition at 45%, wellness at 40% and logging
    consistency over the last week at 15%. The breakdown explains the result
    with six sub-scores, and insights and recommendations are generated from
    the same inputs.

    A day without a wellness log (``wellness`` is None) is scored with neutral
    ratings and no sleep, gets a neutral sleep quality, and produces no
    wellness insights or recommendations.

    Raises:
        InvalidEntryError: if ``consistency_days`` is negative.
    """
    if consistency_days < 0:
        raise InvalidEntryError("consistency_days", "must not be negative")

    logged = wellness
    if wellness is None:
        wellness = neutral_wellness(profile.day)

    nutrition = score_daily_nutrition(profile)
    wellness_score = score_wellness(wellness)
    consistency = consistency_score(consistency_days)
    overall = round_half_up(
        nutrition * NUTRITION_WEIGHT
        + wellness_score * WELLNESS_WEIGHT
        + consistency * CONSISTENCY_WEIGHT
    )

    breakdown = ScoreBreakdown(
        macro_balance=round_half_up(macro_balance_score(profile)),
        sugar_intake=round_half_up(first_match(profile.total_sugar, _SUGAR_INTAKE)),
        micronutrients=round_half_up(micronutrient_score(profile)),
        mental_wellbeing=round_half_up(
            (wellness.mood + wellness.energy + wellness.focus) / 15 * 100
        ),
        sleep_quality=round_half_up(
            first_match(wellness.sleep_hours, _SLEEP_QUALITY)
            if logged is not None
            else NEUTRAL_SLEEP_QUALITY
        ),
        consistency=round_half_up(consistency),
    )
    return ComprehensiveHealthScore(
        overall=overall,
        nutrition=nutrition,
        wellness=wellness_score,
        breakdown=breakdown,
        insights=generate_insights(profile, logged, overall),
        recommendations=generate_recommendations(profile, logged),
    )


def neutral_wellness(day: date | None) -> WellnessEntry:
    """Wellness entry standing in for a day the user did not rate."""
    return WellnessEntry(
        day=day or date.min,
        mood=NEUTRAL_RATING,
        energy=NEUTRAL_RATING,
        focus=NEUTRAL_RATING,
        sleep_hours=0,
    )


def consistency_score(consistency_days: int) -> float:
    """Share of the last week with logged activity, capped at 100."""
    return min(100.0, consistency_days / CONSISTENCY_TARGET_DAYS * 100)


def macro_balance_score(profile: DailyNutritionProfile) -> float:
    """Score closeness to a 30/40/30 protein/carbs/fat calorie split."""
    macro_calories = profile.macro_calories
    if macro_calories == 0:
        return NEUTRAL_MACRO_BALANCE

    shares = {
        "protein": profile.total_protein * 4 / macro_calories * 100,
        "carbs": profile.total_carbs * 4 / macro_calories * 100,
        "fat": profile.total_fat * 9 / macro_calories * 100,
    }
    score = 100.0
    for macro, (target, weight) in _MACRO_TARGETS.items():
        score -= abs(shares[macro] - target) * weight
    return clamp(score)


def micronutrient_score(profile: DailyNutritionProfile) -> float:
    """Approximate micronutrient coverage from fiber and food variety."""
    score = 50.0
    score += first_match(profile.total_fiber, _FIBER_VARIETY)
    score += first_match(profile.food_item_count, _FOOD_VARIETY)
    return min(100.0, score)
