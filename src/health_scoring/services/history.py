"""Scores and nutrition summaries across a trailing window of days."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import UTC, date, datetime, timedelta
from enum import Enum
from zoneinfo import ZoneInfo

from health_scoring.domain.entries import (
    FoodEntry,
    WellnessEntry,
    index_wellness_by_day,
)
from health_scoring.domain.errors import InvalidEntryError
from health_scoring.domain.scores import (
    DailyScore,
    DailySugar,
    HistoricalSummary,
    MacroBalance,
    NutritionInsights,
    SugarStatus,
    SugarTrend,
)
from health_scoring.services.aggregation import (
    DateWindow,
    aggregate_daily,
    group_by_day,
    local_day,
)
from health_scoring.services.nutrition_scoring import score_daily_nutrition
from health_scoring.services.rules import round_half_up
from health_scoring.services.wellness_scoring import score_wellness

DEFAULT_WINDOW_DAYS = 7
# WHO guideline for added sugar, grams per day
ADDED_SUGAR_TARGET_G = 25

NO_DATA_RECOMMENDATION = "Start logging food to see nutrition insights"
BALANCED_RECOMMENDATION = "Great macro balance! Keep up the good work."

WellnessInput = Iterable[WellnessEntry] | Mapping[date, WellnessEntry]


class Timeframe(str, Enum):
    """Named reporting windows."""

    WEEK = "7d"
    MONTH = "1m"
    ALL = "all"

    @property
    def days(self) -> int:
        return _TIMEFRAME_DAYS[self]


_TIMEFRAME_DAYS = {Timeframe.WEEK: 7, Timeframe.MONTH: 30, Timeframe.ALL: 365}


def aggregate_history(
    food_entries: Iterable[FoodEntry],
    wellness_entries: WellnessInput,
    days: int = DEFAULT_WINDOW_DAYS,
    *,
    now: datetime | None = None,
    tz: ZoneInfo | None = None,
) -> HistoricalSummary:
    """Average daily nutrition and wellness scores over the last ``days``.

    Food entries are grouped by local day and each day is scored on its own;
    wellness entries are scored one per date. The overall average is the mean
    of the two averages. Empty input produces zero averages.

    Food is cut at the exact instant ``now - days`` while wellness is cut at
    that instant's date, so the oldest food day may only hold the entries
    logged after the cutoff time and is still scored as a full day.
    """
    cutoff = _cutoff(days, now, tz)
    profiles = aggregate_daily(food_entries, window=DateWindow(cutoff), tz=tz)
    wellness = _wellness_since(wellness_entries, local_day(cutoff, tz))

    nutrition_scores = [score_daily_nutrition(p) for p in profiles.values()]
    wellness_scores = [score_wellness(entry) for entry in wellness.values()]
    avg_nutrition = _mean(nutrition_scores)
    avg_wellness = _mean(wellness_scores)

    return HistoricalSummary(
        avg_nutrition_score=round_half_up(avg_nutrition),
        avg_wellness_score=round_half_up(avg_wellness),
        avg_overall_score=round_half_up((avg_nutrition + avg_wellness) / 2),
        daily_profiles=list(profiles.values()),
    )


def nutrition_insights(
    food_entries: Iterable[FoodEntry],
    days: int = DEFAULT_WINDOW_DAYS,
    *,
    now: datetime | None = None,
    tz: ZoneInfo | None = None,
) -> NutritionInsights:
    """Summarise average daily macros over the days that have food logged."""
    cutoff = _cutoff(days, now, tz)
    grouped = group_by_day(food_entries, window=DateWindow(cutoff), tz=tz)
    days_with_data = len(grouped)
    if days_with_data == 0:
        return NutritionInsights(
            avg_calories=0,
            avg_protein=0,
            avg_carbs=0,
            avg_fat=0,
            avg_sugar=0,
            avg_added_sugar=0,
            avg_fiber=0,
            macro_balance=MacroBalance(protein=0, carbs=0, fat=0),
            sugar_status=SugarStatus.EXCELLENT,
            recommendations=[NO_DATA_RECOMMENDATION],
            days_with_data=0,
        )

    entries = [entry for items in grouped.values() for entry in items]

    def average(values: Iterable[float]) -> int:
        return round_half_up(sum(values) / days_with_data)

    avg_protein = average(entry.protein_g for entry in entries)
    avg_carbs = average(entry.carbs_g for entry in entries)
    avg_fat = average(entry.fat_g for entry in entries)
    avg_added_sugar = average(entry.added_sugar for entry in entries)
    avg_fiber = average(entry.fiber_g for entry in entries)
    macro_balance = _macro_balance(avg_protein, avg_carbs, avg_fat)

    return NutritionInsights(
        avg_calories=average(entry.calories for entry in entries),
        avg_protein=avg_protein,
        avg_carbs=avg_carbs,
        avg_fat=avg_fat,
        avg_sugar=average(entry.sugar_g for entry in entries),
        avg_added_sugar=avg_added_sugar,
        avg_fiber=avg_fiber,
        macro_balance=macro_balance,
        sugar_status=sugar_status(avg_added_sugar),
        recommendations=_macro_recommendations(
            avg_added_sugar, avg_protein, avg_fiber, macro_balance
        ),
        days_with_data=days_with_data,
    )


def sugar_status(avg_added_sugar: float) -> SugarStatus:
    """Categorise average daily added sugar in grams."""
    if avg_added_sugar <= 25:
        return SugarStatus.EXCELLENT
    if avg_added_sugar <= 50:
        return SugarStatus.GOOD
    if avg_added_sugar <= 75:
        return SugarStatus.HIGH
    return SugarStatus.VERY_HIGH


def daily_score_trend(
    food_entries: Iterable[FoodEntry],
    wellness_entries: WellnessInput,
    days: int = DEFAULT_WINDOW_DAYS,
    *,
    now: datetime | None = None,
    tz: ZoneInfo | None = None,
) -> list[DailyScore]:
    """Return one overall score per day that has any data, oldest first.

    A day's score is the mean of its nutrition and wellness scores, with a
    missing side counting as zero.
    """
    cutoff = _cutoff(days, now, tz)
    profiles = aggregate_daily(food_entries, window=DateWindow(cutoff), tz=tz)
    wellness = _wellness_since(wellness_entries, local_day(cutoff, tz))

    trend: list[DailyScore] = []
    for day in sorted(profiles.keys() | wellness.keys()):
        profile = profiles.get(day)
        entry = wellness.get(day)
        nutrition = score_daily_nutrition(profile) if profile is not None else 0
        wellness_score = score_wellness(entry) if entry is not None else 0
        score = round_half_up((nutrition + wellness_score) / 2)
        trend.append(DailyScore(day=day, score=score))
    return trend


def daily_sugar_trend(
    food_entries: Iterable[FoodEntry],
    days: int = DEFAULT_WINDOW_DAYS,
    *,
    now: datetime | None = None,
    tz: ZoneInfo | None = None,
    target_grams: float = ADDED_SUGAR_TARGET_G,
) -> SugarTrend:
    """Total added sugar per local day for the ``days`` days ending today.

    Unlike the score windows this one is made of whole calendar days: today
    and the ``days - 1`` days before it, each present even when empty.
    """
    if days < 1:
        raise InvalidEntryError("days", "must be at least 1")
    today = local_day(now or datetime.now(tz=tz or UTC), tz)
    first_day = today - timedelta(days=days - 1)

    totals = {first_day + timedelta(days=offset): 0.0 for offset in range(days)}
    for entry in food_entries:
        day = local_day(entry.timestamp, tz)
        if day in totals:
            totals[day] += entry.added_sugar

    series = [
        DailySugar(day=day, grams=grams, over_target=grams > target_grams)
        for day, grams in totals.items()
    ]
    logged = [grams for grams in totals.values() if grams > 0]
    return SugarTrend(
        days=series,
        target_grams=target_grams,
        average_grams=round_half_up(_mean(logged)),
        days_with_data=len(logged),
        days_over_target=sum(1 for point in series if point.over_target),
    )


def count_consistency_days(
    food_entries: Iterable[FoodEntry],
    wellness_entries: WellnessInput,
    *,
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    tz: ZoneInfo | None = None,
) -> int:
    """Count days in the window ending ``today`` with any food or wellness log."""
    if window_days < 1:
        raise InvalidEntryError("window_days", "must be at least 1")
    first_day = today - timedelta(days=window_days - 1)
    logged = {local_day(entry.timestamp, tz) for entry in food_entries}
    logged.update(collect_wellness(wellness_entries).keys())
    return sum(1 for day in logged if first_day <= day <= today)


def _cutoff(days: int, now: datetime | None, tz: ZoneInfo | None) -> datetime:
    if days < 1:
        raise InvalidEntryError("days", "must be at least 1")
    current = now or datetime.now(tz=tz or UTC)
    return current - timedelta(days=days)


def collect_wellness(entries: WellnessInput) -> dict[date, WellnessEntry]:
    """Key wellness entries by date from either a sequence or a mapping."""
    if isinstance(entries, Mapping):
        return index_wellness_by_day(entries.values())
    return index_wellness_by_day(entries)


def _wellness_since(
    entries: WellnessInput, first_day: date
) -> dict[date, WellnessEntry]:
    collected = collect_wellness(entries)
    return {day: entry for day, entry in sorted(collected.items()) if day >= first_day}


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def _macro_balance(protein: float, carbs: float, fat: float) -> MacroBalance:
    total = protein * 4 + carbs * 4 + fat * 9
    if total == 0:
        return MacroBalance(protein=0, carbs=0, fat=0)
    return MacroBalance(
        protein=round_half_up(protein * 4 / total * 100),
        carbs=round_half_up(carbs * 4 / total * 100),
        fat=round_half_up(fat * 9 / total * 100),
    )


def _macro_recommendations(
    avg_added_sugar: float,
    avg_protein: float,
    avg_fiber: float,
    macro_balance: MacroBalance,
) -> list[str]:
    recommendations: list[str] = []
    if avg_added_sugar > 50:
        recommendations.append("Reduce added sugars - try whole fruits instead")
    if avg_protein < 50:
        recommendations.append("Increase protein to 15-20% of calories for satiety")
    if avg_fiber < 25:
        recommendations.append("Add more vegetables and whole grains for fiber")
    if macro_balance.protein < 25:
        recommendations.append("Balance your diet with more protein-rich foods")
    if macro_balance.fat > 35:
        recommendations.append("Consider reducing fat intake slightly")
    if not recommendations:
        recommendations.append(BALANCED_RECOMMENDATION)
    return recommendations
