"""Derived score and report models."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


@dataclass(frozen=True)
class DailyNutritionProfile:
    """Summed nutrient totals for one calendar day."""

    day: date | None
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    total_sugar: float
    total_fiber: float
    total_sodium: float
    total_saturated_fat: float
    food_item_count: int

    @classmethod
    def empty(cls, day: date | None = None) -> "DailyNutritionProfile":
        """Return a profile for a day with nothing logged."""
        return cls(
            day=day,
            total_calories=0,
            total_protein=0,
            total_carbs=0,
            total_fat=0,
            total_sugar=0,
            total_fiber=0,
            total_sodium=0,
            total_saturated_fat=0,
            food_item_count=0,
        )

    @property
    def macro_calories(self) -> float:
        """Calories contributed by protein, carbs and fat."""
        return self.total_protein * 4 + self.total_carbs * 4 + self.total_fat * 9


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-scores explaining how the overall score was composed."""

    macro_balance: int
    sugar_intake: int
    micronutrients: int
    mental_wellbeing: int
    sleep_quality: int
    consistency: int


@dataclass(frozen=True)
class ComprehensiveHealthScore:
    """Overall health score for one day with its explanation."""

    overall: int
    nutrition: int
    wellness: int
    breakdown: ScoreBreakdown
    insights: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HistoricalSummary:
    """Average scores across a trailing window of days."""

    avg_nutrition_score: int
    avg_wellness_score: int
    avg_overall_score: int
    daily_profiles: list[DailyNutritionProfile]


class SugarStatus(str, Enum):
    """Average daily added sugar category."""

    EXCELLENT = "excellent"
    GOOD = "good"
    HIGH = "high"
    VERY_HIGH = "very-high"


@dataclass(frozen=True)
class MacroBalance:
    """Share of macro calories from each macronutrient, in percent."""

    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class NutritionInsights:
    """Multi-day macro averages with a sugar category and suggestions."""

    avg_calories: int
    avg_protein: int
    avg_carbs: int
    avg_fat: int
    avg_sugar: int
    avg_added_sugar: int
    avg_fiber: int
    macro_balance: MacroBalance
    sugar_status: SugarStatus
    recommendations: list[str]
    days_with_data: int


@dataclass(frozen=True)
class DailyScore:
    """Overall score for a single day of a trend."""

    day: date
    score: int


@dataclass(frozen=True)
class DailySugar:
    """Added sugar eaten on one day of a sugar trend."""

    day: date
    grams: float
    over_target: bool


@dataclass(frozen=True)
class SugarTrend:
    """Daily added sugar across a window, measured against a daily target.

    ``days`` has one entry per calendar day of the window, oldest first, with
    zero for days without food. The average only counts days with sugar.
    """

    days: list[DailySugar]
    target_grams: float
    average_grams: int
    days_with_data: int
    days_over_target: int


@dataclass(frozen=True)
class WellnessAverages:
    """Mean wellness ratings across a set of entries."""

    mood: float
    energy: float
    focus: float
    sleep_hours: float
    entry_count: int


@dataclass(frozen=True)
class WellnessTip:
    """A single piece of wellness advice."""

    title: str
    message: str


@dataclass(frozen=True)
class DailyReport:
    """Comprehensive score for one calendar day with the inputs behind it."""

    day: date
    profile: DailyNutritionProfile
    score: ComprehensiveHealthScore
    has_wellness: bool
    consistency_days: int
