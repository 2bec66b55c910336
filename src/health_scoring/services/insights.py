"""Rule-based insight, recommendation and tip messages."""

from health_scoring.domain.entries import WellnessEntry
from health_scoring.domain.scores import (
    DailyNutritionProfile,
    WellnessAverages,
    WellnessTip,
)

EXCELLENT_OVERALL = 80
GOOD_OVERALL = 60
LOW_SUGAR_G = 25
HIGH_SUGAR_G = 50
MIN_PROTEIN_G = 50
MIN_FIBER_G = 20
MIN_SLEEP_HOURS = 7
LOW_RATING = 3

DEFAULT_RECOMMENDATION = "Great balance today! Keep up your healthy habits."


def generate_insights(
    profile: DailyNutritionProfile, wellness: WellnessEntry | None, overall: int
) -> list[str]:
    """Describe the day in a few short observations.

    Sleep is only commented on when the day has a wellness entry.
    """
    insights: list[str] = []

    if overall >= EXCELLENT_OVERALL:
        insights.append("Excellent health habits! You're on the right track.")
    elif overall >= GOOD_OVERALL:
        insights.append("Good progress, with room for improvement.")
    else:
        insights.append("Focus on building healthier habits consistently.")

    if profile.total_sugar <= LOW_SUGAR_G:
        insights.append("Sugar intake is well-controlled.")
    elif profile.total_sugar > HIGH_SUGAR_G:
        insights.append("High sugar intake may affect energy and mood.")

    if wellness is not None and wellness.sleep_hours < MIN_SLEEP_HOURS:
        insights.append("More sleep could boost your energy and focus.")

    return insights


def generate_recommendations(
    profile: DailyNutritionProfile, wellness: WellnessEntry | None
) -> list[str]:
    """Suggest concrete changes; never returns an empty list.

    Sleep and mood advice needs a wellness entry for the day.
    """
    recommendations: list[str] = []

    if profile.total_sugar > HIGH_SUGAR_G:
        recommendations.append("Reduce added sugars - try fruit for sweetness instead")
    if profile.total_protein < MIN_PROTEIN_G:
        recommendations.append("Increase protein intake for better satiety and energy")
    if profile.total_fiber < MIN_FIBER_G:
        recommendations.append("Add more vegetables and whole grains for fiber")
    if wellness is not None:
        if wellness.sleep_hours < MIN_SLEEP_HOURS:
            recommendations.append("Aim for 7-9 hours of sleep for optimal recovery")
        if wellness.mood < LOW_RATING or wellness.energy < LOW_RATING:
            recommendations.append(
                "Consider regular exercise to boost mood and energy"
            )

    if not recommendations:
        recommendations.append(DEFAULT_RECOMMENDATION)
    return recommendations


def wellness_tip(averages: WellnessAverages) -> WellnessTip:
    """Pick the single most relevant tip for a period of wellness entries."""
    if averages.entry_count == 0:
        return WellnessTip(
            title="Start Tracking Your Wellness",
            message=(
                "Log your daily wellness metrics to receive personalized tips "
                "based on your mood, energy, focus, and sleep patterns."
            ),
        )
    if averages.mood < LOW_RATING:
        return WellnessTip(
            title="Focus on mood-boosting activities",
            message=(
                "Low mood can trigger sugar cravings. Try exercise, socializing, "
                "or journaling to boost your spirits."
            ),
        )
    if averages.energy < LOW_RATING:
        return WellnessTip(
            title="Consider improving your energy levels",
            message=(
                "Stable blood sugar helps maintain energy. Focus on protein and "
                "complex carbs throughout the day."
            ),
        )
    if averages.sleep_hours < MIN_SLEEP_HOURS:
        return WellnessTip(
            title="Prioritize getting more sleep",
            message=(
                "Poor sleep increases sugar cravings. Aim for 7-9 hours and avoid "
                "screens before bed."
            ),
        )
    return WellnessTip(
        title="Keep up the great work!",
        message=(
            "Your wellness metrics look balanced. Keep tracking to maintain "
            "your progress."
        ),
    )
