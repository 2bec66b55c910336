"""Report service tying the scorers to a clock and a timezone."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from health_scoring.domain.entries import FoodEntry
from health_scoring.domain.errors import InvalidEntryError
from health_scoring.domain.scores import (
    DailyNutritionProfile,
    DailyReport,
    DailyScore,
    HistoricalSummary,
    NutritionInsights,
    SugarTrend,
    WellnessAverages,
    WellnessTip,
)
from health_scoring.services.aggregation import aggregate_daily
from health_scoring.services.composite import score_comprehensive
from health_scoring.services.history import (
    Timeframe,
    WellnessInput,
    aggregate_history,
    collect_wellness,
    count_consistency_days,
    daily_score_trend,
    daily_sugar_trend,
    nutrition_insights,
)
from health_scoring.services.insights import wellness_tip
from health_scoring.services.item_scoring import score_food_entry
from health_scoring.services.wellness_scoring import wellness_averages

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class HealthReportService:
    """Service computing health reports in the user's timezone."""

    timezone_name: str = "UTC"
    default_window_days: int = 7
    consistency_window_days: int = 7
    clock: Callable[[], datetime] = field(default=_utc_now)

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def now(self) -> datetime:
        """Return the current time in the configured timezone."""
        return self.clock().astimezone(self.tz)

    def score_item(self, entry: FoodEntry) -> int:
        """Score a single food item."""
        return score_food_entry(entry)

    def daily_report(
        self,
        food_entries: Iterable[FoodEntry],
        wellness_entries: WellnessInput,
        day: date | None = None,
    ) -> DailyReport:
        """Return the comprehensive score for ``day`` (today by default)."""
        tz = self.tz
        foods = list(food_entries)
        wellness = collect_wellness(wellness_entries)
        target_day = day or self.now().date()

        profile = aggregate_daily(foods, tz=tz).get(
            target_day, DailyNutritionProfile.empty(target_day)
        )
        entry = wellness.get(target_day)
        has_wellness = entry is not None
        consistency_days = count_consistency_days(
            foods,
            wellness,
            today=target_day,
            window_days=self.consistency_window_days,
            tz=tz,
        )
        _logger.debug(
            "Daily report: day=%s foods=%s wellness=%s consistency_days=%s",
            target_day,
            profile.food_item_count,
            has_wellness,
            consistency_days,
        )
        return DailyReport(
            day=target_day,
            profile=profile,
            score=score_comprehensive(profile, entry, consistency_days),
            has_wellness=has_wellness,
            consistency_days=consistency_days,
        )

    def history(
        self,
        food_entries: Iterable[FoodEntry],
        wellness_entries: WellnessInput,
        days: int | Timeframe | None = None,
    ) -> HistoricalSummary:
        """Return average scores over a trailing window."""
        window_days = self._window_days(days)
        summary = aggregate_history(
            food_entries, wellness_entries, window_days, now=self.now(), tz=self.tz
        )
        _logger.debug(
            "History: days=%s profiles=%s overall=%s",
            window_days,
            len(summary.daily_profiles),
            summary.avg_overall_score,
        )
        return summary

    def nutrition_insights(
        self, food_entries: Iterable[FoodEntry], days: int | Timeframe | None = None
    ) -> NutritionInsights:
        """Return macro averages and recommendations over a trailing window."""
        return nutrition_insights(
            food_entries, self._window_days(days), now=self.now(), tz=self.tz
        )

    def trend(
        self,
        food_entries: Iterable[FoodEntry],
        wellness_entries: WellnessInput,
        days: int | Timeframe | None = None,
    ) -> list[DailyScore]:
        """Return the per-day overall score across a trailing window."""
        return daily_score_trend(
            food_entries,
            wellness_entries,
            self._window_days(days),
            now=self.now(),
            tz=self.tz,
        )

    def sugar_trend(
        self, food_entries: Iterable[FoodEntry], days: int | Timeframe | None = None
    ) -> SugarTrend:
        """Return daily added sugar for the calendar days ending today."""
        return daily_sugar_trend(
            food_entries, self._window_days(days), now=self.now(), tz=self.tz
        )

    def wellness_summary(
        self, wellness_entries: WellnessInput, days: int | Timeframe | None = None
    ) -> tuple[WellnessAverages, WellnessTip]:
        """Return wellness averages over a trailing window and a matching tip."""
        first_day = self.now().date() - timedelta(days=self._window_days(days))
        entries = [
            entry
            for day, entry in collect_wellness(wellness_entries).items()
            if day >= first_day
        ]
        averages = wellness_averages(entries)
        return averages, wellness_tip(averages)

    def _window_days(self, days: int | Timeframe | None) -> int:
        if days is None:
            return self.default_window_days
        if isinstance(days, Timeframe):
            return days.days
        if days < 1:
            raise InvalidEntryError("days", "must be at least 1")
        return days
