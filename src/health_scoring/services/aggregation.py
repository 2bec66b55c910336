"""Grouping of food entries into per-day nutrition profiles."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from health_scoring.domain.entries import FoodEntry
from health_scoring.domain.errors import MalformedDateError
from health_scoring.domain.scores import DailyNutritionProfile


@dataclass(frozen=True)
class DateWindow:
    """Inclusive time range used to filter entries before grouping."""

    start: datetime
    end: datetime | None = None

    def contains(self, moment: datetime) -> bool:
        """Return whether ``moment`` lies inside the window.

        A naive ``moment`` is read in the timezone of ``start``; an aware one
        checked against a naive window is compared by its wall-clock time.
        """
        moment = _align(moment, self.start)
        if moment < self.start:
            return False
        return self.end is None or moment <= self.end


def resolve_timestamp(value: object) -> datetime:
    """Return ``value`` as a datetime, parsing ISO-8601 strings."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as exc:
            raise MalformedDateError(value, "not an ISO-8601 timestamp") from exc
    raise MalformedDateError(value, "expected a datetime or ISO-8601 string")


def local_day(value: object, tz: ZoneInfo | None = None) -> date:
    """Return the calendar day of a timestamp in ``tz``.

    Aware timestamps are converted to ``tz`` first; naive timestamps are taken
    to be local already.
    """
    moment = resolve_timestamp(value)
    if tz is not None and moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return moment.date()


def build_profile(
    entries: Iterable[FoodEntry], day: date | None = None
) -> DailyNutritionProfile:
    """Sum entries into a single nutrition profile."""
    profile = DailyNutritionProfile.empty(day)
    for entry in entries:
        profile = DailyNutritionProfile(
            day=day,
            total_calories=profile.total_calories + entry.calories,
            total_protein=profile.total_protein + entry.protein_g,
            total_carbs=profile.total_carbs + entry.carbs_g,
            total_fat=profile.total_fat + entry.fat_g,
            total_sugar=profile.total_sugar + entry.sugar_g,
            total_fiber=profile.total_fiber + entry.fiber_g,
            total_sodium=profile.total_sodium + entry.sodium_mg,
            total_saturated_fat=profile.total_saturated_fat + entry.saturated_fat_g,
            food_item_count=profile.food_item_count + 1,
        )
    return profile


def group_by_day(
    entries: Iterable[FoodEntry],
    *,
    window: DateWindow | None = None,
    tz: ZoneInfo | None = None,
) -> dict[date, list[FoodEntry]]:
    """Group entries by local calendar day, ordered by date.

    When ``window`` is given, entries whose timestamp falls outside it are
    dropped before grouping. Without a window every entry is kept.

    Raises:
        MalformedDateError: if an entry's timestamp cannot be resolved.
    """
    grouped: dict[date, list[FoodEntry]] = {}
    for entry in entries:
        moment = resolve_timestamp(entry.timestamp)
        if window is not None and not window.contains(moment):
            continue
        grouped.setdefault(local_day(moment, tz), []).append(entry)
    return dict(sorted(grouped.items()))


def aggregate_daily(
    entries: Iterable[FoodEntry],
    *,
    window: DateWindow | None = None,
    tz: ZoneInfo | None = None,
) -> dict[date, DailyNutritionProfile]:
    """Return one nutrition profile per calendar day that has entries."""
    return {
        day: build_profile(items, day)
        for day, items in group_by_day(entries, window=window, tz=tz).items()
    }


def _align(moment: datetime, reference: datetime) -> datetime:
    """Make ``moment`` comparable with ``reference``."""
    if moment.tzinfo is None and reference.tzinfo is not None:
        return moment.replace(tzinfo=reference.tzinfo)
    if moment.tzinfo is not None and reference.tzinfo is None:
        return moment.replace(tzinfo=None)
    return moment
