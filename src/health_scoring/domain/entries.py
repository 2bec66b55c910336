"""Domain models for logged food and wellness records."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from health_scoring.domain.errors import InvalidEntryError, MalformedDateError

MIN_RATING = 1
MAX_RATING = 5

_NUTRIENT_FIELDS = (
    "calories",
    "protein_g",
    "carbs_g",
    "fat_g",
    "fiber_g",
    "sugar_g",
    "saturated_fat_g",
    "sodium_mg",
)


@dataclass(frozen=True)
class FoodEntry:
    """A single logged food item with its nutrient breakdown.

    ``added_sugar_g`` and ``natural_sugar_g`` are optional. ``None`` means the
    value was not provided, in which case added sugar falls back to the total
    sugar and natural sugar falls back to zero. A provided ``0`` is kept as is.
    """

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    sugar_g: float
    saturated_fat_g: float
    sodium_mg: float
    timestamp: datetime
    added_sugar_g: float | None = None
    natural_sugar_g: float | None = None
    id: str | None = None
    name: str = ""

    def __post_init__(self) -> None:
        for name in _NUTRIENT_FIELDS:
            _require_non_negative(name, getattr(self, name))
        if self.added_sugar_g is not None:
            _require_non_negative("added_sugar_g", self.added_sugar_g)
        if self.natural_sugar_g is not None:
            _require_non_negative("natural_sugar_g", self.natural_sugar_g)

    @property
    def added_sugar(self) -> float:
        """Added sugar in grams, defaulting to total sugar when absent."""
        if self.added_sugar_g is None:
            return self.sugar_g
        return self.added_sugar_g

    @property
    def natural_sugar(self) -> float:
        """Natural sugar in grams, defaulting to zero when absent."""
        if self.natural_sugar_g is None:
            return 0.0
        return self.natural_sugar_g


@dataclass(frozen=True)
class WellnessEntry:
    """One day's self-rated mood, energy, focus and sleep duration.

    ``day`` may be given as an ISO-8601 string and is stored as a ``date``.
    """

    day: date
    mood: float
    energy: float
    focus: float
    sleep_hours: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "day", _coerce_day(self.day))
        for name in ("mood", "energy", "focus"):
            value = getattr(self, name)
            _require_finite(name, value)
            if not MIN_RATING <= value <= MAX_RATING:
                raise InvalidEntryError(
                    name, f"must be between {MIN_RATING} and {MAX_RATING}"
                )
        _require_non_negative("sleep_hours", self.sleep_hours)


def index_wellness_by_day(
    entries: Iterable[WellnessEntry],
) -> dict[date, WellnessEntry]:
    """Key wellness entries by date; later entries replace earlier ones."""
    indexed: dict[date, WellnessEntry] = {}
    for entry in entries:
        indexed[entry.day] = entry
    return indexed


def upsert_wellness(
    entries: dict[date, WellnessEntry], entry: WellnessEntry
) -> dict[date, WellnessEntry]:
    """Return a copy of ``entries`` with ``entry`` stored under its date."""
    updated = dict(entries)
    updated[entry.day] = entry
    return updated


def _require_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidEntryError(name, "must be a number")
    if not math.isfinite(value):
        raise InvalidEntryError(name, "must be finite")


def _require_non_negative(name: str, value: float) -> None:
    _require_finite(name, value)
    if value < 0:
        raise InvalidEntryError(name, "must be greater than or equal to 0")


def _coerce_day(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise MalformedDateError(value, "not an ISO-8601 date") from exc
    raise MalformedDateError(value, "expected a date or ISO-8601 string")
