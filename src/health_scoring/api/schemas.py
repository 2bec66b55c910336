"""Pydantic models for scoring API payloads."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from health_scoring.domain.entries import FoodEntry, WellnessEntry
from health_scoring.services.aggregation import resolve_timestamp
from health_scoring.services.history import Timeframe


class FoodEntryPayload(BaseModel):
    """Logged food item payload."""

    id: str | None = None
    name: str = ""
    calories: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0
    added_sugar_g: float | None = None
    natural_sugar_g: float | None = None
    saturated_fat_g: float = 0.0
    sodium_mg: float = 0.0
    # unparsed strings are resolved by the engine and rejected with a 400
    timestamp: datetime | str

    def to_entry(self) -> FoodEntry:
        return FoodEntry(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            fiber_g=self.fiber_g,
            sugar_g=self.sugar_g,
            saturated_fat_g=self.saturated_fat_g,
            sodium_mg=self.sodium_mg,
            timestamp=resolve_timestamp(self.timestamp),
            added_sugar_g=self.added_sugar_g,
            natural_sugar_g=self.natural_sugar_g,
            id=self.id,
            name=self.name,
        )


class WellnessEntryPayload(BaseModel):
    """Daily wellness rating payload."""

    day: date | str
    mood: float
    energy: float
    focus: float
    sleep_hours: float

    def to_entry(self) -> WellnessEntry:
        return WellnessEntry(
            day=self.day,
            mood=self.mood,
            energy=self.energy,
            focus=self.focus,
            sleep_hours=self.sleep_hours,
        )


class ItemScoreRequest(BaseModel):
    """Request to score one food item."""

    entry: FoodEntryPayload


class DailyScoreRequest(BaseModel):
    """Request for a comprehensive score of one day."""

    day: date | None = None
    food_entries: list[FoodEntryPayload] = Field(default_factory=list)
    wellness_entries: list[WellnessEntryPayload] = Field(default_factory=list)


class WindowRequest(BaseModel):
    """Request covering a trailing window of days."""

    days: int | None = Field(default=None, ge=1)
    timeframe: Timeframe | None = None
    food_entries: list[FoodEntryPayload] = Field(default_factory=list)
    wellness_entries: list[WellnessEntryPayload] = Field(default_factory=list)

    def window(self) -> int | Timeframe | None:
        """Return the requested window, preferring an explicit day count."""
        if self.days is not None:
            return self.days
        return self.timeframe

    def foods(self) -> list[FoodEntry]:
        return [payload.to_entry() for payload in self.food_entries]

    def wellness(self) -> list[WellnessEntry]:
        return [payload.to_entry() for payload in self.wellness_entries]
