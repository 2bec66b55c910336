"""Models for the food analysis collaborator."""

from datetime import datetime
from typing import Protocol

from pydantic import BaseModel, Field

from health_scoring.domain.entries import FoodEntry


class FoodAnalysis(BaseModel):
    """Best-effort nutrition estimate for a photographed or described food."""

    food_name: str
    calories: float = Field(ge=0.0)
    protein_g: float = Field(default=0.0, ge=0.0)
    carbs_g: float = Field(default=0.0, ge=0.0)
    fat_g: float = Field(default=0.0, ge=0.0)
    fiber_g: float = Field(default=0.0, ge=0.0)
    sugar_g: float = Field(default=0.0, ge=0.0)
    added_sugar_g: float | None = Field(default=None, ge=0.0)
    natural_sugar_g: float | None = Field(default=None, ge=0.0)
    saturated_fat_g: float = Field(default=0.0, ge=0.0)
    sodium_mg: float = Field(default=0.0, ge=0.0)
    confidence: float = Field(ge=0.0, le=1.0)
    suggestion: str | None = None

    def to_food_entry(
        self, timestamp: datetime, entry_id: str | None = None
    ) -> FoodEntry:
        """Convert the estimate into a loggable food entry."""
        return FoodEntry(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            fiber_g=self.fiber_g,
            sugar_g=self.sugar_g,
            saturated_fat_g=self.saturated_fat_g,
            sodium_mg=self.sodium_mg,
            timestamp=timestamp,
            added_sugar_g=self.added_sugar_g,
            natural_sugar_g=self.natural_sugar_g,
            id=entry_id,
            name=self.food_name,
        )


class FoodAnalyzer(Protocol):
    """Interface for an external food recognition service."""

    async def analyze(self, image_bytes: bytes) -> FoodAnalysis:
        """Return a nutrition estimate for the food in the image."""
