"""Read interface to the nutrition data store."""

from typing import Protocol
from uuid import UUID

from nutrition_analytics.domain.dates import DateRange
from nutrition_analytics.domain.entries import DayOffMarker, FoodLogEntry, MacroGoal


class NutritionDataGateway(Protocol):
    """Persistence interface for the analytics engine."""

    def fetch_food_entries(
        self, owner: UUID, date_range: DateRange
    ) -> list[FoodLogEntry]:
        """Return food entries in the range; an open range bounds only the start."""

    def fetch_day_off_markers(
        self, owner: UUID, date_range: DateRange
    ) -> list[DayOffMarker]:
        """Return day-off markers in the range."""

    def fetch_latest_macro_goal(self, owner: UUID) -> MacroGoal | None:
        """Return the most recently created goal, or None when there is none."""
