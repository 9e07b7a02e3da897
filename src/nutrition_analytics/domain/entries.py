"""Domain models for food logs, day-off markers and macro goals."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

MIN_CALORIE_GOAL = 800
MAX_CALORIE_GOAL = 10000
MIN_MACRO_PERCENTAGE = 10
MAX_MACRO_PERCENTAGE = 70
PERCENTAGE_SUM_TOLERANCE = 0.1


@dataclass(frozen=True)
class FoodLogEntry:
    """A logged food with the macros it contributes to its calendar day."""

    name: str
    calendar_date: date
    created_at: datetime
    calories: float
    protein_g: float
    carbs_total_g: float
    fat_total_g: float
    carbs_fiber_g: float = 0.0
    carbs_sugar_g: float = 0.0
    fat_saturated_g: float = 0.0
    description: str | None = None
    id: UUID | None = None


@dataclass(frozen=True)
class DayOffMarker:
    """A day the user excluded from strict goal tracking."""

    calendar_date: date
    reason: str | None = None


@dataclass(frozen=True)
class MacroGoal:
    """Daily calorie goal with a percentage split across macros."""

    daily_calorie_goal: int
    protein_percentage: float
    carbs_percentage: float
    fat_percentage: float
    created_at: datetime | None = None

    @property
    def protein_target_g(self) -> float:
        calories = self.daily_calorie_goal * self.protein_percentage / 100
        return calories / KCAL_PER_G_PROTEIN

    @property
    def carbs_target_g(self) -> float:
        return self.daily_calorie_goal * self.carbs_percentage / 100 / KCAL_PER_G_CARBS

    @property
    def fat_target_g(self) -> float:
        return self.daily_calorie_goal * self.fat_percentage / 100 / KCAL_PER_G_FAT


def validate_macro_goal(goal: MacroGoal) -> list[str]:
    """Return human-readable problems with a goal; empty when it is sane."""
    problems: list[str] = []
    if not MIN_CALORIE_GOAL <= goal.daily_calorie_goal <= MAX_CALORIE_GOAL:
        problems.append(
            f"Daily calorie goal must be between {MIN_CALORIE_GOAL} "
            f"and {MAX_CALORIE_GOAL}"
        )
    percentages = {
        "Protein": goal.protein_percentage,
        "Carbs": goal.carbs_percentage,
        "Fat": goal.fat_percentage,
    }
    for label, value in percentages.items():
        if not MIN_MACRO_PERCENTAGE <= value <= MAX_MACRO_PERCENTAGE:
            problems.append(
                f"{label} percentage must be between {MIN_MACRO_PERCENTAGE}% "
                f"and {MAX_MACRO_PERCENTAGE}%"
            )
    if abs(sum(percentages.values()) - 100) >= PERCENTAGE_SUM_TOLERANCE:
        problems.append("Protein, carbs, and fat percentages must add up to 100%")
    return problems
