"""Pydantic response models for the analytics API."""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel


class FoodEntryOut(BaseModel):
    """Food entry payload attached to a suggestion."""

    id: UUID | None = None
    name: str
    description: str | None = None
    date: dt.date
    created_at: dt.datetime
    calories: float
    protein_grams: float
    carbs_total_grams: float
    carbs_fiber_grams: float
    carbs_sugar_grams: float
    fat_total_grams: float
    fat_saturated_grams: float


class SuggestionOut(BaseModel):
    """Smart suggestion payload."""

    food: FoodEntryOut
    score: float
    reason: str
    last_eaten: str
    frequency: int


class SuggestionsResponse(BaseModel):
    """Ranked suggestions."""

    suggestions: list[SuggestionOut]


class DailyTotalOut(BaseModel):
    """One calendar-day bucket."""

    date: str
    day: dt.date
    calories: float
    protein: float
    carbs: float
    fat: float
    is_day_off: bool


class TrendSummaryOut(BaseModel):
    """Summary statistics for a trend range."""

    avg_calories: int
    avg_protein: int
    avg_carbs: int
    avg_fat: int
    protein_percentage: int
    carbs_percentage: int
    fat_percentage: int
    calorie_goal_met: int
    protein_goal_met: int
    carbs_goal_met: int
    fat_goal_met: int
    total_days: int


class MacroGoalOut(BaseModel):
    """The goal the summary was measured against."""

    daily_calorie_goal: int
    protein_percentage: float
    carbs_percentage: float
    fat_percentage: float
    created_at: dt.datetime | None = None


class TrendResponse(BaseModel):
    """Trend report payload."""

    daily_totals: list[DailyTotalOut]
    summary: TrendSummaryOut
    macro_goal: MacroGoalOut | None = None
    goal_warnings: list[str] = []


class MacroTargetsOut(BaseModel):
    """Targets for a single day."""

    calories: float
    protein: float
    carbs: float
    fat: float


class DailyProgressOut(BaseModel):
    """Intake for one day against its targets."""

    totals: DailyTotalOut
    targets: MacroTargetsOut
    calories_pct: int
    protein_pct: int
    carbs_pct: int
    fat_pct: int
    has_goal: bool
