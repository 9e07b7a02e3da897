"""Domain models for trend reports."""

from dataclasses import dataclass
from datetime import date

from nutrition_analytics.domain.entries import MacroGoal


@dataclass(frozen=True)
class DailyTotal:
    """Summed macros for one calendar day."""

    day: date
    date_label: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    is_day_off: bool


@dataclass(frozen=True)
class TrendSummary:
    """Averages, macro split and goal completion over a date range."""

    avg_calories: int
    avg_protein_g: int
    avg_carbs_g: int
    avg_fat_g: int
    protein_percentage: int
    carbs_percentage: int
    fat_percentage: int
    calorie_goal_met: int
    protein_goal_met: int
    carbs_goal_met: int
    fat_goal_met: int
    total_days: int


@dataclass(frozen=True)
class TrendReport:
    """Daily buckets plus their summary."""

    daily_totals: list[DailyTotal]
    summary: TrendSummary
    macro_goal: MacroGoal | None


@dataclass(frozen=True)
class MacroTargets:
    """Gram and calorie targets for one day."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class DailyProgress:
    """Intake for a single day against its targets."""

    totals: DailyTotal
    targets: MacroTargets
    calories_pct: int
    protein_pct: int
    carbs_pct: int
    fat_pct: int
    has_goal: bool
