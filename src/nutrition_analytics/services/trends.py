"""Trend aggregation and summary statistics over food logs."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrition_analytics.domain.dates import DateRange, day_label
from nutrition_analytics.domain.entries import (
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    DayOffMarker,
    FoodLogEntry,
    MacroGoal,
)
from nutrition_analytics.domain.numbers import round_half_up
from nutrition_analytics.domain.trends import (
    DailyProgress,
    DailyTotal,
    MacroTargets,
    TrendReport,
    TrendSummary,
)
from nutrition_analytics.domain.tuning import DEFAULT_TUNING, AnalyticsTuning
from nutrition_analytics.errors import InvalidDateRangeError, TrendDataUnavailableError
from nutrition_analytics.services.gateway import NutritionDataGateway

_logger = logging.getLogger(__name__)

DEFAULT_TARGETS = MacroTargets(calories=2000, protein_g=150, carbs_g=250, fat_g=67)


@dataclass
class TrendService:
    """Service computing trend reports from the data gateway."""

    gateway: NutritionDataGateway
    tuning: AnalyticsTuning = DEFAULT_TUNING

    async def compute_trends(
        self, owner: UUID, start_date: date, end_date: date
    ) -> TrendReport:
        """Return daily buckets and summary statistics for a closed range."""
        if end_date < start_date:
            raise InvalidDateRangeError(
                f"End date {end_date} is before start date {start_date}"
            )
        date_range = DateRange(start=start_date, end=end_date)
        entries, markers, goal = await self._fetch_all(owner, date_range)
        return build_report(
            start_date, end_date, entries, markers, goal, tuning=self.tuning
        )

    async def daily_progress(self, owner: UUID, day: date) -> DailyProgress:
        """Return one day's intake measured against the user's targets."""
        entries, markers, goal = await self._fetch_all(owner, DateRange(day, day))
        totals = aggregate_daily_totals(day, day, entries, markers)[0]
        return progress_for_day(totals, goal)

    async def _fetch_all(
        self, owner: UUID, date_range: DateRange
    ) -> tuple[list[FoodLogEntry], list[DayOffMarker], MacroGoal | None]:
        return await asyncio.gather(
            self._fetch_entries(owner, date_range),
            self._fetch_day_off_markers(owner, date_range),
            self._fetch_macro_goal(owner),
        )

    async def _fetch_entries(
        self, owner: UUID, date_range: DateRange
    ) -> list[FoodLogEntry]:
        try:
            return await asyncio.to_thread(
                self.gateway.fetch_food_entries, owner, date_range
            )
        except Exception as exc:
            _logger.exception("Failed to fetch food entries for trends")
            raise TrendDataUnavailableError("Failed to fetch trend data") from exc

    async def _fetch_day_off_markers(
        self, owner: UUID, date_range: DateRange
    ) -> list[DayOffMarker]:
        try:
            return await asyncio.to_thread(
                self.gateway.fetch_day_off_markers, owner, date_range
            )
        except Exception:
            _logger.exception("Failed to fetch day-off markers; assuming none")
            return []

    async def _fetch_macro_goal(self, owner: UUID) -> MacroGoal | None:
        try:
            return await asyncio.to_thread(self.gateway.fetch_latest_macro_goal, owner)
        except Exception:
            _logger.exception("Failed to fetch macro goal; continuing without one")
            return None


def build_report(  # noqa: PLR0913
    start_date: date,
    end_date: date,
    entries: list[FoodLogEntry],
    day_off_markers: list[DayOffMarker],
    macro_goal: MacroGoal | None,
    tuning: AnalyticsTuning = DEFAULT_TUNING,
) -> TrendReport:
    """Aggregate entries into buckets and summarize them."""
    daily = aggregate_daily_totals(start_date, end_date, entries, day_off_markers)
    return TrendReport(
        daily_totals=daily,
        summary=summarize(daily, macro_goal, tuning),
        macro_goal=macro_goal,
    )


def aggregate_daily_totals(
    start_date: date,
    end_date: date,
    entries: list[FoodLogEntry],
    day_off_markers: list[DayOffMarker],
) -> list[DailyTotal]:
    """Return one zero-filled bucket per day in ``[start_date, end_date]``."""
    day_off_dates = {marker.calendar_date for marker in day_off_markers}
    buckets: dict[date, list[float]] = {
        day: [0.0, 0.0, 0.0, 0.0] for day in DateRange(start_date, end_date).days()
    }
    for entry in entries:
        bucket = buckets.get(entry.calendar_date)
        if bucket is None:
            continue
        bucket[0] += entry.calories
        bucket[1] += entry.protein_g
        bucket[2] += entry.carbs_total_g
        bucket[3] += entry.fat_total_g

    return [
        DailyTotal(
            day=day,
            date_label=day_label(day),
            calories=calories,
            protein_g=protein,
            carbs_g=carbs,
            fat_g=fat,
            is_day_off=day in day_off_dates,
        )
        for day, (calories, protein, carbs, fat) in buckets.items()
    ]


def summarize(
    daily_totals: list[DailyTotal],
    macro_goal: MacroGoal | None = None,
    tuning: AnalyticsTuning = DEFAULT_TUNING,
) -> TrendSummary:
    """Reduce daily buckets to averages, macro split and goal completion."""
    days_with_data = [
        day for day in daily_totals if day.calories > 0 or day.is_day_off
    ]
    total_days = max(1, len(days_with_data))

    # Day-off days count towards goals but never towards averages.
    eating_days = [
        day for day in days_with_data if day.calories > 0 and not day.is_day_off
    ]
    avg_days = max(1, len(eating_days))

    avg_calories = round_half_up(sum(day.calories for day in eating_days) / avg_days)
    avg_protein = round_half_up(sum(day.protein_g for day in eating_days) / avg_days)
    avg_carbs = round_half_up(sum(day.carbs_g for day in eating_days) / avg_days)
    avg_fat = round_half_up(sum(day.fat_g for day in eating_days) / avg_days)

    protein_pct, carbs_pct, fat_pct = _macro_percentages(
        avg_calories, avg_protein, avg_carbs, avg_fat
    )

    goal_met = (0, 0, 0, 0)
    if macro_goal is not None:
        met_days = _count_goal_days(days_with_data, macro_goal, tuning.goal_tolerance)
        goal_met = tuple(round_half_up(count / total_days * 100) for count in met_days)

    return TrendSummary(
        avg_calories=avg_calories,
        avg_protein_g=avg_protein,
        avg_carbs_g=avg_carbs,
        avg_fat_g=avg_fat,
        protein_percentage=protein_pct,
        carbs_percentage=carbs_pct,
        fat_percentage=fat_pct,
        calorie_goal_met=goal_met[0],
        protein_goal_met=goal_met[1],
        carbs_goal_met=goal_met[2],
        fat_goal_met=goal_met[3],
        total_days=total_days,
    )


def progress_for_day(totals: DailyTotal, goal: MacroGoal | None) -> DailyProgress:
    """Measure a day's totals against the goal, or default targets."""
    if goal is None:
        targets = DEFAULT_TARGETS
    else:
        targets = MacroTargets(
            calories=goal.daily_calorie_goal,
            protein_g=goal.protein_target_g,
            carbs_g=goal.carbs_target_g,
            fat_g=goal.fat_target_g,
        )
    return DailyProgress(
        totals=totals,
        targets=targets,
        calories_pct=_percent_of(totals.calories, targets.calories),
        protein_pct=_percent_of(totals.protein_g, targets.protein_g),
        carbs_pct=_percent_of(totals.carbs_g, targets.carbs_g),
        fat_pct=_percent_of(totals.fat_g, targets.fat_g),
        has_goal=goal is not None,
    )


def _macro_percentages(
    avg_calories: int, avg_protein: int, avg_carbs: int, avg_fat: int
) -> tuple[int, int, int]:
    """Split macro calories by share of the macro-derived total, not logged kcal."""
    if avg_calories <= 0:
        return 0, 0, 0
    protein_kcal = avg_protein * KCAL_PER_G_PROTEIN
    carbs_kcal = avg_carbs * KCAL_PER_G_CARBS
    fat_kcal = avg_fat * KCAL_PER_G_FAT
    total_kcal = protein_kcal + carbs_kcal + fat_kcal
    if total_kcal <= 0:
        return 0, 0, 0
    return (
        round_half_up(protein_kcal / total_kcal * 100),
        round_half_up(carbs_kcal / total_kcal * 100),
        round_half_up(fat_kcal / total_kcal * 100),
    )


def _count_goal_days(
    days: list[DailyTotal], goal: MacroGoal, tolerance: float
) -> tuple[int, int, int, int]:
    calories = protein = carbs = fat = 0
    for day in days:
        if day.is_day_off:
            calories += 1
            protein += 1
            carbs += 1
            fat += 1
            continue
        if day.calories >= goal.daily_calorie_goal * tolerance:
            calories += 1
        if day.protein_g >= goal.protein_target_g * tolerance:
            protein += 1
        if day.carbs_g >= goal.carbs_target_g * tolerance:
            carbs += 1
        if day.fat_g >= goal.fat_target_g * tolerance:
            fat += 1
    return calories, protein, carbs, fat


def _percent_of(actual: float, target: float) -> int:
    if target == 0:
        return 0
    return round_half_up(actual / target * 100)
