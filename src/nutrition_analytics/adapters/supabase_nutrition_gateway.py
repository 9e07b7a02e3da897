"""Supabase implementation of the nutrition data gateway."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_analytics.domain.dates import DateRange, parse_date, parse_timestamp
from nutrition_analytics.domain.entries import DayOffMarker, FoodLogEntry, MacroGoal
from nutrition_analytics.domain.numbers import to_float
from nutrition_analytics.services.gateway import NutritionDataGateway

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseNutritionGateway(NutritionDataGateway):
    """Supabase-backed reads for food entries, day-off markers and goals."""

    client: Client

    def fetch_food_entries(
        self, owner: UUID, date_range: DateRange
    ) -> list[FoodLogEntry]:
        """Return food entries whose calendar date falls in the range.

        An open-ended range only bounds the start date.
        """
        query = (
            self.client.table("food_entries")
            .select("*")
            .eq("user_id", str(owner))
            .gte("date", date_range.start.isoformat())
        )
        if date_range.end is not None:
            query = query.lte("date", date_range.end.isoformat())
        response = query.order("created_at", desc=True).execute()
        entries = []
        for row in response.data or []:
            entry = _parse_entry(row)
            if entry is None:
                _logger.warning(
                    "Skipping food entry with bad dates: id=%s", row.get("id")
                )
                continue
            entries.append(entry)
        return entries

    def fetch_day_off_markers(
        self, owner: UUID, date_range: DateRange
    ) -> list[DayOffMarker]:
        """Return day-off markers in the range."""
        query = (
            self.client.table("yolo_days")
            .select("date, reason")
            .eq("user_id", str(owner))
            .gte("date", date_range.start.isoformat())
        )
        if date_range.end is not None:
            query = query.lte("date", date_range.end.isoformat())
        response = query.execute()
        markers = []
        for row in response.data or []:
            day = parse_date(row.get("date"))
            if day is None:
                continue
            reason = row.get("reason")
            markers.append(
                DayOffMarker(
                    calendar_date=day,
                    reason=reason if isinstance(reason, str) else None,
                )
            )
        return markers

    def fetch_latest_macro_goal(self, owner: UUID) -> MacroGoal | None:
        """Return the most recently created goal for a user."""
        response = (
            self.client.table("macro_goals")
            .select("*")
            .eq("user_id", str(owner))
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])


def _parse_entry(row: dict[str, object]) -> FoodLogEntry | None:
    """Parse a food entry row, coercing numeric strings to floats."""
    calendar_date = parse_date(row.get("date"))
    created_at = parse_timestamp(row.get("created_at"))
    if calendar_date is None or created_at is None:
        return None
    description = row.get("description")
    return FoodLogEntry(
        id=_parse_uuid(row.get("id")),
        name=str(row.get("name") or ""),
        description=description if isinstance(description, str) else None,
        calendar_date=calendar_date,
        created_at=created_at,
        calories=to_float(row.get("calories")),
        protein_g=to_float(row.get("protein_grams")),
        carbs_total_g=to_float(row.get("carbs_total_grams")),
        carbs_fiber_g=to_float(row.get("carbs_fiber_grams")),
        carbs_sugar_g=to_float(row.get("carbs_sugar_grams")),
        fat_total_g=to_float(row.get("fat_total_grams")),
        fat_saturated_g=to_float(row.get("fat_saturated_grams")),
    )


def _parse_goal(row: dict[str, object]) -> MacroGoal:
    return MacroGoal(
        daily_calorie_goal=int(to_float(row.get("daily_calorie_goal"))),
        protein_percentage=to_float(row.get("protein_percentage")),
        carbs_percentage=to_float(row.get("carbs_percentage")),
        fat_percentage=to_float(row.get("fat_percentage")),
        created_at=parse_timestamp(row.get("created_at")),
    )


def _parse_uuid(value: object) -> UUID | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        return None
