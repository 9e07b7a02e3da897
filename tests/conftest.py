"""Shared test fixtures."""

import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from nutrition_analytics.config import Settings
from nutrition_analytics.containers import AppContainer
from nutrition_analytics.domain.dates import DateRange
from nutrition_analytics.domain.entries import DayOffMarker, FoodLogEntry, MacroGoal
from nutrition_analytics.services.gateway import NutritionDataGateway
from nutrition_analytics.services.suggestions import SuggestionService
from nutrition_analytics.services.trends import TrendService


@dataclass
class InMemoryNutritionGateway(NutritionDataGateway):
    """In-memory gateway for tests with failure switches."""

    entries: list[FoodLogEntry] = field(default_factory=list)
    markers: list[DayOffMarker] = field(default_factory=list)
    goals: list[MacroGoal] = field(default_factory=list)
    fail_entries: bool = False
    fail_markers: bool = False
    fail_goal: bool = False
    delay_seconds: float = 0.0
    requested_ranges: list[DateRange] = field(default_factory=list)

    def fetch_food_entries(
        self, owner: UUID, date_range: DateRange
    ) -> list[FoodLogEntry]:
        self.requested_ranges.append(date_range)
        if self.delay_seconds:
            time.sleep(self.delay_seconds)
        if self.fail_entries:
            raise RuntimeError("food_entries unavailable")
        return [entry for entry in self.entries if entry.calendar_date in date_range]

    def fetch_day_off_markers(
        self, owner: UUID, date_range: DateRange
    ) -> list[DayOffMarker]:
        if self.fail_markers:
            raise RuntimeError("yolo_days unavailable")
        return [
            marker for marker in self.markers if marker.calendar_date in date_range
        ]

    def fetch_latest_macro_goal(self, owner: UUID) -> MacroGoal | None:
        if self.fail_goal:
            raise RuntimeError("macro_goals unavailable")
        if not self.goals:
            return None
        return max(
            self.goals,
            key=lambda goal: goal.created_at or datetime.min.replace(tzinfo=UTC),
        )


def make_entry(  # noqa: PLR0913
    name: str,
    created_at: datetime,
    *,
    calendar_date: date | None = None,
    calories: float = 0,
    protein_g: float = 0,
    carbs_g: float = 0,
    fat_g: float = 0,
    description: str | None = None,
) -> FoodLogEntry:
    """Build a food entry; the calendar date defaults to the creation day."""
    return FoodLogEntry(
        id=uuid4(),
        name=name,
        description=description,
        calendar_date=calendar_date or created_at.date(),
        created_at=created_at,
        calories=calories,
        protein_g=protein_g,
        carbs_total_g=carbs_g,
        fat_total_g=fat_g,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        api_token="api-token",
    )


@pytest.fixture
def gateway() -> InMemoryNutritionGateway:
    return InMemoryNutritionGateway()


@pytest.fixture
def container(settings: Settings, gateway: InMemoryNutritionGateway) -> AppContainer:
    tuning = settings.tuning()
    return AppContainer(
        settings=settings,
        gateway=gateway,
        suggestion_service=SuggestionService(gateway, tuning=tuning),
        trend_service=TrendService(gateway, tuning=tuning),
    )


@pytest.fixture(autouse=True)
def propagate_app_logs() -> Iterator[None]:
    """Let caplog see records even after ``configure_logging`` ran."""
    logger = logging.getLogger("nutrition_analytics")
    previous = logger.propagate
    logger.propagate = True
    yield
    logger.propagate = previous
