"""Tests for the Supabase nutrition gateway."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

from nutrition_analytics.adapters.supabase_nutrition_gateway import (
    SupabaseNutritionGateway,
)
from nutrition_analytics.domain.dates import DateRange

JUNE = DateRange(start=date(2025, 6, 1), end=date(2025, 6, 7))


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: list[list[dict[str, object]]] = field(default_factory=list)
    last_columns: str | None = None
    last_filters: list[tuple[str, str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None
    last_limit: int | None = None

    def queue(self, data: list[dict[str, object]]) -> None:
        self.response_queue.append(data)

    def select(self, columns: str) -> "FakeTable":
        self.last_columns = columns
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("eq", column, value))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("gte", column, value))
        return self

    def lte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("lte", column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def limit(self, count: int) -> "FakeTable":
        self.last_limit = count
        return self

    def execute(self) -> FakeResponse:
        data = self.response_queue.pop(0) if self.response_queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _gateway(client: FakeSupabaseClient) -> SupabaseNutritionGateway:
    return SupabaseNutritionGateway(client)  # type: ignore[arg-type]


def _entry_row(**overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": str(uuid4()),
        "user_id": str(uuid4()),
        "name": "Oatmeal",
        "description": "with berries",
        "date": "2025-06-02",
        "created_at": "2025-06-02T07:30:00.123456+00:00",
        "calories": 350,
        "protein_grams": "12.5",
        "carbs_total_grams": "60",
        "carbs_fiber_grams": 8,
        "carbs_sugar_grams": None,
        "fat_total_grams": 6.5,
        "fat_saturated_grams": "n/a",
    }
    row.update(overrides)
    return row


def test_fetch_food_entries_filters_by_owner_and_calendar_range() -> None:
    client = FakeSupabaseClient()
    table = client.table("food_entries")
    owner = uuid4()

    _gateway(client).fetch_food_entries(owner, JUNE)

    assert table.last_filters == [
        ("eq", "user_id", str(owner)),
        ("gte", "date", "2025-06-01"),
        ("lte", "date", "2025-06-07"),
    ]
    assert table.last_order == ("created_at", True)


def test_fetch_food_entries_coerces_numeric_strings() -> None:
    client = FakeSupabaseClient()
    row = _entry_row()
    client.table("food_entries").queue([row])

    (entry,) = _gateway(client).fetch_food_entries(uuid4(), JUNE)

    assert entry.id == UUID(str(row["id"]))
    assert entry.name == "Oatmeal"
    assert entry.description == "with berries"
    assert entry.calendar_date == date(2025, 6, 2)
    assert entry.created_at == datetime(2025, 6, 2, 7, 30, 0, 123456, tzinfo=UTC)
    assert entry.calories == 350
    assert entry.protein_g == 12.5
    assert entry.carbs_total_g == 60
    assert entry.carbs_fiber_g == 8
    assert entry.carbs_sugar_g == 0
    assert entry.fat_total_g == 6.5
    assert entry.fat_saturated_g == 0


def test_fetch_food_entries_accepts_zulu_timestamps() -> None:
    client = FakeSupabaseClient()
    client.table("food_entries").queue([_entry_row(created_at="2025-06-02T21:15:00Z")])

    (entry,) = _gateway(client).fetch_food_entries(uuid4(), JUNE)

    assert entry.created_at == datetime(2025, 6, 2, 21, 15, tzinfo=UTC)


def test_fetch_food_entries_skips_rows_with_bad_dates() -> None:
    client = FakeSupabaseClient()
    client.table("food_entries").queue(
        [
            _entry_row(name="Good"),
            _entry_row(name="No date", date=None),
            _entry_row(name="Bad timestamp", created_at="yesterday"),
        ]
    )

    entries = _gateway(client).fetch_food_entries(uuid4(), JUNE)

    assert [entry.name for entry in entries] == ["Good"]


def test_fetch_day_off_markers() -> None:
    client = FakeSupabaseClient()
    table = client.table("yolo_days")
    table.queue(
        [
            {"date": "2025-06-03", "reason": "Birthday"},
            {"date": "2025-06-05", "reason": None},
            {"date": None, "reason": "broken"},
        ]
    )

    markers = _gateway(client).fetch_day_off_markers(uuid4(), JUNE)

    assert [(m.calendar_date, m.reason) for m in markers] == [
        (date(2025, 6, 3), "Birthday"),
        (date(2025, 6, 5), None),
    ]
    assert table.last_columns == "date, reason"
    assert ("lte", "date", "2025-06-07") in table.last_filters


def test_fetch_latest_macro_goal() -> None:
    client = FakeSupabaseClient()
    table = client.table("macro_goals")
    table.queue(
        [
            {
                "daily_calorie_goal": 2200,
                "protein_percentage": "30",
                "carbs_percentage": 45,
                "fat_percentage": 25.0,
                "created_at": "2025-05-20T10:00:00+00:00",
            }
        ]
    )

    goal = _gateway(client).fetch_latest_macro_goal(uuid4())

    assert goal is not None
    assert goal.daily_calorie_goal == 2200
    assert goal.protein_percentage == 30
    assert goal.carbs_percentage == 45
    assert goal.fat_percentage == 25
    assert goal.created_at == datetime(2025, 5, 20, 10, tzinfo=UTC)
    assert table.last_order == ("created_at", True)
    assert table.last_limit == 1


def test_fetch_latest_macro_goal_missing() -> None:
    client = FakeSupabaseClient()

    goal = _gateway(client).fetch_latest_macro_goal(uuid4())

    assert goal is None


def test_open_ended_range_only_bounds_start() -> None:
    client = FakeSupabaseClient()
    table = client.table("food_entries")
    owner = uuid4()

    _gateway(client).fetch_food_entries(owner, DateRange(date(2025, 5, 5)))

    assert table.last_filters == [
        ("eq", "user_id", str(owner)),
        ("gte", "date", "2025-05-05"),
    ]
