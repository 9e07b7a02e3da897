"""Analytics API endpoints with simple token auth."""

from __future__ import annotations

import asyncio
from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from nutrition_analytics.api.schemas import (
    DailyProgressOut,
    DailyTotalOut,
    FoodEntryOut,
    MacroGoalOut,
    MacroTargetsOut,
    SuggestionOut,
    SuggestionsResponse,
    TrendResponse,
    TrendSummaryOut,
)
from nutrition_analytics.domain.entries import validate_macro_goal

if TYPE_CHECKING:
    from nutrition_analytics.containers import AppContainer
    from nutrition_analytics.domain.entries import FoodLogEntry, MacroGoal
    from nutrition_analytics.domain.suggestions import SmartSuggestion
    from nutrition_analytics.domain.trends import (
        DailyProgress,
        DailyTotal,
        TrendReport,
    )

DEFAULT_TREND_DAYS = 7

router = APIRouter(prefix="/users", tags=["analytics"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get(
    "/{owner_id}/suggestions",
    dependencies=[Depends(require_token)],
    response_model=SuggestionsResponse,
)
async def suggestions(
    owner_id: UUID,
    request: Request,
    q: str | None = None,
    tz: str | None = None,
) -> SuggestionsResponse:
    """Return smart suggestions, optionally filtered by a search term.

    Time-of-day and weekday scoring use ``tz`` (an IANA name), UTC by default.
    """
    container: AppContainer = request.app.state.container
    ranked = await asyncio.to_thread(
        container.suggestion_service.rank_suggestions,
        owner_id,
        now=_now(tz),
        search_term=q,
    )
    return SuggestionsResponse(suggestions=[_serialize_suggestion(s) for s in ranked])


@router.get(
    "/{owner_id}/trends",
    dependencies=[Depends(require_token)],
    response_model=TrendResponse,
)
async def trends(
    owner_id: UUID,
    request: Request,
    start: date | None = None,
    end: date | None = None,
    tz: str | None = None,
) -> TrendResponse:
    """Return daily totals and summary statistics for a date range."""
    container: AppContainer = request.app.state.container
    end_date = end or _now(tz).date()
    start_date = start or end_date - timedelta(days=DEFAULT_TREND_DAYS)
    report = await container.trend_service.compute_trends(
        owner_id, start_date, end_date
    )
    return _serialize_report(report)


@router.get(
    "/{owner_id}/progress",
    dependencies=[Depends(require_token)],
    response_model=DailyProgressOut,
)
async def progress(
    owner_id: UUID,
    request: Request,
    day: date | None = None,
    tz: str | None = None,
) -> DailyProgressOut:
    """Return a single day's intake against the user's targets."""
    container: AppContainer = request.app.state.container
    result = await container.trend_service.daily_progress(
        owner_id, day or _now(tz).date()
    )
    return _serialize_progress(result)


def _now(timezone_name: str | None) -> datetime:
    if not timezone_name:
        return datetime.now(tz=UTC)
    try:
        return datetime.now(tz=ZoneInfo(timezone_name))
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=422, detail=f"Unknown timezone: {timezone_name}"
        ) from exc


def _serialize_entry(entry: FoodLogEntry) -> FoodEntryOut:
    return FoodEntryOut(
        id=entry.id,
        name=entry.name,
        description=entry.description,
        date=entry.calendar_date,
        created_at=entry.created_at,
        calories=entry.calories,
        protein_grams=entry.protein_g,
        carbs_total_grams=entry.carbs_total_g,
        carbs_fiber_grams=entry.carbs_fiber_g,
        carbs_sugar_grams=entry.carbs_sugar_g,
        fat_total_grams=entry.fat_total_g,
        fat_saturated_grams=entry.fat_saturated_g,
    )


def _serialize_suggestion(suggestion: SmartSuggestion) -> SuggestionOut:
    return SuggestionOut(
        food=_serialize_entry(suggestion.entry),
        score=suggestion.score,
        reason=suggestion.reason.value,
        last_eaten=suggestion.last_eaten_label,
        frequency=suggestion.frequency,
    )


def _serialize_daily_total(total: DailyTotal) -> DailyTotalOut:
    return DailyTotalOut(
        date=total.date_label,
        day=total.day,
        calories=total.calories,
        protein=total.protein_g,
        carbs=total.carbs_g,
        fat=total.fat_g,
        is_day_off=total.is_day_off,
    )


def _serialize_goal(goal: MacroGoal) -> MacroGoalOut:
    return MacroGoalOut(
        daily_calorie_goal=goal.daily_calorie_goal,
        protein_percentage=goal.protein_percentage,
        carbs_percentage=goal.carbs_percentage,
        fat_percentage=goal.fat_percentage,
        created_at=goal.created_at,
    )


def _serialize_report(report: TrendReport) -> TrendResponse:
    summary = report.summary
    goal = report.macro_goal
    return TrendResponse(
        daily_totals=[_serialize_daily_total(day) for day in report.daily_totals],
        summary=TrendSummaryOut(
            avg_calories=summary.avg_calories,
            avg_protein=summary.avg_protein_g,
            avg_carbs=summary.avg_carbs_g,
            avg_fat=summary.avg_fat_g,
            protein_percentage=summary.protein_percentage,
            carbs_percentage=summary.carbs_percentage,
            fat_percentage=summary.fat_percentage,
            calorie_goal_met=summary.calorie_goal_met,
            protein_goal_met=summary.protein_goal_met,
            carbs_goal_met=summary.carbs_goal_met,
            fat_goal_met=summary.fat_goal_met,
            total_days=summary.total_days,
        ),
        macro_goal=_serialize_goal(goal) if goal else None,
        goal_warnings=validate_macro_goal(goal) if goal else [],
    )


def _serialize_progress(result: DailyProgress) -> DailyProgressOut:
    return DailyProgressOut(
        totals=_serialize_daily_total(result.totals),
        targets=MacroTargetsOut(
            calories=result.targets.calories,
            protein=result.targets.protein_g,
            carbs=result.targets.carbs_g,
            fat=result.targets.fat_g,
        ),
        calories_pct=result.calories_pct,
        protein_pct=result.protein_pct,
        carbs_pct=result.carbs_pct,
        fat_pct=result.fat_pct,
        has_goal=result.has_goal,
    )
