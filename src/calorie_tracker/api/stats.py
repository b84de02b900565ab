"""Stats API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from calorie_tracker.api.schemas import (
    MonthCalendarResponse,
    RecentDaysResponse,
    StreakResponse,
    SummarizeRequest,
    TodayProgressResponse,
    WeeklyStatsResponse,
)
from calorie_tracker.services.weekly import summarize

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

MAX_WINDOW_DAYS = 366
MAX_RECENT_DAYS = 100
DECEMBER = 12


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


router = APIRouter(tags=["stats"], dependencies=[Depends(require_token)])


@router.get("/users/{user_id}/stats/weekly")
async def weekly_stats(
    user_id: UUID,
    request: Request,
    days: int | None = Query(default=None, ge=1, le=MAX_WINDOW_DAYS),
) -> WeeklyStatsResponse:
    """Return the summary for the last N days."""
    container: AppContainer = request.app.state.container
    summary = container.stats_service.get_weekly_summary(user_id, days)
    return WeeklyStatsResponse.model_validate(asdict(summary))


@router.get("/users/{user_id}/stats/streaks")
async def streaks(user_id: UUID, request: Request) -> StreakResponse:
    """Return current and longest streaks."""
    container: AppContainer = request.app.state.container
    result = container.stats_service.get_streaks(user_id)
    return StreakResponse.model_validate(asdict(result))


@router.get("/users/{user_id}/stats/today")
async def today_progress(user_id: UUID, request: Request) -> TodayProgressResponse:
    """Return today's intake against the target."""
    container: AppContainer = request.app.state.container
    progress = container.stats_service.get_today_progress(user_id)
    return TodayProgressResponse.model_validate(asdict(progress))


@router.get("/users/{user_id}/stats/calendar")
async def month_calendar(
    user_id: UUID,
    request: Request,
    year: int | None = Query(default=None, ge=1, le=9999),
    month: int | None = Query(default=None, ge=1, le=DECEMBER),
) -> MonthCalendarResponse:
    """Return the month calendar with per-day status."""
    container: AppContainer = request.app.state.container
    calendar = container.stats_service.get_month_calendar(user_id, year, month)
    return MonthCalendarResponse.model_validate(asdict(calendar))


@router.get("/users/{user_id}/stats/recent")
async def recent_days(
    user_id: UUID,
    request: Request,
    limit: int = Query(default=10, ge=1, le=MAX_RECENT_DAYS),
) -> RecentDaysResponse:
    """Return the most recent days with entries."""
    container: AppContainer = request.app.state.container
    days = container.stats_service.get_recent_days(user_id, limit)
    return RecentDaysResponse.model_validate({"days": [asdict(day) for day in days]})


@router.post("/stats/summarize")
async def summarize_logs(payload: SummarizeRequest) -> WeeklyStatsResponse:
    """Summarize a client-supplied history without touching storage."""
    summary = summarize(
        [log.model_dump() for log in payload.logs],
        payload.target_kcal,
        payload.window_dates,
        payload.today,
    )
    data = asdict(summary)
    data["updated_at"] = payload.updated_at
    return WeeklyStatsResponse.model_validate(data)
