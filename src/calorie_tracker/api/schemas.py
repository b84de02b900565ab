"""Pydantic models for the stats API."""

from pydantic import BaseModel, Field

from calorie_tracker.domain.stats import DayStatus, ProgressStatus


class DailyTotalPayload(BaseModel):
    """One day's total as sent by a client."""

    date_iso: str
    total_kcal: float = Field(ge=0)


class SummarizeRequest(BaseModel):
    """Request body for stateless summary computation."""

    logs: list[DailyTotalPayload]
    target_kcal: float | None = None
    window_dates: list[str] = Field(default_factory=list)
    today: str
    updated_at: str = ""


class BestDayModel(BaseModel):
    """Best day response payload."""

    date_iso: str
    total_kcal: float


class WeeklyStatsResponse(BaseModel):
    """Weekly stats response payload."""

    period_start: str
    period_end: str
    total_kcal: float
    average_kcal: float
    days_within_target: int
    compliance: float
    trend: float
    best_day: BestDayModel | None = None
    current_streak: int
    longest_streak: int
    updated_at: str


class StreakResponse(BaseModel):
    """Streak response payload."""

    current_streak: int
    longest_streak: int


class TodayProgressResponse(BaseModel):
    """Today's progress response payload."""

    date_iso: str
    total_kcal: float
    target_kcal: float
    status: ProgressStatus
    day_status: DayStatus


class CalendarDayModel(BaseModel):
    """Calendar cell payload."""

    date_iso: str
    total_kcal: float | None = None
    status: DayStatus
    in_month: bool
    in_current_streak: bool


class WeekChipModel(BaseModel):
    """Calendar row compliance payload."""

    index: int
    days_logged: int
    days_within: int
    compliance: int


class MonthCalendarResponse(BaseModel):
    """Month calendar response payload."""

    year: int
    month: int
    days: list[CalendarDayModel]
    weeks: list[WeekChipModel]
    current_streak: int
    longest_streak: int


class RecentDaysResponse(BaseModel):
    """Recent logged days response payload."""

    days: list[DailyTotalPayload]
