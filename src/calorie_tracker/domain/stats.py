"""Domain models for statistics."""

from dataclasses import dataclass
from enum import StrEnum


class DayStatus(StrEnum):
    """Classification of a single day against the target."""

    WITHIN = "within"
    NEAR = "near"
    MISS = "miss"


class ProgressStatus(StrEnum):
    """Progress of today's intake towards the target."""

    OK = "ok"
    NEAR = "near"
    EXCEEDED = "exceeded"


@dataclass(frozen=True)
class DailyTotal:
    """Total energy consumed on one calendar day."""

    date_iso: str
    total_kcal: float


@dataclass(frozen=True)
class StreakSummary:
    """Current and longest runs of days within target."""

    current_streak: int
    longest_streak: int


@dataclass(frozen=True)
class BestDay:
    """Window day closest to the target."""

    date_iso: str
    total_kcal: float


@dataclass(frozen=True)
class WeeklyStatsSummary:
    """Aggregated stats for a window of days."""

    period_start: str
    period_end: str
    total_kcal: float
    average_kcal: float
    days_within_target: int
    compliance: float
    trend: float
    best_day: BestDay | None
    current_streak: int
    longest_streak: int
    updated_at: str = ""


@dataclass(frozen=True)
class TodayProgress:
    """Today's intake compared with the target."""

    date_iso: str
    total_kcal: float
    target_kcal: float
    status: ProgressStatus
    day_status: DayStatus


@dataclass(frozen=True)
class CalendarDay:
    """A single cell of the month calendar."""

    date_iso: str
    total_kcal: float | None
    status: DayStatus
    in_month: bool
    in_current_streak: bool


@dataclass(frozen=True)
class WeekChip:
    """Compliance of one calendar row."""

    index: int
    days_logged: int
    days_within: int
    compliance: int


@dataclass(frozen=True)
class MonthCalendar:
    """Six-week calendar grid for a month."""

    year: int
    month: int
    days: list[CalendarDay]
    weeks: list[WeekChip]
    current_streak: int
    longest_streak: int
