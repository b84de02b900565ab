"""Statistics service for daily calorie logs."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.stats import (
    DailyTotal,
    MonthCalendar,
    StreakSummary,
    TodayProgress,
    WeeklyStatsSummary,
)
from calorie_tracker.services.calendar import (
    RECENT_DAYS_LIMIT,
    build_month_calendar,
    recent_logged_days,
)
from calorie_tracker.services.compliance import (
    classify_day,
    progress_status,
    resolve_target,
)
from calorie_tracker.services.history import (
    coerce_daily_totals,
    index_by_date,
    last_n_days,
    today_in_timezone,
)
from calorie_tracker.services.profiles import ProfileService
from calorie_tracker.services.streaks import MAX_LOOKBACK_DAYS, compute_streaks
from calorie_tracker.services.weekly import summarize

_logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 7


class DailyLogRepository(Protocol):
    """Persistence interface for daily log totals."""

    def list_daily_totals(self, user_id: UUID) -> list[DailyTotal]:
        """Return every daily total logged by the user."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class StatsService:
    """Service for computing user stats in the user's timezone."""

    repository: DailyLogRepository
    profile_service: ProfileService
    clock: Callable[[], datetime] = field(default=_utc_now)
    window_days: int = DEFAULT_WINDOW_DAYS
    streak_lookback_days: int = MAX_LOOKBACK_DAYS

    def get_weekly_summary(
        self, user_id: UUID, days: int | None = None
    ) -> WeeklyStatsSummary:
        """Return the summary for the last ``days`` days, stamped with the clock."""
        now = self.clock()
        today = self._today(user_id, now)
        window = last_n_days(today, days or self.window_days)
        summary = summarize(
            self.repository.list_daily_totals(user_id),
            self.profile_service.get_target_kcal(user_id),
            window,
            today,
            max_lookback_days=self.streak_lookback_days,
        )
        _logger.info(
            "Weekly summary: user_id=%s period=%s..%s compliance=%s",
            user_id,
            summary.period_start,
            summary.period_end,
            summary.compliance,
        )
        return replace(summary, updated_at=now.isoformat())

    def get_streaks(self, user_id: UUID) -> StreakSummary:
        """Return current and longest streaks ending today."""
        today = self._today(user_id, self.clock())
        return compute_streaks(
            self.repository.list_daily_totals(user_id),
            self.profile_service.get_target_kcal(user_id),
            today,
            max_lookback_days=self.streak_lookback_days,
        )

    def get_today_progress(self, user_id: UUID) -> TodayProgress:
        """Return today's intake against the target."""
        today = self._today(user_id, self.clock())
        history = coerce_daily_totals(self.repository.list_daily_totals(user_id))
        target = resolve_target(self.profile_service.get_target_kcal(user_id))
        total = index_by_date(history).get(today, 0.0)
        return TodayProgress(
            date_iso=today,
            total_kcal=total,
            target_kcal=target,
            status=progress_status(total, target),
            day_status=classify_day(total, target),
        )

    def get_month_calendar(
        self, user_id: UUID, year: int | None = None, month: int | None = None
    ) -> MonthCalendar:
        """Return the month calendar, defaulting to the current month."""
        today = self._today(user_id, self.clock())
        current_year, current_month = int(today[:4]), int(today[5:7])
        return build_month_calendar(
            self.repository.list_daily_totals(user_id),
            self.profile_service.get_target_kcal(user_id),
            year or current_year,
            month or current_month,
            today,
            max_lookback_days=self.streak_lookback_days,
        )

    def get_recent_days(
        self, user_id: UUID, limit: int = RECENT_DAYS_LIMIT
    ) -> list[DailyTotal]:
        """Return the most recent days with entries."""
        return recent_logged_days(self.repository.list_daily_totals(user_id), limit)

    def _today(self, user_id: UUID, now: datetime) -> str:
        return today_in_timezone(now, self.profile_service.get_timezone(user_id))
