"""Month calendar view of daily compliance."""

from datetime import date, timedelta

from calorie_tracker.domain.stats import (
    CalendarDay,
    DailyTotal,
    DayStatus,
    MonthCalendar,
    WeekChip,
)
from calorie_tracker.services.compliance import classify_day, resolve_target
from calorie_tracker.services.history import (
    as_calendar_date,
    coerce_daily_totals,
    index_by_date,
    last_n_days,
)
from calorie_tracker.services.streaks import MAX_LOOKBACK_DAYS, streaks_from_history

GRID_WEEKS = 6
DAYS_PER_WEEK = 7
RECENT_DAYS_LIMIT = 10


def month_grid(year: int, month: int) -> list[str]:
    """Return 42 ISO dates covering the month in Monday-first weeks."""
    first = date(year, month, 1)
    start = first - timedelta(days=first.weekday())
    return [
        (start + timedelta(days=offset)).isoformat()
        for offset in range(GRID_WEEKS * DAYS_PER_WEEK)
    ]


def build_month_calendar(  # noqa: PLR0913
    logs: object,
    target_kcal: object,
    year: int,
    month: int,
    today: str | date,
    max_lookback_days: int = MAX_LOOKBACK_DAYS,
) -> MonthCalendar:
    """Build the calendar grid with per-day status and weekly compliance."""
    history = coerce_daily_totals(logs)
    target = resolve_target(target_kcal)
    today_date = as_calendar_date(today)
    streaks = streaks_from_history(history, target, today_date, max_lookback_days)
    streak_dates = set(last_n_days(today_date, streaks.current_streak))
    totals = index_by_date(history)
    month_prefix = f"{year:04d}-{month:02d}-"

    days = []
    for date_iso in month_grid(year, month):
        total = totals.get(date_iso)
        days.append(
            CalendarDay(
                date_iso=date_iso,
                total_kcal=total,
                status=classify_day(total, target),
                in_month=date_iso.startswith(month_prefix),
                in_current_streak=date_iso in streak_dates,
            )
        )

    weeks = []
    for index in range(GRID_WEEKS):
        week = days[index * DAYS_PER_WEEK : (index + 1) * DAYS_PER_WEEK]
        logged = [day for day in week if day.total_kcal]
        within = sum(1 for day in logged if day.status is DayStatus.WITHIN)
        weeks.append(
            WeekChip(
                index=index,
                days_logged=len(logged),
                days_within=within,
                compliance=round(within / DAYS_PER_WEEK * 100),
            )
        )

    return MonthCalendar(
        year=year,
        month=month,
        days=days,
        weeks=weeks,
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
    )


def recent_logged_days(logs: object, limit: int = RECENT_DAYS_LIMIT) -> list[DailyTotal]:
    """Return the latest days with entries, newest first."""
    history = coerce_daily_totals(logs)
    logged = [log for log in history if log.total_kcal > 0]
    logged.sort(key=lambda log: log.date_iso, reverse=True)
    return logged[:limit]
