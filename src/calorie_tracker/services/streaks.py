"""Current and longest streaks of days within target."""

from datetime import date, timedelta

from calorie_tracker.domain.stats import DailyTotal, StreakSummary
from calorie_tracker.services.compliance import is_within_target, resolve_target
from calorie_tracker.services.history import (
    as_calendar_date,
    coerce_daily_totals,
    index_by_date,
)

MAX_LOOKBACK_DAYS = 365


def compute_streaks(
    logs: object,
    target_kcal: object,
    today: str | date,
    max_lookback_days: int = MAX_LOOKBACK_DAYS,
) -> StreakSummary:
    """Return the current and longest streaks for a log history.

    ``today`` is the caller's calendar date; the clock is never read here.
    """
    history = coerce_daily_totals(logs)
    target = resolve_target(target_kcal)
    today_date = as_calendar_date(today)
    return streaks_from_history(history, target, today_date, max_lookback_days)


def streaks_from_history(
    history: list[DailyTotal], target: float, today: date, max_lookback_days: int
) -> StreakSummary:
    """Compute streaks for an already validated history and resolved target."""
    return StreakSummary(
        current_streak=_current_streak(history, target, today, max_lookback_days),
        longest_streak=_longest_streak(history, target),
    )


def _longest_streak(history: list[DailyTotal], target: float) -> int:
    logged = sorted(
        (log for log in history if log.total_kcal > 0), key=lambda log: log.date_iso
    )
    longest = 0
    running = 0
    last_met: date | None = None
    for log in logged:
        if not is_within_target(log.total_kcal, target):
            running = 0
            continue
        day = date.fromisoformat(log.date_iso)
        if last_met is not None and day == last_met + timedelta(days=1):
            running += 1
        else:
            running = 1
        last_met = day
        longest = max(longest, running)
    return longest


def _current_streak(
    history: list[DailyTotal], target: float, today: date, max_lookback_days: int
) -> int:
    totals = index_by_date(history)
    streak = 0
    for offset in range(max_lookback_days):
        total = totals.get((today - timedelta(days=offset)).isoformat(), 0)
        if total <= 0 or not is_within_target(total, target):
            break
        streak += 1
    return streak
