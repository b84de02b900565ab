"""Aggregate statistics over a window of days."""

import math
from datetime import date

from calorie_tracker.domain.stats import BestDay, WeeklyStatsSummary
from calorie_tracker.services.compliance import is_within_target, resolve_target
from calorie_tracker.services.history import (
    as_calendar_date,
    coerce_daily_totals,
    index_by_date,
    parse_iso_date,
)
from calorie_tracker.services.streaks import MAX_LOOKBACK_DAYS, streaks_from_history


def summarize(  # noqa: PLR0913
    logs: object,
    target_kcal: object,
    window_dates: list[str],
    today: str | date,
    max_lookback_days: int = MAX_LOOKBACK_DAYS,
) -> WeeklyStatsSummary:
    """Summarize the window and attach streaks computed over the full history.

    Window days without a log count as zero. ``updated_at`` is left empty for
    the caller to stamp.
    """
    history = coerce_daily_totals(logs)
    target = resolve_target(target_kcal)
    today_date = as_calendar_date(today)
    for date_iso in window_dates:
        parse_iso_date(date_iso)

    totals_by_date = index_by_date(history)
    window = [(date_iso, totals_by_date.get(date_iso, 0.0)) for date_iso in window_dates]
    days = len(window)

    total_kcal = sum(total for _, total in window)
    days_within = sum(1 for _, total in window if is_within_target(total, target))

    best_day = None
    best_diff = 0.0
    for date_iso, total in window:
        diff = abs(total - target)
        if best_day is None or diff < best_diff:
            best_day = BestDay(date_iso=date_iso, total_kcal=_round2(total))
            best_diff = diff

    trend = window[-1][1] - window[-2][1] if days >= 2 else 0.0  # noqa: PLR2004
    streaks = streaks_from_history(history, target, today_date, max_lookback_days)

    return WeeklyStatsSummary(
        period_start=window_dates[0] if window_dates else "",
        period_end=window_dates[-1] if window_dates else "",
        total_kcal=_round2(total_kcal),
        average_kcal=_round2(total_kcal / days) if days else 0.0,
        days_within_target=days_within,
        compliance=_round2(days_within / days * 100) if days else 0.0,
        trend=_round2(trend),
        best_day=best_day,
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
    )


def _round2(value: float) -> float:
    # Halves round toward positive infinity.
    return math.floor(value * 100 + 0.5) / 100
