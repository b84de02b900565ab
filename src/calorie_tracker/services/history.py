"""Validation and date helpers for daily log history."""

import math
import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from calorie_tracker.domain.errors import InvalidDailyTotalError
from calorie_tracker.domain.stats import DailyTotal

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_iso_date(value: object) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date."""
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        raise InvalidDailyTotalError(f"Invalid date_iso: {value!r}")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidDailyTotalError(f"Invalid date_iso: {value!r}") from exc


def as_calendar_date(value: str | date) -> date:
    """Return the calendar date for an ISO string, date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def coerce_daily_totals(logs: object) -> list[DailyTotal]:
    """Validate a log history and return it as ``DailyTotal`` records.

    Records may be ``DailyTotal`` instances or mappings with ``date_iso`` and
    ``total_kcal`` keys. Any malformed record raises instead of being skipped.
    """
    if logs is None or isinstance(logs, str | bytes | Mapping):
        raise InvalidDailyTotalError(
            f"logs must be a collection of daily totals, got {type(logs).__name__}"
        )
    if not isinstance(logs, Iterable):
        raise InvalidDailyTotalError(
            f"logs must be iterable, got {type(logs).__name__}"
        )

    totals: list[DailyTotal] = []
    seen: set[str] = set()
    for position, record in enumerate(logs):
        total = _coerce_record(record, position)
        if total.date_iso in seen:
            raise InvalidDailyTotalError(f"Duplicate date_iso: {total.date_iso}")
        seen.add(total.date_iso)
        totals.append(total)
    return totals


def index_by_date(logs: list[DailyTotal]) -> dict[str, float]:
    """Return totals keyed by ISO date."""
    return {log.date_iso: log.total_kcal for log in logs}


def last_n_days(today: str | date, days: int) -> list[str]:
    """Return ``days`` ascending ISO dates ending at ``today`` inclusive."""
    end = as_calendar_date(today)
    return [
        (end - timedelta(days=offset)).isoformat()
        for offset in range(days - 1, -1, -1)
    ]


def today_in_timezone(now: datetime, timezone_name: str) -> str:
    """Return the calendar date of ``now`` in the given IANA timezone."""
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    return now.astimezone(ZoneInfo(timezone_name)).date().isoformat()


def _coerce_record(record: object, position: int) -> DailyTotal:
    if isinstance(record, DailyTotal):
        date_iso, total_kcal = record.date_iso, record.total_kcal
    elif isinstance(record, Mapping):
        missing = [key for key in ("date_iso", "total_kcal") if key not in record]
        if missing:
            raise InvalidDailyTotalError(
                f"Record {position} is missing {', '.join(missing)}"
            )
        date_iso, total_kcal = record["date_iso"], record["total_kcal"]
    else:
        raise InvalidDailyTotalError(
            f"Record {position} is not a daily total: {type(record).__name__}"
        )

    parse_iso_date(date_iso)
    if (
        isinstance(total_kcal, bool)
        or not isinstance(total_kcal, int | float)
        or not math.isfinite(total_kcal)
        or total_kcal < 0
    ):
        raise InvalidDailyTotalError(
            f"Invalid total_kcal for {date_iso}: {total_kcal!r}"
        )
    return DailyTotal(date_iso=date_iso, total_kcal=float(total_kcal))
