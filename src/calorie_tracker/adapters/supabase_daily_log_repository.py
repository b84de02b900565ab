"""Supabase repository for daily log totals."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.errors import InvalidDailyTotalError
from calorie_tracker.domain.stats import DailyTotal
from calorie_tracker.services.stats import DailyLogRepository


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation for daily log queries."""

    client: Client

    def list_daily_totals(self, user_id: UUID) -> list[DailyTotal]:
        """Return all daily totals for a user ordered by date."""
        response = (
            self.client.table("daily_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date_iso", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> DailyTotal:
    """Normalize current and legacy (camelCase) daily log rows.

    Only a missing total is rebuilt from ``entries``; any other value is passed
    through so malformed totals are rejected by the stats core.
    """
    date_iso = row.get("date_iso") or row.get("dateISO") or ""
    total = row.get("total_kcal")
    if total is None:
        total = row.get("totalKcal")
    if total is None:
        total = _sum_entries(str(date_iso), row.get("entries"))
    return DailyTotal(date_iso=str(date_iso), total_kcal=total)  # type: ignore[arg-type]


def _sum_entries(date_iso: str, entries: object) -> float:
    if not isinstance(entries, list):
        raise InvalidDailyTotalError(
            f"Daily log {date_iso or '?'} has neither total_kcal nor entries"
        )
    total = 0.0
    for entry in entries:
        if not isinstance(entry, dict):
            raise InvalidDailyTotalError(
                f"Daily log {date_iso or '?'} has a malformed entry: {entry!r}"
            )
        kcal = entry.get("kcal_per_unit", entry.get("kcalPerUnit"))
        units = entry.get("units")
        if not _is_number(kcal) or not _is_number(units):
            raise InvalidDailyTotalError(
                f"Daily log {date_iso or '?'} has a malformed entry: {entry!r}"
            )
        total += kcal * units
    return total


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
