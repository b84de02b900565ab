"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from calorie_tracker.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from calorie_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from calorie_tracker.domain.errors import InvalidDailyTotalError
from calorie_tracker.domain.stats import DailyTotal
from calorie_tracker.services.streaks import compute_streaks


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: list[list[dict[str, object]]] = field(default_factory=list)
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None

    def queue(self, data: list[dict[str, object]]) -> None:
        self.response_queue.append(data)

    def select(self, *_args) -> "FakeTable":
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        data = self.response_queue.pop(0) if self.response_queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_daily_log_repository_reads_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("daily_logs")
    table.queue(
        [
            {"date_iso": "2024-01-01", "total_kcal": 1900},
            {"date_iso": "2024-01-02", "total_kcal": 2050.5},
        ]
    )
    user_id = uuid4()

    logs = SupabaseDailyLogRepository(client).list_daily_totals(user_id)

    assert logs == [
        DailyTotal(date_iso="2024-01-01", total_kcal=1900),
        DailyTotal(date_iso="2024-01-02", total_kcal=2050.5),
    ]
    assert table.last_filters == [("user_id", str(user_id))]
    assert table.last_order == ("date_iso", False)


def test_daily_log_repository_normalizes_legacy_rows() -> None:
    client = FakeSupabaseClient()
    client.table("daily_logs").queue(
        [
            {"dateISO": "2024-01-01", "totalKcal": 1800},
            {
                "dateISO": "2024-01-02",
                "entries": [
                    {"kcalPerUnit": 500, "units": 2},
                    {"kcal_per_unit": 250, "units": 4},
                ],
            },
        ]
    )

    logs = SupabaseDailyLogRepository(client).list_daily_totals(uuid4())

    assert logs == [
        DailyTotal(date_iso="2024-01-01", total_kcal=1800),
        DailyTotal(date_iso="2024-01-02", total_kcal=2000.0),
    ]


def test_daily_log_rows_without_date_fail_in_core() -> None:
    client = FakeSupabaseClient()
    client.table("daily_logs").queue([{"total_kcal": 2000}])

    logs = SupabaseDailyLogRepository(client).list_daily_totals(uuid4())

    with pytest.raises(InvalidDailyTotalError):
        compute_streaks(logs, 2000, "2024-01-01")


def test_profile_repository_reads_target_and_timezone() -> None:
    client = FakeSupabaseClient()
    table = client.table("profiles")
    table.queue([{"target_kcal": 1800, "tdee": 2500, "timezone": "UTC"}])
    table.queue([{"target_kcal": 1800, "tdee": 2500, "timezone": "UTC"}])

    repository = SupabaseProfileRepository(client)

    assert repository.get_target_kcal(uuid4()) == 1800
    assert repository.get_timezone(uuid4()) == "UTC"


def test_profile_repository_falls_back_to_tdee() -> None:
    client = FakeSupabaseClient()
    client.table("profiles").queue([{"target_kcal": None, "tdee": 2300}])

    assert SupabaseProfileRepository(client).get_target_kcal(uuid4()) == 2300


def test_profile_repository_missing_profile() -> None:
    client = FakeSupabaseClient()

    repository = SupabaseProfileRepository(client)

    assert repository.get_target_kcal(uuid4()) is None
    assert repository.get_timezone(uuid4()) is None


@pytest.mark.parametrize("total", ["abc", "1900", {"kcal": 1900}, True])
def test_daily_log_rows_with_non_numeric_total_fail_in_core(total: object) -> None:
    client = FakeSupabaseClient()
    client.table("daily_logs").queue(
        [{"date_iso": "2024-01-01", "total_kcal": total, "entries": []}]
    )

    logs = SupabaseDailyLogRepository(client).list_daily_totals(uuid4())

    assert logs[0].total_kcal == total
    with pytest.raises(InvalidDailyTotalError):
        compute_streaks(logs, 2000, "2024-01-01")


def test_daily_log_rows_with_empty_entries_total_zero() -> None:
    client = FakeSupabaseClient()
    client.table("daily_logs").queue([{"date_iso": "2024-01-01", "entries": []}])

    logs = SupabaseDailyLogRepository(client).list_daily_totals(uuid4())

    assert logs == [DailyTotal(date_iso="2024-01-01", total_kcal=0.0)]


@pytest.mark.parametrize(
    "row",
    [
        {"date_iso": "2024-01-01"},
        {"date_iso": "2024-01-01", "entries": ["bad"]},
        {"date_iso": "2024-01-01", "entries": [{"kcal_per_unit": "x", "units": 1}]},
    ],
)
def test_daily_log_rows_with_unusable_entries_raise(row: dict[str, object]) -> None:
    client = FakeSupabaseClient()
    client.table("daily_logs").queue([row])

    with pytest.raises(InvalidDailyTotalError, match="2024-01-01"):
        SupabaseDailyLogRepository(client).list_daily_totals(uuid4())
