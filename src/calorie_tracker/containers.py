"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from calorie_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from calorie_tracker.config import Settings
from calorie_tracker.services.profiles import ProfileService
from calorie_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    daily_log_repository = SupabaseDailyLogRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    profile_service = ProfileService(
        profile_repository, default_timezone=resolved_settings.default_timezone
    )
    stats_service = StatsService(
        repository=daily_log_repository,
        profile_service=profile_service,
        window_days=resolved_settings.summary_window_days,
        streak_lookback_days=resolved_settings.streak_lookback_days,
    )

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        stats_service=stats_service,
    )
