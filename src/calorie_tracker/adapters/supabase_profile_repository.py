"""Supabase repository for profile settings."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile settings."""

    client: Client

    def get_target_kcal(self, user_id: UUID) -> float | None:
        """Return the stored target, falling back to the legacy TDEE column."""
        row = self._get_profile(user_id)
        if row is None:
            return None
        value = row.get("target_kcal")
        if value is None:
            value = row.get("tdee")
        return value

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the stored timezone for a user."""
        row = self._get_profile(user_id)
        if row is None:
            return None
        return row.get("timezone")

    def _get_profile(self, user_id: UUID) -> dict[str, object] | None:
        response = (
            self.client.table("profiles")
            .select("target_kcal, tdee, timezone")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]
