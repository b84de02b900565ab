"""Profile settings used by the stats engine."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

DEFAULT_TIMEZONE = "America/Mexico_City"


class ProfileRepository(Protocol):
    """Persistence interface for profile settings."""

    def get_target_kcal(self, user_id: UUID) -> float | None:
        """Return the user's daily target if set."""

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the user's timezone if set."""


@dataclass
class ProfileService:
    """Service for profile settings."""

    repository: ProfileRepository
    default_timezone: str = DEFAULT_TIMEZONE

    def get_target_kcal(self, user_id: UUID) -> float | None:
        """Return the stored target; missing targets are resolved by the stats core."""
        return self.repository.get_target_kcal(user_id)

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user timezone or the default if unset."""
        return self.repository.get_timezone(user_id) or self.default_timezone
