"""Repository interface for health profiles."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from .profile import HealthProfile


class HealthProfileRepository(ABC):
    """Abstract repository for health profiles."""

    @abstractmethod
    async def get_profile(self, user_id: UUID, session: AsyncSession) -> Optional[HealthProfile]:
        """Get the health profile for a user."""
        ...

    @abstractmethod
    async def upsert_profile(self, profile: HealthProfile, session: AsyncSession) -> HealthProfile:
        """Create or replace the health profile for `profile.user_id`."""
        ...
