"""Health profile read/update."""
from __future__ import annotations

import logging
from typing import Any, Dict
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.profile.profile import HealthProfile
from vibeflow.domain.profile.profile_repo import HealthProfileRepository

logger = logging.getLogger(__name__)


class HealthProfileService:
    def __init__(self, profile_repo: HealthProfileRepository):
        self._repo = profile_repo

    async def get_profile(self, user_id: UUID, session: AsyncSession) -> HealthProfile:
        """Stored profile, or an empty one for users who never filled it in."""
        profile = await self._repo.get_profile(user_id, session)
        return profile or HealthProfile(user_id=user_id)

    async def update_profile(
        self,
        user_id: UUID,
        updates: Dict[str, Any],
        session: AsyncSession
    ) -> HealthProfile:
        profile = await self.get_profile(user_id, session)
        profile.apply_updates(updates)
        saved = await self._repo.upsert_profile(profile, session)
        logger.info(f"Updated health profile for user {user_id}: {sorted(updates)}")
        return saved
