"""Repository interface for mood entries."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.mood.entities import MoodEntry


class MoodRepository(ABC):
    """Abstract repository for mood entry operations."""

    @abstractmethod
    async def create_entry(
        self,
        user_id: UUID,
        entry: MoodEntry,
        session: AsyncSession
    ) -> MoodEntry:
        """Persist a new entry and return the stored record."""
        pass

    @abstractmethod
    async def list_entries_by_user(
        self,
        user_id: UUID,
        session: AsyncSession,
        limit: Optional[int] = None
    ) -> List[MoodEntry]:
        """List a user's entries, newest first."""
        pass

    @abstractmethod
    async def get_latest_entry(
        self,
        user_id: UUID,
        session: AsyncSession
    ) -> Optional[MoodEntry]:
        """Most recent entry for a user, if any."""
        pass
