"""PostgreSQL implementation of MoodRepository."""
from __future__ import annotations
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.mood.entities import MoodEntry
from vibeflow.domain.mood.repo import MoodRepository


class RDSMoodRepository(MoodRepository):
    """PostgreSQL implementation of mood entry repository."""

    async def create_entry(
        self,
        user_id: UUID,
        entry: MoodEntry,
        session: AsyncSession
    ) -> MoodEntry:
        """Insert the entry; the returned record carries the store-assigned id."""
        stored = MoodEntry(
            user_id=user_id,
            mood=entry.mood,
            energy=entry.energy,
            note=entry.note,
            created_at=entry.created_at,
            client_ref=entry.client_ref,
        )
        session.add(stored)
        await session.commit()
        await session.refresh(stored)
        return stored

    async def list_entries_by_user(
        self,
        user_id: UUID,
        session: AsyncSession,
        limit: Optional[int] = None
    ) -> List[MoodEntry]:
        """List entries for a user, ordered by creation date descending."""
        stmt = (
            select(MoodEntry)
            .where(MoodEntry.user_id == user_id)
            .order_by(MoodEntry.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def get_latest_entry(
        self,
        user_id: UUID,
        session: AsyncSession
    ) -> Optional[MoodEntry]:
        entries = await self.list_entries_by_user(user_id, session, limit=1)
        return entries[0] if entries else None
