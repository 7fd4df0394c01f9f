"""Repository interfaces for the recommendation catalog and ratings."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.recommendation.entities import RecommendationRating

# Raw catalog rows keyed by store column names (id, title, mood_types, image_url, ...)
RawRecord = Mapping[str, Any]


class RecommendationRepository(ABC):
    """Catalog reads plus the bulk insert used by seeding."""

    @abstractmethod
    async def has_any(self, session: AsyncSession) -> bool:
        """True when the catalog holds at least one row."""
        ...

    @abstractmethod
    async def count(self, session: AsyncSession) -> int:
        ...

    @abstractmethod
    async def find_matching(
        self,
        mood: str,
        energy: str,
        session: AsyncSession
    ) -> List[RawRecord]:
        """Rows whose mood_types contain `mood` and whose energy_levels contain `energy`."""
        ...

    @abstractmethod
    async def list_general(self, limit: int, session: AsyncSession) -> List[RawRecord]:
        """First `limit` rows, unfiltered."""
        ...

    @abstractmethod
    async def insert_catalog_if_empty(
        self,
        rows: Sequence[Dict[str, Any]],
        session: AsyncSession
    ) -> int:
        """Insert `rows` only when the catalog is empty; return the number inserted."""
        ...


class RatingRepository(ABC):
    """Per-user like/completion persistence."""

    @abstractmethod
    async def upsert_rating(
        self,
        user_id: UUID,
        recommendation_id: UUID,
        liked: bool,
        completed: bool,
        session: AsyncSession
    ) -> RecommendationRating:
        """Insert or update the (user, recommendation) row with both flags."""
        ...

    @abstractmethod
    async def list_ratings_by_user(
        self,
        user_id: UUID,
        session: AsyncSession
    ) -> List[RecommendationRating]:
        ...

    @abstractmethod
    async def count_liked(self, user_id: UUID, session: AsyncSession) -> int:
        ...

    @abstractmethod
    async def count_completed(self, user_id: UUID, session: AsyncSession) -> int:
        ...
