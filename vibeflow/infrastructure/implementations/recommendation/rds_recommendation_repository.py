"""PostgreSQL implementations of the catalog and rating repositories."""
from __future__ import annotations
from typing import Any, Dict, List, Sequence
from uuid import UUID, uuid4

from sqlalchemy import func, insert, select, text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.mood.entities import utcnow
from vibeflow.domain.recommendation.entities import (
    RecommendationRating,
    RecommendationRecord,
    rating_for,
)
from vibeflow.domain.recommendation.repo import RatingRepository, RawRecord, RecommendationRepository

# Arbitrary app-wide key for pg_advisory_xact_lock around catalog seeding
_SEED_LOCK_KEY = 74_201_001

_CATALOG_COLUMNS = (
    RecommendationRecord.id,
    RecommendationRecord.title,
    RecommendationRecord.description,
    RecommendationRecord.category,
    RecommendationRecord.mood_types,
    RecommendationRecord.energy_levels,
    RecommendationRecord.image_url,
)


class RDSRecommendationRepository(RecommendationRepository):
    """Catalog reads return plain row mappings keyed by column name."""

    async def has_any(self, session: AsyncSession) -> bool:
        result = await session.execute(select(RecommendationRecord.id).limit(1))
        return result.first() is not None

    async def count(self, session: AsyncSession) -> int:
        result = await session.execute(select(func.count()).select_from(RecommendationRecord))
        return int(result.scalar_one())

    async def find_matching(
        self,
        mood: str,
        energy: str,
        session: AsyncSession
    ) -> List[RawRecord]:
        stmt = (
            select(*_CATALOG_COLUMNS)
            .where(RecommendationRecord.mood_types.contains([mood]))
            .where(RecommendationRecord.energy_levels.contains([energy]))
        )
        result = await session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def list_general(self, limit: int, session: AsyncSession) -> List[RawRecord]:
        stmt = select(*_CATALOG_COLUMNS).order_by(RecommendationRecord.created_at).limit(limit)
        result = await session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def insert_catalog_if_empty(
        self,
        rows: Sequence[Dict[str, Any]],
        session: AsyncSession
    ) -> int:
        # Serialises concurrent seeders; released at commit/rollback
        await session.execute(text("SELECT pg_advisory_xact_lock(:key)"), {"key": _SEED_LOCK_KEY})
        if await self.has_any(session):
            await session.commit()
            return 0
        now = utcnow()
        await session.execute(
            insert(RecommendationRecord),
            [{"id": uuid4(), "created_at": now, **row} for row in rows],
        )
        await session.commit()
        return len(rows)


class RDSRatingRepository(RatingRepository):
    """PostgreSQL implementation of rating repository."""

    async def upsert_rating(
        self,
        user_id: UUID,
        recommendation_id: UUID,
        liked: bool,
        completed: bool,
        session: AsyncSession
    ) -> RecommendationRating:
        values = {
            "rating": rating_for(liked),
            "completed": completed,
        }
        stmt = (
            pg_insert(RecommendationRating)
            .values(
                id=uuid4(),
                user_id=user_id,
                recommendation_id=recommendation_id,
                created_at=utcnow(),
                **values,
            )
            .on_conflict_do_update(
                index_elements=[RecommendationRating.user_id, RecommendationRating.recommendation_id],
                set_=values,
            )
            .returning(RecommendationRating)
        )
        result = await session.execute(stmt)
        rating = result.scalar_one()
        await session.commit()
        return rating

    async def list_ratings_by_user(
        self,
        user_id: UUID,
        session: AsyncSession
    ) -> List[RecommendationRating]:
        stmt = select(RecommendationRating).where(RecommendationRating.user_id == user_id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def count_liked(self, user_id: UUID, session: AsyncSession) -> int:
        stmt = (
            select(func.count())
            .select_from(RecommendationRating)
            .where(
                RecommendationRating.user_id == user_id,
                RecommendationRating.rating.is_not(None),
                RecommendationRating.rating > 0,
            )
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def count_completed(self, user_id: UUID, session: AsyncSession) -> int:
        stmt = (
            select(func.count())
            .select_from(RecommendationRating)
            .where(
                RecommendationRating.user_id == user_id,
                RecommendationRating.completed.is_(True),
            )
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())
