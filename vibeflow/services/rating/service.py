"""Aggregate like/completion progress for a user."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.recommendation.repo import RatingRepository, RecommendationRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RatingProgress:
    total_recommendations: int
    liked_count: int
    completed_count: int

    @property
    def liked_percentage(self) -> int:
        return _percent(self.liked_count, self.total_recommendations)

    @property
    def completed_percentage(self) -> int:
        return _percent(self.completed_count, self.total_recommendations)


def _percent(part: int, total: int) -> int:
    if total <= 0:
        return 0
    return round(part / total * 100)


class RatingService:
    def __init__(self, rating_repo: RatingRepository, recommendation_repo: RecommendationRepository):
        self._ratings = rating_repo
        self._catalog = recommendation_repo

    async def get_progress(self, user_id: UUID, session: AsyncSession) -> RatingProgress:
        """Share of the catalog the user has liked and completed."""
        total = await self._catalog.count(session)
        liked = await self._ratings.count_liked(user_id, session)
        completed = await self._ratings.count_completed(user_id, session)
        logger.debug(f"Progress user={user_id}: liked={liked} completed={completed} of {total}")
        return RatingProgress(total_recommendations=total, liked_count=liked, completed_count=completed)
