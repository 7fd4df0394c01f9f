"""Mood-matched recommendation retrieval with a fallback cascade."""
from __future__ import annotations

import asyncio
import logging
from typing import AsyncContextManager, Callable, List, Optional, Set, Union
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.mood.entities import MoodEntry
from vibeflow.domain.ports.notifier import NotificationPort, UserNotification
from vibeflow.domain.recommendation.entities import Recommendation
from vibeflow.domain.recommendation.repo import RawRecord, RecommendationRepository
from vibeflow.services.recommendation.dedup import deduplicate
from vibeflow.services.recommendation.defaults import starter_recommendations
from vibeflow.services.recommendation.seeding import RecommendationSeeder

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AsyncContextManager[AsyncSession]]

RECOMMENDATION_ERROR = UserNotification(
    title="Recommendation Error",
    description="Unable to load recommendations. Please try again later.",
    variant="destructive",
)


def _value(kind) -> str:
    return str(getattr(kind, "value", kind))


class RecommendationService:
    """Always answers with *something*: specific match, general rows, or the starter list."""

    def __init__(
        self,
        recommendation_repo: RecommendationRepository,
        seeder: RecommendationSeeder,
        notifier: NotificationPort,
        session_factory: Optional[SessionFactory] = None,
        fallback_limit: int = 20,
    ):
        self._repo = recommendation_repo
        self._seeder = seeder
        self._notifier = notifier
        self._session_factory = session_factory
        self._fallback_limit = fallback_limit
        self._background: Set[asyncio.Task] = set()

    async def fetch_recommendations(
        self,
        mood: Optional[MoodEntry],
        user_id: Union[UUID, str, None],
        session: AsyncSession,
    ) -> List[Recommendation]:
        """Recommendations for `mood`; never raises."""
        if mood is None or not user_id:
            logger.info("No user or mood available for recommendations")
            return []

        try:
            return await self._cascade(mood, str(user_id), session)
        except Exception as e:
            logger.exception(f"Error getting recommendations for user {user_id}: {e}")
            return self._starter_fallback(str(user_id))

    async def seed_catalog(self, session: AsyncSession) -> bool:
        return await self._seeder.ensure_defaults(session)

    async def wait_for_background(self) -> None:
        """Await any in-flight background seeding."""
        if self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)

    # ───────────────────────── cascade steps ───────────────────────── #

    async def _cascade(self, mood: MoodEntry, user_id: str, session: AsyncSession) -> List[Recommendation]:
        mood_value, energy_value = _value(mood.mood), _value(mood.energy)
        logger.info(f"Fetching recommendations for mood={mood_value} energy={energy_value} user={user_id}")

        if not await self._catalog_has_rows(session):
            logger.info("No recommendations found, adding defaults")
            await self._seeder.ensure_defaults(session)

        rows = await self._specific(mood_value, energy_value, session)
        if rows:
            return deduplicate(rows)

        logger.info("No specific recommendations found, using general fallback")
        rows = await self._general(session)
        if rows:
            return deduplicate(rows)

        await self._seeder.ensure_defaults(session)
        rows = await self._general(session)
        if rows:
            logger.info("Retrieved recommendations after adding defaults")
            return deduplicate(rows)

        return self._starter_fallback(user_id)

    async def _catalog_has_rows(self, session: AsyncSession) -> bool:
        try:
            return await self._repo.has_any(session)
        except SQLAlchemyError as e:
            logger.error(f"Error checking recommendation catalog: {e}")
            await self._rollback(session)
            return False

    async def _specific(self, mood: str, energy: str, session: AsyncSession) -> List[RawRecord]:
        try:
            return await self._repo.find_matching(mood, energy, session)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching specific recommendations: {e}")
            await self._rollback(session)
            return []

    async def _general(self, session: AsyncSession) -> List[RawRecord]:
        try:
            return await self._repo.list_general(self._fallback_limit, session)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching fallback recommendations: {e}")
            await self._rollback(session)
            return []

    def _starter_fallback(self, user_id: str) -> List[Recommendation]:
        logger.warning(f"Unable to retrieve any stored recommendations for user {user_id}; using starter list")
        self._notifier.notify(user_id, RECOMMENDATION_ERROR)
        self._schedule_background_seed()
        return starter_recommendations()

    def _schedule_background_seed(self) -> None:
        if self._session_factory is None:
            return
        task = asyncio.create_task(self._seed_in_background())
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def _seed_in_background(self) -> None:
        try:
            async with self._session_factory() as session:
                await self._seeder.ensure_defaults(session)
        except Exception as e:
            logger.exception(f"Background seeding failed: {e}")

    @staticmethod
    async def _rollback(session: AsyncSession) -> None:
        try:
            await session.rollback()
        except Exception as e:
            logger.warning(f"Rollback failed: {e}")
