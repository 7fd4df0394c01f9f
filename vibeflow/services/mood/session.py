"""Per-user mood and recommendation state for one signed-in session."""
from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections import Counter
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Set, Union
from uuid import UUID, uuid4

from vibeflow.domain.mood.entities import EnergyKind, MoodEntry, MoodKind, utcnow
from vibeflow.domain.mood.repo import MoodRepository
from vibeflow.domain.recommendation.entities import RatingSnapshot, Recommendation
from vibeflow.domain.recommendation.repo import RatingRepository
from vibeflow.services.recommendation.service import RecommendationService, SessionFactory

logger = logging.getLogger(__name__)


class SessionClosedError(RuntimeError):
    """Raised when a torn-down session is asked to do work."""


class MoodSession:
    """
    Holds `current_mood`, `mood_history` (newest first) and the deduplicated
    `recommendations` for one user.  Local state is a cache of the store: it
    is updated optimistically and reconciled with persisted records.
    """

    def __init__(
        self,
        user_id: UUID,
        mood_repo: MoodRepository,
        rating_repo: RatingRepository,
        recommendation_service: RecommendationService,
        session_factory: SessionFactory,
    ):
        self.user_id = user_id
        self._mood_repo = mood_repo
        self._rating_repo = rating_repo
        self._recommendations = recommendation_service
        self._session_factory = session_factory

        self.current_mood: Optional[MoodEntry] = None
        self.mood_history: List[MoodEntry] = []
        self.recommendations: List[Recommendation] = []

        self._ratings: Dict[str, RatingSnapshot] = {}
        self._inflight: Counter = Counter()
        self._pending: Set[asyncio.Task] = set()
        self._busy = 0
        self._closed = False

    @property
    def is_loading(self) -> bool:
        return self._busy > 0

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def _busy_scope(self) -> Iterator[None]:
        self._busy += 1
        try:
            yield
        finally:
            self._busy -= 1

    # ───────────────────────── history ───────────────────────── #

    async def load_history(self) -> List[MoodEntry]:
        """Replace local history with the persisted one; current mood becomes its head."""
        with self._busy_scope():
            try:
                async with self._session_factory() as session:
                    history = await self._mood_repo.list_entries_by_user(self.user_id, session)
            except Exception as e:
                logger.error(f"Error fetching mood history for user {self.user_id}: {e}")
                history = []

        if self._closed:
            return []
        self.mood_history = list(history)
        self.current_mood = self.mood_history[0] if self.mood_history else None
        logger.info(f"Loaded {len(self.mood_history)} mood entries for user {self.user_id}")
        return self.mood_history

    async def log_mood(
        self,
        mood: Union[MoodKind, str],
        energy: Union[EnergyKind, str],
        note: Optional[str] = None,
    ) -> MoodEntry:
        """Record a mood optimistically, persist it, then refresh recommendations."""
        if self._closed:
            raise SessionClosedError(f"Session for user {self.user_id} is closed")
        mood = MoodKind(mood)
        energy = EnergyKind(energy)

        with self._busy_scope():
            placeholder = MoodEntry(
                id=uuid4(),
                user_id=self.user_id,
                mood=mood.value,
                energy=energy.value,
                note=note or None,
                created_at=utcnow(),
                client_ref=uuid4().hex,
            )
            self.current_mood = placeholder
            self.mood_history.insert(0, placeholder)

            await self._persist(placeholder)
            await self.get_recommendations()
            return self.current_mood

    async def _persist(self, placeholder: MoodEntry) -> None:
        try:
            async with self._session_factory() as session:
                stored = await self._mood_repo.create_entry(self.user_id, placeholder, session)
        except Exception as e:
            logger.error(f"Error saving mood entry for user {self.user_id}: {e}")
            return
        if self._closed or stored is None:
            return
        self._merge_stored(placeholder.client_ref, stored)

    def _merge_stored(self, client_ref: str, stored: MoodEntry) -> None:
        """Swap the local placeholder for the persisted record, in place."""
        for i, entry in enumerate(self.mood_history):
            if entry.client_ref == client_ref:
                self.mood_history[i] = stored
                break
        else:
            logger.debug(f"Placeholder {client_ref} no longer in history")
        if self.current_mood is not None and self.current_mood.client_ref == client_ref:
            self.current_mood = stored

    def mood_frequency(self) -> Dict[str, int]:
        """How often each mood appears in the loaded history."""
        return dict(Counter(entry.mood for entry in self.mood_history))

    # ───────────────────────── recommendations ───────────────────────── #

    async def get_recommendations(self) -> List[Recommendation]:
        """Refresh recommendations for the current (or latest) mood."""
        if self._closed:
            return []
        mood = self.current_mood or (self.mood_history[0] if self.mood_history else None)
        if mood is None:
            logger.info(f"No mood available for recommendations (user {self.user_id})")
            self.recommendations = []
            return self.recommendations

        with self._busy_scope():
            try:
                async with self._session_factory() as session:
                    recommendations = await self._recommendations.fetch_recommendations(
                        mood, self.user_id, session
                    )
            except Exception as e:
                logger.error(f"Error getting recommendations for user {self.user_id}: {e}")
                recommendations = []

            await self._refresh_ratings()

        if self._closed:
            return []
        self.recommendations = recommendations
        self._apply_ratings()
        return self.recommendations

    async def _refresh_ratings(self) -> None:
        """Pull persisted like/completion flags into local state."""
        try:
            async with self._session_factory() as session:
                ratings = await self._rating_repo.list_ratings_by_user(self.user_id, session)
        except Exception as e:
            logger.error(f"Error fetching ratings for user {self.user_id}: {e}")
            return

        for rating in ratings:
            rec_id = str(rating.recommendation_id)
            if self._inflight[rec_id]:
                # a local toggle is still being written; it is newer than this row
                continue
            self._ratings[rec_id] = RatingSnapshot(
                recommendation_id=rec_id,
                liked=rating.liked,
                completed=bool(rating.completed),
            )

    def _apply_ratings(self) -> None:
        for rec in self.recommendations:
            snapshot = self._ratings.get(rec.id)
            rec.liked = snapshot.liked if snapshot else False
            rec.completed = snapshot.completed if snapshot else False

    def find_recommendation(self, recommendation_id: str) -> Optional[Recommendation]:
        for rec in self.recommendations:
            if rec.id == str(recommendation_id):
                return rec
        return None

    # ───────────────────────── rating sync ───────────────────────── #

    def rating_state(self, recommendation_id: str) -> RatingSnapshot:
        rec_id = str(recommendation_id)
        return self._ratings.get(rec_id, RatingSnapshot(recommendation_id=rec_id))

    def set_like_state(self, recommendation_id: str, liked: bool) -> Optional[asyncio.Task]:
        snapshot = self._update_local(recommendation_id, liked=liked)
        return self._schedule_upsert(snapshot)

    def set_completion_state(self, recommendation_id: str, completed: bool) -> Optional[asyncio.Task]:
        snapshot = self._update_local(recommendation_id, completed=completed)
        return self._schedule_upsert(snapshot)

    def _update_local(self, recommendation_id: str, **changes: bool) -> RatingSnapshot:
        snapshot = dataclasses.replace(self.rating_state(recommendation_id), **changes)
        self._ratings[snapshot.recommendation_id] = snapshot
        rec = self.find_recommendation(snapshot.recommendation_id)
        if rec is not None:
            rec.liked = snapshot.liked
            rec.completed = snapshot.completed
        return snapshot

    def _schedule_upsert(self, snapshot: RatingSnapshot) -> Optional[asyncio.Task]:
        if self._closed:
            return None
        self._inflight[snapshot.recommendation_id] += 1
        task = asyncio.create_task(self._upsert(snapshot))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _upsert(self, snapshot: RatingSnapshot) -> None:
        try:
            try:
                recommendation_id = UUID(snapshot.recommendation_id)
            except ValueError:
                logger.warning(f"Not persisting rating for non-catalog recommendation {snapshot.recommendation_id}")
                return
            async with self._session_factory() as session:
                await self._rating_repo.upsert_rating(
                    self.user_id,
                    recommendation_id,
                    snapshot.liked,
                    snapshot.completed,
                    session,
                )
            logger.info(
                f"Saved rating user={self.user_id} rec={recommendation_id} "
                f"liked={snapshot.liked} completed={snapshot.completed}"
            )
        except Exception as e:
            logger.error(f"Error saving rating for recommendation {snapshot.recommendation_id}: {e}")
        finally:
            self._inflight[snapshot.recommendation_id] -= 1

    # ───────────────────────── lifecycle ───────────────────────── #

    async def drain(self) -> None:
        """Wait for outstanding rating writes."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def close(self) -> None:
        """Tear down: forget local state; late completions are ignored."""
        self._closed = True
        self.current_mood = None
        self.mood_history = []
        self.recommendations = []
        self._ratings.clear()
