"""Sign-in/sign-out lifecycle of per-user mood sessions."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Dict, List, Optional
from uuid import UUID

from vibeflow.domain.ports.notifier import NotificationPort
from vibeflow.services.mood.session import MoodSession

logger = logging.getLogger(__name__)


class MoodSessionRegistry:
    """
    Owns one MoodSession per signed-in user.

    A session is only handed out once its history and first recommendations
    are loaded; concurrent sign-ins for the same user wait on that priming.
    Sessions unused for `idle_ttl` seconds are signed out on the next
    sign-in sweep.
    """

    def __init__(
        self,
        session_builder: Callable[[UUID], MoodSession],
        notifier: Optional[NotificationPort] = None,
        idle_ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._build = session_builder
        self._notifier = notifier
        self._idle_ttl = idle_ttl
        self._clock = clock
        self._sessions: Dict[UUID, MoodSession] = {}
        self._ready: Dict[UUID, asyncio.Event] = {}
        self._last_used: Dict[UUID, float] = {}
        self._lock = asyncio.Lock()

    def get(self, user_id: UUID) -> Optional[MoodSession]:
        """The user's primed session, or None when absent, closed or still loading."""
        session = self._sessions.get(user_id)
        if session is None or session.closed:
            return None
        ready = self._ready.get(user_id)
        if ready is None or not ready.is_set():
            return None
        self._last_used[user_id] = self._clock()
        return session

    async def sign_in(self, user_id: UUID) -> MoodSession:
        """Return the user's session, creating and priming it on first use."""
        await self.evict_idle()

        async with self._lock:
            session = self._sessions.get(user_id)
            if session is not None and not session.closed:
                ready = self._ready[user_id]
                owner = False
            else:
                session = self._build(user_id)
                ready = asyncio.Event()
                self._sessions[user_id] = session
                self._ready[user_id] = ready
                owner = True
            self._last_used[user_id] = self._clock()

        if not owner:
            await ready.wait()
            return session

        logger.info(f"[session] sign-in user={user_id}")
        try:
            await session.load_history()
            await session.get_recommendations()
        finally:
            ready.set()
        return session

    async def sign_out(self, user_id: UUID) -> bool:
        async with self._lock:
            session = self._sessions.pop(user_id, None)
            ready = self._ready.pop(user_id, None)
            self._last_used.pop(user_id, None)
        if self._notifier is not None:
            self._notifier.drain(str(user_id))
        if session is None:
            return False
        if ready is not None:
            await ready.wait()
        await session.drain()
        session.close()
        logger.info(f"[session] sign-out user={user_id}")
        return True

    async def evict_idle(self) -> List[UUID]:
        """Sign out primed sessions idle for longer than the configured ttl."""
        if self._idle_ttl is None:
            return []
        cutoff = self._clock() - self._idle_ttl
        idle = [
            user_id for user_id, last_used in self._last_used.items()
            if last_used < cutoff and self._ready.get(user_id) is not None and self._ready[user_id].is_set()
        ]
        for user_id in idle:
            logger.info(f"[session] evicting idle session user={user_id}")
            await self.sign_out(user_id)
        return idle

    async def close_all(self) -> None:
        for user_id in list(self._sessions):
            await self.sign_out(user_id)
