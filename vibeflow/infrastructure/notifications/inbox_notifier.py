"""In-process notification inbox drained by the client (toast messages)."""
from __future__ import annotations

import logging
from collections import defaultdict, deque
from typing import Deque, Dict, List

from vibeflow.domain.ports.notifier import NotificationPort, UserNotification

logger = logging.getLogger(__name__)


class InboxNotifier(NotificationPort):
    """Keeps the newest `max_per_user` notifications per user until drained."""

    def __init__(self, max_per_user: int = 20):
        self._max = max_per_user
        self._inbox: Dict[str, Deque[UserNotification]] = defaultdict(lambda: deque(maxlen=self._max))

    def notify(self, user_id: str, notification: UserNotification) -> None:
        logger.info(f"[notify] user={user_id} title={notification.title!r} variant={notification.variant}")
        self._inbox[str(user_id)].append(notification)

    def drain(self, user_id: str) -> List[UserNotification]:
        pending = self._inbox.pop(str(user_id), None)
        return list(pending) if pending else []
