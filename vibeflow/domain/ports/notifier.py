"""Port for user-visible, non-blocking notifications (toasts)."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from vibeflow.domain.mood.entities import utcnow


@dataclass(frozen=True)
class UserNotification:
    title: str
    description: str
    variant: str = "default"  # "default" | "destructive"
    created_at: datetime = field(default_factory=utcnow)


class NotificationPort(ABC):
    @abstractmethod
    def notify(self, user_id: str, notification: UserNotification) -> None:
        ...

    @abstractmethod
    def drain(self, user_id: str) -> List[UserNotification]:
        """Return and forget everything pending for `user_id`."""
        ...
