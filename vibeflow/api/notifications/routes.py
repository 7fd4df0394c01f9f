# vibeflow/api/notifications/routes.py

from __future__ import annotations

from datetime import datetime
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from vibeflow.dependencies import get_current_user_id, get_notifier
from vibeflow.infrastructure.notifications.inbox_notifier import InboxNotifier

router = APIRouter(
    prefix="/notifications",
    tags=["notifications"]
)


class NotificationRead(BaseModel):
    title: str
    description: str
    variant: str
    created_at: datetime

    class Config:
        from_attributes = True


@router.get("/", response_model=List[NotificationRead])
async def drain_notifications(
    user_id: UUID = Depends(get_current_user_id),
    notifier: InboxNotifier = Depends(get_notifier),
):
    """Pending toasts for the caller; each is returned once."""
    return [NotificationRead.model_validate(n) for n in notifier.drain(str(user_id))]
