# vibeflow/api/session/routes.py

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from vibeflow.dependencies import get_current_user_id, get_session_registry
from vibeflow.services.mood.registry import MoodSessionRegistry

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/session",
    tags=["session"]
)


class SessionState(BaseModel):
    user_id: UUID
    mood_entries: int
    recommendations: int
    current_mood: Optional[str] = None


@router.post("/", response_model=SessionState, status_code=status.HTTP_201_CREATED)
async def sign_in(
    user_id: UUID = Depends(get_current_user_id),
    registry: MoodSessionRegistry = Depends(get_session_registry),
):
    """Start (or resume) the caller's session: loads history and first recommendations."""
    mood_session = await registry.sign_in(user_id)
    return SessionState(
        user_id=user_id,
        mood_entries=len(mood_session.mood_history),
        recommendations=len(mood_session.recommendations),
        current_mood=mood_session.current_mood.mood if mood_session.current_mood else None,
    )


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    user_id: UUID = Depends(get_current_user_id),
    registry: MoodSessionRegistry = Depends(get_session_registry),
):
    await registry.sign_out(user_id)
