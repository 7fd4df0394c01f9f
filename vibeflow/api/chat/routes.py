# vibeflow/api/chat/routes.py

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.dependencies import (
    get_chat_service,
    get_current_user_id,
    get_session,
    get_session_registry,
)
from vibeflow.domain.ports.text_generation import ChatProviderError
from vibeflow.services.chat.service import ChatService
from vibeflow.services.mood.registry import MoodSessionRegistry
from .schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/chat",
    tags=["chat"]
)


@router.post("/", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    session: AsyncSession = Depends(get_session),
    chat_service: ChatService = Depends(get_chat_service),
    registry: MoodSessionRegistry = Depends(get_session_registry),
    user_id: UUID = Depends(get_current_user_id),
):
    """Ask the wellness assistant; the user's current mood is attached automatically."""
    mood_session = registry.get(user_id)
    current = mood_session.current_mood if mood_session else None
    try:
        reply = await chat_service.reply(
            user_id=user_id,
            message=request.message,
            session=session,
            ai_provider=request.aiProvider,
            current_mood=current,
            mood=request.currentMood,
            mood_emoji=request.moodEmoji,
            user_context=request.userContext,
        )
        return ChatResponse(response=reply.response)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ChatProviderError as e:
        logger.error(f"Chat provider error for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to process your request"
        )
