# vibeflow/api/recommendation/routes.py

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.dependencies import (
    get_current_user_id,
    get_mood_session,
    get_rating_service,
    get_recommendation_service,
    get_session,
)
from vibeflow.services.mood.session import MoodSession
from vibeflow.services.rating.service import RatingService
from vibeflow.services.recommendation.service import RecommendationService
from .schemas import (
    CompletionUpdate,
    LikeUpdate,
    ProgressRead,
    RatingStateRead,
    RecommendationList,
    RecommendationRead,
    SeedResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)

EMPTY_MESSAGE = (
    "No recommendations available right now. "
    "Track your mood to get personalized recommendations."
)


def _to_list(mood_session: MoodSession) -> RecommendationList:
    recs = mood_session.recommendations
    return RecommendationList(
        recommendations=[RecommendationRead.model_validate(r) for r in recs],
        total_count=len(recs),
        is_loading=mood_session.is_loading,
        empty_message=None if recs else EMPTY_MESSAGE,
    )


@router.get("/", response_model=RecommendationList)
async def list_recommendations(mood_session: MoodSession = Depends(get_mood_session)):
    """Current recommendations with the caller's like/completion flags."""
    return _to_list(mood_session)


@router.post("/refresh", response_model=RecommendationList)
async def refresh_recommendations(mood_session: MoodSession = Depends(get_mood_session)):
    await mood_session.get_recommendations()
    return _to_list(mood_session)


@router.put("/{recommendation_id}/like", response_model=RatingStateRead)
async def set_like(
    recommendation_id: str,
    body: LikeUpdate,
    mood_session: MoodSession = Depends(get_mood_session),
):
    """Optimistic: answers with local state while the write runs in the background."""
    logger.info(f"[recommendations] like: user={mood_session.user_id} rec={recommendation_id} liked={body.liked}")
    mood_session.set_like_state(recommendation_id, body.liked)
    return RatingStateRead.model_validate(mood_session.rating_state(recommendation_id))


@router.put("/{recommendation_id}/completion", response_model=RatingStateRead)
async def set_completion(
    recommendation_id: str,
    body: CompletionUpdate,
    mood_session: MoodSession = Depends(get_mood_session),
):
    logger.info(
        f"[recommendations] completion: user={mood_session.user_id} "
        f"rec={recommendation_id} completed={body.completed}"
    )
    mood_session.set_completion_state(recommendation_id, body.completed)
    return RatingStateRead.model_validate(mood_session.rating_state(recommendation_id))


@router.get("/progress", response_model=ProgressRead)
async def get_progress(
    session: AsyncSession = Depends(get_session),
    rating_service: RatingService = Depends(get_rating_service),
    user_id: UUID = Depends(get_current_user_id),
):
    try:
        progress = await rating_service.get_progress(user_id, session)
        return ProgressRead.model_validate(progress)
    except Exception as e:
        logger.error(f"Error computing progress for user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve progress"
        )


@router.post("/seed", response_model=SeedResult)
async def seed_catalog(
    session: AsyncSession = Depends(get_session),
    service: RecommendationService = Depends(get_recommendation_service),
    user_id: UUID = Depends(get_current_user_id),
):
    """Ensure the default catalog exists (no-op when it already does)."""
    logger.info(f"[recommendations] seed requested by user={user_id}")
    return SeedResult(success=await service.seed_catalog(session))
