"""Health profile API routes."""
from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.dependencies import (
    get_current_user_id,
    get_profile_service,
    get_session,
)
from vibeflow.services.profile.service import HealthProfileService
from .schemas import HealthProfileRead, HealthProfileUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/profile",
    tags=["profile"]
)


@router.get("/", response_model=HealthProfileRead)
async def get_profile(
    session: AsyncSession = Depends(get_session),
    profile_service: HealthProfileService = Depends(get_profile_service),
    user_id: UUID = Depends(get_current_user_id),
):
    try:
        profile = await profile_service.get_profile(user_id, session)
        return HealthProfileRead.model_validate(profile)
    except Exception as e:
        logger.error(f"Error getting health profile for user {user_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve profile")


@router.put("/", response_model=HealthProfileRead)
async def update_profile(
    body: HealthProfileUpdate,
    session: AsyncSession = Depends(get_session),
    profile_service: HealthProfileService = Depends(get_profile_service),
    user_id: UUID = Depends(get_current_user_id),
):
    updates = body.model_dump(exclude_unset=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No fields to update")
    try:
        profile = await profile_service.update_profile(user_id, updates, session)
        return HealthProfileRead.model_validate(profile)
    except Exception as e:
        logger.error(f"Error updating health profile for user {user_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update profile")
