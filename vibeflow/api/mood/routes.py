# vibeflow/api/mood/routes.py

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from vibeflow.dependencies import get_mood_session
from vibeflow.domain.mood.entities import EnergyKind, MoodKind
from vibeflow.domain.mood.vocabulary import ENERGY_DESCRIPTIONS, MOOD_DESCRIPTIONS, MOOD_EMOJIS
from vibeflow.services.mood.session import MoodSession, SessionClosedError
from .schemas import MoodCreate, MoodHistory, MoodRead, MoodStats, MoodVocabulary

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/moods",
    tags=["moods"]
)


@router.post("/", response_model=MoodRead, status_code=status.HTTP_201_CREATED)
async def log_mood(
    mood_data: MoodCreate,
    mood_session: MoodSession = Depends(get_mood_session),
):
    """Log a mood; recommendations are refreshed as part of the call."""
    try:
        logger.info(f"[moods] log: user={mood_session.user_id} mood={mood_data.mood.value}")
        entry = await mood_session.log_mood(mood_data.mood, mood_data.energy, mood_data.note)
        return MoodRead.model_validate(entry)
    except SessionClosedError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Session has ended")
    except Exception as e:
        logger.error(f"Error logging mood for user {mood_session.user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log mood"
        )


@router.get("/", response_model=MoodHistory)
async def list_moods(
    limit: int = 50,
    mood_session: MoodSession = Depends(get_mood_session),
):
    """Mood history, newest first."""
    entries = mood_session.mood_history[: max(0, min(limit, 500))]
    return MoodHistory(
        entries=[MoodRead.model_validate(e) for e in entries],
        total_count=len(mood_session.mood_history),
    )


@router.get("/current", response_model=MoodRead)
async def current_mood(mood_session: MoodSession = Depends(get_mood_session)):
    if mood_session.current_mood is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No mood logged yet")
    return MoodRead.model_validate(mood_session.current_mood)


@router.get("/stats", response_model=MoodStats)
async def mood_stats(mood_session: MoodSession = Depends(get_mood_session)):
    """Per-mood frequency across the loaded history."""
    return MoodStats(
        frequency=mood_session.mood_frequency(),
        total_entries=len(mood_session.mood_history),
    )


@router.get("/vocabulary", response_model=MoodVocabulary)
async def vocabulary():
    return MoodVocabulary(
        moods=[m.value for m in MoodKind],
        energy_levels=[e.value for e in EnergyKind],
        mood_emojis={k.value: v for k, v in MOOD_EMOJIS.items()},
        mood_descriptions={k.value: v for k, v in MOOD_DESCRIPTIONS.items()},
        energy_descriptions={k.value: v for k, v in ENERGY_DESCRIPTIONS.items()},
    )
