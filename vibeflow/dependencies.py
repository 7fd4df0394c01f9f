# vibeflow/dependencies.py

"""
Centralised FastAPI dependency providers.

Lifetimes
---------
* module-level singletons → created once at import time
* per-user objects        → MoodSession, owned by the session registry
                            (dropped on sign-out or after
                            `session_idle_ttl_seconds` without a request)
* request-scoped objects  → yielded by functions that FastAPI wraps
"""

from __future__ import annotations

from typing import AsyncGenerator
from uuid import UUID

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.config import settings
from vibeflow.infrastructure.db.bootstrap import get_session as get_db_session
from vibeflow.infrastructure.db.bootstrap import session_scope
from vibeflow.infrastructure.implementations.mood.rds_mood_repository import RDSMoodRepository
from vibeflow.infrastructure.implementations.profile.profile_repository import SqlHealthProfileRepository
from vibeflow.infrastructure.implementations.recommendation.rds_recommendation_repository import (
    RDSRatingRepository,
    RDSRecommendationRepository,
)
from vibeflow.infrastructure.llm.gemini_llm import GeminiLLM
from vibeflow.infrastructure.llm.openai_llm import OpenAILLM
from vibeflow.infrastructure.notifications.inbox_notifier import InboxNotifier
from vibeflow.services.chat.service import ChatService
from vibeflow.services.mood.registry import MoodSessionRegistry
from vibeflow.services.mood.session import MoodSession
from vibeflow.services.profile.service import HealthProfileService
from vibeflow.services.rating.service import RatingService
from vibeflow.services.recommendation.seeding import RecommendationSeeder
from vibeflow.services.recommendation.service import RecommendationService

# ────────────────────────── singletons ─────────────────────────── #

_mood_repo = RDSMoodRepository()
_recommendation_repo = RDSRecommendationRepository()
_rating_repo = RDSRatingRepository()
_profile_repo = SqlHealthProfileRepository()
_notifier = InboxNotifier()

_seeder = RecommendationSeeder(_recommendation_repo)
_recommendation_service = RecommendationService(
    _recommendation_repo,
    _seeder,
    _notifier,
    session_factory=session_scope,
    fallback_limit=settings().recommendation_fallback_limit,
)
_rating_service = RatingService(_rating_repo, _recommendation_repo)
_profile_service = HealthProfileService(_profile_repo)

_openai_llm = OpenAILLM(
    api_key=settings().openai_api_key,
    model=settings().openai_model,
    temperature=settings().llm_temperature,
    max_tokens=settings().llm_max_tokens,
    timeout=settings().llm_timeout_seconds,
)
_gemini_llm = GeminiLLM(
    api_key=settings().gemini_api_key,
    model=settings().gemini_model,
    temperature=settings().llm_temperature,
    max_tokens=settings().llm_max_tokens,
    timeout=settings().llm_timeout_seconds,
)
_chat_service = ChatService({"openai": _openai_llm, "gemini": _gemini_llm}, _profile_repo)


def _build_mood_session(user_id: UUID) -> MoodSession:
    return MoodSession(
        user_id=user_id,
        mood_repo=_mood_repo,
        rating_repo=_rating_repo,
        recommendation_service=_recommendation_service,
        session_factory=session_scope,
    )


_session_registry = MoodSessionRegistry(
    _build_mood_session,
    notifier=_notifier,
    idle_ttl=settings().session_idle_ttl_seconds,
)

# ─────────────────────── DI provider helpers ───────────────────── #

def get_session_registry() -> MoodSessionRegistry:
    """Return the process-wide registry of signed-in users."""
    return _session_registry

def get_recommendation_service() -> RecommendationService:
    return _recommendation_service

def get_rating_service() -> RatingService:
    return _rating_service

def get_profile_service() -> HealthProfileService:
    return _profile_service

def get_chat_service() -> ChatService:
    return _chat_service

def get_notifier() -> InboxNotifier:
    return _notifier

def get_mood_repository() -> RDSMoodRepository:
    return _mood_repo

# ───────────────────────── auth helpers ───────────────────────── #
_security = HTTPBearer()

async def get_current_user(token: HTTPAuthorizationCredentials = Depends(_security)) -> dict:
    """Decode the auth provider's JWT and return its payload (sub, email, exp, …)."""
    cfg = settings()
    try:
        payload = jwt.decode(
            token.credentials,
            cfg.jwt_secret,
            algorithms=[cfg.jwt_algorithm],
            audience=cfg.jwt_audience,
            options={"verify_aud": cfg.jwt_audience is not None},
        )
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return payload

async def get_current_user_id(payload: dict = Depends(get_current_user)) -> UUID:
    """User id is the token subject."""
    sub = payload.get("sub")
    try:
        return UUID(str(sub))
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Token has no valid subject")

async def get_mood_session(
    user_id: UUID = Depends(get_current_user_id),
    registry: MoodSessionRegistry = Depends(get_session_registry),
) -> MoodSession:
    """The caller's MoodSession; signs the user in on first use."""
    session = registry.get(user_id)
    if session is None:
        session = await registry.sign_in(user_id)
    return session

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped database session (async).

    Delegates to *vibeflow.infrastructure.db.bootstrap.get_session* but
    preserves the required *async generator* signature so FastAPI can manage
    the lifecycle automatically (open → yield → close).
    """
    async for session in get_db_session():
        yield session
