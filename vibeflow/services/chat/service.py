"""Wellness assistant chat with mood and health-profile context."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.mood.entities import MoodEntry
from vibeflow.domain.mood.vocabulary import emoji_for
from vibeflow.domain.ports.text_generation import ChatProviderError, TextGenerator
from vibeflow.domain.profile.profile_repo import HealthProfileRepository

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I'm sorry, I couldn't process your request at the moment. Please try again later."

SYSTEM_PROMPT = (
    "You are VibeFlow AI, a friendly wellness assistant. Be empathetic and practical. "
    "Use the user's current mood, energy and health context to give one specific, "
    "actionable suggestion for food, movement or mental wellness. Keep replies under "
    "150 words and conversational."
)


@dataclass(frozen=True)
class ChatReply:
    response: str
    provider: str


class ChatService:
    """Builds a context-carrying prompt and forwards it to the chosen provider."""

    DEFAULT_PROVIDER = "gemini"

    def __init__(
        self,
        providers: Mapping[str, TextGenerator],
        profile_repo: HealthProfileRepository,
    ):
        self._providers = dict(providers)
        self._profile_repo = profile_repo

    @property
    def provider_names(self) -> List[str]:
        return sorted(self._providers)

    async def reply(
        self,
        user_id: UUID,
        message: str,
        session: AsyncSession,
        ai_provider: Optional[str] = None,
        current_mood: Optional[MoodEntry] = None,
        mood: Optional[str] = None,
        mood_emoji: Optional[str] = None,
        user_context: Optional[Dict[str, Any]] = None,
    ) -> ChatReply:
        if not message or not message.strip():
            raise ValueError("Message is required")

        provider_name = ai_provider or self.DEFAULT_PROVIDER
        provider = self._providers.get(provider_name)
        if provider is None:
            raise ValueError(f"Unknown AI provider: {provider_name}")

        context = await self.build_user_context(
            user_id, session,
            current_mood=current_mood,
            mood=mood,
            mood_emoji=mood_emoji,
            extra=user_context,
        )
        messages = self.build_messages(message, context)

        logger.info(f"[chat] user={user_id} provider={provider_name} mood={context.get('mood')}")
        try:
            text = await provider.generate_response(messages)
        except ChatProviderError:
            raise
        except Exception as e:
            raise ChatProviderError(f"{provider_name} request failed: {e}") from e

        if not text or not text.strip():
            logger.warning(f"[chat] empty response from {provider_name}")
            text = FALLBACK_REPLY
        return ChatReply(response=text.strip(), provider=provider_name)

    async def build_user_context(
        self,
        user_id: UUID,
        session: AsyncSession,
        current_mood: Optional[MoodEntry] = None,
        mood: Optional[str] = None,
        mood_emoji: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Mood context from the live session wins over what the client sent."""
        context: Dict[str, Any] = {"mood": "neutral", "energy": "medium"}

        try:
            profile = await self._profile_repo.get_profile(user_id, session)
        except Exception as e:
            logger.warning(f"Could not load health profile for user {user_id}: {e}")
            profile = None
        if profile is not None:
            context.update(profile.to_context())

        if extra:
            context.update({k: v for k, v in extra.items() if v is not None})

        if current_mood is not None:
            context["mood"] = current_mood.mood
            context["energy"] = current_mood.energy
            if current_mood.note:
                context["moodNote"] = current_mood.note
        elif mood:
            context["mood"] = mood

        context["moodEmoji"] = mood_emoji or emoji_for(context["mood"])
        return context

    @staticmethod
    def build_messages(message: str, context: Dict[str, Any]) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": (
                    f"User context:\n{json.dumps(context, ensure_ascii=False, default=str)}\n\n"
                    f"User's message: {message.strip()}"
                ),
            },
        ]
