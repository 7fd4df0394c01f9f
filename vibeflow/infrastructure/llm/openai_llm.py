"""OpenAI chat-completions adapter implementing the TextGenerator port."""
from __future__ import annotations

import logging
from typing import Dict, List

from openai import AsyncOpenAI, OpenAIError

from vibeflow.domain.ports.text_generation import ChatProviderError, TextGenerator

logger = logging.getLogger(__name__)


class OpenAILLM(TextGenerator):
    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        timeout: float = 30.0,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        # lazily built so a missing key only fails when the provider is actually used
        self._api_key = api_key
        self._timeout = timeout
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        if not self._api_key:
            raise ChatProviderError("Missing OpenAI API key")
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key, timeout=self._timeout)
        return self._client

    async def generate_response(self, messages: List[Dict[str, str]]) -> str:
        client = self._get_client()
        try:
            completion = await client.chat.completions.create(
                model=self._model,
                messages=messages,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise ChatProviderError(f"OpenAI API error: {e}") from e

        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""
