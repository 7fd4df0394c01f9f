"""Google Gemini adapter over the public REST API."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx

from vibeflow.domain.ports.text_generation import ChatProviderError, TextGenerator

logger = logging.getLogger(__name__)


class GeminiLLM(TextGenerator):
    _BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout = timeout
        self._transport = transport

    @staticmethod
    def _to_contents(messages: List[Dict[str, str]]) -> List[Dict[str, Any]]:
        # Gemini has no system role here; fold everything into one user turn
        text = "\n\n".join(m["content"].strip() for m in messages if m.get("content"))
        return [{"parts": [{"text": text}]}]

    async def generate_response(self, messages: List[Dict[str, str]]) -> str:
        if not self._api_key:
            raise ChatProviderError("Missing Google Gemini API key")

        body = {
            "contents": self._to_contents(messages),
            "generationConfig": {
                "temperature": self._temperature,
                "topK": 40,
                "topP": 0.95,
                "maxOutputTokens": self._max_tokens,
            },
        }
        url = f"{self._BASE_URL}/{self._model}:generateContent"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as http:
                resp = await http.post(url, json=body, headers={"x-goog-api-key": self._api_key})
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {e}")
            raise ChatProviderError(f"Google Gemini API error: {e}") from e

        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            logger.warning(f"Unexpected Gemini response format: {str(data)[:200]}")
            return ""
