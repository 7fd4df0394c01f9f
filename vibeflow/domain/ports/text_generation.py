"""Port for third-party text generation providers."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List


class ChatProviderError(RuntimeError):
    """The provider could not be reached or rejected the request."""


class TextGenerator(ABC):
    @abstractmethod
    async def generate_response(self, messages: List[Dict[str, str]]) -> str:
        """Return the assistant text for an OpenAI-style message list."""
        ...
