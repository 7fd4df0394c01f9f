"""Pydantic schemas for chat API."""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)
    currentMood: Optional[str] = None
    moodEmoji: Optional[str] = None
    userContext: Optional[Dict[str, Any]] = None
    aiProvider: Literal["gemini", "openai"] = "gemini"


class ChatResponse(BaseModel):
    response: str
