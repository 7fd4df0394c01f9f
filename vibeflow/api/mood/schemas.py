"""Pydantic schemas for mood API."""

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from vibeflow.domain.mood.entities import EnergyKind, MoodKind


class MoodCreate(BaseModel):
    """Schema for logging a new mood."""
    mood: MoodKind
    energy: EnergyKind
    note: Optional[str] = Field(None, max_length=1000, description="Optional free-text note")


class MoodRead(BaseModel):
    """Schema for reading a mood entry."""
    id: UUID
    mood: str
    energy: str
    note: Optional[str] = None
    timestamp: int
    created_at: datetime

    class Config:
        from_attributes = True


class MoodHistory(BaseModel):
    entries: List[MoodRead]
    total_count: int


class MoodVocabulary(BaseModel):
    moods: List[str]
    energy_levels: List[str]
    mood_emojis: Dict[str, str]
    mood_descriptions: Dict[str, str]
    energy_descriptions: Dict[str, str]


class MoodStats(BaseModel):
    frequency: Dict[str, int]
    total_entries: int
