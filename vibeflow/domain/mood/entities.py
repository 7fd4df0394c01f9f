"""Mood entry domain entity."""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from sqlalchemy import Column, DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID

from vibeflow.infrastructure.db.meta import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MoodKind(str, Enum):
    """Canonical mood vocabulary."""
    HAPPY = "happy"
    CALM = "calm"
    TIRED = "tired"
    STRESSED = "stressed"
    SAD = "sad"


class EnergyKind(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MoodEntry(Base):
    """A timestamped (mood, energy, note) record logged by a user."""

    __tablename__ = "mood_entries"
    __table_args__ = (
        Index("ix_mood_entries_user_created", "user_id", "created_at"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid4)
    user_id = Column(UUID(as_uuid=True), nullable=False)
    mood = Column(String(20), nullable=False)
    energy = Column("energy_level", String(20), nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Correlation id minted by the client session before the row exists
    client_ref = Column(String(64), nullable=True)

    @property
    def timestamp(self) -> Optional[int]:
        """Creation time as integer epoch milliseconds."""
        if self.created_at is None:
            return None
        created = self.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return int(created.timestamp() * 1000)

    def __repr__(self) -> str:
        return f"<MoodEntry {self.id} {self.mood}/{self.energy}>"
