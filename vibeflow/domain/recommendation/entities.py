"""Recommendation catalog and per-user rating entities."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import ARRAY, UUID

from vibeflow.domain.mood.entities import utcnow
from vibeflow.infrastructure.db.meta import Base

# Likes are stored in the graded rating column; a like is always written as the top grade.
LIKED_RATING = 5


class CategoryKind(str, Enum):
    FOOD = "food"
    ACTIVITY = "activity"
    MINDFULNESS = "mindfulness"


class RecommendationRecord(Base):
    """Catalog row as stored."""

    __tablename__ = "recommendations"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(32), nullable=False)
    mood_types = Column(ARRAY(String(20)), nullable=False, default=list)
    energy_levels = Column(ARRAY(String(20)), nullable=False, default=list)
    image_url = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class RecommendationRating(Base):
    """A user's like/completion status for one recommendation."""

    __tablename__ = "recommendation_ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "recommendation_id", name="uq_recommendation_ratings_user_rec"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid4)
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    recommendation_id = Column(
        UUID(as_uuid=True),
        ForeignKey("recommendations.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating = Column(Integer, nullable=True)  # 1-5; only 5 or NULL is written today
    completed = Column(Boolean, nullable=True, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    @property
    def liked(self) -> bool:
        return is_liked(self.rating)


def is_liked(rating: Optional[int]) -> bool:
    return rating is not None and rating > 0


def rating_for(liked: bool) -> Optional[int]:
    return LIKED_RATING if liked else None


@dataclass
class Recommendation:
    """Catalog item as presented to a user, with that user's display state."""
    id: str
    title: str
    description: str
    category: str
    mood_types: Tuple[str, ...] = ()
    energy_levels: Tuple[str, ...] = ()
    image_url: Optional[str] = None
    liked: bool = field(default=False, compare=False)
    completed: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class RatingSnapshot:
    """Combined like/completion flags sent together on every write."""
    recommendation_id: str
    liked: bool = False
    completed: bool = False
