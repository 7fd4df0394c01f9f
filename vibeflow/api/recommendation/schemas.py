"""Pydantic schemas for recommendation API."""

from typing import List, Optional

from pydantic import BaseModel


class RecommendationRead(BaseModel):
    id: str
    title: str
    description: str
    category: str
    mood_types: List[str]
    energy_levels: List[str]
    image_url: Optional[str] = None
    liked: bool = False
    completed: bool = False

    class Config:
        from_attributes = True


class RecommendationList(BaseModel):
    recommendations: List[RecommendationRead]
    total_count: int
    is_loading: bool = False
    empty_message: Optional[str] = None


class LikeUpdate(BaseModel):
    liked: bool


class CompletionUpdate(BaseModel):
    completed: bool


class RatingStateRead(BaseModel):
    recommendation_id: str
    liked: bool
    completed: bool

    class Config:
        from_attributes = True


class ProgressRead(BaseModel):
    total_recommendations: int
    liked_count: int
    completed_count: int
    liked_percentage: int
    completed_percentage: int

    class Config:
        from_attributes = True


class SeedResult(BaseModel):
    success: bool
