"""Pydantic schemas for health profile API."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class HealthProfileRead(BaseModel):
    user_id: UUID
    display_name: Optional[str] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    activity_level: Optional[str] = None
    sleep_goal: Optional[str] = None
    health_goals: List[str] = []
    medical_conditions: List[str] = []
    current_medications: List[str] = []
    allergies: List[str] = []
    dietary_preferences: List[str] = []
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HealthProfileUpdate(BaseModel):
    """Partial update; omitted fields are left untouched."""
    display_name: Optional[str] = Field(None, max_length=255)
    height_cm: Optional[float] = Field(None, gt=0, lt=300)
    weight_kg: Optional[float] = Field(None, gt=0, lt=700)
    activity_level: Optional[str] = Field(None, max_length=50)
    sleep_goal: Optional[str] = Field(None, max_length=50)
    health_goals: Optional[List[str]] = None
    medical_conditions: Optional[List[str]] = None
    current_medications: Optional[List[str]] = None
    allergies: Optional[List[str]] = None
    dietary_preferences: Optional[List[str]] = None
