"""Health profile domain entity."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from vibeflow.domain.mood.entities import utcnow


@dataclass
class HealthProfile:
    """Self-reported health and lifestyle data used to personalise chat replies."""
    user_id: UUID
    display_name: Optional[str] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    activity_level: Optional[str] = None
    sleep_goal: Optional[str] = None
    health_goals: List[str] = field(default_factory=list)
    medical_conditions: List[str] = field(default_factory=list)
    current_medications: List[str] = field(default_factory=list)
    allergies: List[str] = field(default_factory=list)
    dietary_preferences: List[str] = field(default_factory=list)
    updated_at: datetime = field(default_factory=utcnow)

    def apply_updates(self, updates: Dict[str, Any]) -> None:
        """Overwrite the given fields in-place; unknown keys are ignored."""
        for key, value in updates.items():
            if key in ("user_id", "updated_at") or not hasattr(self, key):
                continue
            setattr(self, key, value)
        self.updated_at = utcnow()

    def to_context(self) -> Dict[str, Any]:
        """Compact dict for prompt context."""
        return {
            "activityLevel": self.activity_level or "moderate",
            "sleepGoal": self.sleep_goal,
            "healthGoals": self.health_goals,
            "conditions": self.medical_conditions,
            "medications": self.current_medications,
            "allergies": self.allergies,
            "dietaryRestrictions": self.dietary_preferences,
        }
