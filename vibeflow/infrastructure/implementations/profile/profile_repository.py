"""SQL implementation of HealthProfileRepository."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.profile.profile import HealthProfile
from vibeflow.domain.profile.profile_repo import HealthProfileRepository


class SqlHealthProfileRepository(HealthProfileRepository):
    """SQL implementation of HealthProfileRepository using raw SQL queries."""

    async def get_profile(self, user_id: UUID, session: AsyncSession) -> Optional[HealthProfile]:
        """Get health profile for a user."""
        result = await session.execute(
            text("SELECT * FROM health_profiles WHERE user_id = :user_id"),
            {"user_id": user_id}
        )
        row = result.first()

        if not row:
            return None

        return HealthProfile(
            user_id=row.user_id,
            display_name=row.display_name,
            height_cm=row.height_cm,
            weight_kg=row.weight_kg,
            activity_level=row.activity_level,
            sleep_goal=row.sleep_goal,
            health_goals=list(row.health_goals or []),
            medical_conditions=list(row.medical_conditions or []),
            current_medications=list(row.current_medications or []),
            allergies=list(row.allergies or []),
            dietary_preferences=list(row.dietary_preferences or []),
            updated_at=row.updated_at,
        )

    async def upsert_profile(self, profile: HealthProfile, session: AsyncSession) -> HealthProfile:
        """Insert the profile or overwrite the existing row for the same user."""
        await session.execute(
            text("""
                INSERT INTO health_profiles
                (user_id, display_name, height_cm, weight_kg, activity_level, sleep_goal,
                 health_goals, medical_conditions, current_medications, allergies,
                 dietary_preferences, updated_at)
                VALUES (:user_id, :display_name, :height_cm, :weight_kg, :activity_level, :sleep_goal,
                        :health_goals, :medical_conditions, :current_medications, :allergies,
                        :dietary_preferences, :updated_at)
                ON CONFLICT (user_id) DO UPDATE SET
                    display_name = EXCLUDED.display_name,
                    height_cm = EXCLUDED.height_cm,
                    weight_kg = EXCLUDED.weight_kg,
                    activity_level = EXCLUDED.activity_level,
                    sleep_goal = EXCLUDED.sleep_goal,
                    health_goals = EXCLUDED.health_goals,
                    medical_conditions = EXCLUDED.medical_conditions,
                    current_medications = EXCLUDED.current_medications,
                    allergies = EXCLUDED.allergies,
                    dietary_preferences = EXCLUDED.dietary_preferences,
                    updated_at = EXCLUDED.updated_at
            """),
            {
                "user_id": profile.user_id,
                "display_name": profile.display_name,
                "height_cm": profile.height_cm,
                "weight_kg": profile.weight_kg,
                "activity_level": profile.activity_level,
                "sleep_goal": profile.sleep_goal,
                "health_goals": profile.health_goals,
                "medical_conditions": profile.medical_conditions,
                "current_medications": profile.current_medications,
                "allergies": profile.allergies,
                "dietary_preferences": profile.dietary_preferences,
                "updated_at": profile.updated_at,
            }
        )
        await session.commit()
        return profile
