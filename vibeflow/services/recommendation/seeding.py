"""Idempotent seeding of the default recommendation catalog."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.recommendation.repo import RecommendationRepository
from vibeflow.services.recommendation.defaults import default_catalog_rows

logger = logging.getLogger(__name__)


class RecommendationSeeder:
    """Fills an empty catalog with the default content; safe to call repeatedly."""

    def __init__(
        self,
        recommendation_repo: RecommendationRepository,
        rows: Optional[List[Dict[str, Any]]] = None
    ):
        self._repo = recommendation_repo
        self._rows = rows if rows is not None else default_catalog_rows()

    async def ensure_defaults(self, session: AsyncSession) -> bool:
        """Return True when the catalog is (now) populated; never raises."""
        try:
            inserted = await self._repo.insert_catalog_if_empty(self._rows, session)
        except Exception as e:
            logger.error(f"Error adding default recommendations: {e}")
            try:
                await session.rollback()
            except Exception as rollback_error:
                logger.warning(f"Rollback after failed seed also failed: {rollback_error}")
            return False

        if inserted:
            logger.info(f"Added {inserted} default recommendations")
        else:
            logger.debug("Recommendations already exist, skipping defaults")
        return True
