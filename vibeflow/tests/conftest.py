# vibeflow/tests/conftest.py
import logging
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from vibeflow.domain.ports.notifier import NotificationPort
from vibeflow.infrastructure.implementations.mood.rds_mood_repository import RDSMoodRepository
from vibeflow.infrastructure.implementations.recommendation.rds_recommendation_repository import (
    RDSRatingRepository,
    RDSRecommendationRepository,
)
from vibeflow.services.recommendation.seeding import RecommendationSeeder
from vibeflow.services.recommendation.service import RecommendationService

for name in (
    "asyncio",
    "sqlalchemy.pool",
    "sqlalchemy.engine.Engine",
):
    logging.getLogger(name).setLevel(logging.WARNING)

logging.getLogger("vibeflow").setLevel(logging.INFO)


@pytest.fixture
def db_session():
    """Stand-in AsyncSession; repositories are mocked so it is never queried."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def session_factory(db_session):
    @asynccontextmanager
    async def _factory():
        yield db_session
    return _factory


@pytest.fixture
def mock_recommendation_repo():
    repo = AsyncMock(spec=RDSRecommendationRepository)
    repo.has_any.return_value = True
    repo.find_matching.return_value = []
    repo.list_general.return_value = []
    return repo


@pytest.fixture
def mock_rating_repo():
    repo = AsyncMock(spec=RDSRatingRepository)
    repo.list_ratings_by_user.return_value = []
    return repo


@pytest.fixture
def mock_mood_repo():
    repo = AsyncMock(spec=RDSMoodRepository)
    repo.list_entries_by_user.return_value = []
    return repo


@pytest.fixture
def mock_seeder():
    seeder = AsyncMock(spec=RecommendationSeeder)
    seeder.ensure_defaults.return_value = True
    return seeder


@pytest.fixture
def mock_notifier():
    return MagicMock(spec=NotificationPort)


@pytest_asyncio.fixture
async def recommendation_service(mock_recommendation_repo, mock_seeder, mock_notifier, session_factory):
    return RecommendationService(
        mock_recommendation_repo,
        mock_seeder,
        mock_notifier,
        session_factory=session_factory,
        fallback_limit=20,
    )
