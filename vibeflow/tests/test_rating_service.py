from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from vibeflow.domain.ports.notifier import UserNotification
from vibeflow.domain.profile.profile import HealthProfile
from vibeflow.domain.profile.profile_repo import HealthProfileRepository
from vibeflow.domain.recommendation.entities import RecommendationRating, is_liked, rating_for
from vibeflow.infrastructure.notifications.inbox_notifier import InboxNotifier
from vibeflow.services.profile.service import HealthProfileService
from vibeflow.services.rating.service import RatingProgress, RatingService


class TestRatingProgress:
    @pytest.mark.asyncio
    async def test_progress_percentages(self, mock_rating_repo, mock_recommendation_repo, db_session):
        mock_recommendation_repo.count.return_value = 8
        mock_rating_repo.count_liked.return_value = 2
        mock_rating_repo.count_completed.return_value = 1
        service = RatingService(mock_rating_repo, mock_recommendation_repo)

        progress = await service.get_progress(uuid4(), db_session)

        assert progress.liked_percentage == 25
        assert progress.completed_percentage == 12  # round(12.5) -> banker's rounding

    def test_empty_catalog_is_zero_percent(self):
        progress = RatingProgress(total_recommendations=0, liked_count=0, completed_count=0)
        assert (progress.liked_percentage, progress.completed_percentage) == (0, 0)


class TestLikedDerivation:
    def test_like_writes_top_grade_and_unlike_clears(self):
        assert rating_for(True) == 5
        assert rating_for(False) is None

    @pytest.mark.parametrize("rating,expected", [(None, False), (0, False), (1, True), (5, True)])
    def test_any_positive_grade_counts_as_liked(self, rating, expected):
        assert is_liked(rating) is expected
        assert RecommendationRating(rating=rating).liked is expected


class TestInboxNotifier:
    def test_drain_returns_each_notification_once(self):
        notifier = InboxNotifier()
        notifier.notify("u1", UserNotification(title="A", description=""))
        notifier.notify("u2", UserNotification(title="B", description=""))

        assert [n.title for n in notifier.drain("u1")] == ["A"]
        assert notifier.drain("u1") == []
        assert [n.title for n in notifier.drain("u2")] == ["B"]

    def test_keeps_only_newest(self):
        notifier = InboxNotifier(max_per_user=2)
        for title in ("one", "two", "three"):
            notifier.notify("u", UserNotification(title=title, description=""))

        assert [n.title for n in notifier.drain("u")] == ["two", "three"]


class TestHealthProfileService:
    @pytest.mark.asyncio
    async def test_missing_profile_reads_as_empty(self, db_session):
        repo = AsyncMock(spec=HealthProfileRepository)
        repo.get_profile.return_value = None
        user_id = uuid4()

        profile = await HealthProfileService(repo).get_profile(user_id, db_session)

        assert profile.user_id == user_id
        assert profile.allergies == []

    @pytest.mark.asyncio
    async def test_update_merges_into_stored_profile(self, db_session):
        user_id = uuid4()
        repo = AsyncMock(spec=HealthProfileRepository)
        repo.get_profile.return_value = HealthProfile(user_id=user_id, activity_level="low")
        repo.upsert_profile.side_effect = lambda profile, session: profile

        saved = await HealthProfileService(repo).update_profile(
            user_id, {"sleep_goal": "8h", "user_id": uuid4()}, db_session
        )

        assert (saved.activity_level, saved.sleep_goal) == ("low", "8h")
        assert saved.user_id == user_id
