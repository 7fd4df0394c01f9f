"""Tests for the per-user mood and recommendation session."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio

from vibeflow.domain.recommendation.entities import Recommendation
from vibeflow.services.mood.session import MoodSession, SessionClosedError
from vibeflow.services.recommendation.service import RecommendationService
from vibeflow.tests.factories import make_entry, make_row


def stored_copy(user_id, entry, session):
    """What the repository hands back: same data, server id."""
    return make_entry(entry.mood, entry.energy, user_id=user_id, note=entry.note)


@pytest_asyncio.fixture
async def mock_fetcher():
    fetcher = AsyncMock(spec=RecommendationService)
    fetcher.fetch_recommendations.return_value = []
    return fetcher


@pytest_asyncio.fixture
async def mood_session(mock_mood_repo, mock_rating_repo, mock_fetcher, session_factory):
    mock_mood_repo.create_entry.side_effect = stored_copy
    return MoodSession(uuid4(), mock_mood_repo, mock_rating_repo, mock_fetcher, session_factory)


class TestLoadHistory:
    @pytest.mark.asyncio
    async def test_current_mood_is_newest_entry(self, mood_session, mock_mood_repo):
        newest, older = make_entry("happy"), make_entry("sad", minutes_ago=30)
        mock_mood_repo.list_entries_by_user.return_value = [newest, older]

        history = await mood_session.load_history()

        assert history == [newest, older]
        assert mood_session.current_mood is newest

    @pytest.mark.asyncio
    async def test_store_error_leaves_empty_history(self, mood_session, mock_mood_repo):
        mock_mood_repo.list_entries_by_user.side_effect = RuntimeError("db down")

        assert await mood_session.load_history() == []
        assert mood_session.current_mood is None
        assert mood_session.is_loading is False


class TestLogMood:
    @pytest.mark.asyncio
    async def test_new_entry_heads_history_and_is_current(self, mood_session, mock_mood_repo):
        mock_mood_repo.list_entries_by_user.return_value = [make_entry("calm", minutes_ago=60)]
        await mood_session.load_history()

        entry = await mood_session.log_mood("happy", "high", note="sunny day")

        assert mood_session.mood_history[0] is entry
        assert mood_session.current_mood is mood_session.mood_history[0]
        assert len(mood_session.mood_history) == 2
        assert entry.mood == "happy" and entry.note == "sunny day"

    @pytest.mark.asyncio
    async def test_stored_record_replaces_placeholder(self, mood_session, mock_mood_repo):
        entry = await mood_session.log_mood("tired", "low")

        placeholder = mock_mood_repo.create_entry.await_args.args[1]
        assert placeholder.client_ref
        assert entry is not placeholder
        assert entry.id != placeholder.id
        assert mood_session.mood_history == [entry]

    @pytest.mark.asyncio
    async def test_persist_failure_keeps_placeholder(self, mood_session, mock_mood_repo, mock_fetcher):
        mock_mood_repo.create_entry.side_effect = RuntimeError("insert failed")

        entry = await mood_session.log_mood("sad", "medium")

        assert entry.client_ref is not None
        assert mood_session.mood_history == [entry]
        mock_fetcher.fetch_recommendations.assert_awaited_once()
        assert mood_session.is_loading is False

    @pytest.mark.asyncio
    async def test_refresh_uses_the_new_mood(self, mood_session, mock_mood_repo, mock_fetcher, db_session):
        mock_mood_repo.list_entries_by_user.return_value = [make_entry("calm", "medium", minutes_ago=5)]
        await mood_session.load_history()
        calm_tea = [make_row("Sip herbal tea", mood_types=["stressed"], energy_levels=["low"])]
        mock_fetcher.fetch_recommendations.return_value = [
            Recommendation(id=str(calm_tea[0]["id"]), title="Sip herbal tea", description="", category="food")
        ]

        await mood_session.log_mood("stressed", "low")

        mood_arg, user_arg, session_arg = mock_fetcher.fetch_recommendations.await_args.args
        assert (mood_arg.mood, mood_arg.energy) == ("stressed", "low")
        assert user_arg == mood_session.user_id
        assert session_arg is db_session
        assert [r.title for r in mood_session.recommendations] == ["Sip herbal tea"]

    @pytest.mark.asyncio
    async def test_is_loading_while_persisting(self, mood_session, mock_mood_repo):
        seen = []

        async def slow_create(user_id, entry, session):
            seen.append(mood_session.is_loading)
            await asyncio.sleep(0)
            return stored_copy(user_id, entry, session)

        mock_mood_repo.create_entry.side_effect = slow_create

        await mood_session.log_mood("calm", "medium")

        assert seen == [True]
        assert mood_session.is_loading is False

    @pytest.mark.asyncio
    async def test_rejects_unknown_mood(self, mood_session, mock_mood_repo):
        with pytest.raises(ValueError):
            await mood_session.log_mood("ecstatic", "high")
        mock_mood_repo.create_entry.assert_not_awaited()
        assert mood_session.mood_history == []

    @pytest.mark.asyncio
    async def test_closed_session_refuses_to_log(self, mood_session):
        mood_session.close()
        with pytest.raises(SessionClosedError):
            await mood_session.log_mood("happy", "high")


class TestGetRecommendations:
    @pytest.mark.asyncio
    async def test_no_mood_clears_list_without_fetching(self, mood_session, mock_fetcher):
        mood_session.recommendations = [Recommendation(id="x", title="X", description="", category="food")]

        assert await mood_session.get_recommendations() == []
        mock_fetcher.fetch_recommendations.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_falls_back_to_history_head(self, mood_session, mock_fetcher):
        head = make_entry("sad", "low")
        mood_session.mood_history = [head]

        await mood_session.get_recommendations()

        assert mock_fetcher.fetch_recommendations.await_args.args[0] is head

    @pytest.mark.asyncio
    async def test_persisted_ratings_are_reconciled(self, mood_session, mock_fetcher, mock_rating_repo):
        liked_id, done_id, plain_id = uuid4(), uuid4(), uuid4()
        mood_session.current_mood = make_entry()
        mock_fetcher.fetch_recommendations.return_value = [
            Recommendation(id=str(i), title=f"T{n}", description="", category="food")
            for n, i in enumerate((liked_id, done_id, plain_id))
        ]
        mock_rating_repo.list_ratings_by_user.return_value = [
            SimpleNamespace(recommendation_id=liked_id, liked=True, completed=None),
            SimpleNamespace(recommendation_id=done_id, liked=False, completed=True),
        ]

        recs = await mood_session.get_recommendations()

        assert [(r.liked, r.completed) for r in recs] == [(True, False), (False, True), (False, False)]

    @pytest.mark.asyncio
    async def test_rating_fetch_error_still_returns_list(self, mood_session, mock_fetcher, mock_rating_repo):
        mood_session.current_mood = make_entry()
        mock_fetcher.fetch_recommendations.return_value = [
            Recommendation(id="default-1", title="Take a short walk", description="", category="activity")
        ]
        mock_rating_repo.list_ratings_by_user.side_effect = RuntimeError("db down")

        recs = await mood_session.get_recommendations()

        assert [r.id for r in recs] == ["default-1"]

    @pytest.mark.asyncio
    async def test_fetch_error_gives_empty_list(self, mood_session, mock_fetcher):
        mood_session.current_mood = make_entry()
        mock_fetcher.fetch_recommendations.side_effect = RuntimeError("boom")

        assert await mood_session.get_recommendations() == []

    @pytest.mark.asyncio
    async def test_closed_session_ignores_late_results(self, mood_session, mock_fetcher):
        mood_session.current_mood = make_entry()

        async def fetch_then_close(mood, user_id, session):
            mood_session.close()
            return [Recommendation(id="late", title="Late", description="", category="food")]

        mock_fetcher.fetch_recommendations.side_effect = fetch_then_close

        assert await mood_session.get_recommendations() == []
        assert mood_session.recommendations == []


def test_mood_frequency_counts_history():
    session = MoodSession(uuid4(), AsyncMock(), AsyncMock(), AsyncMock(), AsyncMock())
    session.mood_history = [make_entry("happy"), make_entry("sad"), make_entry("happy")]

    assert session.mood_frequency() == {"happy": 2, "sad": 1}
