"""Tests for the chat service and its LLM adapters."""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import httpx
import pytest
import pytest_asyncio

from vibeflow.domain.ports.text_generation import ChatProviderError, TextGenerator
from vibeflow.domain.profile.profile import HealthProfile
from vibeflow.domain.profile.profile_repo import HealthProfileRepository
from vibeflow.infrastructure.llm.gemini_llm import GeminiLLM
from vibeflow.infrastructure.llm.openai_llm import OpenAILLM
from vibeflow.services.chat.service import FALLBACK_REPLY, ChatService
from vibeflow.tests.factories import make_entry


@pytest_asyncio.fixture
async def providers():
    gemini = AsyncMock(spec=TextGenerator)
    gemini.generate_response.return_value = "Try a glass of water and a short walk."
    openai = AsyncMock(spec=TextGenerator)
    openai.generate_response.return_value = "Take five slow breaths."
    return {"gemini": gemini, "openai": openai}


@pytest_asyncio.fixture
async def profile_repo():
    repo = AsyncMock(spec=HealthProfileRepository)
    repo.get_profile.return_value = None
    return repo


@pytest_asyncio.fixture
async def chat_service(providers, profile_repo):
    return ChatService(providers, profile_repo)


def _context_of(provider):
    user_message = provider.generate_response.await_args.args[0][1]["content"]
    payload = user_message.split("User context:\n", 1)[1].split("\n\nUser's message:", 1)[0]
    return json.loads(payload)


class TestReply:
    @pytest.mark.asyncio
    async def test_defaults_to_gemini(self, chat_service, providers, db_session):
        reply = await chat_service.reply(uuid4(), "I feel drained", db_session)

        assert reply.provider == "gemini"
        assert reply.response == "Try a glass of water and a short walk."
        providers["openai"].generate_response.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_session_mood_overrides_request_mood(self, chat_service, providers, db_session):
        current = make_entry("stressed", "low", note="deadline")

        await chat_service.reply(
            uuid4(), "help", db_session, ai_provider="openai", current_mood=current, mood="happy"
        )

        context = _context_of(providers["openai"])
        assert context["mood"] == "stressed"
        assert context["energy"] == "low"
        assert context["moodNote"] == "deadline"
        assert context["moodEmoji"] == "😰"

    @pytest.mark.asyncio
    async def test_request_mood_used_without_session(self, chat_service, providers, db_session):
        await chat_service.reply(uuid4(), "hi", db_session, mood="calm", mood_emoji="🌊")

        context = _context_of(providers["gemini"])
        assert (context["mood"], context["energy"], context["moodEmoji"]) == ("calm", "medium", "🌊")

    @pytest.mark.asyncio
    async def test_health_profile_in_context(self, chat_service, providers, profile_repo, db_session):
        user_id = uuid4()
        profile_repo.get_profile.return_value = HealthProfile(
            user_id=user_id, activity_level="active", allergies=["peanuts"]
        )

        await chat_service.reply(user_id, "snack ideas?", db_session)

        context = _context_of(providers["gemini"])
        assert context["activityLevel"] == "active"
        assert context["allergies"] == ["peanuts"]

    @pytest.mark.asyncio
    async def test_profile_error_does_not_block_reply(self, chat_service, profile_repo, db_session):
        profile_repo.get_profile.side_effect = RuntimeError("db down")

        reply = await chat_service.reply(uuid4(), "hello", db_session)

        assert reply.response

    @pytest.mark.asyncio
    @pytest.mark.parametrize("message", ["", "   "])
    async def test_empty_message_rejected(self, chat_service, providers, db_session, message):
        with pytest.raises(ValueError):
            await chat_service.reply(uuid4(), message, db_session)
        providers["gemini"].generate_response.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_provider_rejected(self, chat_service, db_session):
        with pytest.raises(ValueError):
            await chat_service.reply(uuid4(), "hi", db_session, ai_provider="claude")

    @pytest.mark.asyncio
    async def test_provider_failure_surfaces(self, chat_service, providers, db_session):
        providers["gemini"].generate_response.side_effect = TimeoutError("slow")

        with pytest.raises(ChatProviderError):
            await chat_service.reply(uuid4(), "hi", db_session)

    @pytest.mark.asyncio
    async def test_empty_provider_text_gets_apology(self, chat_service, providers, db_session):
        providers["gemini"].generate_response.return_value = "  "

        reply = await chat_service.reply(uuid4(), "hi", db_session)

        assert reply.response == FALLBACK_REPLY


class TestGeminiAdapter:
    MESSAGES = [{"role": "system", "content": "be kind"}, {"role": "user", "content": "hello"}]

    @pytest.mark.asyncio
    async def test_posts_folded_prompt_and_reads_text(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["key"] = request.headers["x-goog-api-key"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "hi there"}]}}]})

        llm = GeminiLLM("key-123", "gemini-pro", transport=httpx.MockTransport(handler))

        assert await llm.generate_response(self.MESSAGES) == "hi there"
        assert seen["url"].endswith("/models/gemini-pro:generateContent")
        assert seen["key"] == "key-123"
        assert seen["body"]["contents"] == [{"parts": [{"text": "be kind\n\nhello"}]}]

    @pytest.mark.asyncio
    async def test_http_error_raises_provider_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "boom"}))
        llm = GeminiLLM("key", "gemini-pro", transport=transport)

        with pytest.raises(ChatProviderError):
            await llm.generate_response(self.MESSAGES)

    @pytest.mark.asyncio
    async def test_unexpected_payload_returns_empty(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"candidates": []}))
        llm = GeminiLLM("key", "gemini-pro", transport=transport)

        assert await llm.generate_response(self.MESSAGES) == ""

    @pytest.mark.asyncio
    async def test_missing_key(self):
        with pytest.raises(ChatProviderError):
            await GeminiLLM("", "gemini-pro").generate_response(self.MESSAGES)


class TestOpenAIAdapter:
    @pytest.mark.asyncio
    async def test_returns_first_choice(self):
        llm = OpenAILLM("sk-test", "gpt-4o-mini")
        client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=AsyncMock())))
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="breathe"))]
        )
        llm._client = client

        assert await llm.generate_response([{"role": "user", "content": "hi"}]) == "breathe"
        assert client.chat.completions.create.await_args.kwargs["model"] == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_missing_key(self):
        with pytest.raises(ChatProviderError):
            await OpenAILLM("", "gpt-4o-mini").generate_response([{"role": "user", "content": "hi"}])
