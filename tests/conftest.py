"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory chunk database, provider settings, a fake
OpenAI-compatible provider served through httpx.MockTransport
Dependencies: pytest, pytest-asyncio, httpx, sqlalchemy
System role: Test infrastructure and fixture management
"""

import json
from typing import Any, Callable

import httpx
import pytest

from ragchat.configs import (
    ChatSettings,
    DatabaseSettings,
    EmbeddingSettings,
    ProviderSettings,
    RagSettings,
    Settings,
)

PROVIDER_URL = "https://llm.test"
KEYWORDS = ("alpha", "beta", "gamma")


def keyword_embedding(text: str) -> list[float]:
    """Deterministic embedding: keyword counts, so similar texts share directions."""
    lowered = text.lower()
    return [float(lowered.count(word)) for word in KEYWORDS]


class FakeProvider:
    """
    In-process stand-in for an OpenAI-compatible provider.

    Serves /embeddings and /chat/completions and records every request body.
    Tests replace ``embedding_handler`` or ``chat_handler`` to inject failures.
    """

    def __init__(self, answer: str = "Test answer") -> None:
        self.answer = answer
        self.embedding_requests: list[dict[str, Any]] = []
        self.chat_requests: list[dict[str, Any]] = []
        self.embedding_handler: Callable[[dict[str, Any]], Any] | None = None
        self.chat_handler: Callable[[dict[str, Any]], Any] | None = None

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content or b"{}")
        if request.url.path.endswith("/embeddings"):
            self.embedding_requests.append(body)
            if self.embedding_handler is not None:
                return await _maybe_await(self.embedding_handler(body))
            return httpx.Response(
                200,
                json={"data": [{"embedding": keyword_embedding(body["input"])}]},
            )
        if request.url.path.endswith("/chat/completions"):
            self.chat_requests.append(body)
            if self.chat_handler is not None:
                return await _maybe_await(self.chat_handler(body))
            return httpx.Response(
                200,
                json={"choices": [{"message": {"role": "assistant", "content": self.answer}}]},
            )
        return httpx.Response(404, text="not found")


async def _maybe_await(value):
    if hasattr(value, "__await__"):
        return await value
    return value


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Provide a fresh fake provider."""
    return FakeProvider()


@pytest.fixture
async def http_client(fake_provider: FakeProvider):
    """Provide an httpx client routed to the fake provider."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_provider))
    yield client
    await client.aclose()


@pytest.fixture
def provider_settings() -> ProviderSettings:
    """Provide provider settings pointing at the fake provider."""
    return ProviderSettings(
        api_key="test-key",
        base_url=PROVIDER_URL,
        model="test-model",
        timeout_ms=2000,
        system_prompt="You are a test assistant.",
    )


@pytest.fixture
def embedding_settings() -> EmbeddingSettings:
    """Provide embedding settings inheriting endpoint and key from the provider."""
    return EmbeddingSettings(base_url=None, api_key=None, model="test-embed", timeout_ms=2000)


@pytest.fixture
def settings(provider_settings: ProviderSettings, embedding_settings: EmbeddingSettings) -> Settings:
    """Provide application settings backed by an in-memory database."""
    return Settings(
        database=DatabaseSettings(path=":memory:"),
        provider=provider_settings,
        embedding=embedding_settings,
        rag=RagSettings(chunk_max_chars=800, chunk_overlap_chars=120, top_k=4, max_top_k=10),
        chat=ChatSettings(),
    )


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine with the chunk table.

    Yields:
        AsyncEngine: Engine disposed after the test
    """
    from ragchat.boundary.db import create_all_tables, get_async_engine

    engine = get_async_engine(DatabaseSettings(path=":memory:"))
    await create_all_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_async_engine):
    """Provide a session factory bound to the in-memory engine."""
    from ragchat.boundary.db import get_async_session_factory

    return get_async_session_factory(test_async_engine)


@pytest.fixture
def vector_store(session_factory):
    """Provide an SQLVectorStore over the in-memory database."""
    from ragchat.boundary.vdb import SQLVectorStore

    return SQLVectorStore(session_factory)
