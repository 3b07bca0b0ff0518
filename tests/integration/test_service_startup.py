"""
Test suite for ServiceCache startup against an in-memory database.

System role: Verification of resource initialization
"""

import logging

import httpx

from ragchat.api.deps import ServiceCache
from ragchat.models.chunk import ChunkCreate

DEPS_LOGGER = "ragchat.api.deps.dependencies"


def store_ready_record(caplog) -> logging.LogRecord:
    return next(r for r in caplog.records if r.name == DEPS_LOGGER and "Chunk store ready" in r.getMessage())


class TestServiceCacheStartup:
    """Test suite for ServiceCache.startup()."""

    async def test_startup_should_log_empty_store(self, settings, fake_provider, caplog):
        # Arrange
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_provider))
        services = ServiceCache(settings, http_client=http_client)
        caplog.set_level(logging.INFO, logger=DEPS_LOGGER)

        # Act
        try:
            await services.startup()
        finally:
            await services.aclose()

        # Assert
        record = store_ready_record(caplog)
        assert record.chunks == 0
        assert record.dimension is None

    async def test_restart_should_log_existing_corpus(self, settings, fake_provider, caplog):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_provider))
        services = ServiceCache(settings, http_client=http_client)
        try:
            await services.startup()
            await services.vector_store.insert_batch(
                [ChunkCreate(source="doc1", chunk_index=0, content="alpha", embedding=[1.0, 0.0, 0.0])]
            )
            caplog.clear()
            caplog.set_level(logging.INFO, logger=DEPS_LOGGER)

            await services.startup()
        finally:
            await services.aclose()

        record = store_ready_record(caplog)
        assert (record.chunks, record.dimension) == (1, 3)
