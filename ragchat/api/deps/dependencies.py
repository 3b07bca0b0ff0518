"""
Dependency injection container.

Builds the process-wide resources (engine, HTTP pool, provider clients,
services) once and exposes FastAPI dependency functions over them.

Dependencies: ragchat.configs, ragchat.application, ragchat.boundary
System role: DI container for service injection
"""

import logging

import httpx
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from ragchat.application.services import ChatOrchestrator, IngestService
from ragchat.boundary.db import create_all_tables, get_async_engine, get_async_session_factory
from ragchat.boundary.providers import ChatCompletionClient, EmbeddingClient, create_http_client
from ragchat.boundary.vdb import SQLVectorStore
from ragchat.configs import Settings
from ragchat.core.chunker import TextChunker
from ragchat.core.retriever import CosineRetriever

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for shared service instances, created lazily on first use."""

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize container.

        Args:
            settings: Application settings
            http_client: Optional pre-built HTTP client (tests inject a mock transport)
            engine: Optional pre-built database engine
        """
        self.settings = settings
        self._http_client = http_client
        self._engine = engine
        self._vector_store = None
        self._chunker = None
        self._embedding_client = None
        self._chat_client = None
        self._chat_orchestrator = None
        self._ingest_service = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get shared HTTP client."""
        if self._http_client is None:
            self._http_client = create_http_client()
        return self._http_client

    @property
    def engine(self) -> AsyncEngine:
        """Get database engine."""
        if self._engine is None:
            self._engine = get_async_engine(self.settings.database)
        return self._engine

    @property
    def vector_store(self) -> SQLVectorStore:
        """Get cached vector store."""
        if self._vector_store is None:
            self._vector_store = SQLVectorStore(get_async_session_factory(self.engine))
        return self._vector_store

    @property
    def chunker(self) -> TextChunker:
        """Get cached chunker."""
        if self._chunker is None:
            self._chunker = TextChunker(
                max_chars=self.settings.rag.chunk_max_chars,
                overlap_chars=self.settings.rag.chunk_overlap_chars,
            )
        return self._chunker

    @property
    def embedding_client(self) -> EmbeddingClient:
        """Get cached embedding client."""
        if self._embedding_client is None:
            self._embedding_client = EmbeddingClient(
                provider=self.settings.provider,
                settings=self.settings.embedding,
                http_client=self.http_client,
            )
        return self._embedding_client

    @property
    def chat_client(self) -> ChatCompletionClient:
        """Get cached chat-completion client."""
        if self._chat_client is None:
            self._chat_client = ChatCompletionClient(
                settings=self.settings.provider,
                http_client=self.http_client,
            )
        return self._chat_client

    @property
    def chat_orchestrator(self) -> ChatOrchestrator:
        """Get cached chat orchestrator."""
        if self._chat_orchestrator is None:
            self._chat_orchestrator = ChatOrchestrator(
                embedding_client=self.embedding_client,
                retriever=CosineRetriever(self.vector_store),
                chat_client=self.chat_client,
                rag_settings=self.settings.rag,
                chat_settings=self.settings.chat,
            )
        return self._chat_orchestrator

    @property
    def ingest_service(self) -> IngestService:
        """Get cached ingest service."""
        if self._ingest_service is None:
            self._ingest_service = IngestService(
                chunker=self.chunker,
                embedding_client=self.embedding_client,
                vector_store=self.vector_store,
            )
        return self._ingest_service

    async def startup(self) -> None:
        """Validate configuration and create tables; fails fast on bad chunk settings."""
        _ = self.chunker
        await create_all_tables(self.engine)
        logger.info(
            f"{__name__}:startup - Chunk store ready",
            extra={
                "chunks": await self.vector_store.count(),
                "dimension": await self.vector_store.dimension(),
            },
        )
        if not self.settings.provider.api_key:
            logger.warning(
                f"{__name__}:startup - DEEPSEEK_API_KEY is not set; chat and ingest requests will fail"
            )

    async def aclose(self) -> None:
        """Release the HTTP pool and database connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
        if self._engine is not None:
            await self._engine.dispose()


def get_service_cache(request: Request) -> ServiceCache:
    """Get the container attached to the application at startup."""
    return request.app.state.services


def get_chat_orchestrator(request: Request) -> ChatOrchestrator:
    """
    Get chat orchestrator instance.

    Args:
        request: Current request (used to reach app state)

    Returns:
        ChatOrchestrator: Orchestrator wired to the shared clients and store
    """
    return get_service_cache(request).chat_orchestrator


def get_ingest_service(request: Request) -> IngestService:
    """
    Get ingest service instance.

    Args:
        request: Current request (used to reach app state)

    Returns:
        IngestService: Ingest pipeline wired to the shared clients and store
    """
    return get_service_cache(request).ingest_service
