"""
Ingest service for document indexing.

Orchestrates the ingestion flow: chunk the text, embed each chunk in
order, then write the whole batch in one transaction. Nothing is stored
when any embedding call fails.

Dependencies: ragchat.core, ragchat.boundary.providers, ragchat.boundary.vdb
System role: Ingestion orchestration layer
"""

import logging

from ragchat.boundary.providers import EmbeddingClient
from ragchat.boundary.vdb import VectorStore
from ragchat.core.chunker import TextChunker
from ragchat.core.exceptions import BadRequestError, MissingConfigurationError
from ragchat.models.chunk import ChunkCreate

logger = logging.getLogger(__name__)


class IngestService:
    """
    Ingest service for the chunk → embed → store pipeline.

    Embedding calls run sequentially so provider rate limits stay
    predictable and chunk indices follow chunker order.
    """

    def __init__(
        self,
        chunker: TextChunker,
        embedding_client: EmbeddingClient,
        vector_store: VectorStore,
    ) -> None:
        """
        Initialize ingest service.

        Args:
            chunker: Text chunker
            embedding_client: Embedding provider client
            vector_store: Destination store
        """
        self.chunker = chunker
        self.embedding_client = embedding_client
        self.vector_store = vector_store

    async def ingest(self, source: str, text: str, request_id: str) -> int:
        """
        Chunk, embed and store one document.

        Args:
            source: Document identifier stored with every chunk
            text: Raw document text
            request_id: Correlation id for log lines

        Returns:
            int: Number of chunks stored

        Raises:
            BadRequestError: If source or text is blank
            MissingConfigurationError: If no API key is configured
            EmbeddingUpstreamError: If an embedding call fails
            EmbeddingResponseInvalidError: If an embedding response is malformed
            VectorStoreError: If the batch cannot be written
        """
        if not source.strip():
            raise BadRequestError("source must not be blank", field="source")
        if not text.strip():
            raise BadRequestError("text must not be blank", field="text")
        if not self.embedding_client.api_key:
            raise MissingConfigurationError("DEEPSEEK_API_KEY")

        contents = self.chunker.chunk(text)
        logger.info(
            f"[{request_id}] {__name__}:ingest - Chunked source={source} into {len(contents)} chunks",
            extra={"request_id": request_id, "source": source, "chunk_count": len(contents)},
        )

        chunks = []
        for index, content in enumerate(contents):
            embedding = await self.embedding_client.embed(content, request_id)
            chunks.append(
                ChunkCreate(
                    source=source,
                    chunk_index=index,
                    content=content,
                    embedding=embedding,
                )
            )

        inserted = await self.vector_store.insert_batch(chunks)
        logger.info(
            f"[{request_id}] {__name__}:ingest - Stored {inserted} chunks for source={source}",
            extra={"request_id": request_id, "source": source, "inserted": inserted},
        )
        return inserted
