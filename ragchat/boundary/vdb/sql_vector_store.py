"""
SQL-backed flat vector store.

Stores one row per chunk with its vector as JSON text. Inserts are wrapped
in one transaction per batch; reads are a full scan.

Dependencies: sqlalchemy, ragchat.boundary.db, ragchat.core.exceptions
System role: Durable chunk storage for retrieval
"""

import json
import logging
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from ragchat.boundary.db.CRUD import chunk_crud
from ragchat.boundary.db.models import ChunkModel
from ragchat.boundary.vdb.vector_store import VectorStore
from ragchat.core.exceptions import EmbeddingDimensionMismatchError, VectorStoreError
from ragchat.models.chunk import Chunk, ChunkCreate

logger = logging.getLogger(__name__)


class SQLVectorStore(VectorStore):
    """Flat row store over SQLAlchemy (SQLite in production)."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """
        Initialize store.

        Args:
            session_factory: Factory from get_async_session_factory()
        """
        self._session_factory = session_factory

    async def insert_batch(self, chunks: Sequence[ChunkCreate]) -> int:
        if not chunks:
            return 0

        dimension = len(chunks[0].embedding)
        for chunk in chunks:
            if len(chunk.embedding) != dimension:
                raise EmbeddingDimensionMismatchError(
                    expected=dimension,
                    actual=len(chunk.embedding),
                    operation="insert",
                )

        created_at = datetime.now(timezone.utc)
        rows = [
            {
                "source": chunk.source,
                "chunk_index": chunk.chunk_index,
                "content": chunk.content,
                "embedding_json": json.dumps(chunk.embedding),
                "dimension": dimension,
                "created_at": created_at,
            }
            for chunk in chunks
        ]

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    stored_dimension = await chunk_crud.get_dimension(session)
                    if stored_dimension is not None and stored_dimension != dimension:
                        raise EmbeddingDimensionMismatchError(
                            expected=stored_dimension,
                            actual=dimension,
                            operation="insert",
                        )
                    await chunk_crud.create_many(session, rows)
        except SQLAlchemyError as e:
            raise VectorStoreError(
                message="Failed to insert chunk batch",
                operation="insert",
                details={"error": str(e), "chunk_count": len(rows)},
            ) from e

        logger.info(
            f"{__name__}:insert_batch - Inserted {len(rows)} chunks",
            extra={"source": chunks[0].source, "chunk_count": len(rows), "dimension": dimension},
        )
        return len(rows)

    async def scan_all(self) -> list[Chunk]:
        try:
            async with self._session_factory() as session:
                rows = await chunk_crud.get_all(session)
        except SQLAlchemyError as e:
            raise VectorStoreError(
                message="Failed to scan chunks",
                operation="scan",
                details={"error": str(e)},
            ) from e

        chunks = []
        for row in rows:
            chunk = self._to_chunk(row)
            if chunk is not None:
                chunks.append(chunk)
        return chunks

    async def dimension(self) -> int | None:
        """Embedding length shared by the stored corpus, None while empty."""
        async with self._session_factory() as session:
            return await chunk_crud.get_dimension(session)

    async def count(self) -> int:
        """Number of stored chunk rows."""
        async with self._session_factory() as session:
            return await chunk_crud.count(session)

    @staticmethod
    def _to_chunk(row: ChunkModel) -> Chunk | None:
        """Decode one row; rows with an unreadable vector cannot be scored and are skipped."""
        try:
            embedding = json.loads(row.embedding_json)
            return Chunk(
                id=row.id,
                source=row.source,
                chunk_index=row.chunk_index,
                content=row.content,
                embedding=embedding,
                created_at=row.created_at,
            )
        except ValueError as e:
            logger.warning(
                f"{__name__}:_to_chunk - Skipping chunk with unreadable embedding",
                extra={"chunk_id": row.id, "error": str(e)},
            )
            return None
