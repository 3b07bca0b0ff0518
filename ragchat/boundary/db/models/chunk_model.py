"""
Chunk ORM model.

Flat row store of embedded chunks: one row per chunk, vector persisted as
JSON text alongside its dimension.

Dependencies: sqlalchemy, ragchat.boundary.db.base
System role: Chunk persistence for retrieval
"""

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ragchat.boundary.db.base import Base, CreatedAtMixin


class ChunkModel(Base, CreatedAtMixin):
    """
    Chunk ORM model.

    Rows are inserted in batches by one ingest call and never updated.
    (source, chunk_index) is not unique: re-ingesting a source appends a
    new version of its chunks.

    Attributes:
        id: Autoincrement primary key, referenced by citations
        source: Originating document identifier
        chunk_index: Zero-based ordinal within the ingest batch
        content: Chunk text
        embedding_json: Embedding vector serialized as a JSON array
        dimension: Length of the embedding vector
        created_at: Ingestion timestamp (UTC)
    """

    __tablename__ = "rag_chunks"
    __table_args__ = (Index("idx_rag_chunks_source", "source"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    source: Mapped[str] = mapped_column(Text, nullable=False)
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    embedding_json: Mapped[str] = mapped_column(Text, nullable=False)
    dimension: Mapped[int] = mapped_column(Integer, nullable=False)
