"""
Chunk domain models.

Represents a document chunk before and after persistence.

Dependencies: pydantic
System role: Document chunk data structure
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ChunkCreate(BaseModel):
    """Chunk produced by ingestion, ready to be written to the store."""

    source: str = Field(min_length=1, description="Originating document identifier")
    chunk_index: int = Field(ge=0, description="Zero-based ordinal within the source")
    content: str = Field(min_length=1, description="Chunk text content")
    embedding: list[float] = Field(min_length=1, description="Embedding vector")


class Chunk(ChunkCreate):
    """Chunk as persisted in the vector store."""

    id: int = Field(description="Row identifier referenced by citations")
    created_at: datetime = Field(description="Ingestion timestamp (UTC)")

    @property
    def label(self) -> str:
        """Citation label used inside the retrieval context."""
        return f"{self.source}#{self.chunk_index}"
