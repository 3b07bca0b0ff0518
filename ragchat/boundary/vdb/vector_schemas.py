"""
Vector search schemas.

Pydantic models for retrieval results.

Dependencies: pydantic, ragchat.models.chunk
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field

from ragchat.models.chunk import Chunk
from ragchat.models.citation import Citation


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    chunk: Chunk = Field(description="Matched stored chunk")
    similarity_score: float = Field(description="Cosine similarity to the query vector")

    def to_citation(self) -> Citation:
        """Project the result onto the public citation shape."""
        return Citation(
            id=self.chunk.id,
            source=self.chunk.source,
            chunk_index=self.chunk.chunk_index,
            score=self.similarity_score,
        )
