"""
Cosine-similarity retrieval over stored chunks.

Scores every stored vector against the query (linear scan) and keeps the
best non-negative matches. Callers use retrieve(), so an indexed store can
replace the scan without changing them.

Dependencies: numpy, ragchat.boundary.vdb, ragchat.core.exceptions
System role: RAG retrieval business logic
"""

import logging
from typing import Sequence

import numpy as np

from ragchat.boundary.vdb.vector_schemas import VectorSearchResult
from ragchat.boundary.vdb.vector_store import VectorStore
from ragchat.core.exceptions import EmbeddingDimensionMismatchError
from ragchat.models.chunk import Chunk

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    Args:
        a: First vector
        b: Second vector of the same length

    Returns:
        float: Similarity in [-1, 1]; 0.0 when either vector has zero norm

    Raises:
        EmbeddingDimensionMismatchError: If the vectors differ in length
    """
    if len(a) != len(b):
        raise EmbeddingDimensionMismatchError(expected=len(a), actual=len(b), operation="search")

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    denom = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if denom == 0.0:
        return 0.0
    return float(np.clip(np.dot(va, vb) / denom, -1.0, 1.0))


class CosineRetriever:
    """Top-K retrieval by cosine similarity."""

    def __init__(self, vector_store: VectorStore) -> None:
        """
        Initialize retriever.

        Args:
            vector_store: Store to scan
        """
        self.vector_store = vector_store

    @staticmethod
    def search(
        query_vector: Sequence[float],
        chunks: Sequence[Chunk],
        k: int,
    ) -> list[VectorSearchResult]:
        """
        Rank chunks against a query vector.

        Negative similarities are dropped rather than ranked low. Sorting
        is stable, so equal scores keep scan order.

        Args:
            query_vector: Query embedding
            chunks: Candidate chunks
            k: Maximum number of results

        Returns:
            list[VectorSearchResult]: Up to k results, scores non-increasing
        """
        if k <= 0:
            return []

        scored = []
        for chunk in chunks:
            score = cosine_similarity(query_vector, chunk.embedding)
            if score >= 0:
                scored.append(VectorSearchResult(chunk=chunk, similarity_score=score))

        scored.sort(key=lambda result: result.similarity_score, reverse=True)
        return scored[:k]

    async def retrieve(self, query_vector: Sequence[float], k: int) -> list[VectorSearchResult]:
        """
        Retrieve the k most similar stored chunks.

        Args:
            query_vector: Query embedding
            k: Maximum number of results

        Returns:
            list[VectorSearchResult]: Ranked results
        """
        chunks = await self.vector_store.scan_all()
        results = self.search(query_vector, chunks, k)
        logger.info(
            f"{__name__}:retrieve - Scored {len(chunks)} chunks, kept {len(results)}",
            extra={"scanned": len(chunks), "returned": len(results), "top_k": k},
        )
        return results
