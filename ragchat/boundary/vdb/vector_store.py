"""
Vector store interface.

Retrieval code depends on this abstraction only, so the flat row store can
later be replaced by an indexed nearest-neighbour store.

Dependencies: abc, ragchat.models.chunk
System role: Storage contract for embedded chunks
"""

from abc import ABC, abstractmethod
from typing import Sequence

from ragchat.models.chunk import Chunk, ChunkCreate


class VectorStore(ABC):
    """Abstract interface for chunk persistence."""

    @abstractmethod
    async def insert_batch(self, chunks: Sequence[ChunkCreate]) -> int:
        """
        Persist chunks atomically: all rows land or none do.

        Args:
            chunks: Chunks of one ingest call, in chunker order

        Returns:
            Number of rows inserted

        Raises:
            EmbeddingDimensionMismatchError: If vector lengths would mix in the corpus
            VectorStoreError: If the write fails
        """
        pass

    @abstractmethod
    async def scan_all(self) -> list[Chunk]:
        """
        Return every stored chunk with its vector, in insertion order.

        Raises:
            VectorStoreError: If the read fails
        """
        pass
