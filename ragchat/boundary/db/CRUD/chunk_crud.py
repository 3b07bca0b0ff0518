"""
Chunk CRUD operations.

Dependencies: sqlalchemy, ragchat.boundary.db.models.chunk_model
System role: Chunk persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ragchat.boundary.db.CRUD.base_crud import BaseCRUD
from ragchat.boundary.db.models.chunk_model import ChunkModel


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """CRUD operations for ChunkModel."""

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    async def get_dimension(self, session: AsyncSession) -> int | None:
        """
        Return the embedding dimension of the stored corpus.

        Args:
            session: Async database session

        Returns:
            Dimension of the first stored row, None when the table is empty
        """
        stmt = select(ChunkModel.dimension).order_by(ChunkModel.id).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


chunk_crud = ChunkCRUD()
