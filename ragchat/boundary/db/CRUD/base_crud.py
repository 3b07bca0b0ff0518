"""
Base CRUD operations for SQLAlchemy models.

Provides the generic bulk-create, scan and count operations that
model-specific CRUD classes inherit. Rows are append-only, so there is no
update or delete here.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ragchat.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create_many(
        self,
        session: AsyncSession,
        rows: Sequence[dict[str, Any]],
    ) -> list[ModelT]:
        """
        Add several records in the caller's transaction.

        Args:
            session: Async database session
            rows: Field values, one dict per record

        Returns:
            Created model instances with generated IDs
        """
        instances = [self.model(**row) for row in rows]
        session.add_all(instances)
        await session.flush()
        return instances

    async def get_all(self, session: AsyncSession) -> Sequence[ModelT]:
        """
        Retrieve every record in primary-key order.

        Args:
            session: Async database session

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).order_by(self.model.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count(self, session: AsyncSession) -> int:
        """
        Count records.

        Args:
            session: Async database session

        Returns:
            Number of rows in the model's table
        """
        stmt = select(func.count()).select_from(self.model)
        result = await session.execute(stmt)
        return result.scalar_one()
