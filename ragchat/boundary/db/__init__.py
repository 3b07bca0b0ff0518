"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), create_all_tables(): Connection management
  - ChunkModel: Embedded chunk entity
  - chunk_crud: CRUD singleton

Dependencies: sqlalchemy, aiosqlite, ragchat.configs
System role: Database adapter providing the flat chunk row store
"""

from ragchat.boundary.db.base import Base, CreatedAtMixin
from ragchat.boundary.db.connection import (
    create_all_tables,
    get_async_engine,
    get_async_session_factory,
)
from ragchat.boundary.db.models import ChunkModel
from ragchat.boundary.db.CRUD import BaseCRUD, ChunkCRUD, chunk_crud

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    # Connection
    "create_all_tables",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ChunkModel",
    # CRUD
    "BaseCRUD",
    "ChunkCRUD",
    "chunk_crud",
]
