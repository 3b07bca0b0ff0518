"""
CRUD operations for database models.

Usage:
    from ragchat.boundary.db.CRUD import chunk_crud

    rows = await chunk_crud.get_all(db)
"""

from ragchat.boundary.db.CRUD.base_crud import BaseCRUD
from ragchat.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud

__all__ = [
    "BaseCRUD",
    "ChunkCRUD",
    "chunk_crud",
]
