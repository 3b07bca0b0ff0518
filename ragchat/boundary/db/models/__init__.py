"""
Database models package.

Exports:
  - ChunkModel: Embedded chunk ORM model

Dependencies: sqlalchemy, ragchat.boundary.db.base
System role: Database model definitions for domain entities
"""

from ragchat.boundary.db.models.chunk_model import ChunkModel

__all__ = ["ChunkModel"]
