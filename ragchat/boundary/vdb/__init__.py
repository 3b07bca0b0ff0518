"""
Vector database boundary layer.

Provides the vector store abstraction and its SQL flat-table implementation.

Dependencies: sqlalchemy, ragchat.boundary.db
System role: Vector store adapter for RAG retrieval
"""

from ragchat.boundary.vdb.sql_vector_store import SQLVectorStore
from ragchat.boundary.vdb.vector_schemas import VectorSearchResult
from ragchat.boundary.vdb.vector_store import VectorStore

__all__ = [
    "SQLVectorStore",
    "VectorSearchResult",
    "VectorStore",
]
