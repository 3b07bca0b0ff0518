"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components:
chunking, cosine retrieval and prompt assembly.
"""

from ragchat.core.exceptions import (
    RagChatException,
    BadRequestError,
    MissingConfigurationError,
    InvalidConfigurationError,
    EmbeddingUpstreamError,
    EmbeddingResponseInvalidError,
    UpstreamError,
    UpstreamTimeoutError,
    UpstreamResponseInvalidError,
    VectorStoreError,
    EmbeddingDimensionMismatchError,
    InternalError,
    RequestCancelledError,
)
from ragchat.core.chunker import TextChunker
from ragchat.core.retriever import CosineRetriever, cosine_similarity

__all__ = [
    # Exceptions
    "RagChatException",
    "BadRequestError",
    "MissingConfigurationError",
    "InvalidConfigurationError",
    "EmbeddingUpstreamError",
    "EmbeddingResponseInvalidError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "UpstreamResponseInvalidError",
    "VectorStoreError",
    "EmbeddingDimensionMismatchError",
    "InternalError",
    "RequestCancelledError",
    # Business logic
    "TextChunker",
    "CosineRetriever",
    "cosine_similarity",
]
