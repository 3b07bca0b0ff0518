"""
External provider boundary.

HTTP clients for the embedding and chat-completion providers.

Dependencies: httpx
System role: Outbound provider adapters
"""

from ragchat.boundary.providers.chat_client import ChatCompletionClient, Completion
from ragchat.boundary.providers.embedding_client import EmbeddingClient
from ragchat.boundary.providers.http import bearer_headers, create_http_client

__all__ = [
    "ChatCompletionClient",
    "Completion",
    "EmbeddingClient",
    "bearer_headers",
    "create_http_client",
]
