"""
Aggregate settings object handed to the service container.

Each section reads its own environment prefix (DEEPSEEK_, EMBEDDING_, RAG_,
RAG_DB_); the server fields come from ``BaseSettings``.

Dependencies: pydantic, ragchat.configs section modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from ragchat.configs.base import BaseSettings
from ragchat.configs.chat import ChatSettings
from ragchat.configs.database import DatabaseSettings
from ragchat.configs.embedding import EmbeddingSettings
from ragchat.configs.provider import ProviderSettings
from ragchat.configs.rag import RagSettings


class Settings(BaseSettings):
    """Everything the process needs, grouped by concern."""

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    rag: RagSettings = Field(default_factory=RagSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)


@lru_cache
def get_settings() -> Settings:
    """Read the environment once per process and reuse the result."""
    return Settings()
