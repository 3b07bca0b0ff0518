"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from ragchat.configs.chat import ChatSettings
from ragchat.configs.database import DatabaseSettings
from ragchat.configs.embedding import EmbeddingSettings
from ragchat.configs.provider import ProviderSettings
from ragchat.configs.rag import RagSettings
from ragchat.configs.settings import Settings, get_settings

__all__ = [
    "ChatSettings",
    "DatabaseSettings",
    "EmbeddingSettings",
    "ProviderSettings",
    "RagSettings",
    "Settings",
    "get_settings",
]
