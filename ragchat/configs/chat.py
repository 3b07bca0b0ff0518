"""
Chat request bounds.

Dependencies: pydantic, pydantic_settings
System role: Validation limits for chat requests
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChatSettings(BaseSettings):
    """Accepted ranges for optional chat request fields."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_",
        case_sensitive=False,
        extra="ignore",
    )

    temperature_min: float = Field(default=0.0, description="Lowest accepted temperature")
    temperature_max: float = Field(default=2.0, description="Highest accepted temperature")
    max_tokens_max: int = Field(default=8192, description="Largest accepted maxTokens")
