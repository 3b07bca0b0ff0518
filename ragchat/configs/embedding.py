"""
Embedding provider settings.

Dependencies: pydantic, pydantic_settings
System role: Embedding endpoint configuration
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration (unset values inherit from ProviderSettings)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str | None = Field(default=None, description="Embedding base URL override")
    api_key: str | None = Field(default=None, description="Embedding API key override")
    model: str = Field(default="BAAI/bge-m3", description="Embedding model identifier")
    timeout_ms: int = Field(
        default=20000,
        gt=0,
        description="Timeout for one embedding call in milliseconds",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.rstrip("/") or None

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = str(value).strip().strip("'\"")
        return value or None
