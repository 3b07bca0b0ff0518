"""
Chat-completion provider settings.

API credentials, endpoint, model and timeout for the OpenAI-compatible
chat-completion provider. The embedding client falls back to these values
when its own endpoint or key are not configured.

Dependencies: pydantic, pydantic_settings
System role: Upstream LLM provider configuration
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant. Answer clearly and concisely. "
    "If you are unsure, say you are unsure."
)


class ProviderSettings(BaseSettings):
    """Chat-completion provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DEEPSEEK_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(default=None, description="Bearer token for the provider")
    base_url: str = Field(
        default="https://api.deepseek.com",
        description="Provider base URL (without /chat/completions)",
    )
    model: str = Field(default="deepseek-chat", description="Chat model identifier")
    timeout_ms: int = Field(
        default=20000,
        gt=0,
        description="Timeout for one chat-completion call in milliseconds",
    )
    system_prompt: str = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        validation_alias=AliasChoices("SYSTEM_PROMPT", "system_prompt"),
        description="Fixed system instruction sent before every conversation",
    )

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, value: str | None) -> str | None:
        """Drop surrounding whitespace and quotes copied from shell exports."""
        if value is None:
            return None
        value = str(value).strip().strip("'\"")
        return value or None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
