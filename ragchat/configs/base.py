"""
Process-level settings shared by the service.

Holds what the HTTP server itself needs (bind address, log verbosity,
allowed browser origins). Provider, retrieval and storage settings live in
their own modules and are aggregated by ``Settings``.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class BaseSettings(PydanticBaseSettings):
    """Server settings read from unprefixed environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="HTTP bind host")
    port: int = Field(default=4000, ge=1, le=65535, description="HTTP bind port")
    log_level: str = Field(default="INFO", description="Root logger level name")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level
