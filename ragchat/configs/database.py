"""
Database configuration settings.

Manages the SQLite file that backs the chunk table.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """SQLite database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    path: str = Field(default="rag.sqlite", description="SQLite database file path")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def async_database_url(self) -> str:
        """
        Construct async SQLite connection URL.

        Returns:
            str: SQLAlchemy aiosqlite URL for the resolved database path
        """
        if self.path == ":memory:":
            return "sqlite+aiosqlite:///:memory:"
        return f"sqlite+aiosqlite:///{Path(self.path).resolve()}"
