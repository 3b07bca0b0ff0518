"""
Retrieval settings.

Chunking window, overlap and top-K defaults for the RAG pipeline.

Dependencies: pydantic, pydantic_settings
System role: Chunking and retrieval configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RagSettings(BaseSettings):
    """Chunking and retrieval configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_max_chars: int = Field(default=800, description="Maximum characters per chunk")
    chunk_overlap_chars: int = Field(
        default=120,
        description="Characters shared by consecutive windows of a long paragraph",
    )
    top_k: int = Field(default=4, description="Number of chunks retrieved when topK is omitted")
    max_top_k: int = Field(default=10, description="Largest topK a caller may request")
