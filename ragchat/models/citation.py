"""
Citation domain model.

Represents a retrieved chunk that informed a chat answer.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Citation(BaseModel):
    """Citation model for source attribution."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(description="Chunk row identifier")
    source: str = Field(description="Source document identifier")
    chunk_index: int = Field(description="Chunk ordinal within the source")
    score: float = Field(description="Cosine similarity between query and chunk")
