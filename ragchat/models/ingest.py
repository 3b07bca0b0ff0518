"""
Ingestion request/response schemas.

Dependencies: pydantic
System role: Ingest API contracts
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IngestRequest(BaseModel):
    """Request schema for document ingestion."""

    source: str = Field(min_length=1, description="Document identifier stored with every chunk")
    text: str = Field(min_length=1, description="Raw document text")


class IngestResponse(BaseModel):
    """Response schema for document ingestion."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    request_id: str
    chunks: int = Field(description="Number of chunks stored")
