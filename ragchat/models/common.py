"""
Common response models.

Error schema shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """Error response schema."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: str = Field(description="Stable error kind")
    message: str = Field(description="Human-readable error message")
    request_id: str = Field(description="Correlation id of the failed request")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")
