"""
Chat domain models and schemas.

Request/response schemas for chat operations. Wire names are camelCase;
the snake_case names accepted by earlier clients still validate.

Dependencies: pydantic
System role: Chat API contracts
"""

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel

from ragchat.models.citation import Citation


class ChatMessage(BaseModel):
    """Single message of the conversation."""

    role: Literal["user", "assistant"] = Field(description="Message role")
    content: str = Field(min_length=1, description="Message content")


class ChatRequest(BaseModel):
    """Request schema for chat completions."""

    model_config = ConfigDict(populate_by_name=True)

    messages: list[ChatMessage] = Field(description="Conversation so far, oldest first")
    # Strict types: JSON true or "0.5" must not coerce into numbers
    temperature: StrictFloat | None = Field(default=None, description="Sampling temperature")
    max_tokens: StrictInt | None = Field(
        default=None,
        validation_alias=AliasChoices("maxTokens", "max_tokens"),
        description="Completion token limit",
    )
    use_retrieval: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("useRetrieval", "use_rag", "use_retrieval"),
        description="Augment the prompt with retrieved chunks",
    )
    top_k: StrictInt | None = Field(
        default=None,
        validation_alias=AliasChoices("topK", "top_k"),
        description="Number of chunks to retrieve",
    )

    def latest_user_message(self) -> str | None:
        """Return the content of the most recent user message, if any."""
        for message in reversed(self.messages):
            if message.role == "user":
                return message.content
        return None


class ChatResponse(BaseModel):
    """Response schema for chat completions."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    request_id: str
    model: str
    latency_ms: int
    citations: list[Citation]
