"""
Prompt assembly for retrieval-augmented chat.

Dependencies: ragchat.boundary.vdb, ragchat.models.chat
System role: Builds the message list sent to the chat-completion provider
"""

from typing import Sequence

from ragchat.boundary.vdb.vector_schemas import VectorSearchResult
from ragchat.models.chat import ChatMessage

CONTEXT_INSTRUCTION = (
    "Use the following context to answer the user. "
    "If the context is insufficient, say you are unsure."
)


def format_context(results: Sequence[VectorSearchResult]) -> str:
    """Join retrieved chunks into labelled blocks (`Source: source#index`)."""
    return "\n\n".join(
        f"Source: {result.chunk.label}\n{result.chunk.content}" for result in results
    )


def build_messages(
    system_prompt: str,
    messages: Sequence[ChatMessage],
    results: Sequence[VectorSearchResult] = (),
) -> list[dict[str, str]]:
    """
    Build the provider message list.

    The context instruction is only added when at least one chunk was
    retrieved.

    Args:
        system_prompt: Fixed system instruction
        messages: Conversation from the caller, in order
        results: Retrieved chunks, best first

    Returns:
        list[dict[str, str]]: Role/content pairs
    """
    built = [{"role": "system", "content": system_prompt}]
    if results:
        built.append(
            {
                "role": "system",
                "content": f"{CONTEXT_INSTRUCTION}\n\n{format_context(results)}",
            }
        )
    built.extend({"role": m.role, "content": m.content} for m in messages)
    return built
