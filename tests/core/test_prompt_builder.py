"""
Test suite for prompt assembly.

System role: Verification of provider message construction
"""

from datetime import datetime, timezone

from ragchat.boundary.vdb.vector_schemas import VectorSearchResult
from ragchat.core.prompt_builder import CONTEXT_INSTRUCTION, build_messages, format_context
from ragchat.models.chat import ChatMessage
from ragchat.models.chunk import Chunk


def make_result(source: str, index: int, content: str, score: float = 0.9) -> VectorSearchResult:
    chunk = Chunk(
        id=index + 1,
        source=source,
        chunk_index=index,
        content=content,
        embedding=[1.0],
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    return VectorSearchResult(chunk=chunk, similarity_score=score)


class TestFormatContext:
    """Test suite for format_context()."""

    def test_blocks_should_be_labelled_and_separated(self):
        results = [make_result("a.md", 0, "First"), make_result("b.md", 3, "Second")]

        context = format_context(results)

        assert context == "Source: a.md#0\nFirst\n\nSource: b.md#3\nSecond"


class TestBuildMessages:
    """Test suite for build_messages()."""

    def test_without_results_should_send_system_prompt_and_conversation(self):
        # Arrange
        conversation = [
            ChatMessage(role="user", content="Hi"),
            ChatMessage(role="assistant", content="Hello"),
            ChatMessage(role="user", content="How are you?"),
        ]

        # Act
        messages = build_messages("Be brief.", conversation)

        # Assert
        assert messages == [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Hello"},
            {"role": "user", "content": "How are you?"},
        ]

    def test_with_results_should_insert_context_after_system_prompt(self):
        conversation = [ChatMessage(role="user", content="What is alpha?")]
        results = [make_result("a.md", 0, "Alpha is a letter.")]

        messages = build_messages("Be brief.", conversation, results)

        assert len(messages) == 3
        assert messages[0] == {"role": "system", "content": "Be brief."}
        assert messages[1]["role"] == "system"
        assert messages[1]["content"].startswith(CONTEXT_INSTRUCTION)
        assert "Source: a.md#0\nAlpha is a letter." in messages[1]["content"]
        assert messages[2] == {"role": "user", "content": "What is alpha?"}

    def test_empty_results_should_not_add_context_instruction(self):
        conversation = [ChatMessage(role="user", content="Hi")]

        messages = build_messages("Be brief.", conversation, [])

        assert all(CONTEXT_INSTRUCTION not in m["content"] for m in messages)
