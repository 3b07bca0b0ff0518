"""
Test suite for cosine similarity and CosineRetriever.

System role: Verification of retrieval ranking
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from ragchat.core.exceptions import EmbeddingDimensionMismatchError
from ragchat.core.retriever import CosineRetriever, cosine_similarity
from ragchat.models.chunk import Chunk


def make_chunk(chunk_id: int, embedding: list[float], source: str = "doc.md") -> Chunk:
    return Chunk(
        id=chunk_id,
        source=source,
        chunk_index=chunk_id - 1,
        content=f"chunk {chunk_id}",
        embedding=embedding,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestCosineSimilarity:
    """Test suite for cosine_similarity()."""

    def test_identical_vectors_should_score_one(self):
        assert cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)

    def test_scaled_vector_should_score_one(self):
        assert cosine_similarity([1.0, 2.0], [10.0, 20.0]) == pytest.approx(1.0)

    def test_orthogonal_vectors_should_score_zero(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_opposite_vectors_should_score_minus_one(self):
        assert cosine_similarity([1.0, 1.0], [-1.0, -1.0]) == pytest.approx(-1.0)

    def test_zero_vector_should_score_zero(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0
        assert cosine_similarity([1.0, 2.0], [0.0, 0.0]) == 0.0

    def test_result_should_stay_within_bounds(self):
        score = cosine_similarity([1e-200, 1e-200], [1e-200, 1e-200])

        assert -1.0 <= score <= 1.0

    def test_length_mismatch_should_raise(self):
        with pytest.raises(EmbeddingDimensionMismatchError) as exc_info:
            cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])

        assert exc_info.value.details["expected_dimension"] == 2
        assert exc_info.value.details["actual_dimension"] == 3


class TestCosineRetrieverSearch:
    """Test suite for CosineRetriever.search()."""

    def test_results_should_be_sorted_by_score_descending(self):
        # Arrange
        chunks = [
            make_chunk(1, [0.2, 1.0]),
            make_chunk(2, [1.0, 0.0]),
            make_chunk(3, [1.0, 0.5]),
        ]

        # Act
        results = CosineRetriever.search([1.0, 0.0], chunks, k=3)

        # Assert
        assert [r.chunk.id for r in results] == [2, 3, 1]
        scores = [r.similarity_score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_result_count_should_not_exceed_k(self):
        chunks = [make_chunk(i, [1.0, float(i)]) for i in range(1, 8)]

        results = CosineRetriever.search([1.0, 1.0], chunks, k=3)

        assert len(results) == 3

    def test_fewer_chunks_than_k_should_return_all(self):
        chunks = [make_chunk(1, [1.0, 0.0])]

        results = CosineRetriever.search([1.0, 0.0], chunks, k=4)

        assert len(results) == 1

    def test_negative_scores_should_be_dropped(self):
        chunks = [make_chunk(1, [-1.0, 0.0]), make_chunk(2, [1.0, 0.0])]

        results = CosineRetriever.search([1.0, 0.0], chunks, k=4)

        assert [r.chunk.id for r in results] == [2]

    def test_zero_score_should_be_kept(self):
        chunks = [make_chunk(1, [0.0, 1.0])]

        results = CosineRetriever.search([1.0, 0.0], chunks, k=4)

        assert len(results) == 1
        assert results[0].similarity_score == pytest.approx(0.0)

    def test_equal_scores_should_keep_scan_order(self):
        chunks = [make_chunk(i, [1.0, 0.0]) for i in (5, 3, 9)]

        results = CosineRetriever.search([1.0, 0.0], chunks, k=3)

        assert [r.chunk.id for r in results] == [5, 3, 9]

    @pytest.mark.parametrize("k", [0, -1])
    def test_non_positive_k_should_return_empty(self, k):
        chunks = [make_chunk(1, [1.0, 0.0])]

        assert CosineRetriever.search([1.0, 0.0], chunks, k=k) == []

    def test_empty_corpus_should_return_empty(self):
        assert CosineRetriever.search([1.0, 0.0], [], k=4) == []

    def test_mismatched_stored_vector_should_raise(self):
        chunks = [make_chunk(1, [1.0, 0.0, 0.0])]

        with pytest.raises(EmbeddingDimensionMismatchError):
            CosineRetriever.search([1.0, 0.0], chunks, k=4)


class TestCosineRetrieverRetrieve:
    """Test suite for CosineRetriever.retrieve()."""

    async def test_retrieve_should_scan_store_and_rank(self):
        # Arrange
        store = AsyncMock()
        store.scan_all = AsyncMock(
            return_value=[make_chunk(1, [0.0, 1.0]), make_chunk(2, [1.0, 0.1])]
        )
        retriever = CosineRetriever(store)

        # Act
        results = await retriever.retrieve([1.0, 0.0], k=1)

        # Assert
        store.scan_all.assert_awaited_once()
        assert len(results) == 1
        assert results[0].chunk.id == 2

    async def test_citation_should_carry_chunk_identity_and_score(self):
        store = AsyncMock()
        store.scan_all = AsyncMock(return_value=[make_chunk(7, [1.0, 0.0], source="guide.md")])
        retriever = CosineRetriever(store)

        results = await retriever.retrieve([1.0, 0.0], k=4)
        citation = results[0].to_citation()

        assert citation.id == 7
        assert citation.source == "guide.md"
        assert citation.chunk_index == 6
        assert citation.score == pytest.approx(1.0)
