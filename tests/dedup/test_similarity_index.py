# tests/dedup/test_similarity_index.py
"""Tests for SimilarityIndex fallback behavior."""

import logging
from unittest.mock import patch

import pytest

from mcqforge.dedup import SimilarityIndex
from mcqforge.dedup.index import DEFAULT_THRESHOLD


def _store_with_embedding(store, embedder, question):
    store.insert(question)
    store.attach_embedding(question.id, embedder.embed(question.embedding_text()), question.topic)


class TestConstruction:
    def test_defaults(self, content_store):
        index = SimilarityIndex(content_store)
        assert index.threshold == DEFAULT_THRESHOLD == 0.87
        assert index.vector_enabled is False

    @pytest.mark.parametrize("threshold", [-0.1, 1.1])
    def test_invalid_threshold(self, content_store, threshold):
        with pytest.raises(ValueError):
            SimilarityIndex(content_store, threshold=threshold)

    def test_vector_requires_embedder(self, content_store):
        with pytest.raises(ValueError):
            SimilarityIndex(content_store, vector_enabled=True)

    def test_vector_enabled(self, vector_content_store, keyword_embedder):
        index = SimilarityIndex(
            vector_content_store, embedder=keyword_embedder, vector_enabled=True
        )
        assert index.vector_enabled is True


class TestFingerprintOnly:
    def test_exact_text(self, content_store, question_factory):
        content_store.insert(question_factory(text="What is 2+2?"))
        verdict = SimilarityIndex(content_store).find_duplicate(
            "what is 2+2", ["a", "b"], topic="Algebra"
        )
        assert verdict.is_duplicate
        assert verdict.reason == "exact_text"
        assert verdict.strategy == "fingerprint"

    def test_unique(self, content_store, question_factory):
        content_store.insert(question_factory(text="What is 2+2?"))
        verdict = SimilarityIndex(content_store).find_duplicate(
            "What is 3+3?", ["a", "b"], topic="Algebra"
        )
        assert verdict.is_duplicate is False

    def test_embedder_ignored_when_disabled(self, content_store, keyword_embedder):
        SimilarityIndex(content_store, embedder=keyword_embedder).find_duplicate(
            "Q?", ["a", "b"]
        )
        assert keyword_embedder.calls == []


class TestVectorPath:
    def test_embedding_match(self, vector_content_store, keyword_embedder, question_factory):
        existing = question_factory(text="Add 2 plus 2?")
        _store_with_embedding(vector_content_store, keyword_embedder, existing)
        index = SimilarityIndex(
            vector_content_store, embedder=keyword_embedder, vector_enabled=True
        )

        verdict = index.find_duplicate(
            "What do you get if you add 2 plus 2?", ["1", "2", "4", "5"], topic="Algebra"
        )
        assert verdict.is_duplicate
        assert verdict.reason == "embedding_match"
        assert verdict.match_id == existing.id

    def test_vector_miss_does_not_consult_fingerprint(
        self, vector_content_store, keyword_embedder, question_factory
    ):
        # Stored without an embedding: only a fingerprint scan could find it
        vector_content_store.insert(question_factory(text="Capital of France?"))
        index = SimilarityIndex(
            vector_content_store, embedder=keyword_embedder, vector_enabled=True
        )

        verdict = index.find_duplicate("Capital of France?", ["x", "y"], topic="Algebra")
        assert verdict.is_duplicate is False
        assert verdict.strategy == "vector"

    def test_threshold_override(self, vector_content_store, keyword_embedder, question_factory):
        existing = question_factory(text="Add 2 plus 2?")
        _store_with_embedding(vector_content_store, keyword_embedder, existing)
        index = SimilarityIndex(
            vector_content_store, embedder=keyword_embedder, vector_enabled=True
        )
        text, choices = "What is the sum of 2 plus 2?", ["1", "2", "4", "5"]

        # Shares two of three dimensions: cosine 2/3
        assert index.find_duplicate(text, choices, topic="Algebra").is_duplicate is False
        assert index.find_duplicate(text, choices, topic="Algebra", threshold=0.5).is_duplicate

    def test_only_top_match_compared(self, vector_content_store, keyword_embedder, question_factory):
        existing = question_factory(text="Add 2 plus 2?")
        _store_with_embedding(vector_content_store, keyword_embedder, existing)
        index = SimilarityIndex(
            vector_content_store, embedder=keyword_embedder, vector_enabled=True, k=5
        )
        with patch.object(
            vector_content_store,
            "query_nearest",
            return_value=[("low", 0.2), ("high", 0.99)],
        ):
            verdict = index.find_duplicate("Q?", ["a", "b"], topic="Algebra")
        assert verdict.is_duplicate is False


class TestFallback:
    def test_embedding_outage_falls_back(
        self, vector_content_store, failing_embedder, question_factory, caplog
    ):
        vector_content_store.insert(question_factory(text="What is 2+2?"))
        index = SimilarityIndex(
            vector_content_store, embedder=failing_embedder, vector_enabled=True
        )

        with caplog.at_level(logging.WARNING, logger="mcqforge.dedup.index"):
            verdict = index.find_duplicate("What is 2+2?", ["a", "b"], topic="Algebra")

        assert failing_embedder.calls == 1
        assert verdict.is_duplicate
        assert verdict.reason == "exact_text"
        assert verdict.strategy == "fingerprint"
        assert "falling back" in caplog.text

    def test_missing_index_falls_back(self, content_store, keyword_embedder, question_factory):
        content_store.insert(question_factory(text="What is 2+2?"))
        index = SimilarityIndex(content_store, embedder=keyword_embedder, vector_enabled=True)

        verdict = index.find_duplicate("What is 2+2?", ["a", "b"], topic="Algebra")
        assert verdict.reason == "exact_text"

    def test_query_failure_falls_back(self, vector_content_store, keyword_embedder):
        index = SimilarityIndex(
            vector_content_store, embedder=keyword_embedder, vector_enabled=True
        )
        with patch.object(vector_content_store, "query_nearest", side_effect=RuntimeError("db")):
            verdict = index.find_duplicate("Q?", ["a", "b"], topic="Algebra")
        assert verdict.is_duplicate is False
        assert verdict.strategy == "fingerprint"

    def test_fingerprint_failure_never_raises(self, content_store, caplog):
        index = SimilarityIndex(content_store)
        with (
            patch.object(content_store, "query_recent", side_effect=RuntimeError("db locked")),
            caplog.at_level(logging.WARNING, logger="mcqforge.dedup.index"),
        ):
            verdict = index.find_duplicate("Q?", ["a", "b"], topic="Algebra")
        assert verdict.is_duplicate is False
        assert verdict.strategy == "none"
        assert "db locked" in caplog.text

    def test_both_paths_failing_never_raises(self, vector_content_store, failing_embedder):
        index = SimilarityIndex(
            vector_content_store, embedder=failing_embedder, vector_enabled=True
        )
        with patch.object(vector_content_store, "query_recent", side_effect=RuntimeError("db")):
            verdict = index.find_duplicate("Q?", ["a", "b"], topic="Algebra")
        assert verdict.is_duplicate is False

    @pytest.mark.asyncio
    async def test_async_fallback(self, vector_content_store, failing_embedder, question_factory):
        vector_content_store.insert(question_factory(text="What is 2+2?", choices=["a", "b"]))
        index = SimilarityIndex(
            vector_content_store, embedder=failing_embedder, vector_enabled=True
        )
        verdict = await index.afind_duplicate("Other text?", ["A", "B"], topic="Algebra")
        assert verdict.is_duplicate
        assert verdict.reason == "choice_set_match"
