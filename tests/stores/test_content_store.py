# tests/stores/test_content_store.py
"""Tests for the ContentStore facade."""

import pytest

from mcqforge.exceptions import ConfigurationError
from mcqforge.models import GenerationAttemptLog


class TestContentStore:
    def test_insert_get_count(self, content_store, question_factory):
        question = question_factory()
        content_store.insert(question)
        assert content_store.get(question.id) == question
        assert content_store.count_questions() == 1
        assert content_store.count_questions(topic="Other") == 0

    def test_query_recent(self, content_store, question_factory):
        content_store.insert(question_factory(text="First?"))
        content_store.insert(question_factory(text="Second?"))
        assert [q.text for q in content_store.query_recent(limit=1)] == ["Second?"]

    def test_logs(self, content_store):
        appended = content_store.append_log(GenerationAttemptLog(prompt="p", success=True))
        assert appended.id is not None
        assert content_store.count_logs() == 1
        assert content_store.list_logs()[0].id == appended.id

    def test_without_index(self, content_store):
        assert content_store.has_embedding_index is False
        with pytest.raises(ConfigurationError):
            content_store.query_nearest([1.0, 0.0])
        with pytest.raises(ConfigurationError):
            content_store.attach_embedding("q1", [1.0, 0.0])

    def test_with_index(self, vector_content_store, question_factory):
        question = question_factory()
        vector_content_store.insert(question)
        vector_content_store.attach_embedding(question.id, [1.0, 0.0], topic=question.topic)

        assert vector_content_store.has_embedding_index is True
        results = vector_content_store.query_nearest([1.0, 0.0], k=1, topic="Algebra")
        assert results[0][0] == question.id
