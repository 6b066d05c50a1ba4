# src/mcqforge/stores/content.py
"""ContentStore: the single owner of persisted questions, embeddings and attempt logs."""

from __future__ import annotations

from mcqforge.exceptions import ConfigurationError
from mcqforge.models import GenerationAttemptLog, ValidatedQuestion
from mcqforge.stores.base import AttemptLogStore, EmbeddingIndex, QuestionStore


class ContentStore:
    """Persistence facade used by the generation pipeline.

    Combines a question store, an append-only attempt log and an optional
    embedding index. No transaction spans a duplicate check and the insert
    that follows it: reads are read-committed at best.

    Example:
        store = ContentStore(
            question_store=SQLiteQuestionStore("./data/questions.db"),
            log_store=SQLiteAttemptLogStore("./data/attempts.db"),
            embedding_index=SQLiteEmbeddingIndex("./data/embeddings.db"),
        )
    """

    def __init__(
        self,
        question_store: QuestionStore,
        log_store: AttemptLogStore,
        embedding_index: EmbeddingIndex | None = None,
    ) -> None:
        self.question_store = question_store
        self.log_store = log_store
        self.embedding_index = embedding_index

    @property
    def has_embedding_index(self) -> bool:
        return self.embedding_index is not None

    def _require_index(self) -> EmbeddingIndex:
        if self.embedding_index is None:
            raise ConfigurationError("No embedding index configured for this content store")
        return self.embedding_index

    # Questions

    def insert(self, question: ValidatedQuestion) -> None:
        """Persist a validated question. Raises PersistenceError on failure."""
        self.question_store.insert(question)

    def get(self, question_id: str) -> ValidatedQuestion | None:
        return self.question_store.get(question_id)

    def query_recent(self, topic: str | None = None, limit: int = 500) -> list[ValidatedQuestion]:
        """Newest-first window of stored questions."""
        return self.question_store.query_recent(topic=topic, limit=limit)

    def count_questions(self, topic: str | None = None) -> int:
        return self.question_store.count_questions(topic=topic)

    # Embeddings

    def query_nearest(
        self, embedding: list[float], k: int = 5, topic: str | None = None
    ) -> list[tuple[str, float]]:
        """(question_id, similarity) pairs, most similar first."""
        return self._require_index().query_nearest(embedding, k=k, topic=topic)

    def attach_embedding(
        self, question_id: str, embedding: list[float], topic: str | None = None
    ) -> None:
        """Store the embedding of an already persisted question."""
        self._require_index().add(question_id, embedding, topic=topic)

    # Attempt logs

    def append_log(self, entry: GenerationAttemptLog) -> GenerationAttemptLog:
        """Append one attempt log row. Raises PersistenceError on failure."""
        return self.log_store.append(entry)

    def list_logs(self, limit: int = 50, success: bool | None = None) -> list[GenerationAttemptLog]:
        return self.log_store.list_logs(limit=limit, success=success)

    def count_logs(self, success: bool | None = None) -> int:
        return self.log_store.count_logs(success=success)
