# src/mcqforge/stores/base.py
"""Abstract base classes for storage."""

from abc import ABC, abstractmethod

from mcqforge.models import GenerationAttemptLog, ValidatedQuestion


class QuestionStore(ABC):
    """Abstract base class for validated question storage."""

    @abstractmethod
    def insert(self, question: ValidatedQuestion) -> None:
        """Store a new question. Raises PersistenceError if it cannot be stored."""
        ...

    @abstractmethod
    def get(self, question_id: str) -> ValidatedQuestion | None:
        """Retrieve a question by ID. Returns None if not found."""
        ...

    @abstractmethod
    def query_recent(self, topic: str | None = None, limit: int = 500) -> list[ValidatedQuestion]:
        """Most recent questions, newest first, optionally restricted to a topic."""
        ...

    @abstractmethod
    def count_questions(self, topic: str | None = None) -> int:
        """Count stored questions, optionally for one topic."""
        ...


class AttemptLogStore(ABC):
    """Append-only storage for generation attempt logs.

    There is deliberately no update or delete operation.
    """

    @abstractmethod
    def append(self, entry: GenerationAttemptLog) -> GenerationAttemptLog:
        """Append a log row. Returns the row with its assigned id."""
        ...

    @abstractmethod
    def list_logs(self, limit: int = 50, success: bool | None = None) -> list[GenerationAttemptLog]:
        """Most recent log rows, newest first, optionally filtered by outcome."""
        ...

    @abstractmethod
    def count_logs(self, success: bool | None = None) -> int:
        """Count log rows, optionally filtered by outcome."""
        ...


class EmbeddingIndex(ABC):
    """Abstract base class for question embedding storage and nearest-neighbor search."""

    @abstractmethod
    def add(self, question_id: str, embedding: list[float], topic: str | None = None) -> None:
        """Attach an embedding to a stored question, replacing any previous one."""
        ...

    @abstractmethod
    def query_nearest(
        self, embedding: list[float], k: int = 5, topic: str | None = None
    ) -> list[tuple[str, float]]:
        """Return up to k (question_id, cosine similarity) pairs, most similar first."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Count stored embeddings."""
        ...
