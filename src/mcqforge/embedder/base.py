# src/mcqforge/embedder/base.py
"""Embedder abstract base class."""

from abc import ABC, abstractmethod

from mcqforge.embedder.similarity import cosine
from mcqforge.models import EmbeddedQuestion, ValidatedQuestion


class Embedder(ABC):
    """Abstract base class for embedding generation.

    Subclasses must implement embed. Implementations raise
    EmbeddingUnavailable rather than returning an unusable vector.
    """

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        ...

    async def aembed(self, text: str) -> list[float]:
        """Generate an embedding vector (async). Defaults to sync embed()."""
        return self.embed(text)

    def embed_question(self, question: ValidatedQuestion) -> EmbeddedQuestion:
        """Embed a question's text and choices."""
        return EmbeddedQuestion(question=question, embedding=self.embed(question.embedding_text()))

    cosine = staticmethod(cosine)
