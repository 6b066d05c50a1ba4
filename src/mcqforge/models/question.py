# src/mcqforge/models/question.py
"""Question data models."""

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field


class ValidatedQuestion(BaseModel):
    """A candidate that passed schema validation and may be persisted.

    The id is generated independently of content; two questions with the
    same text still get different ids.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    text: str
    choices: list[str]
    correct_answer: str
    explanation: str | None = None
    estimated_time_seconds: int = 60
    difficulty: str
    topic: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def embedding_text(self) -> str:
        """Text used to embed this question: the question plus its choices."""
        return embedding_text(self.text, self.choices)


class EmbeddedQuestion(BaseModel):
    """A ValidatedQuestion paired with its embedding vector."""

    question: ValidatedQuestion
    embedding: list[float]


def embedding_text(text: str, choices: list[str]) -> str:
    return f"{text or ''} {' '.join(choices or [])}"
