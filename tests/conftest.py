"""Shared pytest fixtures."""

import contextlib
import json
import os
import tempfile

# Use litellm's bundled model cost map; its background remote fetch deadlocks imports offline.
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

import pytest

from mcqforge.embedder import Embedder
from mcqforge.exceptions import EmbeddingUnavailable
from mcqforge.models import ValidatedQuestion
from mcqforge.providers import LLMClient
from mcqforge.stores import (
    ContentStore,
    SQLiteAttemptLogStore,
    SQLiteEmbeddingIndex,
    SQLiteQuestionStore,
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir

        # Cleanup ChromaDB's shared system cache to release file handles
        # See: https://github.com/chroma-core/chroma/issues/5868
        try:
            from chromadb.api.shared_system_client import SharedSystemClient

            if hasattr(SharedSystemClient, "_identifier_to_system"):
                identifiers_to_remove = [
                    identifier
                    for identifier in list(SharedSystemClient._identifier_to_system.keys())
                    if tmpdir in str(identifier)
                ]
                for identifier in identifiers_to_remove:
                    if identifier in SharedSystemClient._identifier_to_system:
                        system = SharedSystemClient._identifier_to_system.pop(identifier)
                        with contextlib.suppress(Exception):
                            system.stop()
        except Exception:
            pass  # Best effort cleanup - ChromaDB internals may change


@pytest.fixture
def content_store(temp_dir):
    """ContentStore over SQLite stores, without an embedding index."""
    return ContentStore(
        question_store=SQLiteQuestionStore(os.path.join(temp_dir, "questions.db")),
        log_store=SQLiteAttemptLogStore(os.path.join(temp_dir, "attempts.db")),
    )


@pytest.fixture
def vector_content_store(temp_dir):
    """ContentStore over SQLite stores with a SQLite embedding index."""
    return ContentStore(
        question_store=SQLiteQuestionStore(os.path.join(temp_dir, "questions.db")),
        log_store=SQLiteAttemptLogStore(os.path.join(temp_dir, "attempts.db")),
        embedding_index=SQLiteEmbeddingIndex(os.path.join(temp_dir, "embeddings.db")),
    )


def make_question(
    text: str = "What is 2+2?",
    choices: list[str] | None = None,
    correct_answer: str = "4",
    topic: str = "Algebra",
    difficulty: str = "beginner",
    **kwargs,
) -> ValidatedQuestion:
    """Build a ValidatedQuestion with sensible defaults."""
    return ValidatedQuestion(
        text=text,
        choices=choices if choices is not None else ["1", "2", "4", "5"],
        correct_answer=correct_answer,
        topic=topic,
        difficulty=difficulty,
        **kwargs,
    )


def candidate_json(
    question: str = "What is 2+2?",
    options: list[str] | None = None,
    answer: object = "4",
    **extra,
) -> str:
    """Provider-style JSON text for one candidate."""
    payload = {
        "question": question,
        "options": options if options is not None else ["1", "2", "4", "5"],
        "correctAnswer": answer,
        "explanation": "Two plus two is four.",
        **extra,
    }
    return json.dumps(payload)


class ScriptedLLMClient(LLMClient):
    """LLM client that replays scripted responses.

    Each item is returned in order; exceptions are raised instead.
    """

    model = "test/scripted"

    def __init__(self, responses: list):
        self.responses = list(responses)
        self.prompts: list[str] = []

    def complete(self, prompt: str, temperature: float | None = None) -> str:
        self.prompts.append(prompt)
        if not self.responses:
            raise AssertionError("ScriptedLLMClient ran out of responses")
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class KeywordEmbedder(Embedder):
    """Deterministic embedder: one dimension per keyword, counting occurrences."""

    KEYWORDS = ("add", "sum", "plus", "capital", "france", "paris", "prime", "number")

    def __init__(self):
        self.calls: list[str] = []

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        lowered = text.lower()
        # Constant last dimension keeps every vector non-zero
        return [float(lowered.count(word)) for word in self.KEYWORDS] + [1.0]


class FailingEmbedder(Embedder):
    """Embedder whose provider is down."""

    def __init__(self):
        self.calls = 0

    def embed(self, text: str) -> list[float]:
        self.calls += 1
        raise EmbeddingUnavailable("embedding provider is down")


@pytest.fixture
def keyword_embedder():
    return KeywordEmbedder()


@pytest.fixture
def failing_embedder():
    return FailingEmbedder()


@pytest.fixture
def no_sleep():
    """Recording replacement for asyncio.sleep."""
    calls: list[float] = []

    async def sleep(delay: float) -> None:
        calls.append(delay)

    sleep.calls = calls  # type: ignore[attr-defined]
    return sleep


@pytest.fixture
def question_factory():
    """Factory for ValidatedQuestion instances."""
    return make_question


@pytest.fixture
def candidate_text():
    """Factory for provider-style candidate JSON text."""
    return candidate_json


@pytest.fixture
def scripted_llm():
    """Factory for ScriptedLLMClient instances."""
    return ScriptedLLMClient
