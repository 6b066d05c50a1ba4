# src/mcqforge/stores/__init__.py
"""Storage abstractions for mcqforge."""

from mcqforge.stores.base import AttemptLogStore, EmbeddingIndex, QuestionStore
from mcqforge.stores.content import ContentStore
from mcqforge.stores.sqlite_embedding import SQLiteEmbeddingIndex
from mcqforge.stores.sqlite_log import SQLiteAttemptLogStore
from mcqforge.stores.sqlite_question import SQLiteQuestionStore

try:
    from mcqforge.stores.chroma import ChromaEmbeddingIndex
except ImportError as e:
    from mcqforge._optional import missing_extra

    ChromaEmbeddingIndex = missing_extra(  # type: ignore[misc,assignment]
        "ChromaEmbeddingIndex", "chroma", e
    )

__all__ = [
    "QuestionStore",
    "AttemptLogStore",
    "EmbeddingIndex",
    "ContentStore",
    "SQLiteQuestionStore",
    "SQLiteAttemptLogStore",
    "SQLiteEmbeddingIndex",
    "ChromaEmbeddingIndex",
]
