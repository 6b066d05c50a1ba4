# src/mcqforge/configuration/storage/local.py
"""Local filesystem storage configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from mcqforge.settings import Settings
    from mcqforge.stores import ContentStore, EmbeddingIndex


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage using SQLite and, optionally, Chroma.

    All data is persisted to the specified directory:
    - questions.db: Generated questions (SQLite)
    - attempts.db: Append-only generation attempt log (SQLite)
    - embeddings.db or chroma/: Question embeddings, only when
      settings.vector_index_enabled is set

    Args:
        data_dir: Base directory for all storage files. Created if missing.
        vector_backend: "sqlite" for a brute-force cosine index (no extra
            dependencies) or "chroma" (requires: pip install mcqforge[chroma]).

    Example:
        storage = LocalStorage("./data", vector_backend="chroma")
    """

    data_dir: str
    vector_backend: Literal["sqlite", "chroma"] = "sqlite"

    def _build_embedding_index(self, settings: Settings) -> EmbeddingIndex:
        from mcqforge.stores import ChromaEmbeddingIndex, SQLiteEmbeddingIndex

        if self.vector_backend == "chroma":
            return ChromaEmbeddingIndex(os.path.join(self.data_dir, "chroma"))
        return SQLiteEmbeddingIndex(
            os.path.join(self.data_dir, "embeddings.db"),
            strict_dimensions=settings.strict_dimensions,
        )

    def build_content_store(self, settings: Settings) -> ContentStore:
        """Build the content store.

        Returns:
            ContentStore over SQLite question and log stores, with an
            embedding index when vector search is enabled.
        """
        from mcqforge.stores import ContentStore, SQLiteAttemptLogStore, SQLiteQuestionStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)

        embedding_index = (
            self._build_embedding_index(settings) if settings.vector_index_enabled else None
        )
        return ContentStore(
            question_store=SQLiteQuestionStore(os.path.join(self.data_dir, "questions.db")),
            log_store=SQLiteAttemptLogStore(os.path.join(self.data_dir, "attempts.db")),
            embedding_index=embedding_index,
        )
