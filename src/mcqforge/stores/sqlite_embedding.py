# src/mcqforge/stores/sqlite_embedding.py
"""SQLite embedding index with brute-force cosine search."""

import json
import sqlite3
from pathlib import Path

from mcqforge.embedder.similarity import cosine
from mcqforge.exceptions import PersistenceError
from mcqforge.stores.base import EmbeddingIndex


class SQLiteEmbeddingIndex(EmbeddingIndex):
    """Embeddings stored as JSON arrays, searched with a linear cosine scan.

    Suitable for small corpora and tests. Use ChromaEmbeddingIndex for
    approximate nearest-neighbor search at scale.
    """

    def __init__(self, db_path: str, strict_dimensions: bool = False) -> None:
        """Initialize the index.

        Args:
            db_path: Path to SQLite database file
            strict_dimensions: Raise DimensionMismatch instead of truncating
                when a stored vector has a different length than the query.
        """
        self.db_path = db_path
        self.strict_dimensions = strict_dimensions
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS question_embeddings (
                    question_id TEXT PRIMARY KEY,
                    topic TEXT,
                    dim INTEGER NOT NULL,
                    embedding TEXT NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_embedding_topic ON question_embeddings(topic)"
            )
            conn.commit()

    def add(self, question_id: str, embedding: list[float], topic: str | None = None) -> None:
        """Attach an embedding to a question, overwriting if it exists."""
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    """
                    INSERT OR REPLACE INTO question_embeddings (question_id, topic, dim, embedding)
                    VALUES (?, ?, ?, ?)
                    """,
                    (question_id, topic, len(embedding), json.dumps(embedding)),
                )
                conn.commit()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to store embedding for {question_id}: {e}") from e

    def query_nearest(
        self, embedding: list[float], k: int = 5, topic: str | None = None
    ) -> list[tuple[str, float]]:
        """Return the k most similar stored questions."""
        with sqlite3.connect(self.db_path) as conn:
            if topic is None:
                cursor = conn.execute("SELECT question_id, embedding FROM question_embeddings")
            else:
                cursor = conn.execute(
                    "SELECT question_id, embedding FROM question_embeddings WHERE topic = ?",
                    (topic,),
                )
            rows = cursor.fetchall()

        scored = [
            (question_id, cosine(embedding, json.loads(raw), strict=self.strict_dimensions))
            for question_id, raw in rows
        ]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return scored[:k]

    def count(self) -> int:
        """Count stored embeddings."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT COUNT(question_id) FROM question_embeddings")
            count = cursor.fetchone()
            return count[0] if count else 0
