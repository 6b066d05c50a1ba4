# src/mcqforge/stores/chroma.py
"""ChromaDB embedding index implementation."""

from pathlib import Path

import chromadb

from mcqforge.exceptions import PersistenceError
from mcqforge.stores.base import EmbeddingIndex


class ChromaEmbeddingIndex(EmbeddingIndex):
    """ChromaDB-based embedding index using cosine distance."""

    def __init__(self, persist_dir: str, collection_name: str = "mcqforge") -> None:
        """Initialize the ChromaDB index."""
        Path(persist_dir).mkdir(parents=True, exist_ok=True)
        self._client = chromadb.PersistentClient(path=persist_dir)
        self._collection = self._client.get_or_create_collection(
            name=collection_name,
            metadata={"hnsw:space": "cosine"},
        )

    def close(self) -> None:
        """Close the index and release resources.

        ChromaDB has no official close method; stopping the internal system
        releases file handles. See: https://github.com/chroma-core/chroma/issues/5868
        """
        self._collection = None  # type: ignore[assignment]

        system = getattr(self._client, "_system", None)
        if system is not None:
            system.stop()

        self._client = None  # type: ignore[assignment]

    def add(self, question_id: str, embedding: list[float], topic: str | None = None) -> None:
        """Attach an embedding to a question, overwriting if it exists."""
        try:
            self._collection.upsert(
                ids=[question_id],
                embeddings=[embedding],  # type: ignore[arg-type]
                metadatas=[{"topic": topic or ""}],
            )
        except Exception as e:
            raise PersistenceError(f"Failed to store embedding for {question_id}: {e}") from e

    def query_nearest(
        self, embedding: list[float], k: int = 5, topic: str | None = None
    ) -> list[tuple[str, float]]:
        """Return the k most similar stored questions."""
        total = self._collection.count()
        if total == 0:
            return []

        results = self._collection.query(
            query_embeddings=[embedding],  # type: ignore[arg-type]
            n_results=min(k, total),
            where={"topic": topic} if topic is not None else None,
            include=["distances"],
        )

        ids = results["ids"][0]
        distances = results["distances"][0]  # type: ignore[index]
        # Cosine distance: similarity = 1 - distance
        return [(qid, 1.0 - dist) for qid, dist in zip(ids, distances, strict=True)]

    def count(self) -> int:
        """Count stored embeddings."""
        return self._collection.count()
