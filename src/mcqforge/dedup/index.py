# src/mcqforge/dedup/index.py
"""SimilarityIndex: vector search with a fingerprint fallback that never raises."""

from __future__ import annotations

import logging

from mcqforge.dedup.strategies import FingerprintStrategy, VectorStrategy
from mcqforge.embedder import Embedder
from mcqforge.models import SimilarityVerdict
from mcqforge.stores import ContentStore

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.87


class SimilarityIndex:
    """Answers "has something like this question been generated already?".

    When vector search is enabled it is tried first. Any error on that path
    (embedding outage, index failure, dimension mismatch) is logged and the
    fingerprint strategy runs instead. If the fingerprint strategy fails too
    the verdict is "not a duplicate": an indeterminate check must not block
    generation.

    Example:
        index = SimilarityIndex(store, embedder=embedder, vector_enabled=True)
        verdict = index.find_duplicate("What is 2+2?", ["1", "2", "4", "5"], topic="Algebra")
        if verdict.is_duplicate:
            print(verdict.reason, verdict.match_id, verdict.score)
    """

    def __init__(
        self,
        content_store: ContentStore,
        embedder: Embedder | None = None,
        vector_enabled: bool = False,
        threshold: float = DEFAULT_THRESHOLD,
        k: int = 5,
        window: int = 500,
    ) -> None:
        """Initialize the index.

        Args:
            content_store: Store holding the existing corpus.
            embedder: Embedder for the vector strategy. Required if vector_enabled.
            vector_enabled: Try nearest-neighbor search before fingerprints.
            threshold: Default cosine similarity at or above which a
                vector match is a duplicate. Overridable per call.
            k: Neighbors fetched by the vector strategy.
            window: Newest questions scanned by the fingerprint strategy.
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError("Threshold must be between 0.0 and 1.0")
        if vector_enabled and embedder is None:
            raise ValueError("An embedder is required when vector_enabled=True")

        self.content_store = content_store
        self.threshold = threshold
        self.vector: VectorStrategy | None = (
            VectorStrategy(content_store, embedder, k=k)  # type: ignore[arg-type]
            if vector_enabled
            else None
        )
        self.fingerprint = FingerprintStrategy(content_store, window=window)

    @property
    def vector_enabled(self) -> bool:
        return self.vector is not None

    def _fingerprint(
        self, text: str, choices: list[str], topic: str | None, threshold: float
    ) -> SimilarityVerdict:
        try:
            return self.fingerprint.find_duplicate(text, choices, topic, threshold)
        except Exception as e:
            logger.warning("Duplicate check failed, treating candidate as unique: %s", e)
            return SimilarityVerdict.unique()

    def find_duplicate(
        self,
        text: str,
        choices: list[str],
        topic: str | None = None,
        threshold: float | None = None,
    ) -> SimilarityVerdict:
        """Check a question against the stored corpus. Never raises.

        Args:
            text: Question text.
            choices: Answer choices.
            topic: Restrict the comparison to this topic when given.
            threshold: Override the index's similarity threshold for this call.
        """
        threshold = self.threshold if threshold is None else threshold
        if self.vector is not None:
            try:
                return self.vector.find_duplicate(text, choices, topic, threshold)
            except Exception as e:
                logger.warning("Vector duplicate check failed, falling back to fingerprint: %s", e)
        return self._fingerprint(text, choices, topic, threshold)

    async def afind_duplicate(
        self,
        text: str,
        choices: list[str],
        topic: str | None = None,
        threshold: float | None = None,
    ) -> SimilarityVerdict:
        """Check a question against the stored corpus (async). Never raises."""
        threshold = self.threshold if threshold is None else threshold
        if self.vector is not None:
            try:
                return await self.vector.afind_duplicate(text, choices, topic, threshold)
            except Exception as e:
                logger.warning("Vector duplicate check failed, falling back to fingerprint: %s", e)
        return self._fingerprint(text, choices, topic, threshold)
