# src/mcqforge/dedup/strategies.py
"""Duplicate strategy implementations."""

from mcqforge.dedup.base import DuplicateStrategy
from mcqforge.dedup.fingerprint import choice_fingerprint, normalize_text
from mcqforge.embedder import Embedder
from mcqforge.models import SimilarityVerdict
from mcqforge.models.question import embedding_text
from mcqforge.stores import ContentStore


class VectorStrategy(DuplicateStrategy):
    """Nearest-neighbor search over stored question embeddings.

    Only the single most similar stored question is compared with the
    threshold; the other k-1 neighbors are not aggregated.
    """

    def __init__(self, content_store: ContentStore, embedder: Embedder, k: int = 5) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.content_store = content_store
        self.embedder = embedder
        self.k = k

    def _verdict(
        self, embedding: list[float], topic: str | None, threshold: float
    ) -> SimilarityVerdict:
        neighbors = self.content_store.query_nearest(embedding, k=self.k, topic=topic)
        if neighbors:
            match_id, score = neighbors[0]
            if score >= threshold:
                return SimilarityVerdict(
                    is_duplicate=True,
                    reason="embedding_match",
                    match_id=match_id,
                    score=score,
                    strategy="vector",
                )
        return SimilarityVerdict.unique("vector")

    def find_duplicate(
        self,
        text: str,
        choices: list[str],
        topic: str | None,
        threshold: float,
    ) -> SimilarityVerdict:
        embedding = self.embedder.embed(embedding_text(text, choices))
        return self._verdict(embedding, topic, threshold)

    async def afind_duplicate(
        self,
        text: str,
        choices: list[str],
        topic: str | None,
        threshold: float,
    ) -> SimilarityVerdict:
        embedding = await self.embedder.aembed(embedding_text(text, choices))
        return self._verdict(embedding, topic, threshold)


class FingerprintStrategy(DuplicateStrategy):
    """Exact match on normalized text or normalized choices over a recent window.

    Scans at most ``window`` of the newest questions (restricted to the
    topic when given). Older questions are never compared. The threshold is
    ignored: a fingerprint match always scores 1.0.
    """

    def __init__(self, content_store: ContentStore, window: int = 500) -> None:
        if window < 1:
            raise ValueError("window must be at least 1")
        self.content_store = content_store
        self.window = window

    def find_duplicate(
        self,
        text: str,
        choices: list[str],
        topic: str | None,
        threshold: float,
    ) -> SimilarityVerdict:
        wanted_text = normalize_text(text)
        wanted_choices = choice_fingerprint(choices)

        for existing in self.content_store.query_recent(topic=topic, limit=self.window):
            # An empty fingerprint (text of pure punctuation) matches nothing
            if wanted_text and normalize_text(existing.text) == wanted_text:
                return SimilarityVerdict(
                    is_duplicate=True,
                    reason="exact_text",
                    match_id=existing.id,
                    score=1.0,
                    strategy="fingerprint",
                )
            if choice_fingerprint(existing.choices) == wanted_choices:
                return SimilarityVerdict(
                    is_duplicate=True,
                    reason="choice_set_match",
                    match_id=existing.id,
                    score=1.0,
                    strategy="fingerprint",
                )

        return SimilarityVerdict.unique("fingerprint")
