# src/mcqforge/models/verdict.py
"""Duplicate-check verdict model."""

from typing import Literal

from pydantic import BaseModel

DuplicateReason = Literal["embedding_match", "exact_text", "choice_set_match"]
VerdictStrategy = Literal["vector", "fingerprint", "none"]


class SimilarityVerdict(BaseModel):
    """Outcome of one duplicate check. Never persisted."""

    is_duplicate: bool
    reason: DuplicateReason | None = None
    match_id: str | None = None
    score: float | None = None
    strategy: VerdictStrategy = "none"

    @classmethod
    def unique(cls, strategy: VerdictStrategy = "none") -> "SimilarityVerdict":
        """A negative verdict."""
        return cls(is_duplicate=False, strategy=strategy)
