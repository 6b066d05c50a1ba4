# src/mcqforge/models/__init__.py
"""Data models for mcqforge."""

from mcqforge.models.attempt_log import GenerationAttemptLog
from mcqforge.models.candidate import Candidate
from mcqforge.models.question import EmbeddedQuestion, ValidatedQuestion
from mcqforge.models.verdict import DuplicateReason, SimilarityVerdict

__all__ = [
    "Candidate",
    "ValidatedQuestion",
    "EmbeddedQuestion",
    "SimilarityVerdict",
    "DuplicateReason",
    "GenerationAttemptLog",
]
