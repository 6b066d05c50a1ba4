# src/mcqforge/dedup/__init__.py
"""Duplicate detection against previously generated questions."""

from mcqforge.dedup.base import DuplicateStrategy
from mcqforge.dedup.fingerprint import choice_fingerprint, normalize_text
from mcqforge.dedup.index import SimilarityIndex
from mcqforge.dedup.strategies import FingerprintStrategy, VectorStrategy

__all__ = [
    "DuplicateStrategy",
    "FingerprintStrategy",
    "VectorStrategy",
    "SimilarityIndex",
    "normalize_text",
    "choice_fingerprint",
]
