# src/mcqforge/embedder/similarity.py
"""Cosine similarity between embedding vectors."""

import logging

import numpy as np

from mcqforge.exceptions import DimensionMismatch

logger = logging.getLogger(__name__)


def cosine(a: list[float], b: list[float], *, strict: bool = False) -> float:
    """Compute cosine similarity between two vectors.

    Compares the first min(len(a), len(b)) elements. A length mismatch is
    logged as a warning; vectors from different embedding models are not
    comparable and the result should not be trusted. With strict=True a
    mismatch raises DimensionMismatch instead.

    Values:
    - 1.0 = identical direction
    - 0.0 = orthogonal, or either vector is all zeros
    - -1.0 = opposite direction

    Formula: cos(θ) = (a · b) / (||a|| * ||b||)
    """
    if len(a) != len(b):
        if strict:
            raise DimensionMismatch(len(a), len(b))
        logger.warning(
            "Comparing embeddings of different dimensions (%d vs %d); truncating",
            len(a),
            len(b),
        )

    n = min(len(a), len(b))
    if n == 0:
        return 0.0

    a_arr = np.asarray(a[:n], dtype=float)
    b_arr = np.asarray(b[:n], dtype=float)

    norm_a, norm_b = np.linalg.norm(a_arr), np.linalg.norm(b_arr)

    # Zero vectors have no direction
    if norm_a == 0 or norm_b == 0:
        return 0.0

    similarity = float(np.dot(a_arr, b_arr) / (norm_a * norm_b))
    return max(-1.0, min(1.0, similarity))
