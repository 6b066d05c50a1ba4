# src/mcqforge/dedup/base.py
"""Duplicate strategy abstract base class."""

from abc import ABC, abstractmethod

from mcqforge.models import SimilarityVerdict


class DuplicateStrategy(ABC):
    """Abstract base class for duplicate detection strategies.

    Strategies may raise; SimilarityIndex decides how failures degrade.
    """

    @abstractmethod
    def find_duplicate(
        self,
        text: str,
        choices: list[str],
        topic: str | None,
        threshold: float,
    ) -> SimilarityVerdict:
        """Check a question against the stored corpus."""
        ...

    async def afind_duplicate(
        self,
        text: str,
        choices: list[str],
        topic: str | None,
        threshold: float,
    ) -> SimilarityVerdict:
        """Check a question against the stored corpus (async).

        Default implementation calls sync find_duplicate().
        """
        return self.find_duplicate(text, choices, topic, threshold)
