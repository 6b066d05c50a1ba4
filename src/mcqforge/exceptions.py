# src/mcqforge/exceptions.py
"""Exception hierarchy for mcqforge.

Only GenerationFailed, PersistenceError and ConfigurationError are expected
to reach callers of the generation pipeline. Everything else is raised and
handled inside the retry loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcqforge.models import SimilarityVerdict


class MCQForgeError(Exception):
    """Base class for all mcqforge errors."""


class ConfigurationError(MCQForgeError):
    """Raised when configuration (settings file, prompt template) is unusable."""


class ProviderError(MCQForgeError):
    """A completion or embedding provider failed or returned malformed output."""


class EmbeddingUnavailable(ProviderError):
    """The embedding provider failed, timed out, or returned no usable vector."""


class DimensionMismatch(MCQForgeError):
    """Two embedding vectors of different lengths were compared in strict mode."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Embedding dimension mismatch: {left} != {right}")
        self.left = left
        self.right = right


class SchemaError(MCQForgeError):
    """A candidate failed structural validation.

    Attributes:
        reason: Short machine-readable failure reason.
    """

    reason = "schema_error"


class EmptyText(SchemaError):
    reason = "empty_text"


class InvalidChoices(SchemaError):
    reason = "invalid_choices"


class MissingAnswer(SchemaError):
    reason = "missing_answer"


class AnswerNotInChoices(SchemaError):
    reason = "answer_not_in_choices"


class InvalidEstimatedTime(SchemaError):
    reason = "invalid_estimated_time"


class DuplicateDetected(MCQForgeError):
    """Carries a positive duplicate verdict through the retry loop."""

    def __init__(self, verdict: SimilarityVerdict) -> None:
        super().__init__(f"duplicate:{verdict.reason}")
        self.verdict = verdict


class PersistenceError(MCQForgeError):
    """A validated question or attempt log row could not be stored."""


class GenerationFailed(MCQForgeError):
    """Raised after every generation attempt has failed.

    Attributes:
        last_error: The error from the final attempt.
        attempts: Number of attempts made.
    """

    def __init__(self, last_error: BaseException | None, attempts: int) -> None:
        detail = str(last_error) if last_error is not None else "unknown error"
        super().__init__(f"Generation failed after {attempts} attempt(s): {detail}")
        self.last_error = last_error
        self.attempts = attempts
