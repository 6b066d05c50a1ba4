# src/mcqforge/models/candidate.py
"""Candidate data model."""

from typing import Any

from pydantic import BaseModel, Field

# Provider key aliases, first match wins
TEXT_KEYS = ("question", "question_text", "prompt", "text")
CHOICE_KEYS = ("options", "choices")
ANSWER_KEYS = ("correctAnswer", "correct_answer")
TIME_KEYS = ("estimated_time_seconds", "estimatedTimeSeconds", "time")


def _first_present(payload: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if payload.get(key) is not None:
            return payload[key]
    return None


class Candidate(BaseModel):
    """Unvalidated content returned by the provider for one attempt.

    Fields are untyped on purpose: nothing about a candidate is trusted
    until it passes the schema validator.
    """

    text: Any = None
    choices: Any = None
    correct_answer: Any = None
    explanation: Any = None
    estimated_time_seconds: Any = None
    raw: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_provider(cls, payload: dict[str, Any]) -> "Candidate":
        """Build a candidate from a provider JSON object, resolving key aliases."""
        return cls(
            text=_first_present(payload, TEXT_KEYS),
            choices=_first_present(payload, CHOICE_KEYS),
            correct_answer=_first_present(payload, ANSWER_KEYS),
            explanation=payload.get("explanation"),
            estimated_time_seconds=_first_present(payload, TIME_KEYS),
            raw=dict(payload),
        )
