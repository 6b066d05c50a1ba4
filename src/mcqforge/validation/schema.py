# src/mcqforge/validation/schema.py
"""Schema validator: the single gate between provider output and storage.

Rules are applied in order and each failure has its own exception type:

1. text must be a non-empty string after trimming (EmptyText)
2. choices must be a list of at least two strings (InvalidChoices)
3. correct_answer must be present (MissingAnswer) and resolve to a choice
   (AnswerNotInChoices). Numbers are zero-based indexes into choices.
4. estimated_time_seconds, when present, must be a positive integer
   (InvalidEstimatedTime); it defaults to 60 otherwise.
"""

from __future__ import annotations

from typing import Any

from mcqforge.exceptions import (
    AnswerNotInChoices,
    EmptyText,
    InvalidChoices,
    InvalidEstimatedTime,
    MissingAnswer,
)
from mcqforge.models import Candidate, ValidatedQuestion

DEFAULT_ESTIMATED_TIME_SECONDS = 60


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never an index
    return isinstance(value, int | float) and not isinstance(value, bool)


def _check_text(text: Any) -> str:
    if not isinstance(text, str) or not text.strip():
        raise EmptyText("Question text must be a non-empty string")
    return text.strip()


def _check_choices(choices: Any) -> list[str]:
    if not isinstance(choices, list | tuple):
        raise InvalidChoices(f"Choices must be a list of strings, got {type(choices).__name__}")
    if len(choices) < 2:
        raise InvalidChoices(f"At least 2 choices are required, got {len(choices)}")
    if not all(isinstance(choice, str) for choice in choices):
        raise InvalidChoices("Every choice must be a string")
    return list(choices)


def _resolve_answer(answer: Any, choices: list[str]) -> str:
    if answer is None:
        raise MissingAnswer("correct_answer is missing")

    if _is_number(answer):
        if isinstance(answer, float) and not answer.is_integer():
            raise AnswerNotInChoices(f"Answer index {answer} is not an integer")
        index = int(answer)
        if not 0 <= index < len(choices):
            raise AnswerNotInChoices(
                f"Answer index {index} is out of range for {len(choices)} choices"
            )
        return choices[index]

    if isinstance(answer, str):
        wanted = answer.strip()
        for choice in choices:
            if choice.strip() == wanted:
                return choice
        raise AnswerNotInChoices(f"Answer {answer!r} is not one of the choices")

    raise AnswerNotInChoices(f"Unsupported answer type {type(answer).__name__}")


def _check_estimated_time(value: Any, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if _is_number(value) and float(value).is_integer() and value > 0:
        return int(value)
    raise InvalidEstimatedTime(f"estimated_time_seconds must be a positive integer, got {value!r}")


def validate(
    candidate: Candidate | ValidatedQuestion | dict[str, Any],
    *,
    topic: str | None = None,
    difficulty: str | None = None,
    question_id: str | None = None,
    metadata: dict[str, Any] | None = None,
    default_estimated_time_seconds: int = DEFAULT_ESTIMATED_TIME_SECONDS,
) -> ValidatedQuestion:
    """Validate a candidate and return the normalized question.

    Passing a ValidatedQuestion re-validates it and keeps its id, topic,
    difficulty, metadata and creation time unless overridden, so
    validation is idempotent.

    Args:
        candidate: Provider candidate, raw provider dict, or validated question.
        topic: Topic to attach. Required unless candidate is a ValidatedQuestion.
        difficulty: Difficulty to attach. Same rule as topic.
        question_id: Id to assign. A new uuid4 is generated when omitted.
        metadata: Metadata to attach. Defaults to the raw provider payload.
        default_estimated_time_seconds: Used when the candidate has no time.

    Returns:
        The ValidatedQuestion.

    Raises:
        SchemaError: One of its subclasses, for the first rule violated.
    """
    extra: dict[str, Any] = {}
    if isinstance(candidate, ValidatedQuestion):
        topic = candidate.topic if topic is None else topic
        difficulty = candidate.difficulty if difficulty is None else difficulty
        question_id = candidate.id if question_id is None else question_id
        metadata = candidate.metadata if metadata is None else metadata
        extra["created_at"] = candidate.created_at
        candidate = Candidate(
            text=candidate.text,
            choices=candidate.choices,
            correct_answer=candidate.correct_answer,
            explanation=candidate.explanation,
            estimated_time_seconds=candidate.estimated_time_seconds,
        )
    elif isinstance(candidate, dict):
        candidate = Candidate.from_provider(candidate)

    if topic is None or difficulty is None:
        raise ValueError("topic and difficulty are required to validate a candidate")

    text = _check_text(candidate.text)
    choices = _check_choices(candidate.choices)
    correct_answer = _resolve_answer(candidate.correct_answer, choices)
    estimated_time = _check_estimated_time(
        candidate.estimated_time_seconds, default_estimated_time_seconds
    )

    explanation = candidate.explanation
    if explanation is not None and not isinstance(explanation, str):
        explanation = str(explanation)

    if metadata is None:
        metadata = {"raw_candidate": candidate.raw} if candidate.raw else {}
    if question_id is not None:
        extra["id"] = question_id

    return ValidatedQuestion(
        text=text,
        choices=choices,
        correct_answer=correct_answer,
        explanation=explanation or None,
        estimated_time_seconds=estimated_time,
        difficulty=difficulty,
        topic=topic,
        metadata=dict(metadata),
        **extra,
    )


class SchemaValidator:
    """Validator bound to a default estimated time.

    Example:
        validator = SchemaValidator(default_estimated_time_seconds=90)
        question = validator.validate(candidate, topic="Algebra", difficulty="beginner")
    """

    def __init__(self, default_estimated_time_seconds: int = DEFAULT_ESTIMATED_TIME_SECONDS) -> None:
        if default_estimated_time_seconds <= 0:
            raise ValueError("default_estimated_time_seconds must be positive")
        self.default_estimated_time_seconds = default_estimated_time_seconds

    def validate(
        self,
        candidate: Candidate | ValidatedQuestion | dict[str, Any],
        *,
        topic: str | None = None,
        difficulty: str | None = None,
        question_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> ValidatedQuestion:
        """Validate a candidate. See :func:`validate`."""
        return validate(
            candidate,
            topic=topic,
            difficulty=difficulty,
            question_id=question_id,
            metadata=metadata,
            default_estimated_time_seconds=self.default_estimated_time_seconds,
        )
