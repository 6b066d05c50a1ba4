# src/mcqforge/models/attempt_log.py
"""Generation attempt log model."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field


class GenerationAttemptLog(BaseModel):
    """Append-only audit record of one generation attempt.

    One row exists per attempt regardless of outcome. ``id`` is assigned
    by the store on append.
    """

    id: int | None = None
    requester_id: str | None = None
    prompt: str
    params: dict[str, Any] = Field(default_factory=dict)
    model: str | None = None
    response: Any = None
    success: bool
    error: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
