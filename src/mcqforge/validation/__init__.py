# src/mcqforge/validation/__init__.py
"""Structural validation of provider candidates."""

from mcqforge.validation.schema import (
    DEFAULT_ESTIMATED_TIME_SECONDS,
    SchemaValidator,
    validate,
)

__all__ = ["DEFAULT_ESTIMATED_TIME_SECONDS", "SchemaValidator", "validate"]
