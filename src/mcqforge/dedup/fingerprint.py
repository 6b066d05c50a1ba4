# src/mcqforge/dedup/fingerprint.py
"""Deterministic text fingerprints for the non-vector duplicate check."""

import re

_NON_ALNUM = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Lower-case, drop punctuation and symbols, collapse whitespace.

    Example:
        >>> normalize_text("  What is  2+2? ")
        'what is 22'
    """
    lowered = (text or "").lower()
    stripped = _NON_ALNUM.sub("", lowered)
    return _WHITESPACE.sub(" ", stripped).strip()


def choice_fingerprint(choices: list[str] | None) -> str:
    """Normalized choices joined with '|', order preserved."""
    return "|".join(normalize_text(choice) for choice in choices or [])
