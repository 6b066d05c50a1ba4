# src/mcqforge/question_generator/parsing.py
"""Parsing of raw provider text into a candidate payload."""

import json
import re
from typing import Any

from mcqforge.exceptions import ProviderError

_FENCED = re.compile(r"```(?:json)?\s*\n(.*?)\n\s*```", re.DOTALL | re.IGNORECASE)
_LEADING_FENCE = re.compile(r"^\s*```(?:json)?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove a markdown code block wrapper if present."""
    match = _FENCED.search(text)
    if match:
        return match.group(1).strip()
    return _TRAILING_FENCE.sub("", _LEADING_FENCE.sub("", text)).strip()


def parse_candidate_payload(text: str) -> dict[str, Any]:
    """Extract one question object from provider output.

    Accepts a JSON object, a JSON array of objects (the first is used), or
    an object wrapping such an array under ``questions``.

    Raises:
        ProviderError: If the text holds no usable JSON object.
    """
    if not text or not text.strip():
        raise ProviderError("Model returned empty result")

    try:
        parsed = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        raise ProviderError(f"Model did not return valid JSON: {e}") from e

    if isinstance(parsed, dict) and isinstance(parsed.get("questions"), list):
        parsed = parsed["questions"]

    if isinstance(parsed, list):
        if not parsed:
            raise ProviderError("Model returned empty result")
        parsed = parsed[0]

    if not isinstance(parsed, dict):
        raise ProviderError(f"Model returned {type(parsed).__name__}, expected a JSON object")
    return parsed
