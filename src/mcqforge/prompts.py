# src/mcqforge/prompts.py
"""Prompt template configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from mcqforge.exceptions import ConfigurationError

# Keys looked up in a prompts JSON file, in order
PROMPT_KEYS = ("default_question_prompt", "default_prompt")

DEFAULT_QUESTION_PROMPT = """Generate one {difficulty}-level multiple-choice question on "{topic}".

Provide:
- question (string)
- options (array of at least 2 strings)
- correctAnswer (string, exactly one of the options)
- explanation (string, why the answer is correct)
- estimated_time_seconds (positive integer)

Respond with a single JSON object and nothing else. Do NOT wrap the output in markdown or code fences.

Example:
{{"question": "...", "options": ["A", "B", "C", "D"], "correctAnswer": "C", "explanation": "...", "estimated_time_seconds": 60}}"""


@dataclass(frozen=True)
class PromptConfig:
    """The prompt template handed to the generation orchestrator.

    The template may use ``{topic}`` and ``{difficulty}`` placeholders;
    literal braces must be doubled.

    Example:
        prompts = PromptConfig.from_file("./ai-prompts.json")
        prompt = prompts.render(topic="Algebra", difficulty="beginner")
    """

    template: str = DEFAULT_QUESTION_PROMPT

    def __post_init__(self) -> None:
        if not self.template or not self.template.strip():
            raise ConfigurationError("No prompt template configured for generation")

    @classmethod
    def from_file(cls, path: str | Path) -> PromptConfig:
        """Load the template from a JSON object file.

        The first non-empty value among ``default_question_prompt`` and
        ``default_prompt`` is used.

        Raises:
            ConfigurationError: If the file is missing, not a JSON object,
                or has no usable template.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigurationError(f"Prompt file not found: {path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load prompts from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Prompt file {path} must contain a JSON object")

        for key in PROMPT_KEYS:
            template = data.get(key)
            if isinstance(template, str) and template.strip():
                return cls(template=template)
        raise ConfigurationError(
            f"Prompt file {path} has none of the keys: {', '.join(PROMPT_KEYS)}"
        )

    def render(self, topic: str, difficulty: str) -> str:
        """Fill the template for one generation request."""
        try:
            return self.template.format(topic=topic, difficulty=difficulty)
        except (KeyError, IndexError, ValueError) as e:
            raise ConfigurationError(f"Prompt template is invalid: {e}") from e
