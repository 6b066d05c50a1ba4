# src/mcqforge/question_generator/__init__.py
"""Question generation pipeline for mcqforge."""

from mcqforge.question_generator.orchestrator import AttemptCallback, GenerationOrchestrator
from mcqforge.question_generator.parsing import parse_candidate_payload, strip_code_fences
from mcqforge.settings import MAX_ATTEMPTS

__all__ = [
    "MAX_ATTEMPTS",
    "AttemptCallback",
    "GenerationOrchestrator",
    "parse_candidate_payload",
    "strip_code_fences",
]
