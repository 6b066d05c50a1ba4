# src/mcqforge/configuration/providers/__init__.py
"""Provider configurations for mcqforge."""

from mcqforge.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
