# src/mcqforge/providers/litellm/__init__.py
"""LiteLLM provider clients for mcqforge.

Usage:
    from mcqforge.providers.litellm import LiteLLMClient, ChatModels

    client = LiteLLMClient(model=ChatModels.GPT_4O)
    text = client.complete("Write one multiple-choice question about fractions.")
"""

from mcqforge.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from mcqforge.providers.litellm.models import ChatModels, EmbeddingModels

__all__ = [
    "ChatModels",
    "EmbeddingModels",
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
