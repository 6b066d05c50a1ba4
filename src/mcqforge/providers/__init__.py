# src/mcqforge/providers/__init__.py
"""Provider implementations for mcqforge.

- LLMClient: Abstract base class for completion providers
- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementations (requires: pip install mcqforge[litellm])

Usage:
    from mcqforge.providers import LLMClient, EmbeddingClient
    from mcqforge.providers.litellm import LiteLLMClient, ChatModels
"""

from mcqforge.providers.base import EmbeddingClient, LLMClient

try:
    from mcqforge.providers.litellm import (
        ChatModels,
        EmbeddingModels,
        LiteLLMClient,
        LiteLLMEmbeddingClient,
    )
except ImportError as e:
    from mcqforge._optional import missing_extra

    class ChatModels:  # type: ignore[no-redef]
        """Unavailable without the litellm extra."""

    class EmbeddingModels:  # type: ignore[no-redef]
        """Unavailable without the litellm extra."""

    LiteLLMClient = missing_extra("LiteLLMClient", "litellm", e)  # type: ignore[misc,assignment]
    LiteLLMEmbeddingClient = missing_extra(  # type: ignore[misc,assignment]
        "LiteLLMEmbeddingClient", "litellm", e
    )

__all__ = [
    "LLMClient",
    "EmbeddingClient",
    "ChatModels",
    "EmbeddingModels",
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
