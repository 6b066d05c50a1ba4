# src/mcqforge/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcqforge.embedder import Embedder
    from mcqforge.providers import LLMClient
    from mcqforge.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for completion and embedding calls.

    Args:
        llm: LiteLLM model identifier for question generation.
             Examples: "openai/gpt-4o", "anthropic/claude-sonnet-4-5-20250929"
        embedding: LiteLLM model identifier for embeddings.
                   Examples: "openai/text-embedding-3-small"

    Example:
        provider = LiteLLMProvider(
            llm="openai/gpt-4o-mini",
            embedding="openai/text-embedding-3-small",
        )
    """

    llm: str
    embedding: str

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build a LiteLLMClient.

        Args:
            settings: Settings containing num_retries and provider_timeout_seconds.
        """
        from mcqforge.providers.litellm import LiteLLMClient

        return LiteLLMClient(
            model=self.llm,
            num_retries=settings.num_retries,
            timeout=settings.provider_timeout_seconds,
        )

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder over a LiteLLM embedding client.

        Args:
            settings: Settings containing num_retries and embedding_timeout_seconds.
        """
        from mcqforge.embedder import ClientEmbedder
        from mcqforge.providers.litellm import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
            timeout=settings.embedding_timeout_seconds,
        )
        return ClientEmbedder(
            embedding_client=embedding_client,
            timeout=settings.embedding_timeout_seconds,
        )
