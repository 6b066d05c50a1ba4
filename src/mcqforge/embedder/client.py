# src/mcqforge/embedder/client.py
"""Client-based embedder implementation."""

import asyncio
import logging
import math

from mcqforge.embedder.base import Embedder
from mcqforge.exceptions import EmbeddingUnavailable
from mcqforge.providers.base import EmbeddingClient

logger = logging.getLogger(__name__)


class ClientEmbedder(Embedder):
    """Embedder that uses an EmbeddingClient for generating embeddings.

    This is the only component of the pipeline allowed to fail because of an
    external provider outage. Every failure surfaces as EmbeddingUnavailable.

    Example:
        from mcqforge.providers.litellm import LiteLLMEmbeddingClient
        from mcqforge.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="openai/text-embedding-3-small")
        embedder = ClientEmbedder(embedding_client=client, timeout=10.0)
    """

    def __init__(self, embedding_client: EmbeddingClient, timeout: float | None = None) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation
            timeout: Seconds to wait for an async embedding call. None waits forever.
        """
        self._client = embedding_client
        self.timeout = timeout

    def _check_vector(self, result: object) -> list[float]:
        if not isinstance(result, list) or not result:
            raise EmbeddingUnavailable("Embedding provider returned no vectors")
        vector = result[0]
        if not isinstance(vector, list | tuple) or not vector:
            raise EmbeddingUnavailable("Embedding provider returned an empty vector")
        try:
            values = [float(v) for v in vector]
        except (TypeError, ValueError) as e:
            raise EmbeddingUnavailable(f"Embedding vector is not numeric: {e}") from e
        if not all(math.isfinite(v) for v in values):
            raise EmbeddingUnavailable("Embedding vector contains non-finite values")
        return values

    def embed(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        try:
            result = self._client.embed([text])
        except EmbeddingUnavailable:
            raise
        except Exception as e:
            logger.warning("Embedding creation failed: %s", e)
            raise EmbeddingUnavailable(f"Failed to create embedding: {e}") from e
        return self._check_vector(result)

    async def aembed(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text (async, time-bounded)."""
        try:
            result = await asyncio.wait_for(self._client.aembed([text]), timeout=self.timeout)
        except EmbeddingUnavailable:
            raise
        except TimeoutError as e:
            logger.warning("Embedding creation timed out after %ss", self.timeout)
            raise EmbeddingUnavailable(f"Embedding timed out after {self.timeout}s") from e
        except Exception as e:
            logger.warning("Embedding creation failed: %s", e)
            raise EmbeddingUnavailable(f"Failed to create embedding: {e}") from e
        return self._check_vector(result)
