# src/mcqforge/providers/litellm/client.py
"""LiteLLM client implementations for completion and embedding APIs."""

from typing import Any

import litellm

from mcqforge.exceptions import EmbeddingUnavailable, ProviderError
from mcqforge.providers.base import EmbeddingClient, LLMClient
from mcqforge.providers.litellm.models import ChatModels, EmbeddingModels


class LiteLLMClient(LLMClient):
    """LiteLLM-based completion client.

    Supports any model available through LiteLLM (OpenAI, Anthropic, Gemini,
    Bedrock, Ollama, etc.). Every provider exception is re-raised as
    ProviderError so the generation loop can retry it.

    Example:
        from mcqforge.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.GPT_4O_MINI, timeout=20.0)
        text = client.complete("Generate a question about prime numbers.")
    """

    def __init__(
        self,
        model: str = ChatModels.GPT_4O,
        num_retries: int = 3,
        timeout: float | None = None,
        max_tokens: int | None = 2048,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
            num_retries: Retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
            timeout: Per-request timeout in seconds. None uses LiteLLM's default.
            max_tokens: Completion token cap. None uses the model default.
        """
        self.model = model
        self.num_retries = num_retries
        self.timeout = timeout
        self.max_tokens = max_tokens

    def _completion_kwargs(self, prompt: str, temperature: float | None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            kwargs["temperature"] = temperature
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.max_tokens is not None:
            kwargs["max_tokens"] = self.max_tokens
        return kwargs

    def _extract_content(self, response: Any) -> str:
        if not response.choices:
            raise ProviderError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ProviderError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(self, prompt: str, temperature: float | None = None) -> str:
        """Generate a completion using LiteLLM."""
        try:
            response = litellm.completion(**self._completion_kwargs(prompt, temperature))
        except Exception as e:
            raise ProviderError(f"Completion failed for model {self.model}: {e}") from e
        return self._extract_content(response)

    async def acomplete(self, prompt: str, temperature: float | None = None) -> str:
        """Generate a completion using LiteLLM (async)."""
        try:
            response = await litellm.acompletion(**self._completion_kwargs(prompt, temperature))
        except Exception as e:
            raise ProviderError(f"Completion failed for model {self.model}: {e}") from e
        return self._extract_content(response)


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Example:
        from mcqforge.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.TEXT_3_SMALL)
        vectors = client.embed(["What is 2+2? 1 2 4 5"])
    """

    def __init__(
        self,
        model: str = EmbeddingModels.TEXT_3_SMALL,
        num_retries: int = 3,
        timeout: float | None = None,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
            num_retries: Retries on rate limit errors. Default: 3.
            timeout: Per-request timeout in seconds.
        """
        self.model = model
        self.num_retries = num_retries
        self.timeout = timeout

    def _embedding_kwargs(self, texts: list[str]) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "input": texts,
            "num_retries": self.num_retries,
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs

    @staticmethod
    def _sorted_vectors(response: Any) -> list[list[float]]:
        # Sort by index to maintain order
        sorted_data = sorted(response.data, key=lambda x: x["index"])
        return [item["embedding"] for item in sorted_data]

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []
        try:
            response = litellm.embedding(**self._embedding_kwargs(texts))
        except Exception as e:
            raise EmbeddingUnavailable(f"Embedding failed for model {self.model}: {e}") from e
        return self._sorted_vectors(response)

    async def aembed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM (async)."""
        if not texts:
            return []
        try:
            response = await litellm.aembedding(**self._embedding_kwargs(texts))
        except Exception as e:
            raise EmbeddingUnavailable(f"Embedding failed for model {self.model}: {e}") from e
        return self._sorted_vectors(response)
