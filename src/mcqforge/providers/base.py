# src/mcqforge/providers/base.py
"""Abstract base classes for completion and embedding providers."""

from abc import ABC, abstractmethod


class LLMClient(ABC):
    """Abstract base class for text completion providers.

    The pipeline treats completion as a black box: a prompt goes in, raw
    text comes out. Parsing that text is the caller's job.

    Example:
        class MyLLMClient(LLMClient):
            def complete(self, prompt, temperature=None):
                return my_api.generate(prompt, temp=temperature)
    """

    model: str | None = None

    @abstractmethod
    def complete(self, prompt: str, temperature: float | None = None) -> str:
        """Generate a completion for the given prompt.

        Args:
            prompt: The full prompt text.
            temperature: Optional temperature (0.0-1.0). None uses the provider default.

        Returns:
            The raw generated text.
        """
        ...

    async def acomplete(self, prompt: str, temperature: float | None = None) -> str:
        """Generate a completion for the given prompt (async).

        Default implementation calls sync complete(). Override in subclasses
        for true async behavior.
        """
        return self.complete(prompt, temperature)


class EmbeddingClient(ABC):
    """Abstract base class for embedding providers.

    Example:
        class MyEmbeddingClient(EmbeddingClient):
            def embed(self, texts):
                return my_api.embed_batch(texts)
    """

    model: str | None = None

    @abstractmethod
    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts.

        Returns:
            One vector per input text, in input order.
        """
        ...

    async def aembed(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors (async). Defaults to sync embed()."""
        return self.embed(texts)
