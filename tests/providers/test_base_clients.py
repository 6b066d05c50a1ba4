# tests/providers/test_base_clients.py
"""Tests for provider ABCs."""

import pytest

from mcqforge.providers import EmbeddingClient, LLMClient


class EchoClient(LLMClient):
    def complete(self, prompt, temperature=None):
        return f"{prompt}:{temperature}"


class ConstantEmbeddingClient(EmbeddingClient):
    def embed(self, texts):
        return [[1.0, 0.0] for _ in texts]


def test_llm_client_is_abstract():
    with pytest.raises(TypeError):
        LLMClient()


def test_embedding_client_is_abstract():
    with pytest.raises(TypeError):
        EmbeddingClient()


@pytest.mark.asyncio
async def test_acomplete_defaults_to_sync():
    assert await EchoClient().acomplete("hi", temperature=0.5) == "hi:0.5"


@pytest.mark.asyncio
async def test_aembed_defaults_to_sync():
    assert await ConstantEmbeddingClient().aembed(["a", "b"]) == [[1.0, 0.0], [1.0, 0.0]]
