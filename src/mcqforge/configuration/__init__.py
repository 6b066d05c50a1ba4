# src/mcqforge/configuration/__init__.py
"""Configuration objects for mcqforge.

Provider configurations (build model clients):
- LiteLLMProvider: Uses LiteLLM for completion and embedding calls

Storage configurations (build the content store):
- LocalStorage: SQLite (plus optional Chroma) under one directory

Example:
    from mcqforge import Forge, LiteLLMProvider, LocalStorage

    forge = Forge(
        provider=LiteLLMProvider(llm="openai/gpt-4o", embedding="openai/text-embedding-3-small"),
        storage=LocalStorage("./data"),
    )
"""

from mcqforge.configuration.base import ProviderConfig, StorageConfig
from mcqforge.configuration.providers import LiteLLMProvider
from mcqforge.configuration.storage import LocalStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
]
