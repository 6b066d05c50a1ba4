# src/mcqforge/configuration/base.py
"""Protocol definitions for configuration objects.

Provider and storage configurations are structural: any frozen dataclass
with the right methods satisfies them without inheritance. Stores, by
contrast, use ABCs (see mcqforge.stores.base) because implementations share
behavior through inheritance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mcqforge.embedder import Embedder
    from mcqforge.providers import LLMClient
    from mcqforge.settings import Settings
    from mcqforge.stores import ContentStore


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the external-model components:
    - LLMClient: produces raw candidate text
    - Embedder: produces vectors for duplicate detection

    Example implementation:
        @dataclass(frozen=True)
        class LiteLLMProvider:
            llm: str
            embedding: str

            def build_llm_client(self, settings: Settings) -> LLMClient: ...
            def build_embedder(self, settings: Settings) -> Embedder: ...
    """

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build the completion client used to request candidates."""
        ...

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build the embedder used by vector duplicate detection."""
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Example implementation:
        @dataclass(frozen=True)
        class LocalStorage:
            data_dir: str

            def build_content_store(self, settings: Settings) -> ContentStore: ...
    """

    def build_content_store(self, settings: Settings) -> ContentStore:
        """Build the content store (questions, attempt logs, embedding index)."""
        ...
