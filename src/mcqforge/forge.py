# src/mcqforge/forge.py
"""Central configuration class for mcqforge."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcqforge.configuration import ProviderConfig, StorageConfig
    from mcqforge.models import ValidatedQuestion
    from mcqforge.question_generator import AttemptCallback
    from mcqforge.stores import ContentStore

from mcqforge.dedup import SimilarityIndex
from mcqforge.prompts import PromptConfig
from mcqforge.question_generator import GenerationOrchestrator
from mcqforge.settings import Settings


class Forge:
    """Bundles provider clients, the content store and settings.

    Configure once, then generate questions or build the pipeline pieces
    individually.

    1. With a storage bundle:

        from mcqforge import Forge, LiteLLMProvider, LocalStorage, Settings

        forge = Forge(
            provider=LiteLLMProvider(
                llm="openai/gpt-4o-mini",
                embedding="openai/text-embedding-3-small",
            ),
            storage=LocalStorage("./data"),
            settings=Settings(vector_index_enabled=True),
        )
        question = forge.generate_one("Algebra", "beginner")

    2. With an explicit content store:

        forge = Forge.from_content_store(provider=provider, content_store=store)
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig,
        # EITHER storage bundle...
        storage: StorageConfig | None = None,
        # ...OR an explicit content store
        content_store: ContentStore | None = None,
        # Common
        settings: Settings | None = None,
        prompts: PromptConfig | None = None,
    ) -> None:
        """Create a Forge.

        Args:
            provider: Provider configuration (builds LLM client and embedder).
            storage: Storage bundle. Mutually exclusive with content_store.
            content_store: Explicit content store.
            settings: Behavioral settings.
            prompts: Prompt template configuration. Defaults to the built-in template.

        Raises:
            ValueError: If neither or both of storage and content_store are given.
        """
        self.settings = settings if settings is not None else Settings()
        self.prompts = prompts if prompts is not None else PromptConfig()

        if storage is not None and content_store is not None:
            raise ValueError("Cannot mix 'storage' bundle with an explicit content_store")
        if storage is not None:
            self.content_store = storage.build_content_store(self.settings)
        elif content_store is not None:
            self.content_store = content_store
        else:
            raise ValueError("Must provide either 'storage' bundle or 'content_store'")

        self.llm_client = provider.build_llm_client(self.settings)
        self.embedder = (
            provider.build_embedder(self.settings) if self.settings.vector_index_enabled else None
        )

    @classmethod
    def from_content_store(
        cls,
        *,
        provider: ProviderConfig,
        content_store: ContentStore,
        settings: Settings | None = None,
        prompts: PromptConfig | None = None,
    ) -> Forge:
        """Create a Forge around an existing content store."""
        return cls(
            provider=provider,
            content_store=content_store,
            settings=settings,
            prompts=prompts,
        )

    def similarity_index(self) -> SimilarityIndex:
        """Build a SimilarityIndex over this forge's content store."""
        return SimilarityIndex(
            self.content_store,
            embedder=self.embedder,
            vector_enabled=self.settings.vector_index_enabled,
            threshold=self.settings.similarity_threshold,
            k=self.settings.nearest_k,
            window=self.settings.fingerprint_window,
        )

    def orchestrator(self) -> GenerationOrchestrator:
        """Build a GenerationOrchestrator wired to this forge's components."""
        return GenerationOrchestrator(
            llm_client=self.llm_client,
            content_store=self.content_store,
            similarity_index=self.similarity_index(),
            prompts=self.prompts,
            settings=self.settings,
            embedder=self.embedder,
        )

    def generate_one(
        self,
        topic: str,
        difficulty: str,
        requester_id: str | None = None,
        on_attempt: AttemptCallback | None = None,
    ) -> ValidatedQuestion:
        """Generate and persist one question. See GenerationOrchestrator.generate_one."""
        return self.orchestrator().generate_one(
            topic, difficulty, requester_id=requester_id, on_attempt=on_attempt
        )

    async def agenerate_one(
        self,
        topic: str,
        difficulty: str,
        requester_id: str | None = None,
        on_attempt: AttemptCallback | None = None,
    ) -> ValidatedQuestion:
        """Generate and persist one question (async)."""
        return await self.orchestrator().agenerate_one(
            topic, difficulty, requester_id=requester_id, on_attempt=on_attempt
        )
