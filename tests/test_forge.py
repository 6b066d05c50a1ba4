# tests/test_forge.py
"""Tests for the Forge class."""

from dataclasses import dataclass

import pytest

from mcqforge import Forge, LocalStorage, Settings
from mcqforge.dedup import SimilarityIndex
from mcqforge.prompts import PromptConfig
from mcqforge.question_generator import GenerationOrchestrator


@dataclass(frozen=True)
class FakeProvider:
    """Provider configuration handing out test doubles."""

    llm: object = None
    embedder: object = None

    def build_llm_client(self, settings):
        return self.llm

    def build_embedder(self, settings):
        return self.embedder


class TestConstruction:
    def test_with_storage_bundle(self, temp_dir):
        forge = Forge(provider=FakeProvider(), storage=LocalStorage(temp_dir))
        assert forge.content_store.count_questions() == 0
        assert isinstance(forge.settings, Settings)
        assert isinstance(forge.prompts, PromptConfig)

    def test_from_content_store(self, content_store):
        forge = Forge.from_content_store(provider=FakeProvider(), content_store=content_store)
        assert forge.content_store is content_store

    def test_requires_storage(self):
        with pytest.raises(ValueError, match="Must provide"):
            Forge(provider=FakeProvider())

    def test_rejects_both_storage_kinds(self, temp_dir, content_store):
        with pytest.raises(ValueError, match="Cannot mix"):
            Forge(
                provider=FakeProvider(),
                storage=LocalStorage(temp_dir),
                content_store=content_store,
            )

    def test_embedder_only_when_vector_enabled(self, temp_dir, keyword_embedder):
        provider = FakeProvider(embedder=keyword_embedder)
        plain = Forge(provider=provider, storage=LocalStorage(temp_dir))
        assert plain.embedder is None

        vector = Forge(
            provider=provider,
            storage=LocalStorage(temp_dir),
            settings=Settings(vector_index_enabled=True),
        )
        assert vector.embedder is keyword_embedder
        assert vector.content_store.has_embedding_index()


class TestWiring:
    def test_similarity_index_uses_settings(self, content_store):
        settings = Settings(similarity_threshold=0.95, fingerprint_window=50)
        forge = Forge.from_content_store(
            provider=FakeProvider(), content_store=content_store, settings=settings
        )
        index = forge.similarity_index()

        assert isinstance(index, SimilarityIndex)
        assert index.threshold == 0.95
        assert index.vector_enabled is False
        assert index.content_store is content_store

    def test_orchestrator_shares_components(self, content_store):
        prompts = PromptConfig(template="Ask about {topic} ({difficulty})")
        forge = Forge.from_content_store(
            provider=FakeProvider(), content_store=content_store, prompts=prompts
        )
        orchestrator = forge.orchestrator()

        assert isinstance(orchestrator, GenerationOrchestrator)
        assert orchestrator.llm_client is forge.llm_client
        assert orchestrator.content_store is content_store
        assert orchestrator.prompts is prompts
        assert orchestrator.settings is forge.settings


class TestGenerate:
    def test_generate_one_persists(self, temp_dir, scripted_llm, candidate_text):
        forge = Forge(
            provider=FakeProvider(llm=scripted_llm([candidate_text()])),
            storage=LocalStorage(temp_dir),
        )
        question = forge.generate_one("Algebra", "beginner", requester_id="user-1")

        assert question.correct_answer == "4"
        assert forge.content_store.get(question.id) == question
        logs = forge.content_store.list_logs()
        assert len(logs) == 1
        assert logs[0].success is True

    @pytest.mark.asyncio
    async def test_agenerate_one_with_vector_index(
        self, temp_dir, scripted_llm, candidate_text, keyword_embedder
    ):
        forge = Forge(
            provider=FakeProvider(
                llm=scripted_llm([candidate_text()]), embedder=keyword_embedder
            ),
            storage=LocalStorage(temp_dir),
            settings=Settings(vector_index_enabled=True),
        )
        question = await forge.agenerate_one("Algebra", "beginner")

        assert forge.content_store.count_questions() == 1
        assert forge.content_store.get(question.id) is not None
        assert keyword_embedder.calls
