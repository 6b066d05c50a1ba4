# src/mcqforge/question_generator/orchestrator.py
"""Generation orchestrator: request, validate, deduplicate, persist."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any
from uuid import uuid4

from mcqforge.dedup import SimilarityIndex
from mcqforge.embedder import Embedder
from mcqforge.exceptions import (
    DuplicateDetected,
    GenerationFailed,
    PersistenceError,
    ProviderError,
    SchemaError,
)
from mcqforge.models import Candidate, GenerationAttemptLog, ValidatedQuestion
from mcqforge.prompts import PromptConfig
from mcqforge.providers.base import LLMClient
from mcqforge.question_generator.parsing import parse_candidate_payload
from mcqforge.settings import Settings
from mcqforge.stores import ContentStore
from mcqforge.validation import SchemaValidator

logger = logging.getLogger(__name__)

AttemptCallback = Callable[[str, int, int, str], None]
"""Callback for generation progress updates.

Args:
    event: "requesting", "validating", "deduplicating", "persisting",
           "retrying", "failed" or "done"
    attempt: Current attempt number (1-based)
    max_attempts: Attempt budget for this call
    message: Human-readable status message
"""


class GenerationOrchestrator:
    """Produces one novel, validated, persisted question per call.

    Per attempt:
    1. Request a candidate from the completion provider
    2. Validate its structure
    3. Check it against the stored corpus for duplicates
    4. Persist it, attach its embedding (best effort) and return it

    Provider errors, schema errors and duplicate verdicts are retried with
    linear backoff up to ``settings.max_attempts`` times. A persistence
    failure is not retried. Each attempt appends exactly one attempt log row.

    Concurrent calls are not coordinated: two calls for the same topic can
    both pass the duplicate check before either persists.

    Example:
        orchestrator = GenerationOrchestrator(
            llm_client=LiteLLMClient(model="openai/gpt-4o-mini"),
            content_store=store,
            similarity_index=SimilarityIndex(store),
        )
        question = await orchestrator.agenerate_one("Algebra", "beginner")
    """

    def __init__(
        self,
        llm_client: LLMClient,
        content_store: ContentStore,
        similarity_index: SimilarityIndex,
        prompts: PromptConfig | None = None,
        settings: Settings | None = None,
        embedder: Embedder | None = None,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            llm_client: Completion provider.
            content_store: Where questions and attempt logs are persisted.
            similarity_index: Duplicate checker over content_store's corpus.
            prompts: Prompt template configuration. Defaults to the built-in template.
            settings: Retry, timeout and validation settings.
            embedder: Used to attach embeddings after persisting. Defaults to
                the similarity index's embedder when vector search is enabled.
            sleep: Awaitable delay used for backoff. Defaults to asyncio.sleep.
        """
        self.llm_client = llm_client
        self.content_store = content_store
        self.similarity_index = similarity_index
        self.prompts = prompts or PromptConfig()
        self.settings = settings or Settings()
        self.validator = SchemaValidator(self.settings.default_estimated_time_seconds)
        if embedder is None and similarity_index.vector is not None:
            embedder = similarity_index.vector.embedder
        self.embedder = embedder
        self._sleep = sleep or asyncio.sleep

    @property
    def max_attempts(self) -> int:
        return self.settings.max_attempts

    @property
    def model(self) -> str | None:
        return getattr(self.llm_client, "model", None)

    async def _request_candidate(self, prompt: str) -> str:
        """Call the provider, bounding the wait by the provider timeout."""
        timeout = self.settings.provider_timeout_seconds
        try:
            return await asyncio.wait_for(
                self.llm_client.acomplete(prompt, temperature=self.settings.generation_temperature),
                timeout=timeout,
            )
        except ProviderError:
            raise
        except TimeoutError as e:
            raise ProviderError(f"Provider timed out after {timeout}s") from e
        except Exception as e:
            raise ProviderError(f"Provider call failed: {e}") from e

    def _log_attempt(
        self,
        *,
        prompt: str,
        topic: str,
        difficulty: str,
        attempt: int,
        requester_id: str | None,
        response: Any,
        success: bool,
        error: str | None = None,
    ) -> None:
        self.content_store.append_log(
            GenerationAttemptLog(
                requester_id=requester_id,
                prompt=prompt,
                params={"topic": topic, "difficulty": difficulty, "attempt": attempt},
                model=self.model,
                response=response,
                success=success,
                error=error,
            )
        )

    async def _attach_embedding(self, question: ValidatedQuestion) -> None:
        """Store the new question's embedding. Failures only log a warning."""
        if not self.similarity_index.vector_enabled or self.embedder is None:
            return
        try:
            embedding = await self.embedder.aembed(question.embedding_text())
            self.content_store.attach_embedding(question.id, embedding, topic=question.topic)
        except Exception as e:
            logger.warning("Failed to persist embedding for question %s: %s", question.id, e)

    @staticmethod
    def _describe(error: Exception) -> str:
        if isinstance(error, SchemaError):
            return f"{error.reason}: {error}"
        return str(error)

    async def agenerate_one(
        self,
        topic: str,
        difficulty: str,
        requester_id: str | None = None,
        threshold: float | None = None,
        on_attempt: AttemptCallback | None = None,
    ) -> ValidatedQuestion:
        """Generate, validate, deduplicate and persist one question.

        Args:
            topic: Question topic.
            difficulty: Difficulty label, e.g. "beginner".
            requester_id: Caller identity recorded in attempt logs.
            threshold: Override the duplicate similarity threshold for this call.
            on_attempt: Optional callback(event, attempt, max_attempts, message).

        Returns:
            The persisted ValidatedQuestion.

        Raises:
            GenerationFailed: If every attempt failed.
            PersistenceError: If the question or a log row could not be stored.
            ConfigurationError: If the prompt template cannot be rendered.
        """
        max_attempts = self.max_attempts

        def progress(event: str, attempt: int, message: str = "") -> None:
            if on_attempt:
                on_attempt(event, attempt, max_attempts, message)

        prompt = self.prompts.render(topic=topic, difficulty=difficulty)
        last_error: Exception | None = None

        for attempt in range(1, max_attempts + 1):
            response: Any = None
            try:
                progress("requesting", attempt, f"Requesting candidate ({attempt}/{max_attempts})")
                raw_text = await self._request_candidate(prompt)
                response = raw_text
                payload = parse_candidate_payload(raw_text)
                response = payload

                progress("validating", attempt, "Validating candidate")
                question = self.validator.validate(
                    Candidate.from_provider(payload),
                    topic=topic,
                    difficulty=difficulty,
                    question_id=str(uuid4()),
                    metadata={
                        "raw_candidate": payload,
                        "attempt": attempt,
                        "model": self.model,
                        "requester_id": requester_id,
                    },
                )

                progress("deduplicating", attempt, "Checking for duplicates")
                verdict = await self.similarity_index.afind_duplicate(
                    question.text, question.choices, topic=topic, threshold=threshold
                )
                if verdict.is_duplicate:
                    raise DuplicateDetected(verdict)

            except (ProviderError, SchemaError, DuplicateDetected) as e:
                last_error = e
                logger.info(
                    "Generation attempt %d/%d for topic=%r failed: %s",
                    attempt,
                    max_attempts,
                    topic,
                    e,
                )
                self._log_attempt(
                    prompt=prompt,
                    topic=topic,
                    difficulty=difficulty,
                    attempt=attempt,
                    requester_id=requester_id,
                    response=response,
                    success=False,
                    error=self._describe(e),
                )
                if attempt < max_attempts:
                    delay = self.settings.backoff_for(attempt)
                    progress("retrying", attempt, f"{e}; retrying in {delay:.1f}s")
                    await self._sleep(delay)
                continue

            progress("persisting", attempt, "Persisting question")
            try:
                self.content_store.insert(question)
            except PersistenceError as e:
                self._log_attempt(
                    prompt=prompt,
                    topic=topic,
                    difficulty=difficulty,
                    attempt=attempt,
                    requester_id=requester_id,
                    response=response,
                    success=False,
                    error=f"persistence: {e}",
                )
                raise

            await self._attach_embedding(question)
            self._log_attempt(
                prompt=prompt,
                topic=topic,
                difficulty=difficulty,
                attempt=attempt,
                requester_id=requester_id,
                response=response,
                success=True,
            )
            logger.info(
                "Generated question %s for topic=%r difficulty=%r on attempt %d",
                question.id,
                topic,
                difficulty,
                attempt,
            )
            progress("done", attempt, f"Stored question {question.id}")
            return question

        progress("failed", max_attempts, f"All {max_attempts} attempts failed")
        raise GenerationFailed(last_error, max_attempts)

    def generate_one(
        self,
        topic: str,
        difficulty: str,
        requester_id: str | None = None,
        threshold: float | None = None,
        on_attempt: AttemptCallback | None = None,
    ) -> ValidatedQuestion:
        """Synchronous wrapper around agenerate_one().

        Must not be called from inside a running event loop; use
        agenerate_one() there.
        """
        return asyncio.run(
            self.agenerate_one(
                topic,
                difficulty,
                requester_id=requester_id,
                threshold=threshold,
                on_attempt=on_attempt,
            )
        )
