"""mcqforge - validated, deduplicated multiple-choice question generation.

Asks an LLM for one question, validates its structure, rejects near
duplicates of stored questions, and persists the result with a full
attempt log.

Quick Start (LiteLLM + Local Storage):
    from mcqforge import Forge, LiteLLMProvider, LocalStorage, Settings

    forge = Forge(
        provider=LiteLLMProvider(
            llm="openai/gpt-4o-mini",
            embedding="openai/text-embedding-3-small",
        ),
        storage=LocalStorage("./data"),
        settings=Settings(vector_index_enabled=True),
    )
    question = forge.generate_one("Fractions", "beginner")

Explicit Stores:
    from mcqforge import Forge, LiteLLMProvider
    from mcqforge.stores import ContentStore, SQLiteAttemptLogStore, SQLiteQuestionStore

    forge = Forge.from_content_store(
        provider=LiteLLMProvider(llm="gpt-4o", embedding="text-embedding-3-small"),
        content_store=ContentStore(
            question_store=SQLiteQuestionStore("./data/questions.db"),
            log_store=SQLiteAttemptLogStore("./data/attempts.db"),
        ),
    )
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("mcqforge")
except PackageNotFoundError:
    # Source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"

# Configuration objects
from mcqforge.configuration import (
    LiteLLMProvider,
    LocalStorage,
    ProviderConfig,
    StorageConfig,
)

# Duplicate detection
from mcqforge.dedup import FingerprintStrategy, SimilarityIndex, VectorStrategy

# Embedding
from mcqforge.embedder import ClientEmbedder, Embedder, cosine

# Errors
from mcqforge.exceptions import (
    ConfigurationError,
    DimensionMismatch,
    DuplicateDetected,
    EmbeddingUnavailable,
    GenerationFailed,
    MCQForgeError,
    PersistenceError,
    ProviderError,
    SchemaError,
)

# Central configuration
from mcqforge.forge import Forge

# Models
from mcqforge.models import (
    Candidate,
    EmbeddedQuestion,
    GenerationAttemptLog,
    SimilarityVerdict,
    ValidatedQuestion,
)
from mcqforge.prompts import PromptConfig

# Provider ABCs
from mcqforge.providers import EmbeddingClient, LLMClient

# Pipeline
from mcqforge.question_generator import MAX_ATTEMPTS, GenerationOrchestrator
from mcqforge.settings import Settings

# Storage
from mcqforge.stores import (
    AttemptLogStore,
    ChromaEmbeddingIndex,
    ContentStore,
    EmbeddingIndex,
    QuestionStore,
    SQLiteAttemptLogStore,
    SQLiteEmbeddingIndex,
    SQLiteQuestionStore,
)
from mcqforge.validation import SchemaValidator, validate

__all__ = [
    # Version
    "__version__",
    # Models
    "Candidate",
    "EmbeddedQuestion",
    "GenerationAttemptLog",
    "SimilarityVerdict",
    "ValidatedQuestion",
    # Config
    "Settings",
    "PromptConfig",
    "MAX_ATTEMPTS",
    # Configuration objects
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    # Errors
    "MCQForgeError",
    "ConfigurationError",
    "ProviderError",
    "EmbeddingUnavailable",
    "DimensionMismatch",
    "SchemaError",
    "DuplicateDetected",
    "PersistenceError",
    "GenerationFailed",
    # Storage
    "QuestionStore",
    "AttemptLogStore",
    "EmbeddingIndex",
    "ContentStore",
    "SQLiteQuestionStore",
    "SQLiteAttemptLogStore",
    "SQLiteEmbeddingIndex",
    "ChromaEmbeddingIndex",
    # Validation
    "SchemaValidator",
    "validate",
    # Embedding
    "Embedder",
    "ClientEmbedder",
    "cosine",
    # Duplicate detection
    "SimilarityIndex",
    "VectorStrategy",
    "FingerprintStrategy",
    # Provider ABCs
    "LLMClient",
    "EmbeddingClient",
    # Pipeline
    "GenerationOrchestrator",
    # Central configuration
    "Forge",
]
