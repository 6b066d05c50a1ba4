# src/mcqforge/config.py
"""Configuration loading utilities for mcqforge.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using mcqforge as a library

It handles:
- Finding and loading mcqforge.yaml config files
- Loading .env files for API keys
- Building Settings objects from YAML and MCQFORGE_* environment variables
- Creating Forge instances from configuration
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

import yaml
from pydantic import ValidationError

from mcqforge.exceptions import ConfigurationError
from mcqforge.prompts import PromptConfig
from mcqforge.settings import PROFILES, Settings

if TYPE_CHECKING:
    from mcqforge.forge import Forge
    from mcqforge.stores import ContentStore

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = "./mcqforge_data"
CONFIG_FILES = ["mcqforge.yaml", "mcqforge.yml", ".mcqforgerc"]
ENV_FILE = ".env"

DEFAULT_EMBEDDING_MODEL = "openai/text-embedding-3-small"

# Valid configuration keys for validation
VALID_ROOT_KEYS = {
    "llm_model",
    "embedding_model",
    "data_dir",
    "vector_backend",
    "prompts_path",
    "settings",
}

VALID_SETTINGS_KEYS = set(Settings.model_fields) | {"profile"}

VALID_VECTOR_BACKENDS = ("sqlite", "chroma")


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from .env file if it exists.

    Existing environment variables are never overridden, so provider API keys
    exported in the shell win over the file.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("\"'")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown root keys.

    Unknown keys under ``settings:`` are an error, raised by build_settings.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)

    Raises:
        ConfigurationError: If the file is missing, unparsable, or not a mapping.
    """
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
    else:
        config_path = find_config_file()

    if config_path is None:
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return config


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from MCQFORGE_* environment variables.

    Returns only values that were explicitly set, so YAML settings are used
    unless overridden by env vars.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    if "MCQFORGE_VECTOR_INDEX_ENABLED" in os.environ:
        result["vector_index_enabled"] = _parse_bool(os.environ["MCQFORGE_VECTOR_INDEX_ENABLED"])
    if (val := _safe_float(os.environ.get("MCQFORGE_SIMILARITY_THRESHOLD"))) is not None:
        result["similarity_threshold"] = val
    if (val := _safe_int(os.environ.get("MCQFORGE_MAX_ATTEMPTS"))) is not None:
        result["max_attempts"] = val
    if (val := _safe_int(os.environ.get("MCQFORGE_NUM_RETRIES"))) is not None:
        result["num_retries"] = val
    if (val := _safe_float(os.environ.get("MCQFORGE_PROVIDER_TIMEOUT"))) is not None:
        result["provider_timeout_seconds"] = val
    if os.environ.get("MCQFORGE_PROFILE"):
        result["profile"] = os.environ["MCQFORGE_PROFILE"]

    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables (for CI/CD override)
    2. YAML settings: section
    3. Profile values, when a profile is named
    4. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance

    Raises:
        ConfigurationError: On unknown settings keys, an unknown profile,
            or values Settings rejects.
    """
    config = config or {}
    yaml_settings = config.get("settings") or {}
    if not isinstance(yaml_settings, dict):
        raise ConfigurationError("'settings' must be a mapping")

    unknown = set(yaml_settings.keys()) - VALID_SETTINGS_KEYS
    if unknown:
        raise ConfigurationError(f"Unknown settings keys: {', '.join(sorted(unknown))}")

    env_settings = env_settings if env_settings is not None else get_settings_from_env()
    merged = {**yaml_settings, **env_settings}
    profile = merged.pop("profile", None)

    try:
        if profile:
            if profile not in PROFILES:
                raise ConfigurationError(
                    f"Unknown profile '{profile}'. Available profiles: {list(PROFILES.keys())}"
                )
            return Settings.with_profile(profile, **merged)
        return Settings(**merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def build_prompts(config: dict[str, Any], base_dir: Path | None = None) -> PromptConfig:
    """Build the prompt configuration.

    A ``prompts_path`` entry points at a JSON prompts file; relative paths
    resolve against ``base_dir`` (the config file's directory). Without one
    the built-in template is used.
    """
    prompts_path = config.get("prompts_path") or os.environ.get("MCQFORGE_PROMPTS_PATH")
    if not prompts_path:
        return PromptConfig()
    path = Path(prompts_path)
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return PromptConfig.from_file(path)


@dataclass
class ForgeConfig:
    """Configuration for creating a Forge instance."""

    llm_model: str
    embedding_model: str
    data_dir: str
    settings: Settings
    prompts: PromptConfig
    vector_backend: Literal["sqlite", "chroma"] = "sqlite"


def get_forge_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ForgeConfig:
    """Get configuration for creating a Forge instance.

    This extracts configuration without creating the instance, so callers
    can inspect or report it first.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        ForgeConfig with all settings

    Raises:
        ConfigurationError: If required values are missing or invalid.
    """
    resolved_path = Path(config_path) if config_path is not None else find_config_file()
    config = load_config(resolved_path)
    base_dir = resolved_path.parent if resolved_path is not None else None

    settings = build_settings(config)

    llm_model = config.get("llm_model") or os.environ.get("MCQFORGE_LLM_MODEL")
    if not llm_model:
        raise ConfigurationError(
            "No llm_model configured. Set it in mcqforge.yaml or MCQFORGE_LLM_MODEL."
        )

    embedding_model = config.get("embedding_model") or os.environ.get("MCQFORGE_EMBEDDING_MODEL")
    if not embedding_model:
        if settings.vector_index_enabled:
            raise ConfigurationError(
                "vector_index_enabled requires embedding_model. "
                "Set it in mcqforge.yaml or MCQFORGE_EMBEDDING_MODEL."
            )
        embedding_model = DEFAULT_EMBEDDING_MODEL

    vector_backend = config.get("vector_backend", "sqlite")
    if vector_backend not in VALID_VECTOR_BACKENDS:
        raise ConfigurationError(
            f"Unknown vector_backend '{vector_backend}'. "
            f"Supported: {', '.join(VALID_VECTOR_BACKENDS)}"
        )

    return ForgeConfig(
        llm_model=llm_model,
        embedding_model=embedding_model,
        data_dir=data_dir or config.get("data_dir") or DEFAULT_DATA_DIR,
        settings=settings,
        prompts=build_prompts(config, base_dir),
        vector_backend=vector_backend,
    )


def get_content_store(data_dir: str | Path) -> ContentStore:
    """Get a content store for read-only operations (logs, status).

    This doesn't require provider configuration since it only reads stores.

    Args:
        data_dir: Path to data directory
    """
    from mcqforge.stores import ContentStore, SQLiteAttemptLogStore, SQLiteQuestionStore

    data_dir = str(data_dir)
    return ContentStore(
        question_store=SQLiteQuestionStore(os.path.join(data_dir, "questions.db")),
        log_store=SQLiteAttemptLogStore(os.path.join(data_dir, "attempts.db")),
    )


def create_forge(config: ForgeConfig) -> Forge:
    """Create a Forge instance from configuration.

    Args:
        config: Configuration for the Forge instance

    Returns:
        Configured Forge instance
    """
    from mcqforge.configuration import LiteLLMProvider, LocalStorage
    from mcqforge.forge import Forge

    return Forge(
        provider=LiteLLMProvider(llm=config.llm_model, embedding=config.embedding_model),
        storage=LocalStorage(config.data_dir, vector_backend=config.vector_backend),
        settings=config.settings,
        prompts=config.prompts,
    )


def get_forge(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> Forge:
    """Create a Forge instance based on configuration.

    Convenience wrapper around get_forge_config and create_forge.
    """
    return create_forge(get_forge_config(data_dir, config_path))
