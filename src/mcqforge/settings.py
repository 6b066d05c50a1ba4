# src/mcqforge/settings.py
"""Behavioral settings for mcqforge.

Settings are passed programmatically; the library does not read environment
variables. Applications that want env-based config read them at the
application layer (see mcqforge.config) and pass values explicitly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

MAX_ATTEMPTS = 3

# Profile definitions
# - "strict": fail fast on slow providers, refuse to compare mismatched embeddings
# - "lenient": tolerate slow providers, truncate mismatched embeddings
PROFILES: dict[str, dict[str, Any]] = {
    "strict": {
        "provider_timeout_seconds": 15.0,
        "embedding_timeout_seconds": 5.0,
        "strict_dimensions": True,
    },
    "lenient": {
        "provider_timeout_seconds": 90.0,
        "embedding_timeout_seconds": 30.0,
        "num_retries": 5,
        "strict_dimensions": False,
    },
}


class Settings(BaseModel):
    """Behavioral settings for the generation pipeline.

    Example:
        settings = Settings(vector_index_enabled=True, similarity_threshold=0.9)

        # Or start from a profile
        settings = Settings.with_profile("strict", max_attempts=5)
    """

    # Duplicate detection
    vector_index_enabled: bool = False
    similarity_threshold: float = Field(default=0.87, ge=0.0, le=1.0)
    nearest_k: int = Field(default=5, ge=1)
    fingerprint_window: int = Field(default=500, ge=1)
    strict_dimensions: bool = False  # True = DimensionMismatch instead of truncation

    # Retry loop
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)
    backoff_seconds: float = Field(default=0.3, ge=0.0)  # Multiplied by the attempt number

    # Validation
    default_estimated_time_seconds: int = Field(default=60, gt=0)

    # Provider calls
    provider_timeout_seconds: float | None = 30.0
    embedding_timeout_seconds: float | None = 10.0
    generation_temperature: float | None = 0.7
    num_retries: int = 3  # LiteLLM-level retries on rate limits, inside one attempt

    @classmethod
    def with_profile(
        cls,
        profile: Literal["strict", "lenient"],
        **overrides: Any,
    ) -> Settings:
        """Create Settings from a named profile.

        Args:
            profile: The profile to use.
            **overrides: Settings to override on top of the profile.

        Returns:
            Settings instance with profile values applied.
        """
        if profile not in PROFILES:
            raise ValueError(
                f"Unknown profile '{profile}'. Available profiles: {list(PROFILES.keys())}"
            )

        profile_settings: dict[str, Any] = PROFILES[profile].copy()
        profile_settings.update(overrides)
        return cls(**profile_settings)

    def backoff_for(self, attempt: int) -> float:
        """Linear backoff delay after the given (1-based) failed attempt."""
        return self.backoff_seconds * attempt
