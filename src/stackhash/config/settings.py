"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for strategy
building.

Usage:
    from stackhash.config import StrategySettings, get_settings

    # Load from environment variables (STACKHASH_*)
    settings = get_settings()

    # Or override with explicit values
    strict = StrategySettings(identity_conflict="error")
    strategy = builder(settings=strict).compare_kind().build()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class StrategySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for strategy building.

    Attributes:
        identity_conflict: What build() does when a builder selects both
            reference identity and stable-name identity. Both facets are always
            applied together (they must agree); this only controls the report.
            "allow" is silent, "warn" emits a UserWarning, "error" raises
            IdentityConflictError.

    Environment Variables:
        STACKHASH_IDENTITY_CONFLICT
    """

    model_config = SettingsConfigDict(
        env_prefix="STACKHASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    identity_conflict: Literal["allow", "warn", "error"] = "warn"


@lru_cache
def get_settings() -> StrategySettings:
    """Get cached settings instance loaded from the environment."""
    return StrategySettings()
