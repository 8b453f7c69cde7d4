"""Configuration module using Pydantic Settings.

Provides typed configuration for strategy building with environment variable
support.

Usage:
    from stackhash.config import StrategySettings

    settings = StrategySettings(identity_conflict="allow")
"""

from stackhash.config.settings import StrategySettings, get_settings

__all__ = [
    "StrategySettings",
    "get_settings",
]
