"""Configuration module using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from kitties.config import KittiesSettings

    settings = KittiesSettings(id_limit=1000, seed_length=16)
"""

from kitties.config.settings import KittiesSettings, configure_logging

__all__ = [
    "KittiesSettings",
    "configure_logging",
]
