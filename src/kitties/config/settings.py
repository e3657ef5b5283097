"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from kitties.config import KittiesSettings

    # Load from environment variables (KITTIES_*)
    settings = KittiesSettings()

    # Or override with explicit values
    settings = KittiesSettings(id_limit=10)
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator

from kitties.core.types import U32_MAX

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. Install with: pip install kitties"
    ) from e


class KittiesSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the kitties module and its local collaborators.

    Attributes:
        id_limit: Highest value the kitty id counter may reach.
        seed_length: Bytes of entropy drawn per call by SystemRandomness.
        log_level: Level applied by configure_logging().

    Environment Variables:
        KITTIES_ID_LIMIT
        KITTIES_SEED_LENGTH
        KITTIES_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="KITTIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    id_limit: int = Field(default=U32_MAX, ge=0, le=U32_MAX)
    seed_length: int = Field(default=32, ge=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def configure_logging(settings: KittiesSettings | None = None) -> None:
    """Apply the configured level to the kitties logger hierarchy.

    Args:
        settings: Settings to read the level from (defaults to environment).
    """
    settings = settings or KittiesSettings()
    logging.getLogger("kitties").setLevel(settings.log_level)
