"""Configuration for the galaxy catalog console."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GalaxyDBSettings(BaseSettings):
    """Console settings.

    Resolution order: programmatic, environment vars (GALAXYDB_ prefix), defaults.
    """

    prompt: str = Field(default="> ", description="Prompt shown before each line")
    log_level: str = Field(default="WARNING", description="Root logging level")
    log_format: Literal["simple", "detailed"] = Field(
        default="simple", description="Log line format"
    )
    color: bool = Field(default=True, description="Style errors and warnings")

    model_config = SettingsConfigDict(env_prefix="GALAXYDB_")


# Global settings instance
_settings: Optional[GalaxyDBSettings] = None


def get_settings() -> GalaxyDBSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = GalaxyDBSettings()
    return _settings


def set_settings(settings: Optional[GalaxyDBSettings]) -> None:
    """Replace the global settings instance; None re-reads the environment."""
    global _settings
    _settings = settings
