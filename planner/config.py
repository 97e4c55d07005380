"""Application settings loaded from ``PLANNER_*`` environment variables.

Usage:
    from planner.config import get_settings
    settings = get_settings()
    settings.log_level
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlannerSettings(BaseSettings):
    """Planner service configuration."""

    model_config = SettingsConfigDict(env_prefix="PLANNER_", extra="ignore")

    app_title: str = "Venue Event Planner"
    log_level: str = "INFO"
    schedule_lead_hours: int = Field(default=1, ge=0)
    seed_demo_data: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> PlannerSettings:
    """Get cached PlannerSettings instance (singleton pattern)."""
    return PlannerSettings()


def clear_settings_cache() -> None:
    """Clear cached settings (useful for testing)."""
    get_settings.cache_clear()
