"""
Application configuration using pydantic-settings.

Environment variables (prefix: WEALTH_WARS_):
    WEALTH_WARS_SEED            - Seed for the dice (default: random)
    WEALTH_WARS_MAX_TURNS       - Stop after this many turns (default: unlimited)
    WEALTH_WARS_LOG_LEVEL       - Python logging level (default: WARNING)
    WEALTH_WARS_EVENT_LOG_FILE  - Path of a JSONL event log (default: disabled)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wealth_wars.config import GameConfig


class WealthWarsSettings(BaseSettings):
    """Runtime settings for a console session."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="WEALTH_WARS_",
    )

    seed: Optional[int] = Field(
        default=None,
        description="Seed for dice rolls and event amounts.",
    )
    max_turns: Optional[int] = Field(
        default=None,
        gt=0,
        description="Turn limit; the richest player wins when it is reached.",
    )
    log_level: str = Field(default="WARNING")
    event_log_file: Optional[str] = Field(
        default=None,
        description="Write engine events as JSONL to this path.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Accept any case and reject names logging does not know."""
        if not value:
            return "WARNING"
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def to_game_config(self) -> GameConfig:
        """Build the engine configuration from these settings."""
        return GameConfig(seed=self.seed, max_turns=self.max_turns)


@lru_cache
def get_settings() -> WealthWarsSettings:
    """Return cached settings instance."""
    return WealthWarsSettings()
