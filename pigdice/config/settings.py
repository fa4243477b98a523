"""
Pig Dice - Application Settings

Loads configuration from environment variables (prefixed ``PIG_``) or a
``.env`` file using Pydantic Settings.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "WARNING"

    # Game
    seed: int | None = None
    show_rules: bool = True

    model_config = {
        "env_prefix": "PIG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
