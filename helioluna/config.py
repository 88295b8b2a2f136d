"""Configuration using Pydantic Settings.

Only the CLI reads these values; the formulas and services take every input
as an argument.
"""

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Settings loaded from environment variables and .env file."""

    # Default observer location
    latitude: float = 0.0
    longitude: float = 0.0
    height_m: float = 0.0

    # Logging
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Accept any case, reject names the logging module does not know."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    model_config = {"env_prefix": "HELIOLUNA_", "env_file": str(_ENV_FILE)}


settings = Settings()
