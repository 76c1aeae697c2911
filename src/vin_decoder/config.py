"""
Configuration module for the VIN decoder
Environment-based settings for production vs development.
"""
import os
import logging
from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def _parse_year(raw: Optional[str]) -> Optional[int]:
    """Parse VIN_REFERENCE_YEAR; blank or malformed values fall back to the clock."""
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring VIN_REFERENCE_YEAR={raw!r}: not an integer year")
        return None


@dataclass
class Config:
    """Application configuration."""

    # Environment
    ENV: Literal["production", "development", "testing"] = "production"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Pins the "current year" used for model-year decoding; None reads the clock
    REFERENCE_YEAR: Optional[int] = None

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        """
        Create config from environment variables.

        Args:
            env_file: Optional .env file. Its values are read without touching
                os.environ, and real environment variables take precedence.
        """
        env: Mapping[str, Optional[str]] = os.environ
        if env_file is not None:
            env = {**dotenv_values(env_file), **os.environ}

        return cls(
            ENV=env.get("VIN_ENV") or "production",
            LOG_LEVEL=(env.get("VIN_LOG_LEVEL") or "INFO").upper(),
            LOG_JSON=(env.get("VIN_LOG_JSON") or "true").lower() == "true",
            REFERENCE_YEAR=_parse_year(env.get("VIN_REFERENCE_YEAR")),
        )


# Global config instance
config = Config.from_env()
