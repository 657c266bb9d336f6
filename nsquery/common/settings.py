"""
Application settings loaded from environment variables.
It centralizes the few runtime knobs the adapters need: log level and the outbound API location.
The query-string core itself is configured per view through `QSConfig`, never through the environment.
"""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    LOG_LEVEL: str = "INFO"
    API_BASE_URL: str = "http://localhost:8000/api/v1"
    API_TIMEOUT_SECONDS: int = 8

    @field_validator("API_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("API_TIMEOUT_SECONDS must be greater than 0.")
        return value

    @field_validator("API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate settings from `.env` and the process environment."""

    if load_env:
        load_dotenv()

    values = {key: value for key, value in os.environ.items() if key in Settings.model_fields and value}
    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
