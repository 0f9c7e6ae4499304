# snippetbox/config.py
"""
Centralized configuration using pydantic-settings.

All settings are read from environment variables or a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from snippetbox.constants import LATEST_SNIPPETS_LIMIT


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Priority: environment variables > .env file > defaults
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    # --- Database ---
    DB_URL: str = Field(
        default="postgresql://localhost:5432/snippetbox",
        description="Database connection URL (PostgreSQL or SQLite)"
    )

    # --- Debug / Logging ---
    DEBUG: bool = Field(
        default=False,
        description="Echo SQL statements on the default engine"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    LOGS_PATH: Optional[str] = Field(
        default=None,
        description="Directory for the JSON log file; stdout only when unset"
    )

    # --- Store ---
    LATEST_LIMIT: int = Field(
        default=LATEST_SNIPPETS_LIMIT,
        ge=1,
        description="Maximum number of snippets returned by latest()"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v_upper


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
