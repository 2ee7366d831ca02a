"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).

Simulated latencies are configurable so tests and local runs can use a zero delay.
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    telegram_bot_token: str = Field(alias="TELEGRAM_BOT_TOKEN")

    query_delay_s: float = Field(default=1.5, ge=0, alias="QUERY_DELAY_S")
    upload_delay_s: float = Field(default=1.0, ge=0, alias="UPLOAD_DELAY_S")
    result_table_rows: int = Field(default=10, ge=1, alias="RESULT_TABLE_ROWS")
    dataset_preview_rows: int = Field(default=5, ge=1, alias="DATASET_PREVIEW_ROWS")


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
