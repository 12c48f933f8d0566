"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Corpus location and encoding; the packaged asset is used when unset
    CORPUS_PATH: Path | None = Field(default=None)
    CORPUS_ENCODING: str = Field(default="cp1251")

    # Fixed seed for reproducible selection (None draws from OS entropy)
    RANDOM_VERSE_SEED: int | None = Field(default=None)

    RANDOM_VERSE_LOG_LEVEL: str = Field(default="warning")
    RANDOM_VERSE_LOG_TO_FILE: bool = Field(default=False)
    RANDOM_VERSE_LOG_DIR: Path | None = Field(default=None)
    RANDOM_VERSE_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")

    DATA_DIR: Path = Field(default=Path.home() / ".random-verse")


settings = Settings()
config = settings  # Alias matching the engine-wide naming


__all__ = ["Settings", "settings", "config"]
