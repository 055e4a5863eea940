"""Configuration management for bigfive."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from BIGFIVE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BIGFIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Lexicon JSON to load by default; None uses the bundled sample
    lexicon_path: Optional[Path] = None

    # Logging
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
