"""Configuration management for Voice Consistency Analyzer."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VCA_",
    )

    # Storage
    data_dir: Path = Field(default=Path("data"))
    profile_filename: str = Field(default="voice-profile.json")
    samples_filename: str = Field(default="samples.json")

    # Profile building
    min_samples: int = Field(default=2, ge=1, description="Non-empty samples required to build a profile")

    # Logging
    log_level: str = Field(default="WARNING")

    @property
    def profile_path(self) -> Path:
        return self.data_dir / self.profile_filename

    @property
    def samples_path(self) -> Path:
        return self.data_dir / self.samples_filename


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
