"""Configuration management for car_stats.

Uses pydantic-settings for type-safe environment variable loading. Nothing
needs to be set; the defaults analyse ./Egypt-Used-Car-Price.csv.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from CAR_STATS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CAR_STATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    csv_path: Path = Field(
        default=Path("Egypt-Used-Car-Price.csv"),
        description="Listings file analysed when no path is given",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the listings file",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the shared settings instance."""
    global _settings

    if _settings is None:
        _settings = Settings()
    return _settings
