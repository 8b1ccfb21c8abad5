"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Chart defaults
    default_tz_offset_minutes: float = Field(default=-300.0, alias="DEFAULT_TZ_OFFSET_MINUTES")
    default_orb: float = Field(default=4.0, alias="DEFAULT_ORB")
    max_orb: float = Field(default=30.0, alias="MAX_ORB")
    chart_timeout_seconds: float = Field(default=10.0, alias="CHART_TIMEOUT_SECONDS")

    # Ephemeris
    ephemeris_mode: str = Field(default="moshier", alias="EPHEMERIS_MODE")
    swisseph_ephe_path: str = Field(default="", alias="SWISSEPH_EPHE_PATH")

    # HTTP
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")
    max_body_bytes: int = Field(default=200 * 1024, alias="MAX_BODY_BYTES")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
