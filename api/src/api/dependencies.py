"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from aspectwire.config import Settings, get_settings
from ephemeris.provider import EphemerisProvider, SwissEphemerisProvider


def get_app_settings() -> Settings:
    return get_settings()


@lru_cache(maxsize=1)
def _build_provider(mode: str, ephe_path: str) -> SwissEphemerisProvider:
    return SwissEphemerisProvider(mode=mode, ephe_path=ephe_path)


def get_provider() -> EphemerisProvider:
    """Shared Swiss Ephemeris provider for the configured mode and data path."""
    settings = get_settings()
    return _build_provider(settings.ephemeris_mode, settings.swisseph_ephe_path)
