"""API test configuration."""

import pytest
from api.dependencies import get_provider
from api.main import create_app
from aspectwire.config import reset_settings_cache
from ephemeris.provider import BodyLongitude
from httpx import ASGITransport, AsyncClient

SAMPLE_LONGITUDES = {
    "Sun": 10.0,
    "Moon": 100.5,
    "Mercury": 25.0,
    "Venus": 333.0,
    "Mars": 190.0,
    "Jupiter": 130.25,
    "Saturn": 300.0,
    "Uranus": 47.0,
    "Neptune": 275.0,
    "Pluto": 222.0,
}


class FakeProvider:
    """Deterministic stand-in for the Swiss Ephemeris provider."""

    def __init__(self, longitudes=None, failing=None):
        self.longitudes = dict(longitudes or SAMPLE_LONGITUDES)
        self.failing = set(failing or ())
        self.calls = []

    def longitude(self, jd, body, body_id):
        self.calls.append(body)
        if body in self.failing:
            return BodyLongitude(body=body, error="SwissEph file not found")
        return BodyLongitude(body=body, longitude=self.longitudes[body])


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def app(fake_provider):
    a = create_app()
    a.dependency_overrides[get_provider] = lambda: fake_provider
    return a


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
