import httpx
import pytest
from httpx import ASGITransport

SUPABASE_URL = "https://db.staybook.test"
BOOKING_API_URL = "https://api.staybook.test"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", SUPABASE_URL)
    monkeypatch.setenv("SUPABASE_KEY", "test-key")
    monkeypatch.setenv("BOOKING_API_URL", BOOKING_API_URL)
    monkeypatch.setenv("LOOKUP_TIMEOUT", "2")
    monkeypatch.setenv("DASHBOARD_TIMEZONE", "Europe/London")


@pytest.fixture
async def client(mock_env):
    from staybook.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
