"""Pytest configuration and fixtures for LinkedIn bridge tests."""

import os
from typing import AsyncGenerator
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Set test environment before importing app modules
os.environ["LINKEDIN_CLIENT_ID"] = "test-client-id"
os.environ["LINKEDIN_CLIENT_SECRET"] = "test-client-secret"
os.environ["LINKEDIN_REDIRECT_URI"] = "http://localhost:5000/api/linkedin/callback"
os.environ["BASE_URL"] = "http://localhost:5000"
os.environ["FRONTEND_URL"] = "http://localhost:5173"

from app.main import app
from app.stores import Stores
from app.services.state_registry import StateRegistry
from app.services.sessions import SessionStore


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def stores():
    """Open fresh in-memory stores and release them after each test."""
    Stores.open()

    yield Stores

    Stores.close()


@pytest_asyncio.fixture
async def client(stores) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def state_registry(clock: FakeClock) -> StateRegistry:
    """State registry driven by the fake clock."""
    return StateRegistry(ttl_seconds=300, clock=clock)


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def mock_userinfo():
    """Mock LinkedIn userinfo response."""
    return {
        "sub": "782bbtaQ",
        "name": "Jane Doe",
        "given_name": "Jane",
        "family_name": "Doe",
        "picture": "https://media.licdn.com/dms/image/jane.jpg",
        "locale": {"country": "US", "language": "en"},
        "email": "j@d.com",
        "email_verified": True,
    }


@pytest.fixture
def mock_token_response():
    """Mock LinkedIn access token response."""
    return {
        "access_token": "AQUvlL_DYEzvT2wz1QJiEPeLioeA",
        "expires_in": 5184000,
        "scope": "email,openid,profile,w_member_social",
        "token_type": "Bearer",
        "id_token": "eyJ0eXAiOiJKV1QiLCJhbGciOiJSUzI1NiJ9.e30.sig",
    }
