"""Configuration for pytest tests.

This file contains fixtures and setup configuration for all tests.
"""

import os
from datetime import (
    UTC,
    datetime,
    timedelta,
)
from typing import (
    AsyncGenerator,
    Generator,
)

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

TEST_SESSION_SECRET = "test-session-secret-0123456789abcdef"

# Set test environment before the application reads its settings
os.environ["APP_ENV"] = "test"
os.environ["SESSION_SECRET"] = TEST_SESSION_SECRET
os.environ["USE_MOCK_DB"] = "true"
os.environ["USE_MOCK_TRANSLATION_API"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"

from translation_hub.core.config import Settings  # noqa: E402
from translation_hub.domain.repositories import StorageBackendInterface  # noqa: E402
from translation_hub.domain.services import (  # noqa: E402
    CredentialService,
    SessionService,
    UserDomainService,
)
from translation_hub.infrastructure.database import (  # noqa: E402
    ConnectionManager,
    SQLStorageBackend,
)
from translation_hub.infrastructure.memory import MemoryStorageBackend  # noqa: E402
from translation_hub.main import create_app  # noqa: E402

VALID_PASSWORD = "Secret12!"


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime = None):
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory, mock-provider application."""
    return Settings(
        APP_ENV="test",
        SESSION_SECRET=TEST_SESSION_SECRET,
        SESSION_EXPIRATION=3600,
        USE_MOCK_DB=True,
        USE_MOCK_TRANSLATION_API=True,
        BCRYPT_ROUNDS=4,
    )


@pytest_asyncio.fixture(params=["memory", "sql"])
async def backend(request) -> AsyncGenerator[StorageBackendInterface, None]:
    """Each storage backend in turn: the mock and SQLite through the SQL backend."""
    if request.param == "memory":
        storage = MemoryStorageBackend()
    else:
        storage = SQLStorageBackend(ConnectionManager("sqlite://", connect_timeout=5))
    yield storage
    await storage.close()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def credentials() -> CredentialService:
    return CredentialService(rounds=4)


@pytest.fixture
def session_service(backend, clock) -> SessionService:
    return SessionService(backend, secret=TEST_SESSION_SECRET, ttl_seconds=3600, clock=clock)


@pytest.fixture
def user_service(backend, credentials) -> UserDomainService:
    return UserDomainService(backend, credentials)


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Create a test client for a fresh application."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def register_and_login(client: TestClient, email: str, password: str = VALID_PASSWORD) -> dict:
    """Register a user and return the login response body."""
    response = client.post("/api/v1/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text

    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
