"""Pytest configuration and fixtures."""

import os

import httpx
import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing intake modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SUBMITTED_AT_TIMEZONE", "Europe/Paris")


def _database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'applications.db'}"


@pytest.fixture
def sample_application_data():
    """Minimal valid submission, camelCase as sent by the web form."""
    return {
        "name": "A",
        "email": "a@x.com",
        "phone": "1",
        "city": "C",
        "motivation": "M",
        "contribution": "Co",
        "availability": "Av",
        "membershipType": "T",
    }


@pytest.fixture
def full_application_data(sample_application_data):
    """Submission with every optional field filled in."""
    return {
        **sample_application_data,
        "skills": ["Design", "Event planning"],
        "otherDetails": "Available on weekends",
        "newsletterOptIn": True,
    }


@pytest.fixture
def storage_factory(tmp_path):
    """Build a storage handle on a fresh SQLite file."""
    from intake.core.storage import ApplicationStorage

    def _make(name: str = "applications.db") -> ApplicationStorage:
        return ApplicationStorage(f"sqlite+aiosqlite:///{tmp_path / name}")

    return _make


@pytest.fixture
async def storage(storage_factory):
    """Initialized storage backed by a temporary database."""
    store = storage_factory()
    await store.init_models()
    yield store
    await store.close()


@pytest.fixture
async def uninitialized_storage(storage_factory):
    """Storage whose table was never created, so every query fails."""
    store = storage_factory("broken.db")
    yield store
    await store.close()


@pytest.fixture
def test_client(tmp_path):
    """TestClient running the full app lifespan on a temporary database."""
    from intake.core.storage import ApplicationStorage
    from intake.main import create_app

    app = create_app(ApplicationStorage(_database_url(tmp_path)))
    with TestClient(app) as client:
        yield client


@pytest.fixture
async def intake_client(storage):
    """IntakeClient wired to the app in-process through ASGITransport."""
    from intake.main import create_app
    from intake.services.intake_client import IntakeClient

    app = create_app(storage)
    client = IntakeClient(
        base_url="http://testserver/api",
        transport=httpx.ASGITransport(app=app),
    )
    yield client
    await client.close()
