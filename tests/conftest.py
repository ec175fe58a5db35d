"""
Pytest configuration and shared fixtures.

Every test gets its own application bound to a private in-memory SQLite
database, so tests never share rows or need a running server.
"""

import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import Environment, Settings
from domain.models import init_database
from main import create_app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        environment=Environment.TESTING,
        db_init_attempts=1,
        db_init_delay_sec=0,
        log_level="WARNING",
    )


@pytest.fixture
def app(test_settings: Settings):
    return create_app(test_settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """TestClient with the lifespan started (schema created)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def other_client(app, client) -> TestClient:
    """A second browser against the same app, with its own cookie jar."""
    return TestClient(app)


@pytest.fixture
def db_session(app) -> Generator[Session, None, None]:
    """
    Create a database session for repository and service tests.

    Uses the same engine as the app fixture, schema created up front.
    """
    init_database(app.state.engine)
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
