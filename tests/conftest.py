# -*- coding: utf-8 -*-
import os

# Must be set before the app (and its cached settings) is imported
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.setdefault("SENTRY_DSN", "")
os.environ.setdefault("LOG_FORMAT", "console")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from newsdesk.main import app
from newsdesk.core.database import Base, get_db
from newsdesk.core.rate_limiter import limiter
import newsdesk.models.db_models  # noqa: F401


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client_with_db(test_db):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"X-User-Id": "admin-1", "X-User-Role": "admin"}


@pytest.fixture
def editor_headers():
    return {"X-User-Id": "editor-1", "X-User-Role": "editor"}


@pytest.fixture
def viewer_headers():
    return {"X-User-Id": "viewer-1", "X-User-Role": "viewer"}
