from __future__ import annotations

import os
import time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

# Keep the module-level app in main.py off any real database
os.environ.setdefault("ENV", "local")
os.environ.pop("DATABASE_URL", None)

from campus_events.db import Database  # noqa: E402
from campus_events.main import create_app  # noqa: E402
from tests.factories import make_settings  # noqa: E402


@pytest.fixture
def database():
    db = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.create_all()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def db_session(database):
    db = database.session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app(database):
    return create_app(make_settings(), database=database)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def degraded_client() -> TestClient:
    settings = make_settings(database_url=None)
    return TestClient(create_app(settings, database=Database(None)))


@pytest.fixture
def new_york_process_tz(monkeypatch):
    """Run with the process local zone pinned to America/New_York."""
    if not hasattr(time, "tzset"):
        pytest.skip("process timezone cannot be changed on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
