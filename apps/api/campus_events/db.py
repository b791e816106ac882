from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import structlog
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from campus_events.core.config import Settings
from campus_events.models import Base
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import BackendUnavailableError

logger = structlog.get_logger()

# Driver messages that mean "the backend is not set up", not "the query is wrong"
_MISCONFIGURED_MARKERS = (
    "password authentication failed",
    "no password supplied",
    "could not translate host name",
    "connection refused",
    "unable to open database file",
)


def is_backend_misconfigured(exc: Exception) -> bool:
    if not isinstance(exc, OperationalError):
        return False
    text = str(exc).lower()
    return any(marker in text for marker in _MISCONFIGURED_MARKERS) or (
        "database" in text and "does not exist" in text
    )


class Database:
    """Explicitly constructed handle on the hosted event database.

    ``is_configured`` is False when no URL was given; callers then run in
    degraded mode instead of talking to a stand-in client.
    """

    def __init__(self, url: str | None, **engine_kwargs: Any) -> None:
        self.url = url
        self.engine: Engine | None = None
        self.SessionLocal: sessionmaker[Session] | None = None
        if url:
            self.engine = create_engine(url, future=True, pool_pre_ping=True, **engine_kwargs)
            self.SessionLocal = sessionmaker(
                bind=self.engine,
                autoflush=False,
                expire_on_commit=False,
                future=True,
            )

    @property
    def is_configured(self) -> bool:
        return self.SessionLocal is not None

    def session(self) -> Session:
        if self.SessionLocal is None:
            raise BackendUnavailableError(ErrorCode.DATABASE_NOT_CONFIGURED, "Database not configured")
        return self.SessionLocal()

    def create_all(self) -> None:
        if self.engine is None:
            raise BackendUnavailableError(ErrorCode.DATABASE_NOT_CONFIGURED, "Database not configured")
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()


def build_database(settings: Settings) -> Database:
    if not settings.database_configured:
        logger.warning("database_not_configured", hint="set DATABASE_URL")
    return Database(settings.database_url)


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session | None]:
    """One session per request, or None in degraded mode."""
    database = get_database(request)
    if not database.is_configured:
        yield None
        return

    db = database.session()
    try:
        yield db
    finally:
        db.close()
