from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone
from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from campus_events.api.schemas.events import EventCreate, EventOut, EventUpdate, EventWrite
from campus_events.auth.shared_secret import can_edit_event
from campus_events.db import is_backend_misconfigured
from campus_events.models import Event
from campus_events.models.event import EventStatus
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import (
    AuthenticationRequiredError,
    BackendUnavailableError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = structlog.get_logger()

MISSING_FIELDS_MESSAGE = "Missing required fields: title, club, starts_at, location"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _synthesized_id() -> str:
    return str(int(time.time() * 1000))


def _require_fields(payload: EventWrite) -> None:
    if payload.missing_fields():
        raise ValidationError(ErrorCode.MISSING_REQUIRED_FIELDS, MISSING_FIELDS_MESSAGE)


def _event_values(payload: EventWrite) -> dict[str, Any]:
    return {
        "title": payload.title.strip(),
        "club": payload.club.strip(),
        "starts_at": payload.starts_at,
        "ends_at": payload.ends_at,
        "location": payload.location.strip(),
        "description": payload.description,
        "tags": [tag.value for tag in payload.tags],
        "current_attendees": payload.current_attendees,
        "max_attendees": payload.max_attendees,
    }


def _require_creator(creator_id: str | None) -> str:
    if not creator_id:
        raise AuthenticationRequiredError(
            ErrorCode.CREATOR_ID_REQUIRED,
            "Authentication required. Please provide creator_id.",
        )
    return creator_id


def _load_event(db: Session, event_id: str) -> Event:
    try:
        key = uuid.UUID(str(event_id))
    except ValueError:
        raise NotFoundError(ErrorCode.EVENT_NOT_FOUND, "Event not found") from None

    event = db.get(Event, key)
    if not event:
        raise NotFoundError(ErrorCode.EVENT_NOT_FOUND, "Event not found")
    return event


def _require_database(db: Session | None) -> Session:
    if db is None:
        raise BackendUnavailableError(ErrorCode.DATABASE_NOT_CONFIGURED, "Database not configured")
    return db


def list_events(db: Session | None, status: EventStatus = EventStatus.SCHEDULED) -> list[Event]:
    if db is None:
        logger.warning("degraded_mode_list", status=status.value)
        return []

    try:
        events = list(
            db.scalars(
                select(Event).where(Event.status == status).order_by(Event.starts_at.asc())
            )
        )
    except OperationalError as exc:
        db.rollback()
        if is_backend_misconfigured(exc):
            logger.warning("degraded_mode_list", status=status.value, error=str(exc))
            return []
        raise

    logger.info("events_listed", status=status.value, count=len(events))
    return events


def create_event(db: Session | None, payload: EventCreate) -> Event | EventOut:
    _require_fields(payload)

    values = _event_values(payload)
    values["status"] = EventStatus.SCHEDULED
    values["creator_id"] = payload.creator_id

    if db is None:
        return _synthesize(values)

    event = Event(**values)
    db.add(event)
    try:
        db.commit()
    except OperationalError as exc:
        db.rollback()
        if is_backend_misconfigured(exc):
            return _synthesize(values)
        raise

    db.refresh(event)
    logger.info("event_created", event_id=str(event.id), starts_at=event.starts_at.isoformat())
    return event


def _synthesize(values: dict[str, Any]) -> EventOut:
    now = _now()
    record = EventOut(id=_synthesized_id(), created_at=now, updated_at=now, **values)
    logger.warning("degraded_mode_create", event_id=record.id)
    return record


def get_event(db: Session | None, event_id: str) -> Event:
    return _load_event(_require_database(db), event_id)


def update_event(db: Session | None, event_id: str, payload: EventUpdate) -> Event | EventOut:
    _require_fields(payload)
    creator_id = _require_creator(payload.creator_id)
    values = _event_values(payload)

    if db is None:
        logger.warning("degraded_mode_update", event_id=event_id)
        return EventOut(id=event_id, creator_id=creator_id, updated_at=_now(), **values)

    event = _load_event(db, event_id)
    if not can_edit_event(creator_id, event.creator_id):
        raise PermissionDeniedError(
            ErrorCode.NOT_EVENT_CREATOR,
            "Unauthorized. You can only edit events you created.",
        )

    for key, value in values.items():
        setattr(event, key, value)
    event.updated_at = _now()

    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("event_updated", event_id=str(event.id))
    return event


def delete_event(db: Session | None, event_id: str, creator_id: str | None) -> str:
    creator_id = _require_creator(creator_id)

    if db is None:
        logger.warning("degraded_mode_delete", event_id=event_id)
        return event_id

    event = _load_event(db, event_id)
    if not can_edit_event(creator_id, event.creator_id):
        raise PermissionDeniedError(
            ErrorCode.NOT_EVENT_CREATOR,
            "Unauthorized. You can only delete events you created.",
        )

    db.delete(event)
    db.commit()
    logger.info("event_deleted", event_id=event_id)
    return event_id
