from fastapi import APIRouter, Body

from campus_events.api.deps import DBSession
from campus_events.api.schemas.events import (
    DeletedEnvelope,
    DeletedOut,
    EventCreate,
    EventDelete,
    EventEnvelope,
    EventListEnvelope,
    EventOut,
    EventUpdate,
)
from campus_events.models.event import EventStatus
from campus_events.services import events_service
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import ValidationError

router = APIRouter(prefix="/events", tags=["events"])


def _parse_status(value: str | None) -> EventStatus:
    if not value or not value.strip():
        return EventStatus.SCHEDULED
    try:
        return EventStatus(value.strip())
    except ValueError:
        raise ValidationError(ErrorCode.INVALID_REQUEST, f"unknown status: {value}") from None


@router.get("", response_model=EventListEnvelope)
def list_events(db: DBSession, status: str | None = None):
    events = events_service.list_events(db, _parse_status(status))
    return EventListEnvelope(data=[EventOut.model_validate(event) for event in events])


@router.post("", response_model=EventEnvelope, status_code=201)
def create_event(payload: EventCreate, db: DBSession):
    event = events_service.create_event(db, payload)
    return EventEnvelope(data=EventOut.model_validate(event))


@router.get("/{event_id}", response_model=EventEnvelope)
def get_event(event_id: str, db: DBSession):
    event = events_service.get_event(db, event_id)
    return EventEnvelope(data=EventOut.model_validate(event))


@router.put("/{event_id}", response_model=EventEnvelope)
def update_event(event_id: str, payload: EventUpdate, db: DBSession):
    event = events_service.update_event(db, event_id, payload)
    return EventEnvelope(data=EventOut.model_validate(event))


@router.delete("/{event_id}", response_model=DeletedEnvelope)
def delete_event(event_id: str, db: DBSession, payload: EventDelete | None = Body(default=None)):
    creator_id = payload.creator_id if payload else None
    deleted_id = events_service.delete_event(db, event_id, creator_id)
    return DeletedEnvelope(data=DeletedOut(id=deleted_id))
