from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from campus_events.models.event import EventStatus, EventTag

REQUIRED_EVENT_FIELDS = ("title", "club", "starts_at", "location")


def _ensure_tzaware(value: datetime | None) -> datetime | None:
    if value is None:
        return value
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise ValueError("datetime must be timezone-aware")
    return value


class SchemaBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class TZAwareMixin(BaseModel):
    @field_validator(
        "starts_at",
        "ends_at",
        "created_at",
        "updated_at",
        mode="after",
        check_fields=False,
    )
    @classmethod
    def _validate_tzaware(cls, value: datetime | None) -> datetime | None:
        return _ensure_tzaware(value)


class EventWrite(TZAwareMixin, SchemaBase):
    """Body shared by create and full update.

    Required fields are checked by the service so a missing one produces the
    single combined message the frontend shows.
    """

    title: str | None = None
    club: str | None = None
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    location: str | None = None
    description: str | None = None
    tags: list[EventTag] = Field(default_factory=list)
    current_attendees: int = Field(default=0, ge=0)
    max_attendees: int | None = Field(default=None, ge=1)
    creator_id: str | None = None

    @field_validator("ends_at", "starts_at", mode="before")
    @classmethod
    def _blank_datetime_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("tags", mode="after")
    @classmethod
    def _unique_tags(cls, value: list[EventTag]) -> list[EventTag]:
        return list(dict.fromkeys(value))

    @field_validator("current_attendees", mode="before")
    @classmethod
    def _null_attendees(cls, value: Any) -> Any:
        return 0 if value is None else value

    @model_validator(mode="after")
    def _validate_time_bounds(self):
        if self.starts_at and self.ends_at and self.ends_at <= self.starts_at:
            raise ValueError("ends_at must be after starts_at")
        return self

    def missing_fields(self) -> list[str]:
        missing = []
        for name in REQUIRED_EVENT_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing


class EventCreate(EventWrite):
    pass


class EventUpdate(EventWrite):
    pass


class EventDelete(SchemaBase):
    creator_id: str | None = None


class EventOut(TZAwareMixin, SchemaBase):
    id: str
    title: str
    club: str
    starts_at: datetime
    ends_at: datetime | None = None
    location: str
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    current_attendees: int = Field(default=0, ge=0)
    max_attendees: int | None = None
    status: EventStatus = EventStatus.SCHEDULED
    creator_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return value if isinstance(value, str) else str(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _plain_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        return [getattr(tag, "value", tag) for tag in value]


class EventEnvelope(SchemaBase):
    data: EventOut


class EventListEnvelope(SchemaBase):
    data: list[EventOut]


class DeletedOut(SchemaBase):
    id: str


class DeletedEnvelope(SchemaBase):
    data: DeletedOut
