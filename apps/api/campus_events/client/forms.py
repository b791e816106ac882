"""Event creation form: the draft the user edits and its field-level checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from campus_events.models.event import EVENT_TAGS


@dataclass
class EventDraft:
    title: str = ""
    club: str = ""
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    location: str = ""
    tags: list[str] = field(default_factory=list)
    current_attendees: int = 0
    description: str | None = None

    def toggle_tag(self, tag: str) -> None:
        if tag in self.tags:
            self.tags = [t for t in self.tags if t != tag]
        else:
            self.tags = [*self.tags, tag]

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "title": self.title.strip(),
            "club": self.club.strip(),
            "starts_at": self.starts_at.isoformat() if self.starts_at else None,
            "ends_at": self.ends_at.isoformat() if self.ends_at else None,
            "location": self.location.strip(),
            "tags": list(self.tags),
            "current_attendees": self.current_attendees,
        }
        if self.description:
            payload["description"] = self.description.strip()
        return payload


def validate_draft(draft: EventDraft, now: datetime | None = None) -> dict[str, str]:
    """Return ``{field: message}`` for every problem; empty means submittable."""
    now = now or datetime.now(timezone.utc)
    errors: dict[str, str] = {}

    if not draft.title.strip():
        errors["title"] = "Event title is required"

    if not draft.club.strip():
        errors["club"] = "Club name is required"

    if draft.starts_at is None:
        errors["starts_at"] = "Start date and time is required"
    elif draft.starts_at.tzinfo is None:
        errors["starts_at"] = "Start time must include a timezone"
    elif draft.starts_at < now:
        errors["starts_at"] = "Start time must be in the future"

    if draft.ends_at is not None:
        if draft.ends_at.tzinfo is None:
            errors["ends_at"] = "End time must include a timezone"
        elif draft.starts_at is not None and draft.starts_at.tzinfo is not None:
            if draft.ends_at <= draft.starts_at:
                errors["ends_at"] = "End time must be after start time"

    if not draft.location.strip():
        errors["location"] = "Location is required"

    if not draft.tags:
        errors["tags"] = "At least one tag is required"
    else:
        unknown = [tag for tag in draft.tags if tag not in EVENT_TAGS]
        if unknown:
            errors["tags"] = f"Unknown tags: {', '.join(unknown)}"

    if draft.current_attendees < 0:
        errors["current_attendees"] = "Attendees cannot be negative"

    return errors
