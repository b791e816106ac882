from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol


class EventLike(Protocol):
    """What the calendar engine reads from an event record.

    Satisfied by the ORM ``Event`` and by the API's ``EventOut`` schema.
    """

    title: str
    club: str
    starts_at: datetime
    ends_at: datetime | None
    tags: Sequence[str]


class CardEvent(EventLike, Protocol):
    """An ``EventLike`` with the fields a dashboard card shows."""

    id: object
    location: str
    current_attendees: int
