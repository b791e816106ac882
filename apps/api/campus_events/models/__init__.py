from campus_events.models.base import Base
from campus_events.models.event import Event, EventStatus, EventTag

__all__ = ["Base", "Event", "EventStatus", "EventTag"]
