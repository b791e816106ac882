from campus_events.client.dashboard import CalendarState, DashboardState
from campus_events.client.forms import EventDraft, validate_draft
from campus_events.client.store import DraftValidationError, EventStoreClient, EventStoreError

__all__ = [
    "CalendarState",
    "DashboardState",
    "EventDraft",
    "validate_draft",
    "DraftValidationError",
    "EventStoreClient",
    "EventStoreError",
]
