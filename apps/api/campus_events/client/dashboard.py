"""Session-scoped view state for the dashboard and calendar screens.

``refresh`` is what the page calls on mount, on becoming visible again and
on regaining focus. Calls are not sequenced: whichever returns last sets
``events``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone, tzinfo

from campus_events.api.schemas.events import EventOut
from campus_events.calendar.dates import localize
from campus_events.calendar.display import EventCard, events_found_label, format_card
from campus_events.calendar.filters import ALL, TimeWindow, filter_events
from campus_events.calendar.grid import MonthView, build_month, shift_month
from campus_events.client.store import EventStoreClient


@dataclass
class DashboardState:
    store: EventStoreClient
    tz: tzinfo | None = None
    query: str = ""
    tag: str = ALL
    window: TimeWindow = TimeWindow.ALL
    events: list[EventOut] = field(default_factory=list)
    is_loading: bool = False

    def refresh(self) -> list[EventOut]:
        self.is_loading = True
        try:
            self.events = self.store.list_events()
        finally:
            self.is_loading = False
        return self.events

    def filtered(self, now: datetime | None = None) -> list[EventOut]:
        return filter_events(
            self.events,
            query=self.query,
            tag=self.tag,
            window=self.window,
            now=now,
            tz=self.tz,
        )

    def display_events(self, now: datetime | None = None) -> list[EventCard]:
        return [format_card(event, self.tz) for event in self.filtered(now)]

    def summary(self, now: datetime | None = None) -> str:
        return events_found_label(len(self.filtered(now)))


@dataclass
class CalendarState:
    store: EventStoreClient
    tz: tzinfo | None = None
    year: int = 0
    month: int = 0
    selected: date | None = None
    events: list[EventOut] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.year or not self.month:
            self.go_to_today()

    def refresh(self) -> list[EventOut]:
        self.events = self.store.list_events()
        return self.events

    def navigate(self, delta: int) -> None:
        self.year, self.month = shift_month(self.year, self.month, delta)

    def go_to_today(self, now: datetime | None = None) -> None:
        today = localize(now or datetime.now(timezone.utc), self.tz).date()
        self.year, self.month = today.year, today.month
        self.selected = today

    def select(self, day: date | None) -> None:
        self.selected = day

    def month_view(self, now: datetime | None = None) -> MonthView[EventOut]:
        return build_month(
            self.year,
            self.month,
            self.events,
            selected=self.selected,
            today=now,
            tz=self.tz,
        )
