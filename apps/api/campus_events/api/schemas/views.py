from __future__ import annotations

from campus_events.api.schemas.events import EventOut, SchemaBase
from campus_events.calendar.display import EventCard
from campus_events.calendar.grid import WEEKDAY_LABELS, DayCell, MonthView


class EventCardOut(SchemaBase):
    id: str
    title: str
    club: str
    date: str
    time: str
    location: str
    tags: list[str]
    attendees: int
    is_multi_day: bool

    @classmethod
    def from_card(cls, card: EventCard) -> "EventCardOut":
        return cls.model_validate(card)


class DashboardOut(SchemaBase):
    count: int
    label: str
    events: list[EventCardOut]


class DashboardEnvelope(SchemaBase):
    data: DashboardOut


class CalendarEntryOut(EventOut):
    is_start: bool
    is_end: bool
    is_multi_day: bool


class CalendarDayOut(SchemaBase):
    date: str
    day: int
    in_current_month: bool
    is_today: bool
    is_selected: bool
    events: list[CalendarEntryOut]


class MonthOut(SchemaBase):
    year: int
    month: int
    title: str
    weekdays: list[str]
    days: list[CalendarDayOut]
    selected: str | None = None
    selected_events: list[EventOut]

    @classmethod
    def from_view(cls, view: MonthView) -> "MonthOut":
        return cls(
            year=view.year,
            month=view.month,
            title=view.title,
            weekdays=list(WEEKDAY_LABELS),
            days=[_day_out(cell) for cell in view.days],
            selected=view.selected_key,
            selected_events=[EventOut.model_validate(event) for event in view.selected_events],
        )


class MonthEnvelope(SchemaBase):
    data: MonthOut


def _day_out(cell: DayCell) -> CalendarDayOut:
    entries = []
    for entry in cell.entries:
        base = EventOut.model_validate(entry.event).model_dump()
        entries.append(
            CalendarEntryOut(
                **base,
                is_start=entry.is_start,
                is_end=entry.is_end,
                is_multi_day=entry.is_multi_day,
            )
        )
    return CalendarDayOut(
        date=cell.key,
        day=int(cell.key[-2:]),
        in_current_month=cell.in_current_month,
        is_today=cell.is_today,
        is_selected=cell.is_selected,
        events=entries,
    )
