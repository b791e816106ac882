from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo

from campus_events.calendar.dates import day_key, localize
from campus_events.calendar.types import CardEvent, EventLike


@dataclass(frozen=True)
class EventCard:
    id: str
    title: str
    club: str
    date: str
    time: str
    location: str
    tags: list[str]
    attendees: int
    is_multi_day: bool


def format_day(value: datetime, tz: tzinfo | None = None) -> str:
    """``Friday, Jun 28``"""
    local = localize(value, tz)
    return f"{local:%A}, {local:%b} {local.day}"


def format_clock(value: datetime, tz: tzinfo | None = None) -> str:
    """``7:05 PM``"""
    local = localize(value, tz)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix}"


def is_multi_day(event: EventLike, tz: tzinfo | None = None) -> bool:
    if not event.ends_at:
        return False
    return day_key(event.starts_at, tz) != day_key(event.ends_at, tz)


def format_card(event: CardEvent, tz: tzinfo | None = None) -> EventCard:
    multi_day = is_multi_day(event, tz)

    date_line = format_day(event.starts_at, tz)
    if multi_day:
        date_line = f"{date_line} - {format_day(event.ends_at, tz)}"

    times = [format_clock(event.starts_at, tz)]
    if event.ends_at:
        times.append(format_clock(event.ends_at, tz))

    return EventCard(
        id=str(event.id),
        title=event.title,
        club=event.club,
        date=date_line,
        time=" - ".join(times),
        location=event.location,
        tags=[str(getattr(tag, "value", tag)) for tag in event.tags],
        attendees=event.current_attendees,
        is_multi_day=multi_day,
    )


def events_found_label(count: int) -> str:
    return f"{count} event{'' if count == 1 else 's'} found"
