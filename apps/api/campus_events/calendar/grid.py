"""Month grid projection and event-to-day bucketing."""

from __future__ import annotations

from calendar import monthrange
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Generic, TypeVar

from campus_events.calendar.dates import days_between, day_key, localize, midnight, weekday_index
from campus_events.calendar.types import EventLike

E = TypeVar("E", bound=EventLike)

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def month_grid(year: int, month: int, tz: tzinfo | None = None) -> list[datetime]:
    """Every day from the Sunday on/before the 1st to the Saturday on/after month end."""
    first = date(year, month, 1)
    last = date(year, month, monthrange(year, month)[1])

    start = first - timedelta(days=weekday_index(first))
    end = last + timedelta(days=6 - weekday_index(last))

    days: list[datetime] = []
    current = start
    while current <= end:
        days.append(midnight(current, tz))
        current += timedelta(days=1)
    return days


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def event_span(event: EventLike, tz: tzinfo | None = None) -> list[datetime]:
    return days_between(event.starts_at, event.ends_at or event.starts_at, tz)


def bucket_events(events: Iterable[E], tz: tzinfo | None = None) -> dict[str, list[E]]:
    """Map day keys to the events touching that day.

    An event spanning N days lands in N buckets. Buckets keep the order of
    ``events``; nothing is sorted by time of day.
    """
    buckets: dict[str, list[E]] = {}
    for event in events:
        for day in event_span(event, tz):
            buckets.setdefault(day_key(day, tz), []).append(event)
    return buckets


@dataclass(frozen=True)
class SpanPosition:
    is_start: bool
    is_end: bool

    @property
    def is_interior(self) -> bool:
        return not self.is_start and not self.is_end

    @property
    def is_single_day(self) -> bool:
        return self.is_start and self.is_end


def span_position(event: EventLike, day: date, tz: tzinfo | None = None) -> SpanPosition:
    span = event_span(event, tz)
    key = day_key(day, tz)
    return SpanPosition(
        is_start=key == day_key(span[0], tz),
        is_end=key == day_key(span[-1], tz),
    )


@dataclass
class DayEntry(Generic[E]):
    event: E
    is_start: bool
    is_end: bool

    @property
    def is_multi_day(self) -> bool:
        return not (self.is_start and self.is_end)


@dataclass
class DayCell(Generic[E]):
    day: datetime
    key: str
    in_current_month: bool
    is_today: bool
    is_selected: bool
    entries: list[DayEntry[E]] = field(default_factory=list)

    @property
    def events(self) -> list[E]:
        return [entry.event for entry in self.entries]


@dataclass
class MonthView(Generic[E]):
    year: int
    month: int
    title: str
    days: list[DayCell[E]]
    selected_key: str | None = None
    selected_events: list[E] = field(default_factory=list)

    @property
    def weeks(self) -> list[list[DayCell[E]]]:
        return [self.days[i : i + 7] for i in range(0, len(self.days), 7)]


def build_month(
    year: int,
    month: int,
    events: Iterable[E],
    selected: date | None = None,
    today: datetime | None = None,
    tz: tzinfo | None = None,
) -> MonthView[E]:
    events = list(events)
    buckets = bucket_events(events, tz)
    today_key = day_key(today or datetime.now(timezone.utc), tz)
    selected_key = day_key(selected, tz) if selected is not None else None

    cells: list[DayCell[E]] = []
    for day in month_grid(year, month, tz):
        key = day_key(day, tz)
        local = localize(day, tz)
        entries: list[DayEntry[E]] = []
        for event in buckets.get(key, []):
            position = span_position(event, day, tz)
            entries.append(DayEntry(event=event, is_start=position.is_start, is_end=position.is_end))
        cells.append(
            DayCell(
                day=day,
                key=key,
                in_current_month=local.month == month,
                is_today=key == today_key,
                is_selected=key == selected_key,
                entries=entries,
            )
        )

    return MonthView(
        year=year,
        month=month,
        title=date(year, month, 1).strftime("%B %Y"),
        days=cells,
        selected_key=selected_key,
        selected_events=list(buckets.get(selected_key, [])) if selected_key else [],
    )
