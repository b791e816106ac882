from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import TypeVar

from campus_events.calendar.dates import (
    SATURDAY,
    add_days,
    is_same_day,
    localize,
    next_weekday,
    normalize_day_end,
)
from campus_events.calendar.types import EventLike
from campus_events.models.event import EVENT_TAGS

E = TypeVar("E", bound=EventLike)

ALL = "All"
TONIGHT_STARTS_AT_HOUR = 17


class TimeWindow(str, Enum):
    ALL = "All"
    TODAY = "Today"
    TONIGHT = "Tonight"
    THIS_WEEKEND = "This Weekend"


TIME_FILTERS: tuple[str, ...] = tuple(window.value for window in TimeWindow)
TAG_FILTERS: tuple[str, ...] = (ALL, *EVENT_TAGS)


def matches_search(event: EventLike, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return needle in event.title.lower() or needle in event.club.lower()


def matches_tag(event: EventLike, tag: str) -> bool:
    if tag == ALL:
        return True
    return tag in event.tags


def matches_time(
    event: EventLike,
    window: TimeWindow | str,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> bool:
    """Classify ``event`` against a relative time window.

    ``now`` is read at call time when not given, so a result only holds for
    the instant it was computed at.
    """
    window = TimeWindow(window)
    if window is TimeWindow.ALL:
        return True

    now = now or datetime.now(timezone.utc)
    starts = localize(event.starts_at, tz)

    if window is TimeWindow.TODAY:
        return is_same_day(starts, now, tz)

    if window is TimeWindow.TONIGHT:
        return is_same_day(starts, now, tz) and starts.hour >= TONIGHT_STARTS_AT_HOUR

    weekend_start = next_weekday(now, SATURDAY, tz)
    weekend_end = normalize_day_end(add_days(weekend_start, 1, tz), tz)
    return weekend_start <= starts <= weekend_end


def filter_events(
    events: Iterable[E],
    query: str = "",
    tag: str = ALL,
    window: TimeWindow | str = TimeWindow.ALL,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> list[E]:
    window = TimeWindow(window)
    return [
        event
        for event in events
        if matches_search(event, query)
        and matches_tag(event, tag)
        and matches_time(event, window, now=now, tz=tz)
    ]
