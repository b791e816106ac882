"""Local-calendar date helpers.

Every helper takes an optional ``tz``: the viewer's calendar. When it is
omitted the process local zone is used, resolved per date so that days on
either side of a DST change keep their own offset.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo

SUNDAY = 0
SATURDAY = 6


def _attach(naive: datetime, tz: tzinfo | None) -> datetime:
    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)


def localize(value: datetime, tz: tzinfo | None = None) -> datetime:
    """Return ``value`` expressed in the viewer's calendar."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return _attach(value, tz)
    if tz is None:
        return value.astimezone()
    return value.astimezone(tz)


def midnight(day: date, tz: tzinfo | None = None) -> datetime:
    return _attach(datetime.combine(day, time.min), tz)


def weekday_index(value: date) -> int:
    """Sunday-based weekday: 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


def day_key(value: date, tz: tzinfo | None = None) -> str:
    if isinstance(value, datetime):
        value = localize(value, tz)
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def normalize_day_start(value: datetime, tz: tzinfo | None = None) -> datetime:
    return midnight(localize(value, tz).date(), tz)


def normalize_day_end(value: datetime, tz: tzinfo | None = None) -> datetime:
    # Attached per date: the process zone's offset at midnight may differ by 23:59
    return _attach(datetime.combine(localize(value, tz).date(), time.max), tz)


def add_days(value: datetime, amount: int, tz: tzinfo | None = None) -> datetime:
    """Move ``amount`` calendar days keeping the local wall-clock time."""
    local = localize(value, tz)
    shifted = local.replace(tzinfo=None) + timedelta(days=amount)
    return _attach(shifted, tz)


def with_time(value: datetime, hour: int, minute: int, tz: tzinfo | None = None) -> datetime:
    local = localize(value, tz)
    return _attach(
        datetime.combine(local.date(), time(hour=hour, minute=minute)),
        tz,
    )


def is_same_day(a: datetime, b: datetime, tz: tzinfo | None = None) -> bool:
    return localize(a, tz).date() == localize(b, tz).date()


def days_between(start: datetime, end: datetime, tz: tzinfo | None = None) -> list[datetime]:
    first = normalize_day_start(start, tz).date()
    last = normalize_day_end(end, tz).date()
    if last < first:
        last = first

    days: list[datetime] = []
    current = first
    while current <= last:
        days.append(midnight(current, tz))
        current += timedelta(days=1)
    return days


def next_weekday(from_: datetime, target_weekday: int, tz: tzinfo | None = None) -> datetime:
    """Next ``target_weekday`` on or after ``from_``, at local midnight.

    A ``from_`` already on the target weekday yields that same day.
    """
    if not 0 <= target_weekday <= 6:
        raise ValueError(f"target_weekday must be 0..6, got {target_weekday}")

    local = localize(from_, tz)
    distance = (target_weekday - weekday_index(local) + 7) % 7
    return midnight(local.date() + timedelta(days=distance), tz)


def upcoming_weekend_date(
    hour: int,
    minute: int,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> datetime:
    """The coming Saturday at ``hour:minute``; next week's if that moment has passed."""
    now = now or datetime.now().astimezone()
    saturday = next_weekday(now, SATURDAY, tz)
    target = with_time(saturday, hour, minute, tz)
    if target < now:
        target = with_time(add_days(saturday, 7, tz), hour, minute, tz)
    return target
