from __future__ import annotations

from types import SimpleNamespace
from zoneinfo import ZoneInfo

from campus_events.core.config import Settings

NEW_YORK = ZoneInfo("America/New_York")
PASSWORDS = ["letmein", "club-secret"]


def make_settings(**overrides) -> Settings:
    values = {
        "env": "local",
        "database_url": "sqlite://",
        "event_passwords": PASSWORDS,
        "timezone_name": "America/New_York",
    }
    values.update(overrides)
    return Settings(**values)


def make_event(title="Event", club="Club", starts_at=None, ends_at=None, tags=(), **extra):
    """Plain record with the attributes the calendar engine reads."""
    return SimpleNamespace(
        id=extra.pop("id", title.lower().replace(" ", "-")),
        title=title,
        club=club,
        starts_at=starts_at,
        ends_at=ends_at,
        tags=list(tags),
        location=extra.pop("location", "Student Union"),
        current_attendees=extra.pop("current_attendees", 0),
        **extra,
    )
