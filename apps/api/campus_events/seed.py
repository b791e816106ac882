"""Load a few demo events relative to today.

    python -m campus_events.seed
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

import structlog

from campus_events.api.schemas.events import EventCreate
from campus_events.calendar.dates import with_time, upcoming_weekend_date
from campus_events.core.config import settings
from campus_events.core.logging import configure_logging
from campus_events.db import Database, build_database
from campus_events.models import Event
from campus_events.services import events_service

logger = structlog.get_logger()


def sample_events(now: datetime | None = None, tz: tzinfo | None = None) -> list[EventCreate]:
    now = now or datetime.now(timezone.utc)
    brunch = upcoming_weekend_date(11, 0, now=now, tz=tz)
    return [
        EventCreate(
            title="Hackathon Kickoff",
            club="Tech Innovators",
            starts_at=with_time(now, 10, 0, tz),
            ends_at=with_time(now, 14, 0, tz),
            location="Innovation Hub",
            tags=["tech", "career", "networking"],
            current_attendees=48,
        ),
        EventCreate(
            title="Evening Study Session",
            club="Academic Success Center",
            starts_at=with_time(now, 19, 0, tz),
            ends_at=with_time(now, 21, 0, tz),
            location="Library Commons",
            tags=["study"],
            current_attendees=23,
        ),
        EventCreate(
            title="Saturday Brunch Social",
            club="Campus Life",
            starts_at=brunch,
            ends_at=with_time(brunch, 13, 0, tz),
            location="Student Union Lawn",
            tags=["food", "social"],
            current_attendees=67,
        ),
    ]


def seed(database: Database, now: datetime | None = None, tz: tzinfo | None = None) -> list[Event]:
    database.create_all()
    created = []
    with database.session() as db:
        for payload in sample_events(now, tz):
            created.append(events_service.create_event(db, payload))
    logger.info("seed_completed", count=len(created))
    return created


def main() -> None:
    configure_logging(settings.log_level, json=settings.env != "local")
    seed(build_database(settings), tz=settings.timezone)


if __name__ == "__main__":
    main()
