from __future__ import annotations

from datetime import datetime

from campus_events.calendar.dates import localize, weekday_index
from campus_events.seed import sample_events, seed
from tests.factories import NEW_YORK

# A Wednesday
NOW = datetime(2031, 6, 25, 12, 0, tzinfo=NEW_YORK)


def test_sample_events_are_relative_to_today():
    hackathon, study, brunch = sample_events(now=NOW, tz=NEW_YORK)

    assert hackathon.starts_at == datetime(2031, 6, 25, 10, 0, tzinfo=NEW_YORK)
    assert study.starts_at == datetime(2031, 6, 25, 19, 0, tzinfo=NEW_YORK)
    assert brunch.starts_at == datetime(2031, 6, 28, 11, 0, tzinfo=NEW_YORK)
    assert brunch.ends_at == datetime(2031, 6, 28, 13, 0, tzinfo=NEW_YORK)
    assert weekday_index(brunch.starts_at) == 6


def test_seed_inserts_scheduled_events(database):
    created = seed(database, now=NOW, tz=NEW_YORK)

    assert [event.title for event in created] == [
        "Hackathon Kickoff",
        "Evening Study Session",
        "Saturday Brunch Social",
    ]
    assert all(event.status.value == "scheduled" for event in created)
    assert localize(created[1].starts_at, NEW_YORK).hour == 19


def test_seeded_events_are_listed(database, client):
    seed(database, now=NOW, tz=NEW_YORK)
    titles = [event["title"] for event in client.get("/api/events").json()["data"]]
    assert titles == ["Hackathon Kickoff", "Evening Study Session", "Saturday Brunch Social"]
