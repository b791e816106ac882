from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import httpx
import pytest
from fastapi.testclient import TestClient

from campus_events.auth.shared_secret import creator_id_for
from campus_events.calendar.filters import TimeWindow
from campus_events.client import (
    CalendarState,
    DashboardState,
    DraftValidationError,
    EventDraft,
    EventStoreClient,
    EventStoreError,
)
from campus_events.client.forms import validate_draft
from tests.factories import NEW_YORK

NOW = datetime(2031, 6, 25, 12, 0, tzinfo=NEW_YORK)


def _draft(**overrides) -> EventDraft:
    values = {
        "title": "  Hackathon Kickoff ",
        "club": "Tech Innovators",
        "starts_at": datetime(2031, 6, 27, 10, 0, tzinfo=NEW_YORK),
        "ends_at": datetime(2031, 6, 27, 14, 0, tzinfo=NEW_YORK),
        "location": "Innovation Hub",
        "tags": ["tech"],
        "current_attendees": 12,
    }
    values.update(overrides)
    return EventDraft(**values)


def _mock_store(handler) -> tuple[EventStoreClient, list[httpx.Request]]:
    calls: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    http = httpx.Client(transport=httpx.MockTransport(record), base_url="http://events.test")
    return EventStoreClient(http=http), calls


@pytest.fixture
def store(client: TestClient) -> EventStoreClient:
    return EventStoreClient(http=client)


def test_validate_draft_reports_every_field():
    errors = validate_draft(EventDraft(), now=NOW)
    assert errors == {
        "title": "Event title is required",
        "club": "Club name is required",
        "starts_at": "Start date and time is required",
        "location": "Location is required",
        "tags": "At least one tag is required",
    }


def test_validate_draft_time_rules():
    past = validate_draft(_draft(starts_at=NOW - timedelta(hours=1), ends_at=None), now=NOW)
    assert past == {"starts_at": "Start time must be in the future"}

    backwards = validate_draft(
        _draft(ends_at=datetime(2031, 6, 27, 9, 0, tzinfo=NEW_YORK)),
        now=NOW,
    )
    assert backwards == {"ends_at": "End time must be after start time"}

    assert validate_draft(_draft(), now=NOW) == {}


def test_validate_draft_rejects_unknown_tags():
    errors = validate_draft(_draft(tags=["tech", "dancing"]), now=NOW)
    assert errors == {"tags": "Unknown tags: dancing"}


def test_toggle_tag_and_payload():
    draft = _draft(tags=[])
    draft.toggle_tag("food")
    draft.toggle_tag("social")
    draft.toggle_tag("food")
    assert draft.tags == ["social"]

    payload = draft.to_payload()
    assert payload["title"] == "Hackathon Kickoff"
    assert payload["starts_at"] == "2031-06-27T10:00:00-04:00"
    assert payload["tags"] == ["social"]


def test_invalid_draft_never_reaches_the_network():
    store, calls = _mock_store(lambda request: httpx.Response(201, json={"data": {}}))

    with pytest.raises(DraftValidationError) as excinfo:
        store.create_event(_draft(title=" "), now=NOW)

    assert excinfo.value.errors == {"title": "Event title is required"}
    assert calls == []


def test_create_and_list_roundtrip(store: EventStoreClient):
    created = store.create_event(_draft(), now=NOW)
    assert created.title == "Hackathon Kickoff"
    assert created.creator_id is None

    listed = store.list_events()
    assert [event.id for event in listed] == [created.id]
    assert listed[0].starts_at == datetime(2031, 6, 27, 14, 0, tzinfo=timezone.utc)
    assert store.get_event(created.id).location == "Innovation Hub"


def test_create_failure_uses_server_message():
    store, _ = _mock_store(
        lambda request: httpx.Response(500, json={"error": "disk full", "code": "INTERNAL"})
    )
    with pytest.raises(EventStoreError) as excinfo:
        store.create_event(_draft(), now=NOW)

    assert excinfo.value.message == "disk full"
    assert excinfo.value.status_code == 500


def test_create_failure_without_body_uses_generic_message():
    store, _ = _mock_store(lambda request: httpx.Response(502, text="Bad Gateway"))
    with pytest.raises(EventStoreError) as excinfo:
        store.create_event(_draft(), now=NOW)
    assert excinfo.value.message == "Failed to create event. Please try again."


def test_list_failures_return_empty():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    unreachable, _ = _mock_store(refuse)
    assert unreachable.list_events() == []

    erroring, calls = _mock_store(lambda request: httpx.Response(500, json={"error": "boom"}))
    assert erroring.list_events() == []
    assert calls[0].url.params["status"] == "scheduled"


def test_login_edit_and_delete(store: EventStoreClient):
    assert store.login("wrong") is False
    assert not store.identity.is_authenticated

    assert store.login("letmein") is True
    assert store.identity.creator_id == creator_id_for("letmein")

    created = store.create_event(_draft(), now=NOW)
    assert created.creator_id == creator_id_for("letmein")
    assert store.can_edit(created)

    updated = store.update_event(created.id, _draft(title="Hackathon Finals"))
    assert updated.title == "Hackathon Finals"

    assert store.delete_event(created.id) == created.id
    assert store.list_events() == []


def test_other_identity_cannot_edit(store: EventStoreClient):
    store.login("letmein")
    created = store.create_event(_draft(), now=NOW)

    store.login("club-secret")
    assert not store.can_edit(created)
    with pytest.raises(EventStoreError) as excinfo:
        store.delete_event(created.id)
    assert excinfo.value.status_code == 403

    store.logout()
    with pytest.raises(EventStoreError) as excinfo:
        store.update_event(created.id, _draft())
    assert excinfo.value.status_code == 401


def test_dashboard_state(store: EventStoreClient):
    store.create_event(_draft(tags=["tech", "career"]), now=NOW)
    store.create_event(
        _draft(
            title="Evening Study Session",
            club="Academic Success Center",
            starts_at=datetime(2031, 6, 25, 19, 0, tzinfo=NEW_YORK),
            ends_at=datetime(2031, 6, 25, 21, 0, tzinfo=NEW_YORK),
            tags=["study"],
        ),
        now=NOW,
    )

    state = DashboardState(store=store, tz=NEW_YORK)
    assert len(state.refresh()) == 2
    assert state.is_loading is False
    assert state.summary(now=NOW) == "2 events found"

    state.window = TimeWindow.TONIGHT
    cards = state.display_events(now=NOW)
    assert [card.title for card in cards] == ["Evening Study Session"]
    assert cards[0].time == "7:00 PM - 9:00 PM"

    state.window = TimeWindow.ALL
    state.tag = "tech"
    state.query = "innov"
    assert [event.title for event in state.filtered(now=NOW)] == ["Hackathon Kickoff"]


def test_calendar_state_navigation(store: EventStoreClient):
    store.create_event(
        _draft(
            starts_at=datetime(2031, 6, 28, 10, 0, tzinfo=NEW_YORK),
            ends_at=datetime(2031, 6, 30, 12, 0, tzinfo=NEW_YORK),
        ),
        now=NOW,
    )

    state = CalendarState(store=store, tz=NEW_YORK)
    state.go_to_today(now=NOW)
    assert (state.year, state.month, state.selected) == (2031, 6, date(2031, 6, 25))

    state.refresh()
    state.select(date(2031, 6, 29))
    view = state.month_view(now=NOW)
    assert view.title == "June 2031"
    assert [event.title for event in view.selected_events] == ["Hackathon Kickoff"]

    state.navigate(1)
    assert (state.year, state.month) == (2031, 7)
    state.navigate(-7)
    assert (state.year, state.month) == (2030, 12)


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="ok"),
        httpx.Response(201, json={"ok": True}),
        httpx.Response(201, json={"data": ["not", "an", "event"]}),
    ],
)
def test_create_with_unreadable_success_body_raises_store_error(response):
    store, _ = _mock_store(lambda request: response)

    with pytest.raises(EventStoreError) as excinfo:
        store.create_event(_draft(), now=NOW)

    assert excinfo.value.message == "Failed to create event. Please try again."


def test_create_with_malformed_event_raises_store_error():
    store, _ = _mock_store(lambda request: httpx.Response(201, json={"data": {"id": "1", "title": "x"}}))

    with pytest.raises(EventStoreError) as excinfo:
        store.create_event(_draft(), now=NOW)
    assert excinfo.value.message == "Failed to create event. Please try again."


def test_other_calls_with_unreadable_success_body_raise_store_error():
    store, _ = _mock_store(lambda request: httpx.Response(200, json={"data": {}}))
    store.identity.creator_id = creator_id_for("letmein")

    with pytest.raises(EventStoreError):
        store.get_event("1")
    with pytest.raises(EventStoreError):
        store.update_event("1", _draft())
    with pytest.raises(EventStoreError):
        store.delete_event("1")


def test_login_with_unreadable_success_body_stays_logged_out():
    store, _ = _mock_store(lambda request: httpx.Response(200, text="ok"))
    assert store.login("letmein") is False
    assert not store.identity.is_authenticated
