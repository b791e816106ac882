"""JSON view models for the dashboard and the month calendar."""

from datetime import date, datetime, timezone

from fastapi import APIRouter, Query

from campus_events.api.deps import DBSession, ViewerTZ
from campus_events.api.schemas.views import (
    DashboardEnvelope,
    DashboardOut,
    EventCardOut,
    MonthEnvelope,
    MonthOut,
)
from campus_events.calendar.dates import localize
from campus_events.calendar.display import events_found_label, format_card
from campus_events.calendar.filters import ALL, TAG_FILTERS, TimeWindow, filter_events
from campus_events.calendar.grid import build_month
from campus_events.services import events_service
from campus_events.services.error_codes import ErrorCode
from campus_events.services.exceptions import ValidationError

router = APIRouter(tags=["views"])


@router.get("/dashboard", response_model=DashboardEnvelope)
def dashboard(
    db: DBSession,
    tz: ViewerTZ,
    q: str = "",
    tag: str = ALL,
    when: TimeWindow = TimeWindow.ALL,
):
    if tag not in TAG_FILTERS:
        raise ValidationError(ErrorCode.INVALID_REQUEST, f"unknown tag: {tag}")

    events = events_service.list_events(db)
    matched = filter_events(events, query=q, tag=tag, window=when, tz=tz)
    cards = [EventCardOut.from_card(format_card(event, tz)) for event in matched]
    return DashboardEnvelope(
        data=DashboardOut(count=len(cards), label=events_found_label(len(cards)), events=cards)
    )


@router.get("/calendar", response_model=MonthEnvelope)
def calendar(
    db: DBSession,
    tz: ViewerTZ,
    year: int | None = Query(default=None, ge=1, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
    selected: date | None = None,
):
    now = datetime.now(timezone.utc)
    today = localize(now, tz).date()

    events = events_service.list_events(db)
    view = build_month(
        year or today.year,
        month or today.month,
        events,
        selected=selected or today,
        today=now,
        tz=tz,
    )
    return MonthEnvelope(data=MonthOut.from_view(view))
