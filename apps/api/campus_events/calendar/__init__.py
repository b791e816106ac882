from campus_events.calendar.dates import (
    day_key,
    days_between,
    next_weekday,
    normalize_day_end,
    normalize_day_start,
)
from campus_events.calendar.display import EventCard, format_card
from campus_events.calendar.filters import (
    TAG_FILTERS,
    TIME_FILTERS,
    TimeWindow,
    filter_events,
    matches_search,
    matches_tag,
    matches_time,
)
from campus_events.calendar.grid import (
    MonthView,
    SpanPosition,
    bucket_events,
    build_month,
    month_grid,
    shift_month,
    span_position,
)

__all__ = [
    "day_key",
    "days_between",
    "next_weekday",
    "normalize_day_end",
    "normalize_day_start",
    "EventCard",
    "format_card",
    "TAG_FILTERS",
    "TIME_FILTERS",
    "TimeWindow",
    "filter_events",
    "matches_search",
    "matches_tag",
    "matches_time",
    "MonthView",
    "SpanPosition",
    "bucket_events",
    "build_month",
    "month_grid",
    "shift_month",
    "span_position",
]
