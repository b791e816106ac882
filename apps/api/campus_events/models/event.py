from datetime import datetime
from enum import Enum

from sqlalchemy import JSON, CheckConstraint, Integer, String, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from campus_events.models.base import Base, TimestampMixin, TZDateTime, UUIDPrimaryKeyMixin


class EventStatus(str, Enum):
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class EventTag(str, Enum):
    TECH = "tech"
    FOOD = "food"
    GAMES = "games"
    STUDY = "study"
    SOCIAL = "social"
    CAREER = "career"
    NETWORKING = "networking"


EVENT_TAGS: tuple[str, ...] = tuple(tag.value for tag in EventTag)

# TEXT[] on PostgreSQL, JSON list elsewhere; order is preserved either way
TagList = JSON().with_variant(ARRAY(String(32)), "postgresql")


class Event(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "events"
    __table_args__ = (
        CheckConstraint("current_attendees >= 0", name="ck_events_current_attendees_nonneg"),
        CheckConstraint(
            "ends_at IS NULL OR ends_at > starts_at", name="ck_events_ends_after_starts"
        ),
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    # Club name as text for now; there is no clubs table behind it
    club: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    starts_at: Mapped[datetime] = mapped_column(TZDateTime, nullable=False, index=True)
    ends_at: Mapped[datetime | None] = mapped_column(TZDateTime, nullable=True)
    location: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    tags: Mapped[list[str]] = mapped_column(TagList, nullable=False, default=list)
    current_attendees: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    max_attendees: Mapped[int | None] = mapped_column(Integer, nullable=True)

    status: Mapped[EventStatus] = mapped_column(
        SAEnum(
            EventStatus,
            native_enum=False,
            length=20,
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
        default=EventStatus.SCHEDULED,
        index=True,
    )

    # Hash of the shared secret used at creation; compared on update/delete
    creator_id: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
