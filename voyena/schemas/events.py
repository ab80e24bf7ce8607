"""Event schemas."""

from typing import Literal

from pydantic import Field

from voyena.schemas.base import BaseSchema, TimestampMixin

TimeModeType = Literal["todo", "at_time", "all_day", "morning", "day", "evening", "anytime"]
EventCategoryType = Literal["work", "meeting", "personal", "todo"]
PriorityType = Literal["low", "medium", "high"]
EventStatusType = Literal["pending", "in_progress", "completed", "cancelled", "missed", "skipped"]
RecurringPatternType = Literal["daily", "weekly", "monthly", "yearly"]


class EventReminder(BaseSchema):
    """Reminder fired some minutes before an event starts."""

    id: str
    minutes_before: int = Field(..., ge=0)
    type: Literal["notification", "email"] = "notification"


class EventBase(BaseSchema):
    """Fields shared by create and read."""

    title: str = Field(..., min_length=1)
    description: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    duration_minutes: int | None = None
    location: str | None = None
    color: str | None = None
    recurring_pattern: RecurringPatternType | None = None


class EventCreate(EventBase):
    """Schema for creating an event."""

    event_type: str | None = None
    time_mode: TimeModeType | None = None
    category: EventCategoryType | None = None
    priority: PriorityType | None = None
    tags: list[str] = Field(default_factory=list)
    show_on_calendar: bool | None = None
    is_all_day: bool | None = None
    is_recurring: bool | None = None
    reminders: list[EventReminder] = Field(default_factory=list)


class EventRead(TimestampMixin, EventBase):
    """Schema for reading event data."""

    id: str
    event_type: str | None = None
    has_scheduled_time: bool
    time_mode: str
    category: str
    priority: str
    tags: list[str]
    show_on_calendar: bool
    is_all_day: bool
    is_recurring: bool
    status: str
    reminders: list[EventReminder]
    notes: str | None = None
    deleted_at: str | None = None


class EventUpdate(BaseSchema):
    """Schema for updating an event. All fields optional."""

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    event_type: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    time_mode: TimeModeType | None = None
    duration_minutes: int | None = None
    location: str | None = None
    category: EventCategoryType | None = None
    color: str | None = None
    priority: PriorityType | None = None
    tags: list[str] | None = None
    show_on_calendar: bool | None = None
    is_all_day: bool | None = None
    is_recurring: bool | None = None
    recurring_pattern: RecurringPatternType | None = None
    status: EventStatusType | None = None
    reminders: list[EventReminder] | None = None
    notes: str | None = None
