"""Event CRUD with soft delete."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from voyena.db.base import new_id, utc_now
from voyena.db.models import Event
from voyena.errors import NotFoundError
from voyena.schemas.events import EventCreate, EventUpdate

_REQUIRED_FIELDS = frozenset(
    {
        "title",
        "time_mode",
        "category",
        "priority",
        "tags",
        "show_on_calendar",
        "is_all_day",
        "is_recurring",
        "status",
        "reminders",
    }
)


class EventService:
    """Events are listed by start time; unscheduled events come last."""

    async def list_events(
        self,
        db: AsyncSession,
        start: str | None = None,
        end: str | None = None,
    ) -> list[Event]:
        """
        Non-deleted events.

        With start/end, only events whose start_time falls inside the
        inclusive range are returned.
        """
        query = select(Event).where(Event.deleted_at.is_(None))
        if start is not None:
            query = query.where(Event.start_time >= start)
        if end is not None:
            query = query.where(Event.start_time <= end)
        query = query.order_by(Event.start_time.is_(None), Event.start_time.asc())

        result = await db.execute(query.execution_options(populate_existing=True))
        return list(result.scalars())

    async def get_event(self, db: AsyncSession, event_id: str) -> Event | None:
        return await db.get(Event, event_id, populate_existing=True)

    async def create_event(self, db: AsyncSession, data: EventCreate) -> Event:
        now = utc_now()
        event = Event(
            id=new_id("event"),
            title=data.title,
            description=data.description,
            event_type=data.event_type,
            start_time=data.start_time,
            end_time=data.end_time,
            has_scheduled_time=data.start_time is not None,
            time_mode=data.time_mode or "at_time",
            duration_minutes=data.duration_minutes,
            location=data.location,
            category=data.category or "personal",
            color=data.color,
            priority=data.priority or "medium",
            tags=list(data.tags),
            show_on_calendar=True if data.show_on_calendar is None else data.show_on_calendar,
            is_all_day=bool(data.is_all_day),
            is_recurring=bool(data.is_recurring),
            recurring_pattern=data.recurring_pattern,
            status="pending",
            reminders=[r.model_dump() for r in data.reminders],
            created_at=now,
            updated_at=now,
        )
        db.add(event)
        await db.commit()
        return event

    async def update_event(self, db: AsyncSession, event_id: str, data: EventUpdate) -> Event:
        event = await db.get(Event, event_id, populate_existing=True)
        if event is None:
            raise NotFoundError("Event", event_id)

        patch = data.model_dump(exclude_unset=True)
        for key, value in patch.items():
            if value is None and key in _REQUIRED_FIELDS:
                continue
            setattr(event, key, value)
        if "start_time" in patch:
            event.has_scheduled_time = event.start_time is not None
        event.updated_at = utc_now()
        await db.commit()
        return event

    async def delete_event(self, db: AsyncSession, event_id: str, hard: bool = False) -> None:
        if hard:
            await db.execute(delete(Event).where(Event.id == event_id))
        else:
            await db.execute(
                update(Event).where(Event.id == event_id).values(deleted_at=utc_now())
            )
        await db.commit()


# Singleton instance
event_service = EventService()
