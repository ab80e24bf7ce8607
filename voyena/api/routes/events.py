"""Event CRUD routes."""

from fastapi import APIRouter, status

from voyena.api.deps import DbSession
from voyena.schemas.events import EventCreate, EventRead, EventUpdate
from voyena.services.events import event_service

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/", response_model=list[EventRead])
async def list_events(
    db: DbSession,
    start: str | None = None,
    end: str | None = None,
) -> list[EventRead]:
    """
    List non-deleted events by start time.

    Filters:
    - start/end: Inclusive range on start_time
    """
    events = await event_service.list_events(db, start=start, end=end)
    return [EventRead.model_validate(e) for e in events]


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(data: EventCreate, db: DbSession) -> EventRead:
    """Create a new event."""
    event = await event_service.create_event(db, data)
    return EventRead.model_validate(event)


@router.get("/{event_id}", response_model=EventRead | None)
async def get_event(event_id: str, db: DbSession) -> EventRead | None:
    """Get an event by ID, or null when it does not exist."""
    event = await event_service.get_event(db, event_id)
    return EventRead.model_validate(event) if event else None


@router.patch("/{event_id}", response_model=EventRead)
async def update_event(event_id: str, data: EventUpdate, db: DbSession) -> EventRead:
    """Update an event."""
    event = await event_service.update_event(db, event_id, data)
    return EventRead.model_validate(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: str, db: DbSession, hard: bool = False) -> None:
    """Delete an event (soft unless hard=true)."""
    await event_service.delete_event(db, event_id, hard=hard)
