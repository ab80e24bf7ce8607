"""Notes CRUD routes."""

from fastapi import APIRouter, status

from voyena.api.deps import DbSession
from voyena.schemas.notes import NoteCreate, NoteMove, NoteRead, NoteUpdate
from voyena.services.notes import note_service

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("/", response_model=list[NoteRead])
async def list_notes(db: DbSession, folder_id: str | None = None) -> list[NoteRead]:
    """
    List non-deleted notes, pinned first.

    Filters:
    - folder_id: Only notes in this folder
    """
    notes = await note_service.list_notes(db, folder_id)
    return [NoteRead.model_validate(n) for n in notes]


@router.post("/", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
async def create_note(data: NoteCreate, db: DbSession) -> NoteRead:
    """Create a new note."""
    note = await note_service.create_note(db, data)
    return NoteRead.model_validate(note)


@router.post("/move", status_code=status.HTTP_204_NO_CONTENT)
async def move_notes(data: NoteMove, db: DbSession) -> None:
    """Move notes into a folder (or out of any folder)."""
    await note_service.move_notes_to_folder(db, data.note_ids, data.folder_id)


@router.get("/{note_id}", response_model=NoteRead | None)
async def get_note(note_id: str, db: DbSession) -> NoteRead | None:
    """Get a note by ID, or null when it does not exist."""
    note = await note_service.get_note(db, note_id)
    return NoteRead.model_validate(note) if note else None


@router.patch("/{note_id}", response_model=NoteRead)
async def update_note(note_id: str, data: NoteUpdate, db: DbSession) -> NoteRead:
    """Update a note."""
    note = await note_service.update_note(db, note_id, data)
    return NoteRead.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, db: DbSession, hard: bool = False) -> None:
    """Delete a note (soft unless hard=true)."""
    await note_service.delete_note(db, note_id, hard=hard)
