"""Note CRUD with soft delete and folder moves."""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from voyena.db.base import new_id, utc_now
from voyena.db.models import Note
from voyena.errors import NotFoundError
from voyena.schemas.notes import NoteCreate, NoteUpdate

logger = logging.getLogger(__name__)


class NoteService:
    """Notes are listed pinned-first, then by recency."""

    async def list_notes(self, db: AsyncSession, folder_id: str | None = None) -> list[Note]:
        query = select(Note).where(Note.deleted_at.is_(None))
        if folder_id:
            query = query.where(Note.folder_id == folder_id)
        query = query.order_by(Note.is_pinned.desc(), Note.updated_at.desc())

        result = await db.execute(query.execution_options(populate_existing=True))
        return list(result.scalars())

    async def get_note(self, db: AsyncSession, note_id: str) -> Note | None:
        """Fetch by id, including soft-deleted notes."""
        return await db.get(Note, note_id, populate_existing=True)

    async def create_note(self, db: AsyncSession, data: NoteCreate) -> Note:
        now = utc_now()
        note = Note(
            id=new_id("note"),
            title=data.title or "",
            content=data.content or "",
            folder_id=data.folder_id,
            tags=list(data.tags),
            is_pinned=False,
            created_at=now,
            updated_at=now,
        )
        db.add(note)
        await db.commit()
        return note

    async def update_note(self, db: AsyncSession, note_id: str, data: NoteUpdate) -> Note:
        note = await db.get(Note, note_id, populate_existing=True)
        if note is None:
            raise NotFoundError("Note", note_id)

        for key, value in data.model_dump(exclude_unset=True).items():
            if value is None and key != "folder_id":
                continue
            setattr(note, key, value)
        note.updated_at = utc_now()
        await db.commit()
        return note

    async def delete_note(self, db: AsyncSession, note_id: str, hard: bool = False) -> None:
        """Soft delete by default; a hard delete also clears node links to the note."""
        if hard:
            await db.execute(delete(Note).where(Note.id == note_id))
        else:
            await db.execute(update(Note).where(Note.id == note_id).values(deleted_at=utc_now()))
        await db.commit()

    async def move_notes_to_folder(
        self, db: AsyncSession, note_ids: list[str], folder_id: str | None
    ) -> None:
        """Move notes into folder_id (or out of any folder), one shared timestamp."""
        now = utc_now()
        for note_id in note_ids:
            await db.execute(
                update(Note).where(Note.id == note_id).values(folder_id=folder_id, updated_at=now)
            )
        await db.commit()
        logger.debug("Moved %d note(s) to folder %s", len(note_ids), folder_id)


# Singleton instance
note_service = NoteService()
