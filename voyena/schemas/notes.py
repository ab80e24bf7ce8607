"""Note schemas."""

from pydantic import Field

from voyena.schemas.base import BaseSchema, TimestampMixin


class NoteCreate(BaseSchema):
    """Schema for creating a note. Missing title/content become empty strings."""

    title: str | None = None
    content: str | None = None
    folder_id: str | None = None
    tags: list[str] = Field(default_factory=list)


class NoteRead(TimestampMixin, BaseSchema):
    """Schema for reading note data."""

    id: str
    title: str
    content: str
    folder_id: str | None = None
    tags: list[str]
    is_pinned: bool
    deleted_at: str | None = None


class NoteUpdate(BaseSchema):
    """Schema for updating a note. All fields optional."""

    title: str | None = None
    content: str | None = None
    folder_id: str | None = None
    tags: list[str] | None = None
    is_pinned: bool | None = None


class NoteMove(BaseSchema):
    """Move several notes into a folder, or out of any folder when folder_id is null."""

    note_ids: list[str]
    folder_id: str | None = None
