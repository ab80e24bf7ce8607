"""Folder schemas."""

from typing import Annotated

from pydantic import StringConstraints

from voyena.schemas.base import BaseSchema, TimestampMixin

# Folder names are trimmed; the rest of the app stores text exactly as given
FolderName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class FolderCreate(BaseSchema):
    """Schema for creating a folder."""

    name: FolderName
    parent_id: str | None = None
    color: str | None = None
    icon: str | None = None


class FolderRead(TimestampMixin, BaseSchema):
    """Schema for reading folder data."""

    id: str
    name: str
    parent_id: str | None = None
    color: str | None = None
    icon: str | None = None


class FolderUpdate(BaseSchema):
    """Schema for updating a folder. All fields optional."""

    name: FolderName | None = None
    parent_id: str | None = None
    color: str | None = None
    icon: str | None = None
