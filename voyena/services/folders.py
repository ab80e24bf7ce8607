"""Folder CRUD. Folders are hard-deleted only."""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from voyena.db.base import new_id, utc_now
from voyena.db.models import Folder, Note
from voyena.errors import NotFoundError
from voyena.schemas.folders import FolderCreate, FolderUpdate

logger = logging.getLogger(__name__)


class FolderService:
    """Manages the folder tree. Parent links are not checked for cycles."""

    async def list_folders(self, db: AsyncSession) -> list[Folder]:
        result = await db.execute(
            select(Folder).order_by(Folder.name.asc()).execution_options(populate_existing=True)
        )
        return list(result.scalars())

    async def get_folder(self, db: AsyncSession, folder_id: str) -> Folder | None:
        return await db.get(Folder, folder_id, populate_existing=True)

    async def create_folder(self, db: AsyncSession, data: FolderCreate) -> Folder:
        now = utc_now()
        folder = Folder(
            id=new_id("folder"),
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        db.add(folder)
        await db.commit()
        return folder

    async def update_folder(self, db: AsyncSession, folder_id: str, data: FolderUpdate) -> Folder:
        folder = await db.get(Folder, folder_id, populate_existing=True)
        if folder is None:
            raise NotFoundError("Folder", folder_id)

        for key, value in data.model_dump(exclude_unset=True).items():
            if value is None and key == "name":
                continue
            setattr(folder, key, value)
        folder.updated_at = utc_now()
        await db.commit()
        return folder

    async def delete_folder(self, db: AsyncSession, folder_id: str) -> None:
        """Move the folder's notes to no folder, then remove the folder."""
        await db.execute(update(Note).where(Note.folder_id == folder_id).values(folder_id=None))
        await db.execute(delete(Folder).where(Folder.id == folder_id))
        await db.commit()
        logger.debug("Deleted folder %s", folder_id)


# Singleton instance
folder_service = FolderService()
