"""Folder CRUD routes."""

from fastapi import APIRouter, status

from voyena.api.deps import DbSession
from voyena.schemas.folders import FolderCreate, FolderRead, FolderUpdate
from voyena.services.folders import folder_service

router = APIRouter(prefix="/folders", tags=["folders"])


@router.get("/", response_model=list[FolderRead])
async def list_folders(db: DbSession) -> list[FolderRead]:
    """List all folders by name."""
    folders = await folder_service.list_folders(db)
    return [FolderRead.model_validate(f) for f in folders]


@router.post("/", response_model=FolderRead, status_code=status.HTTP_201_CREATED)
async def create_folder(data: FolderCreate, db: DbSession) -> FolderRead:
    """Create a new folder."""
    folder = await folder_service.create_folder(db, data)
    return FolderRead.model_validate(folder)


@router.get("/{folder_id}", response_model=FolderRead | None)
async def get_folder(folder_id: str, db: DbSession) -> FolderRead | None:
    """Get a folder by ID, or null when it does not exist."""
    folder = await folder_service.get_folder(db, folder_id)
    return FolderRead.model_validate(folder) if folder else None


@router.patch("/{folder_id}", response_model=FolderRead)
async def update_folder(folder_id: str, data: FolderUpdate, db: DbSession) -> FolderRead:
    """Update a folder."""
    folder = await folder_service.update_folder(db, folder_id, data)
    return FolderRead.model_validate(folder)


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_folder(folder_id: str, db: DbSession) -> None:
    """Delete a folder; its notes are kept without a folder."""
    await folder_service.delete_folder(db, folder_id)
