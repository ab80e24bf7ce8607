"""Key/value settings routes."""

from fastapi import APIRouter, status

from voyena.api.deps import DbSession
from voyena.schemas.settings import SettingRead, SettingWrite
from voyena.services.settings import settings_service

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/{key}", response_model=SettingRead)
async def get_setting(key: str, db: DbSession) -> SettingRead:
    """Read a setting; value is null when unset."""
    value = await settings_service.get_setting(db, key)
    return SettingRead(key=key, value=value)


@router.put("/{key}", status_code=status.HTTP_204_NO_CONTENT)
async def set_setting(key: str, data: SettingWrite, db: DbSession) -> None:
    """Create or replace a setting."""
    await settings_service.set_setting(db, key, data.value)
