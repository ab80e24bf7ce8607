"""Flat key/value settings."""

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession

from voyena.db.models import Setting


class SettingsService:
    """Upsert-style access to the settings table."""

    async def get_setting(self, db: AsyncSession, key: str) -> str | None:
        return await db.scalar(select(Setting.value).where(Setting.key == key))

    async def set_setting(self, db: AsyncSession, key: str, value: str) -> None:
        stmt = insert(Setting).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(index_elements=[Setting.key], set_={"value": value})
        await db.execute(stmt)
        await db.commit()


# Singleton instance
settings_service = SettingsService()
