"""
Schema creation and forward-only column migration.

Runs once at startup:
1. CREATE TABLE / INDEX IF NOT EXISTS for every model (idempotent)
2. For each existing table, ADD COLUMN for any model column the database
   file does not have yet (older files created before the column existed)

Columns are never dropped or altered.
"""

import logging
from pathlib import Path

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import Column, inspect
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

from voyena.db.base import Base
from voyena.db import models  # noqa: F401 - Import models to register them

logger = logging.getLogger(__name__)


def _added_column(column: Column) -> Column:
    """
    Standalone copy of a model column suitable for ALTER TABLE ADD COLUMN.

    SQLite cannot add a NOT NULL column without a default, so the copy is
    only NOT NULL when a server default exists. Foreign keys are not
    re-declared; SQLite cannot add constraints to an existing table.
    """
    server_default = column.server_default.arg if column.server_default is not None else None
    return Column(
        column.name,
        column.type,
        nullable=column.nullable or server_default is None,
        server_default=server_default,
    )


def add_missing_columns(connection: Connection) -> list[str]:
    """Add model columns absent from existing tables. Returns ``table.column`` names."""
    inspector = inspect(connection)
    existing_tables = set(inspector.get_table_names())
    operations = Operations(MigrationContext.configure(connection))
    added: list[str] = []

    for table in Base.metadata.sorted_tables:
        if table.name not in existing_tables:
            continue
        present = {col["name"] for col in inspector.get_columns(table.name)}
        for column in table.columns:
            if column.name in present:
                continue
            operations.add_column(table.name, _added_column(column))
            added.append(f"{table.name}.{column.name}")
            logger.info("Added column %s.%s", table.name, column.name)

    return added


def _create_and_migrate(connection: Connection) -> list[str]:
    added = add_missing_columns(connection)
    Base.metadata.create_all(connection)
    return added


async def init_schema(engine: AsyncEngine, database_path: Path | None = None) -> list[str]:
    """
    Bring the store schema up to date.

    Creates the data directory for ``database_path`` when given.
    """
    if database_path is not None:
        database_path.parent.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        added = await conn.run_sync(_create_and_migrate)

    logger.info("Schema ready (%d column(s) added)", len(added))
    return added
