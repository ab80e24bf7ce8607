"""
FastAPI dependencies.

Every route takes a DbSession: the request runs inside the store's
exclusive session, committed when the handler returns and rolled back if it
raises.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from voyena.db.session import get_db

# Type alias for dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
