"""Declarative base plus the identifier and clock helpers shared by all tables."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all Voyena tables."""


def utc_now() -> str:
    """Current UTC time as a fixed-width ISO-8601 string (sorts lexically)."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def new_id(prefix: str) -> str:
    """Opaque identifier such as ``node_5f0c...``."""
    return f"{prefix}_{uuid4()}"


def id_factory(prefix: str):
    """Column default producing identifiers with the given type prefix."""

    def _make() -> str:
        return new_id(prefix)

    return _make
