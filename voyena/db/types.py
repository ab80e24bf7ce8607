"""
Column types mapping stored SQLite values to Python values.

The store keeps booleans as 0/1 integers and list-valued fields as JSON text.
Decoding is lenient: a column that cannot be decoded reads back as an empty
list instead of failing the whole row.
"""

import json
import logging
from typing import Any

from sqlalchemy import Integer, Text
from sqlalchemy.types import TypeDecorator

logger = logging.getLogger(__name__)


class JSONList(TypeDecorator):
    """Ordered list serialized as JSON text."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[Any] | None, dialect) -> str:
        if value is None:
            return "[]"
        return json.dumps(list(value))

    def process_result_value(self, value: str | None, dialect) -> list[Any]:
        if not value:
            return []
        try:
            decoded = json.loads(value)
        except ValueError:
            logger.warning("Discarding undecodable list column value: %.60r", value)
            return []
        if not isinstance(decoded, list):
            return []
        return decoded


class IntBool(TypeDecorator):
    """Boolean persisted as a 0/1 integer."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: bool | None, dialect) -> int | None:
        if value is None:
            return None
        return 1 if value else 0

    def process_result_value(self, value: int | None, dialect) -> bool | None:
        if value is None:
            return None
        return value != 0
