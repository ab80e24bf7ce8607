"""Domain errors raised by the services layer."""


class VoyenaError(Exception):
    """Base class for domain errors."""


class NotFoundError(VoyenaError):
    """Update, restore or reposition targeted an id that does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")
