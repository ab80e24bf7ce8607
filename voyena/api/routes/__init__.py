"""API routes package."""

from voyena.api.routes import brain_maps, events, folders, notes, settings

__all__ = [
    "brain_maps",
    "events",
    "folders",
    "notes",
    "settings",
]
