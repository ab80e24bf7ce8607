"""Domain services over the local store."""

from voyena.services.brain_maps import brain_map_service
from voyena.services.events import event_service
from voyena.services.folders import folder_service
from voyena.services.notes import note_service
from voyena.services.settings import settings_service

__all__ = [
    "brain_map_service",
    "event_service",
    "folder_service",
    "note_service",
    "settings_service",
]
