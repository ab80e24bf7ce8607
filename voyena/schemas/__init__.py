"""Pydantic schemas for request/response validation."""

from voyena.schemas.brain_maps import (
    BrainMapConnectionCreate,
    BrainMapConnectionRead,
    BrainMapCreate,
    BrainMapNodeCreate,
    BrainMapNodeRead,
    BrainMapNodeUpdate,
    BrainMapRead,
    BrainMapUpdate,
    BrainMapWithData,
    CycleCheckRead,
    NodePosition,
)
from voyena.schemas.events import EventCreate, EventRead, EventReminder, EventUpdate
from voyena.schemas.folders import FolderCreate, FolderRead, FolderUpdate
from voyena.schemas.notes import NoteCreate, NoteMove, NoteRead, NoteUpdate
from voyena.schemas.settings import SettingRead, SettingWrite

__all__ = [
    # Brain maps
    "BrainMapCreate",
    "BrainMapRead",
    "BrainMapUpdate",
    "BrainMapWithData",
    # Nodes
    "BrainMapNodeCreate",
    "BrainMapNodeRead",
    "BrainMapNodeUpdate",
    "NodePosition",
    "CycleCheckRead",
    # Connections
    "BrainMapConnectionCreate",
    "BrainMapConnectionRead",
    # Notes
    "NoteCreate",
    "NoteMove",
    "NoteRead",
    "NoteUpdate",
    # Folders
    "FolderCreate",
    "FolderRead",
    "FolderUpdate",
    # Events
    "EventCreate",
    "EventRead",
    "EventReminder",
    "EventUpdate",
    # Settings
    "SettingRead",
    "SettingWrite",
]
