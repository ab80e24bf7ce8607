"""
SQLAlchemy 2.0 Models for Voyena.

Uses modern declarative syntax with Mapped[] type annotations.
Primary keys are prefixed string identifiers, timestamps are ISO-8601 text,
and parent/child links are plain foreign keys (no owning relationships).
"""

from typing import Any, Optional

from sqlalchemy import Float, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from voyena.db.base import Base, id_factory, utc_now
from voyena.db.types import IntBool, JSONList


# =============================================================================
# MODELS
# =============================================================================


class Folder(Base):
    """
    Folder for grouping notes.

    Folders nest through parent_id; nothing prevents a folder from becoming
    its own ancestor.
    """

    __tablename__ = "folders"
    __table_args__ = (Index("idx_folders_parent", "parent_id"),)

    id: Mapped[str] = mapped_column(String, primary_key=True, default=id_factory("folder"))
    name: Mapped[str] = mapped_column(Text, nullable=False)
    parent_id: Mapped[Optional[str]] = mapped_column(
        String, ForeignKey("folders.id", ondelete="SET NULL"), nullable=True
    )
    color: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    created_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
    updated_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)


class Note(Base):
    """User note with markdown content and an ordered tag list."""

    __tablename__ = "notes"
    __table_args__ = (
        Index("idx_notes_folder", "folder_id"),
        Index("idx_notes_updated", "updated_at"),
        Index("idx_notes_deleted", "deleted_at"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=id_factory("note"))
    title: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    folder_id: Mapped[Optional[str]] = mapped_column(
        String, ForeignKey("folders.id", ondelete="SET NULL"), nullable=True
    )
    tags: Mapped[list[str]] = mapped_column(
        JSONList, nullable=False, default=list, server_default="[]"
    )
    is_pinned: Mapped[bool] = mapped_column(
        IntBool, nullable=False, default=False, server_default=text("0")
    )
    created_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
    updated_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
    deleted_at: Mapped[Optional[str]] = mapped_column(String, nullable=True)


class Event(Base):
    """
    Calendar event or todo.

    Reminders are kept inline as a JSON list of ``{id, minutes_before, type}``
    records rather than in a child table.
    """

    __tablename__ = "events"
    __table_args__ = (
        Index("idx_events_start", "start_time"),
        Index("idx_events_deleted", "deleted_at"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=id_factory("event"))
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    event_type: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    start_time: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    end_time: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    has_scheduled_time: Mapped[bool] = mapped_column(
        IntBool, nullable=False, default=False, server_default=text("0")
    )
    time_mode: Mapped[str] = mapped_column(
        String, nullable=False, default="at_time", server_default="at_time"
    )
    duration_minutes: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(
        String, nullable=False, default="personal", server_default="personal"
    )
    color: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    priority: Mapped[str] = mapped_column(
        String, nullable=False, default="medium", server_default="medium"
    )
    tags: Mapped[list[str]] = mapped_column(
        JSONList, nullable=False, default=list, server_default="[]"
    )
    show_on_calendar: Mapped[bool] = mapped_column(
        IntBool, nullable=False, default=True, server_default=text("1")
    )
    is_all_day: Mapped[bool] = mapped_column(
        IntBool, nullable=False, default=False, server_default=text("0")
    )
    is_recurring: Mapped[bool] = mapped_column(
        IntBool, nullable=False, default=False, server_default=text("0")
    )
    recurring_pattern: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default="pending", server_default="pending"
    )
    reminders: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONList, nullable=False, default=list, server_default="[]"
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
    updated_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
    deleted_at: Mapped[Optional[str]] = mapped_column(String, nullable=True)


class Setting(Base):
    """Flat key/value application setting."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)


class BrainMap(Base):
    """
    Mind map canvas.

    center_node_id points back at the layer-0 node created together with the
    map. It is a plain column, not a foreign key, so the two tables do not
    depend on each other.
    """

    __tablename__ = "brain_maps"
    __table_args__ = (
        Index("idx_brain_maps_updated", "updated_at"),
        Index("idx_brain_maps_deleted", "deleted_at"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=id_factory("brainmap"))
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    center_node_id: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    center_node_text: Mapped[str] = mapped_column(Text, nullable=False)
    viewport_x: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0, server_default=text("0")
    )
    viewport_y: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0, server_default=text("0")
    )
    viewport_zoom: Mapped[float] = mapped_column(
        Float, nullable=False, default=1.0, server_default=text("1")
    )
    theme: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    created_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
    updated_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
    deleted_at: Mapped[Optional[str]] = mapped_column(String, nullable=True)


class BrainMapNode(Base):
    """
    Node of a brain map.

    layer is recorded once at creation (parent layer + 1) and is not kept in
    sync when the node is reparented or its parent is deleted.
    """

    __tablename__ = "brain_map_nodes"
    __table_args__ = (
        Index("idx_brain_map_nodes_map", "brain_map_id"),
        Index("idx_brain_map_nodes_parent", "parent_node_id"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=id_factory("node"))
    brain_map_id: Mapped[str] = mapped_column(
        String, ForeignKey("brain_maps.id", ondelete="CASCADE"), nullable=False
    )
    parent_node_id: Mapped[Optional[str]] = mapped_column(
        String, ForeignKey("brain_map_nodes.id", ondelete="SET NULL"), nullable=True
    )
    label: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    x: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, server_default=text("0"))
    y: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, server_default=text("0"))
    color: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    shape: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    size: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # Weak links: cleared by the store when the target row is removed
    linked_note_id: Mapped[Optional[str]] = mapped_column(
        String, ForeignKey("notes.id", ondelete="SET NULL"), nullable=True
    )
    linked_folder_id: Mapped[Optional[str]] = mapped_column(
        String, ForeignKey("folders.id", ondelete="SET NULL"), nullable=True
    )
    linked_event_id: Mapped[Optional[str]] = mapped_column(
        String, ForeignKey("events.id", ondelete="SET NULL"), nullable=True
    )

    is_collapsed: Mapped[bool] = mapped_column(
        IntBool, nullable=False, default=False, server_default=text("0")
    )
    layer: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default=text("1"))
    created_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
    updated_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)


class BrainMapConnection(Base):
    """Free-form edge between two nodes of a map. Parallel duplicates are allowed."""

    __tablename__ = "brain_map_connections"
    __table_args__ = (
        Index("idx_brain_map_connections_map", "brain_map_id"),
        Index("idx_brain_map_connections_source", "source_node_id"),
        Index("idx_brain_map_connections_target", "target_node_id"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=id_factory("conn"))
    brain_map_id: Mapped[str] = mapped_column(
        String, ForeignKey("brain_maps.id", ondelete="CASCADE"), nullable=False
    )
    source_node_id: Mapped[str] = mapped_column(
        String, ForeignKey("brain_map_nodes.id", ondelete="CASCADE"), nullable=False
    )
    target_node_id: Mapped[str] = mapped_column(
        String, ForeignKey("brain_map_nodes.id", ondelete="CASCADE"), nullable=False
    )
    label: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    color: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    style: Mapped[str] = mapped_column(
        String, nullable=False, default="solid", server_default="solid"
    )
    animated: Mapped[bool] = mapped_column(
        IntBool, nullable=False, default=False, server_default=text("0")
    )
    created_at: Mapped[str] = mapped_column(String, nullable=False, default=utc_now)
