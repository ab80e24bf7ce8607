"""Brain map, node and connection schemas."""

from typing import Literal

from pydantic import Field

from voyena.schemas.base import BaseSchema, TimestampMixin

BrainMapThemeType = Literal["default", "dark", "colorful", "minimal", "neon"]
NodeShapeType = Literal["circle", "rectangle", "diamond", "hexagon", "pill"]
NodeSizeType = Literal["small", "medium", "large", "xl"]
ConnectionStyleType = Literal["solid", "dashed", "dotted", "curved"]


# =============================================================================
# MAPS
# =============================================================================


class BrainMapCreate(BaseSchema):
    """Schema for creating a brain map. Every field is optional."""

    title: str | None = None
    description: str | None = None
    center_node_text: str | None = None
    theme: BrainMapThemeType | None = None


class BrainMapUpdate(BaseSchema):
    """Schema for updating a brain map. All fields optional."""

    title: str | None = None
    description: str | None = None
    center_node_id: str | None = None
    center_node_text: str | None = None
    viewport_x: float | None = None
    viewport_y: float | None = None
    viewport_zoom: float | None = None
    theme: BrainMapThemeType | None = None


class BrainMapRead(TimestampMixin, BaseSchema):
    """Schema for reading brain map data."""

    id: str
    title: str
    description: str | None = None
    center_node_id: str | None = None
    center_node_text: str
    viewport_x: float
    viewport_y: float
    viewport_zoom: float
    theme: str | None = None
    deleted_at: str | None = None


# =============================================================================
# NODES
# =============================================================================


class BrainMapNodeCreate(BaseSchema):
    """Schema for creating a node. Only brain_map_id and label are required."""

    brain_map_id: str
    label: str
    parent_node_id: str | None = None
    description: str | None = None
    x: float | None = None
    y: float | None = None
    color: str | None = None
    shape: NodeShapeType | None = None
    size: NodeSizeType | None = None
    icon: str | None = None
    linked_note_id: str | None = None
    linked_folder_id: str | None = None
    linked_event_id: str | None = None


class BrainMapNodeUpdate(BaseSchema):
    """
    Schema for updating a node. All fields optional.

    layer is deliberately absent: it is fixed when the node is created.
    """

    parent_node_id: str | None = None
    label: str | None = None
    description: str | None = None
    x: float | None = None
    y: float | None = None
    color: str | None = None
    shape: NodeShapeType | None = None
    size: NodeSizeType | None = None
    icon: str | None = None
    linked_note_id: str | None = None
    linked_folder_id: str | None = None
    linked_event_id: str | None = None
    is_collapsed: bool | None = None


class BrainMapNodeRead(TimestampMixin, BaseSchema):
    """Schema for reading node data."""

    id: str
    brain_map_id: str
    parent_node_id: str | None = None
    label: str
    description: str | None = None
    x: float
    y: float
    color: str | None = None
    shape: str | None = None
    size: str | None = None
    icon: str | None = None
    linked_note_id: str | None = None
    linked_folder_id: str | None = None
    linked_event_id: str | None = None
    is_collapsed: bool
    layer: int


# (node id, x, y)
NodePosition = tuple[str, float, float]


class CycleCheckRead(BaseSchema):
    """Result of checking a proposed parent assignment."""

    node_id: str
    parent_node_id: str | None
    would_create_cycle: bool


# =============================================================================
# CONNECTIONS
# =============================================================================


class BrainMapConnectionCreate(BaseSchema):
    """Schema for creating a connection between two nodes."""

    brain_map_id: str
    source_node_id: str
    target_node_id: str
    label: str | None = None
    color: str | None = None
    style: ConnectionStyleType | None = None
    animated: bool | None = None


class BrainMapConnectionRead(BaseSchema):
    """Schema for reading connection data. Connections are immutable."""

    id: str
    brain_map_id: str
    source_node_id: str
    target_node_id: str
    label: str | None = None
    color: str | None = None
    style: str
    animated: bool
    created_at: str


class BrainMapWithData(BaseSchema):
    """A map with its nodes (layer, then creation order) and connections."""

    brain_map: BrainMapRead
    nodes: list[BrainMapNodeRead] = Field(default_factory=list)
    connections: list[BrainMapConnectionRead] = Field(default_factory=list)
