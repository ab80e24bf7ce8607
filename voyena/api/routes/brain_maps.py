"""Brain map routes: map lifecycle, nodes and connections."""

from typing import Annotated

from fastapi import APIRouter, Body, status

from voyena.api.deps import DbSession
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
from voyena.services.brain_maps import brain_map_service

router = APIRouter(prefix="/brain-maps", tags=["brain-maps"])
nodes_router = APIRouter(prefix="/brain-map-nodes", tags=["brain-maps"])
connections_router = APIRouter(prefix="/brain-map-connections", tags=["brain-maps"])


# =============================================================================
# MAPS
# =============================================================================


@router.get("/", response_model=list[BrainMapRead])
async def list_brain_maps(db: DbSession) -> list[BrainMapRead]:
    """List non-deleted brain maps, most recently updated first."""
    maps = await brain_map_service.list_maps(db)
    return [BrainMapRead.model_validate(m) for m in maps]


@router.post("/", response_model=BrainMapWithData, status_code=status.HTTP_201_CREATED)
async def create_brain_map(data: BrainMapCreate, db: DbSession) -> BrainMapWithData:
    """Create a brain map and its center node."""
    return await brain_map_service.create_map(db, data)


@router.get("/{map_id}", response_model=BrainMapWithData | None)
async def get_brain_map(map_id: str, db: DbSession) -> BrainMapWithData | None:
    """
    Get a brain map with nodes and connections.

    Responds with null (not 404) when the map does not exist.
    """
    return await brain_map_service.get_map(db, map_id)


@router.patch("/{map_id}", response_model=BrainMapRead)
async def update_brain_map(map_id: str, data: BrainMapUpdate, db: DbSession) -> BrainMapRead:
    """Update a brain map."""
    brain_map = await brain_map_service.update_map(db, map_id, data)
    return BrainMapRead.model_validate(brain_map)


@router.delete("/{map_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_brain_map(map_id: str, db: DbSession, hard: bool = False) -> None:
    """Soft-delete a brain map, or remove it with everything in it when hard=true."""
    await brain_map_service.delete_map(db, map_id, hard=hard)


@router.post("/{map_id}/restore", response_model=BrainMapRead)
async def restore_brain_map(map_id: str, db: DbSession) -> BrainMapRead:
    """Undo a soft delete."""
    brain_map = await brain_map_service.restore_map(db, map_id)
    return BrainMapRead.model_validate(brain_map)


@router.post("/{map_id}/recompute-layers", response_model=list[BrainMapNodeRead])
async def recompute_layers(map_id: str, db: DbSession) -> list[BrainMapNodeRead]:
    """Recalculate every node's layer from the current parent links."""
    nodes = await brain_map_service.recompute_layers(db, map_id)
    return [BrainMapNodeRead.model_validate(n) for n in nodes]


# =============================================================================
# NODES
# =============================================================================


@nodes_router.post("/", response_model=BrainMapNodeRead, status_code=status.HTTP_201_CREATED)
async def create_node(data: BrainMapNodeCreate, db: DbSession) -> BrainMapNodeRead:
    """Create a node; its layer is derived from the parent."""
    node = await brain_map_service.create_node(db, data)
    return BrainMapNodeRead.model_validate(node)


@nodes_router.put("/positions", status_code=status.HTTP_204_NO_CONTENT)
async def reposition_nodes(
    positions: Annotated[list[NodePosition], Body()], db: DbSession
) -> None:
    """
    Move several nodes.

    Not atomic: positions before a failing id stay saved.
    """
    await brain_map_service.reposition_nodes(db, positions)


@nodes_router.get("/{node_id}/cycle-check", response_model=CycleCheckRead)
async def check_reparent(
    node_id: str,
    db: DbSession,
    parent_node_id: str | None = None,
) -> CycleCheckRead:
    """Report whether giving node_id this parent would create a cycle."""
    would_cycle = await brain_map_service.would_create_cycle(db, node_id, parent_node_id)
    return CycleCheckRead(
        node_id=node_id,
        parent_node_id=parent_node_id,
        would_create_cycle=would_cycle,
    )


@nodes_router.patch("/{node_id}", response_model=BrainMapNodeRead)
async def update_node(node_id: str, data: BrainMapNodeUpdate, db: DbSession) -> BrainMapNodeRead:
    """Update a node. Its layer is not recalculated."""
    node = await brain_map_service.update_node(db, node_id, data)
    return BrainMapNodeRead.model_validate(node)


@nodes_router.delete("/{node_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_node(node_id: str, db: DbSession) -> None:
    """Delete a node and its connections. Unknown ids are ignored."""
    await brain_map_service.delete_node(db, node_id)


# =============================================================================
# CONNECTIONS
# =============================================================================


@connections_router.post(
    "/", response_model=BrainMapConnectionRead, status_code=status.HTTP_201_CREATED
)
async def create_connection(
    data: BrainMapConnectionCreate, db: DbSession
) -> BrainMapConnectionRead:
    """Connect two nodes."""
    connection = await brain_map_service.create_connection(db, data)
    return BrainMapConnectionRead.model_validate(connection)


@connections_router.delete("/{connection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_connection(connection_id: str, db: DbSession) -> None:
    """Delete a connection."""
    await brain_map_service.delete_connection(db, connection_id)
