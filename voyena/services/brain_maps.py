"""
Brain map service: map lifecycle, node hierarchy and connections.

Touch rule: creating, updating or deleting a node, and creating a
connection, set the owning map's updated_at to the operation timestamp so
that recency ordering reflects content edits. Deleting a connection does not
touch the map.

layer is written once when a node is created and never recomputed
implicitly. recompute_layers() is the explicit way to refresh it.
"""

import logging
from collections import defaultdict, deque
from collections.abc import Iterable

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from voyena.config import get_settings
from voyena.db.base import new_id, utc_now
from voyena.db.models import BrainMap, BrainMapConnection, BrainMapNode
from voyena.errors import NotFoundError
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
    NodePosition,
)

logger = logging.getLogger(__name__)
settings = get_settings()

# Columns that cannot be cleared through a patch; an explicit null is ignored
_MAP_REQUIRED_FIELDS = frozenset(
    {"title", "center_node_text", "viewport_x", "viewport_y", "viewport_zoom"}
)
_NODE_REQUIRED_FIELDS = frozenset({"label", "x", "y", "is_collapsed"})


def _apply_patch(target: object, patch: dict, required: frozenset[str]) -> None:
    for key, value in patch.items():
        if value is None and key in required:
            continue
        setattr(target, key, value)


class BrainMapService:
    """Manages brain maps, their node hierarchy and cross-connections."""

    # =========================================================================
    # MAPS
    # =========================================================================

    async def list_maps(self, db: AsyncSession) -> list[BrainMap]:
        """Non-deleted maps, most recently touched first."""
        result = await db.execute(
            select(BrainMap)
            .where(BrainMap.deleted_at.is_(None))
            .order_by(BrainMap.updated_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars())

    async def get_map(self, db: AsyncSession, map_id: str) -> BrainMapWithData | None:
        """
        Fetch a map with its nodes and connections.

        Returns None when no row exists. Soft-deleted maps are still returned.
        """
        brain_map = await db.get(BrainMap, map_id, populate_existing=True)
        if brain_map is None:
            return None

        nodes = await self.list_nodes(db, map_id)
        connections = await self.list_connections(db, map_id)
        return BrainMapWithData(
            brain_map=BrainMapRead.model_validate(brain_map),
            nodes=[BrainMapNodeRead.model_validate(n) for n in nodes],
            connections=[BrainMapConnectionRead.model_validate(c) for c in connections],
        )

    async def create_map(self, db: AsyncSession, data: BrainMapCreate) -> BrainMapWithData:
        """
        Create a map together with its center node.

        Both rows are written in one transaction: if either insert fails
        nothing is committed.
        """
        now = utc_now()
        center_text = (
            data.center_node_text
            if data.center_node_text is not None
            else settings.default_center_text
        )
        map_id = new_id("brainmap")
        center_id = new_id("node")

        brain_map = BrainMap(
            id=map_id,
            title=data.title if data.title is not None else settings.default_map_title,
            description=data.description,
            center_node_id=center_id,
            center_node_text=center_text,
            viewport_x=0.0,
            viewport_y=0.0,
            viewport_zoom=1.0,
            theme=data.theme or "default",
            created_at=now,
            updated_at=now,
        )
        center = BrainMapNode(
            id=center_id,
            brain_map_id=map_id,
            parent_node_id=None,
            label=center_text,
            x=0.0,
            y=0.0,
            color=settings.center_node_color,
            shape="circle",
            size="large",
            is_collapsed=False,
            layer=0,
            created_at=now,
            updated_at=now,
        )

        try:
            db.add(brain_map)
            await db.flush()
            db.add(center)
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            logger.error("Brain map creation rolled back for %s", map_id)
            raise

        logger.info("Created brain map %s with center node %s", map_id, center_id)
        return BrainMapWithData(
            brain_map=BrainMapRead.model_validate(brain_map),
            nodes=[BrainMapNodeRead.model_validate(center)],
            connections=[],
        )

    async def update_map(self, db: AsyncSession, map_id: str, data: BrainMapUpdate) -> BrainMap:
        """Apply the fields present in the patch; updated_at always advances."""
        brain_map = await db.get(BrainMap, map_id, populate_existing=True)
        if brain_map is None:
            raise NotFoundError("Brain map", map_id)

        _apply_patch(brain_map, data.model_dump(exclude_unset=True), _MAP_REQUIRED_FIELDS)
        brain_map.updated_at = utc_now()
        await db.commit()
        return brain_map

    async def delete_map(self, db: AsyncSession, map_id: str, hard: bool = False) -> None:
        """
        Soft delete by default (sets deleted_at).

        A hard delete removes the row; the store cascades its nodes and
        connections.
        """
        if hard:
            await db.execute(delete(BrainMap).where(BrainMap.id == map_id))
            logger.info("Hard-deleted brain map %s", map_id)
        else:
            await db.execute(
                update(BrainMap).where(BrainMap.id == map_id).values(deleted_at=utc_now())
            )
        await db.commit()

    async def restore_map(self, db: AsyncSession, map_id: str) -> BrainMap:
        """Undo a soft delete. updated_at is left as it was."""
        brain_map = await db.get(BrainMap, map_id, populate_existing=True)
        if brain_map is None:
            raise NotFoundError("Brain map", map_id)

        brain_map.deleted_at = None
        await db.commit()
        return brain_map

    async def _touch(self, db: AsyncSession, map_id: str, now: str) -> None:
        await db.execute(update(BrainMap).where(BrainMap.id == map_id).values(updated_at=now))
        await db.commit()
        logger.debug("Touched brain map %s", map_id)

    # =========================================================================
    # NODES
    # =========================================================================

    async def list_nodes(self, db: AsyncSession, map_id: str) -> list[BrainMapNode]:
        """Nodes of a map ordered by layer, then creation time."""
        result = await db.execute(
            select(BrainMapNode)
            .where(BrainMapNode.brain_map_id == map_id)
            .order_by(BrainMapNode.layer.asc(), BrainMapNode.created_at.asc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars())

    async def get_node(self, db: AsyncSession, node_id: str) -> BrainMapNode | None:
        return await db.get(BrainMapNode, node_id, populate_existing=True)

    async def _derive_layer(self, db: AsyncSession, parent_node_id: str | None) -> int:
        """
        Parent layer + 1, or 1 without a parent.

        A parent id that matches no node counts as layer 0.
        """
        if not parent_node_id:
            return 1
        parent_layer = await db.scalar(
            select(BrainMapNode.layer).where(BrainMapNode.id == parent_node_id)
        )
        if parent_layer is None:
            logger.warning("Parent node %s not found; deriving layer from 0", parent_node_id)
            parent_layer = 0
        return parent_layer + 1

    async def create_node(self, db: AsyncSession, data: BrainMapNodeCreate) -> BrainMapNode:
        """Create a node under a map. The center node is never created here."""
        now = utc_now()
        layer = await self._derive_layer(db, data.parent_node_id)

        node = BrainMapNode(
            id=new_id("node"),
            brain_map_id=data.brain_map_id,
            parent_node_id=data.parent_node_id,
            label=data.label,
            description=data.description,
            x=data.x if data.x is not None else 0.0,
            y=data.y if data.y is not None else 0.0,
            color=data.color,
            shape=data.shape or "circle",
            size=data.size or "medium",
            icon=data.icon,
            linked_note_id=data.linked_note_id,
            linked_folder_id=data.linked_folder_id,
            linked_event_id=data.linked_event_id,
            is_collapsed=False,
            layer=layer,
            created_at=now,
            updated_at=now,
        )
        db.add(node)
        await db.commit()

        await self._touch(db, data.brain_map_id, now)
        return node

    async def update_node(
        self, db: AsyncSession, node_id: str, data: BrainMapNodeUpdate
    ) -> BrainMapNode:
        """
        Apply the fields present in the patch.

        Reparenting keeps the stored layer of the node and its descendants.
        """
        node = await db.get(BrainMapNode, node_id, populate_existing=True)
        if node is None:
            raise NotFoundError("Brain map node", node_id)

        now = utc_now()
        _apply_patch(node, data.model_dump(exclude_unset=True), _NODE_REQUIRED_FIELDS)
        node.updated_at = now
        await db.commit()

        await self._touch(db, node.brain_map_id, now)
        return node

    async def delete_node(self, db: AsyncSession, node_id: str) -> None:
        """
        Delete a node; a node that does not exist is a no-op.

        The store removes every connection using the node and clears
        parent_node_id on its children (their layer is left unchanged).
        """
        map_id = await db.scalar(
            select(BrainMapNode.brain_map_id).where(BrainMapNode.id == node_id)
        )
        await db.execute(delete(BrainMapNode).where(BrainMapNode.id == node_id))
        await db.commit()

        if map_id is not None:
            await self._touch(db, map_id, utc_now())

    async def reposition_nodes(self, db: AsyncSession, positions: Iterable[NodePosition]) -> None:
        """
        Move nodes, committing one node at a time.

        All rows share one timestamp. The first id that matches no node
        raises NotFoundError; positions already applied stay committed.
        """
        now = utc_now()
        for node_id, x, y in positions:
            result = await db.execute(
                update(BrainMapNode)
                .where(BrainMapNode.id == node_id)
                .values(x=x, y=y, updated_at=now)
            )
            if result.rowcount == 0:
                raise NotFoundError("Brain map node", node_id)
            await db.commit()

    async def recompute_layers(self, db: AsyncSession, map_id: str) -> list[BrainMapNode]:
        """
        Rewrite every node's layer as its distance from a root.

        Roots are nodes without a parent in this map: the center node sits at
        layer 0, any other root at layer 1. Nodes stuck in a parent cycle are
        unreachable from a root and keep their stored layer.
        """
        brain_map = await db.get(BrainMap, map_id, populate_existing=True)
        if brain_map is None:
            raise NotFoundError("Brain map", map_id)

        nodes = await self.list_nodes(db, map_id)
        by_id = {node.id: node for node in nodes}
        children: dict[str, list[BrainMapNode]] = defaultdict(list)
        queue: deque[tuple[BrainMapNode, int]] = deque()

        for node in nodes:
            if node.parent_node_id in by_id:
                children[node.parent_node_id].append(node)
            else:
                queue.append((node, 0 if node.id == brain_map.center_node_id else 1))

        now = utc_now()
        visited: set[str] = set()
        changed = 0
        while queue:
            node, layer = queue.popleft()
            if node.id in visited:
                continue
            visited.add(node.id)
            if node.layer != layer:
                node.layer = layer
                node.updated_at = now
                changed += 1
            for child in children[node.id]:
                queue.append((child, layer + 1))

        await db.commit()
        await self._touch(db, map_id, now)
        logger.info("Recomputed layers for brain map %s (%d node(s) changed)", map_id, changed)
        return await self.list_nodes(db, map_id)

    async def would_create_cycle(
        self, db: AsyncSession, node_id: str, parent_node_id: str | None
    ) -> bool:
        """
        True when making parent_node_id the parent of node_id would close a loop.

        Walks up from the proposed parent; update_node itself never runs this check.
        """
        if await db.get(BrainMapNode, node_id) is None:
            raise NotFoundError("Brain map node", node_id)

        current = parent_node_id
        seen: set[str] = set()
        while current is not None and current not in seen:
            if current == node_id:
                return True
            seen.add(current)
            current = await db.scalar(
                select(BrainMapNode.parent_node_id).where(BrainMapNode.id == current)
            )
        return False

    # =========================================================================
    # CONNECTIONS
    # =========================================================================

    async def list_connections(self, db: AsyncSession, map_id: str) -> list[BrainMapConnection]:
        result = await db.execute(
            select(BrainMapConnection)
            .where(BrainMapConnection.brain_map_id == map_id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars())

    async def create_connection(
        self, db: AsyncSession, data: BrainMapConnectionCreate
    ) -> BrainMapConnection:
        """
        Connect two nodes.

        The store only checks that both nodes exist; it does not check that
        they belong to brain_map_id.
        """
        now = utc_now()
        connection = BrainMapConnection(
            id=new_id("conn"),
            brain_map_id=data.brain_map_id,
            source_node_id=data.source_node_id,
            target_node_id=data.target_node_id,
            label=data.label,
            color=data.color,
            style=data.style or "solid",
            animated=bool(data.animated),
            created_at=now,
        )
        db.add(connection)
        await db.commit()

        await self._touch(db, data.brain_map_id, now)
        return connection

    async def delete_connection(self, db: AsyncSession, connection_id: str) -> None:
        """Remove a connection. The owning map's updated_at is not touched."""
        await db.execute(delete(BrainMapConnection).where(BrainMapConnection.id == connection_id))
        await db.commit()


# Singleton instance
brain_map_service = BrainMapService()
