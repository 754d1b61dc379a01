"""
Canvas synthesis: lay out a new canvas from a note's list properties.

The note becomes an anchor file node on the left. Every property gets one
labelled edge from the anchor: single values point at a node in the value
column, multiple values point at a group holding one node per value.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..shared.infrastructure.monitoring import get_logger
from ..shared.models.canvas import (
    CanvasNode, CardNode, Edge, FileNode, GroupNode, PropertyMap, UrlNode
)
from .layout import (
    ANCHOR_HEIGHT, ANCHOR_WIDTH, CARD_HEIGHT, CARD_WIDTH, COLUMN_GAP, FILE_HEIGHT,
    FILE_WIDTH, GROUP_COLUMN_X, LONG_CARD_HEIGHT, LONG_CARD_WIDTH, LONG_TEXT_THRESHOLD,
    MARGIN, SINGLE_COLUMN_X, URL_HEIGHT, URL_WIDTH, IdFactory, new_node_id, select_sides,
)
from .links import LinkResolver, is_wikilink, split_link_target, strip_wikilink

logger = get_logger(__name__)

NODE_MODELS = {
    "text": CardNode,
    "file": FileNode,
    "link": UrlNode,
}


def is_url(value: str) -> bool:
    return value.lower().startswith("http") and "//" in value and len(value) >= 8


class CanvasSynthesizer:
    """
    Builds canvas nodes and edges that represent note properties.

    Node ids come from ``id_factory`` so tests can make layouts deterministic.
    """

    def __init__(self, resolver: LinkResolver, id_factory: Optional[IdFactory] = None):
        self.resolver = resolver
        self.id_factory = id_factory or new_node_id

    def classify_value(self, value: str, source_path: str) -> Dict[str, Any]:
        """
        Canvas fields (type, content, size) for one property value.

        Wikilinks become file nodes, http(s) addresses become link nodes and
        everything else becomes a text card.
        """
        if is_wikilink(value):
            return self._file_fields(strip_wikilink(value), source_path)

        if is_url(value):
            return {"type": "link", "url": value, "width": URL_WIDTH, "height": URL_HEIGHT}

        if len(value) > LONG_TEXT_THRESHOLD:
            return {"type": "text", "text": value, "width": LONG_CARD_WIDTH, "height": LONG_CARD_HEIGHT}
        return {"type": "text", "text": value, "width": CARD_WIDTH, "height": CARD_HEIGHT}

    def _file_fields(self, target: str, source_path: str) -> Dict[str, Any]:
        fields: Dict[str, Any] = {"type": "file", "width": FILE_WIDTH, "height": FILE_HEIGHT}

        destination = self.resolver.first_linkpath_dest(target, source_path)
        if destination is not None:
            fields["file"] = destination
            return fields

        path, subpath, _alias = split_link_target(target)
        destination = self.resolver.first_linkpath_dest(path, source_path) if path else None
        if destination is None:
            logger.warning(f"Link [[{target}]] in {source_path} does not resolve; leaving it broken")
            fields["file"] = target
            return fields

        fields["file"] = destination
        if subpath:
            fields["subpath"] = subpath
        return fields

    def make_node(self, value: str, source_path: str, x: float, y: float) -> CanvasNode:
        """Create a positioned node for one property value."""
        fields = self.classify_value(value, source_path)
        model = NODE_MODELS[fields["type"]]
        return model.model_validate({**fields, "id": self.id_factory(), "x": x, "y": y})

    def make_edge(self, from_node: CanvasNode, to_node: CanvasNode, label: Optional[str]) -> Edge:
        """Create an edge with sides chosen from the nodes' relative positions."""
        from_side, to_side = select_sides(from_node, to_node)
        return Edge(
            id=self.id_factory(),
            from_node=from_node.id,
            to_node=to_node.id,
            from_side=from_side,
            to_side=to_side,
            label=label,
        )

    def synthesize(self, note_path: str, props: PropertyMap) -> Dict[str, Any]:
        """
        Lay out a canvas for ``note_path`` from its property map.

        Returns:
            Raw canvas JSON (``{"nodes": [...], "edges": [...]}``)
        """
        anchor = FileNode(
            id=self.id_factory(),
            file=note_path,
            x=SINGLE_COLUMN_X - ANCHOR_WIDTH - COLUMN_GAP,
            y=0,
            width=ANCHOR_WIDTH,
            height=ANCHOR_HEIGHT,
        )

        nodes: List[CanvasNode] = []
        targets: List[Tuple[CanvasNode, str]] = []
        cursor_y = 0
        group_cursor_y = 0

        for key, values in props.items():
            values = [str(v) for v in values if v is not None and str(v).strip()]
            if not values:
                continue

            if len(values) == 1:
                node = self.make_node(values[0], note_path, SINGLE_COLUMN_X, cursor_y)
                cursor_y += node.height + MARGIN
                nodes.append(node)
                targets.append((node, key))
                continue

            group, members = self._make_group(key, values, note_path, group_cursor_y)
            group_cursor_y += group.height + MARGIN
            nodes.append(group)
            nodes.extend(members)
            targets.append((group, key))

        total_height = max(cursor_y, group_cursor_y) - MARGIN if targets else 0
        anchor.y = round(total_height / 2 - ANCHOR_HEIGHT / 2)

        edges = [self.make_edge(anchor, target, key) for target, key in targets]

        logger.debug(f"Synthesized {len(nodes) + 1} nodes and {len(edges)} edges for {note_path}")
        return {
            "nodes": [node.to_canvas_dict() for node in [anchor, *nodes]],
            "edges": [edge.to_canvas_dict() for edge in edges],
        }

    def _make_group(self,
                    key: str,
                    values: List[str],
                    note_path: str,
                    top: float) -> Tuple[GroupNode, List[CanvasNode]]:
        """Group node labelled ``key`` with its members laid out left to right."""
        members: List[CanvasNode] = []
        member_x = GROUP_COLUMN_X + MARGIN
        for value in values:
            member = self.make_node(value, note_path, member_x, top + MARGIN)
            member_x += member.width + MARGIN
            members.append(member)

        group = GroupNode(
            id=self.id_factory(),
            label=key,
            x=GROUP_COLUMN_X,
            y=top,
            width=member_x - GROUP_COLUMN_X,
            height=max(member.height for member in members) + 2 * MARGIN,
        )
        return group, members
