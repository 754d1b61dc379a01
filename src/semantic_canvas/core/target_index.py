"""
Connection target index: what a canvas already shows, keyed by content.

Used when pulling note properties onto an existing canvas so values that are
already represented get an edge instead of a duplicate node. Groups are left
out: a group's label is not a stable identity for a property value.
"""

from typing import Iterable, List, Optional

from pydantic import Field

from ..shared.models.base import BaseModel
from ..shared.models.canvas import CanvasGraph, CanvasNode, CardNode, Edge, FileNode, NodeKind, UrlNode
from .links import LinkResolver, file_node_to_wikilink


class ConnectionTarget(BaseModel):
    """An existing canvas node a property value could connect to."""

    node_type: NodeKind = Field(..., description="Kind of the existing node")
    id: str = Field(..., description="Canvas node id")
    content: str = Field(..., description="Card text, url or raw file path")
    normalized_file_name: Optional[str] = Field(default=None, description="Wikilink form of a file node")
    x: float = Field(default=0)
    y: float = Field(default=0)
    width: float = Field(default=0)
    height: float = Field(default=0)

    def as_node(self) -> CanvasNode:
        """Geometry-only view, enough for side selection."""
        return CanvasNode(id=self.id, x=self.x, y=self.y, width=self.width, height=self.height)


def target_for_node(node: CanvasNode, source_path: str, resolver: LinkResolver) -> Optional[ConnectionTarget]:
    """
    Connection target for one card, file or url node; None for groups.

    File nodes also get the wikilink they would have as a property value of
    ``source_path``.
    """
    geometry = {"x": node.x, "y": node.y, "width": node.width, "height": node.height}

    if isinstance(node, CardNode):
        return ConnectionTarget(node_type=NodeKind.CARD, id=node.id, content=node.text, **geometry)
    if isinstance(node, FileNode):
        return ConnectionTarget(
            node_type=NodeKind.FILE, id=node.id, content=node.file,
            normalized_file_name=file_node_to_wikilink(node, source_path, resolver),
            **geometry,
        )
    if isinstance(node, UrlNode):
        return ConnectionTarget(node_type=NodeKind.URL, id=node.id, content=node.url, **geometry)
    return None


def build_target_index(graph: CanvasGraph, source_path: str, resolver: LinkResolver) -> List[ConnectionTarget]:
    """Flatten the cards, files and urls of a graph into connection targets."""
    return [
        target_for_node(node, source_path, resolver)
        for node in [*graph.cards, *graph.files, *graph.urls]
    ]


def find_target(index: Iterable[ConnectionTarget], value: str,
                exclude_id: Optional[str] = None) -> Optional[ConnectionTarget]:
    """First target whose content or normalized file name equals ``value``."""
    for target in index:
        if target.id == exclude_id:
            continue
        if target.content == value or target.normalized_file_name == value:
            return target
    return None


def edge_exists(edges: Iterable[Edge], from_id: str, to_id: str, label: Optional[str]) -> bool:
    """True when an edge with exactly this ``(from, to, label)`` is present."""
    return any(
        edge.from_node == from_id and edge.to_node == to_id and edge.label == label
        for edge in edges
    )
