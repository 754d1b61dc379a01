"""
Edge normalization: bidirectionality flags and phantom edges for group targets.
"""

from typing import List

from ..shared.exceptions import UnresolvedEdgeEndpointError
from ..shared.infrastructure.monitoring import get_logger
from ..shared.models.canvas import CanvasGraph, Edge, GroupNode, NodeKind, ResolvedNode

logger = get_logger(__name__)

PHANTOM_SUFFIX = "-phantom"

# Phantom edges are never drawn; only label and connectivity matter
PHANTOM_FROM_SIDE = "right"
PHANTOM_TO_SIDE = "left"


def is_bidirectional(edge: Edge) -> bool:
    """
    An edge counts for both endpoints when it has an arrowhead at its start
    or no arrowhead at its end.
    """
    return edge.from_end == "arrow" or edge.to_end == "none"


def find_node(graph: CanvasGraph, node_id: str) -> ResolvedNode:
    """
    Find a node by id, checking cards, files, urls, then groups.

    Raises:
        UnresolvedEdgeEndpointError: if no node has this id
    """
    for kind, nodes in (
        (NodeKind.CARD, graph.cards),
        (NodeKind.FILE, graph.files),
        (NodeKind.URL, graph.urls),
        (NodeKind.GROUP, graph.groups),
    ):
        for node in nodes:
            if node.id == node_id:
                return ResolvedNode(kind, node)

    raise UnresolvedEdgeEndpointError(f"No canvas node with id {node_id!r}", node_id=node_id)


def phantom_edges_for(edge: Edge, group: GroupNode) -> List[Edge]:
    """One phantom edge per non-group member of ``group``."""
    label = edge.label if edge.label else group.label
    return [
        Edge(
            id=edge.id + PHANTOM_SUFFIX,
            from_node=edge.from_node,
            to_node=member.id,
            from_side=PHANTOM_FROM_SIDE,
            to_side=PHANTOM_TO_SIDE,
            label=label,
            is_bidirectional=edge.is_bidirectional,
        )
        for member in group.contained_nodes
        if not isinstance(member, GroupNode)
    ]


def normalize_edges(graph: CanvasGraph) -> CanvasGraph:
    """
    Return a new graph whose edges carry ``is_bidirectional`` and are followed
    by the phantom edges of every edge that points at a group.

    Every endpoint of every edge must resolve; a dangling edge is a broken
    canvas and raises UnresolvedEdgeEndpointError.
    """
    edges = [
        edge.model_copy(update={"is_bidirectional": is_bidirectional(edge)})
        for edge in graph.edges
    ]

    phantoms: List[Edge] = []
    for edge in edges:
        try:
            find_node(graph, edge.from_node)
            target = find_node(graph, edge.to_node)
        except UnresolvedEdgeEndpointError as e:
            raise UnresolvedEdgeEndpointError(
                f"Edge {edge.id} has an unresolvable endpoint {e.node_id!r}",
                edge_id=edge.id,
                node_id=e.node_id,
            ) from e

        if target.kind == NodeKind.GROUP:
            phantoms.extend(phantom_edges_for(edge, target.node))

    if phantoms:
        logger.debug(f"Synthesized {len(phantoms)} phantom edges for group targets")

    return graph.model_copy(update={"edges": edges + phantoms})
