"""
Property derivation: what a file node's canvas connections say about its note.

For one file node, every edge leaving the node (or any group containing it),
plus every bidirectional edge arriving there, yields one property value:

- card  -> the card text, keyed by the edge label or ``card_default``
- url   -> the link address, keyed by the edge label or ``url_default``
- file  -> a wikilink to the other note, keyed by the edge label or ``file_default``
- group -> nothing; group targets are already expanded into phantom edges

Group membership itself becomes ``group_default: [group labels]``.
"""

from typing import List, NamedTuple, Optional

from ..shared.config.settings import Settings
from ..shared.exceptions import UnresolvedEdgeEndpointError
from ..shared.models.canvas import (
    CanvasGraph, DerivedResult, Edge, FileNode, NodeKind, PropertyMap, ResolvedNode
)
from .links import LinkResolver, file_node_to_wikilink


class Connection(NamedTuple):
    """One relevant edge seen from the file node's side."""
    edge: Edge
    other: ResolvedNode
    label: Optional[str]
    value: Optional[str]


def relevant_edges(file: FileNode, graph: CanvasGraph) -> List[Edge]:
    """
    Edges that speak for ``file``: those leaving the node or one of its
    groups, and bidirectional edges arriving at them.
    """
    relevant_ids = {file.id, *(group.id for group in file.in_groups)}
    return [
        edge for edge in graph.edges
        if edge.from_node in relevant_ids
        or (edge.to_node in relevant_ids and edge.is_bidirectional)
    ]


def resolve_other_side(graph: CanvasGraph, node_id: str) -> ResolvedNode:
    """
    Find the node at the far end of an edge, checking cards, urls, files,
    then groups, and taking the first match in each.

    Raises:
        UnresolvedEdgeEndpointError: if no node has this id
    """
    for kind, nodes in (
        (NodeKind.CARD, graph.cards),
        (NodeKind.URL, graph.urls),
        (NodeKind.FILE, graph.files),
        (NodeKind.GROUP, graph.groups),
    ):
        match = next((node for node in nodes if node.id == node_id), None)
        if match is not None:
            return ResolvedNode(kind, match)

    raise UnresolvedEdgeEndpointError(
        f"Could not find other side of edge: no node with id {node_id!r}", node_id=node_id
    )


def other_side_id(edge: Edge, file: FileNode) -> str:
    if edge.to_node == file.id:
        return edge.from_node
    return edge.to_node


def describe_connection(edge: Edge,
                        file: FileNode,
                        graph: CanvasGraph,
                        settings: Settings,
                        resolver: LinkResolver) -> Connection:
    """Work out the property key and value one relevant edge contributes."""
    try:
        other = resolve_other_side(graph, other_side_id(edge, file))
    except UnresolvedEdgeEndpointError as e:
        e.edge_id = edge.id
        raise

    label: Optional[str] = None
    value: Optional[str] = None

    if other.kind == NodeKind.CARD:
        label, value = settings.card_default, other.node.text
    elif other.kind == NodeKind.URL:
        label, value = settings.url_default, other.node.url
    elif other.kind == NodeKind.FILE:
        label, value = settings.file_default, file_node_to_wikilink(other.node, file.file, resolver)

    if edge.label is not None:
        label = edge.label

    return Connection(edge=edge, other=other, label=label, value=value)


def derive_properties(file: FileNode,
                      graph: CanvasGraph,
                      settings: Settings,
                      resolver: LinkResolver) -> DerivedResult:
    """
    Derive the property map one file node implies.

    Returns None when the node has no relevant edges and sits in no group.
    Only labelled groups are listed under ``group_default``; a file inside an
    unlabelled group still counts as grouped, so the result is ``{}``
    rather than None.
    The returned map can still be empty once unlabelled entries are dropped;
    callers filter those out before writing.
    """
    edges = relevant_edges(file, graph)
    if not edges and not file.in_groups:
        return None

    connections = [
        connection
        for connection in (describe_connection(edge, file, graph, settings, resolver) for edge in edges)
        if connection.label
    ]

    props: PropertyMap = {}

    if file.in_groups and settings.use_groups:
        labels = [group.label for group in file.in_groups if group.label]
        if labels:
            props[settings.group_default] = labels

    for kind, enabled in (
        (NodeKind.CARD, settings.use_cards),
        (NodeKind.URL, settings.use_urls),
        (NodeKind.FILE, settings.use_files),
    ):
        if not enabled:
            continue
        for connection in connections:
            if connection.other.kind == kind:
                props.setdefault(connection.label, []).append(connection.value)

    return props
