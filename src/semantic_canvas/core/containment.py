"""
Group containment: which nodes sit inside which groups.
"""

from typing import Dict, List

from ..shared.infrastructure.monitoring import get_logger
from ..shared.models.canvas import CanvasGraph, CanvasNode, FileNode

logger = get_logger(__name__)


def contains(group: CanvasNode, node: CanvasNode) -> bool:
    """
    True when ``node``'s bounding box lies entirely inside ``group``'s.

    Edges touching the group boundary still count as inside.
    """
    return (
        group.x <= node.x
        and group.y <= node.y
        and group.right >= node.right
        and group.bottom >= node.bottom
    )


def resolve_containment(graph: CanvasGraph) -> CanvasGraph:
    """
    Return a new graph with ``GroupNode.contained_nodes`` and
    ``FileNode.in_groups`` filled in.

    Memberships are rebuilt from geometry every time, so resolving an already
    resolved graph gives the same result. Groups are not tested against other
    groups: nested groups are not supported.
    """
    members = graph.member_nodes()
    contained: Dict[str, List[CanvasNode]] = {}
    file_groups: Dict[str, List[str]] = {f.id: [] for f in graph.files}

    for group in graph.groups:
        contained[group.id] = []
        for node in members:
            if not contains(group, node):
                continue
            if isinstance(node, FileNode):
                node = node.model_copy(update={"in_groups": []})
            contained[group.id].append(node)
            if node.id in file_groups:
                file_groups[node.id].append(group.id)

        for other in graph.groups:
            if other.id != group.id and contains(group, other):
                logger.debug(f"Group {other.id} is nested in {group.id}; nested groups are ignored")

    groups = [
        group.model_copy(update={"contained_nodes": contained[group.id]})
        for group in graph.groups
    ]
    groups_by_id = {group.id: group for group in groups}

    files = [
        f.model_copy(update={"in_groups": [groups_by_id[gid] for gid in file_groups[f.id]]})
        for f in graph.files
    ]

    return graph.model_copy(update={"groups": groups, "files": files})
