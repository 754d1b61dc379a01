"""
Canvas ingestion: raw JSON canvas -> partitioned CanvasGraph.
"""

import json
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from ..shared.exceptions import CanvasFormatError
from ..shared.infrastructure.monitoring import get_logger
from ..shared.models.canvas import (
    CANVAS_TYPES, CanvasGraph, CardNode, Edge, FileNode, GroupNode, NodeKind, UrlNode
)

logger = get_logger(__name__)


def load_canvas_json(text: str) -> Dict[str, Any]:
    """
    Parse canvas document text.

    An empty document is an empty canvas. Anything that is not a JSON object
    raises CanvasFormatError.
    """
    if not text.strip():
        return {"nodes": [], "edges": []}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CanvasFormatError(f"Canvas is not valid JSON: {e}")

    if not isinstance(data, dict):
        raise CanvasFormatError("Canvas root must be a JSON object")

    data.setdefault("nodes", [])
    data.setdefault("edges", [])
    return data


def ingest_canvas(raw: Mapping[str, Any]) -> CanvasGraph:
    """
    Partition raw canvas nodes by their ``type`` discriminator.

    Unknown node types are dropped silently; edges pointing at them fail
    later, when endpoints are resolved.
    """
    graph = CanvasGraph()

    try:
        _partition(raw, graph)
    except ValidationError as e:
        raise CanvasFormatError(f"Malformed canvas element: {e}")

    logger.debug(
        f"Ingested {len(graph.cards)} cards, {len(graph.files)} files, "
        f"{len(graph.urls)} urls, {len(graph.groups)} groups, {len(graph.edges)} edges"
    )
    return graph


def _partition(raw: Mapping[str, Any], graph: CanvasGraph) -> None:
    for node_data in raw.get("nodes") or []:
        kind = CANVAS_TYPES.get(node_data.get("type"))
        if kind is None:
            logger.debug(f"Skipping node {node_data.get('id')} of unknown type {node_data.get('type')!r}")
            continue

        if kind == NodeKind.CARD:
            graph.cards.append(CardNode.model_validate(node_data))
        elif kind == NodeKind.FILE:
            graph.files.append(FileNode.model_validate(node_data))
        elif kind == NodeKind.URL:
            graph.urls.append(UrlNode.model_validate(node_data))
        else:
            graph.groups.append(GroupNode.model_validate(node_data))

    for edge_data in raw.get("edges") or []:
        graph.edges.append(Edge.model_validate(edge_data))
