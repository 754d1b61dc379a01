"""
Canvas graph pipeline: raw JSON -> ingested -> containment resolved -> edges normalized.
"""

from typing import Any, Mapping

from ..shared.infrastructure.monitoring import timed_operation
from ..shared.models.canvas import CanvasGraph
from .containment import resolve_containment
from .ingest import ingest_canvas
from .normalizer import normalize_edges


@timed_operation("canvas_graph_build")
def build_canvas_graph(raw: Mapping[str, Any]) -> CanvasGraph:
    """Run every graph stage over a raw canvas document."""
    graph = ingest_canvas(raw)
    graph = resolve_containment(graph)
    return normalize_edges(graph)
