"""
Canvas semantic graph engine.

Turns a raw JSON canvas into a typed graph with group memberships and
phantom edges, derives note properties from it, and lays out canvases from
note properties.
"""

from .containment import contains, resolve_containment
from .deriver import derive_properties, relevant_edges, resolve_other_side
from .ingest import ingest_canvas, load_canvas_json
from .links import LinkResolver, PathLinkResolver, file_node_to_wikilink
from .merger import UpdateMode, apply_properties, filter_excluded, merge_derived
from .normalizer import find_node, is_bidirectional, normalize_edges
from .pipeline import build_canvas_graph
from .synthesizer import CanvasSynthesizer
from .target_index import ConnectionTarget, build_target_index, edge_exists, find_target, target_for_node

__all__ = [
    "contains",
    "resolve_containment",
    "derive_properties",
    "relevant_edges",
    "resolve_other_side",
    "ingest_canvas",
    "load_canvas_json",
    "LinkResolver",
    "PathLinkResolver",
    "file_node_to_wikilink",
    "UpdateMode",
    "apply_properties",
    "filter_excluded",
    "merge_derived",
    "find_node",
    "is_bidirectional",
    "normalize_edges",
    "build_canvas_graph",
    "CanvasSynthesizer",
    "ConnectionTarget",
    "build_target_index",
    "edge_exists",
    "find_target",
    "target_for_node",
]
