"""
Semantic Canvas - canvas connections as note properties, and back.
"""

__version__ = "1.0.0"
__author__ = "Semantic Canvas Team"

# Re-export main components for easy access
from .shared.config.settings import Settings, get_settings
from .shared.exceptions import SemanticCanvasError, UnresolvedEdgeEndpointError
from .shared.models.canvas import CanvasGraph, Edge, FileNode, GroupNode
from .core import build_canvas_graph, derive_properties, merge_derived, CanvasSynthesizer

__all__ = [
    "Settings",
    "get_settings",
    "SemanticCanvasError",
    "UnresolvedEdgeEndpointError",
    "CanvasGraph",
    "Edge",
    "FileNode",
    "GroupNode",
    "build_canvas_graph",
    "derive_properties",
    "merge_derived",
    "CanvasSynthesizer",
]
