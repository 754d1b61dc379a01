"""
Shared data models for Semantic Canvas.
"""

from .base import BaseModel
from .canvas import (
    CANVAS_TYPES,
    CanvasElement,
    CanvasGraph,
    CanvasNode,
    CardNode,
    DerivedResult,
    Edge,
    FileNode,
    GroupNode,
    Node,
    NodeKind,
    PropertyMap,
    ResolvedNode,
    UrlNode,
)

__all__ = [
    # Base models
    "BaseModel",
    # Canvas models
    "CANVAS_TYPES",
    "CanvasElement",
    "CanvasGraph",
    "CanvasNode",
    "CardNode",
    "DerivedResult",
    "Edge",
    "FileNode",
    "GroupNode",
    "Node",
    "NodeKind",
    "PropertyMap",
    "ResolvedNode",
    "UrlNode",
]
