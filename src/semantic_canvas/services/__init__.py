"""
Services for Semantic Canvas.

- vault: notes, canvases and front matter on disk
- property_sync: canvas connections -> note properties
- canvas_builder: note properties -> canvas layout
"""

from .canvas_builder import BuildResult, CanvasBuilderService, PullResult
from .property_sync import EdgeDeltaTracker, PropertySyncService, SyncResult, get_edge_tracker
from .vault import VaultRepository

__all__ = [
    "BuildResult",
    "CanvasBuilderService",
    "EdgeDeltaTracker",
    "PropertySyncService",
    "PullResult",
    "SyncResult",
    "VaultRepository",
    "get_edge_tracker",
]
