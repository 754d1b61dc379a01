"""
Property sync service for Semantic Canvas.

Pushes canvas connections and group memberships into note properties.
"""

from .edge_tracker import EdgeDelta, EdgeDeltaTracker, get_edge_tracker
from .models import SyncResult
from .service import PropertySyncService

__all__ = [
    "EdgeDelta",
    "EdgeDeltaTracker",
    "get_edge_tracker",
    "PropertySyncService",
    "SyncResult",
]
