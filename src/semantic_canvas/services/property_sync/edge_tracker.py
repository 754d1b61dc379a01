"""
Edge delta tracking across canvas writes.

Keeps the last seen edge set of each open canvas so a host can tell which
connections appeared or disappeared since the previous write. State is
explicit: ``reset`` when a canvas is opened, ``observe_write`` whenever a
write of that canvas is seen.
"""

import threading
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import Field

from ...shared import BaseModel, Edge, get_logger

EdgeKey = Tuple[str, str, str, Optional[str]]


def edge_key(edge: Edge) -> EdgeKey:
    return (edge.id, edge.from_node, edge.to_node, edge.label)


class EdgeDelta(BaseModel):
    """Edges added and removed between two observed writes."""

    added: List[Edge] = Field(default_factory=list)
    removed: List[Edge] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


class EdgeDeltaTracker:
    """Per-canvas memory of the previously written edge set."""

    def __init__(self):
        self._lock = threading.Lock()
        self._edges: Dict[str, Dict[EdgeKey, Edge]] = {}
        self.logger = get_logger(__name__)

    def reset(self, canvas_path: str, edges: Iterable[Edge] = ()) -> None:
        """Start tracking ``canvas_path`` with ``edges`` as the baseline."""
        with self._lock:
            self._edges[canvas_path] = {edge_key(edge): edge for edge in edges}
        self.logger.debug(f"Edge tracking reset for {canvas_path}")

    def forget(self, canvas_path: str) -> None:
        """Stop tracking a canvas, e.g. when it is closed."""
        with self._lock:
            self._edges.pop(canvas_path, None)

    def is_tracking(self, canvas_path: str) -> bool:
        return canvas_path in self._edges

    def observe_write(self, canvas_path: str, edges: Iterable[Edge]) -> EdgeDelta:
        """
        Record a write of ``canvas_path`` and return what changed since the
        previous one. An untracked canvas is compared against an empty set.
        """
        current = {edge_key(edge): edge for edge in edges}
        with self._lock:
            previous = self._edges.get(canvas_path, {})
            self._edges[canvas_path] = current

        delta = EdgeDelta(
            added=[edge for key, edge in current.items() if key not in previous],
            removed=[edge for key, edge in previous.items() if key not in current],
        )
        if not delta.is_empty:
            self.logger.debug(
                f"{canvas_path}: {len(delta.added)} edges added, {len(delta.removed)} removed"
            )
        return delta


@lru_cache()
def get_edge_tracker() -> EdgeDeltaTracker:
    """Process-wide edge tracker."""
    return EdgeDeltaTracker()
