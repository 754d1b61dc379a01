"""
Tests for edge delta tracking between canvas writes.
"""

from semantic_canvas.services import EdgeDeltaTracker, get_edge_tracker
from semantic_canvas.shared import Edge


def _edge(edge_id, label=None):
    return Edge(id=edge_id, from_node="a", to_node="b", label=label)


def test_untracked_canvas_reports_everything_added():
    tracker = EdgeDeltaTracker()

    delta = tracker.observe_write("Board.canvas", [_edge("e1")])

    assert [e.id for e in delta.added] == ["e1"]
    assert delta.removed == []
    assert tracker.is_tracking("Board.canvas")


def test_delta_against_reset_baseline():
    """Test that changes are measured from the baseline set on open."""
    tracker = EdgeDeltaTracker()
    tracker.reset("Board.canvas", [_edge("e1"), _edge("e2")])

    delta = tracker.observe_write("Board.canvas", [_edge("e2"), _edge("e3")])

    assert [e.id for e in delta.added] == ["e3"]
    assert [e.id for e in delta.removed] == ["e1"]


def test_relabelled_edge_counts_as_replaced():
    tracker = EdgeDeltaTracker()
    tracker.reset("Board.canvas", [_edge("e1", "old")])

    delta = tracker.observe_write("Board.canvas", [_edge("e1", "new")])

    assert [e.label for e in delta.added] == ["new"]
    assert [e.label for e in delta.removed] == ["old"]


def test_unchanged_write_is_empty():
    tracker = EdgeDeltaTracker()
    tracker.reset("Board.canvas", [_edge("e1")])

    assert tracker.observe_write("Board.canvas", [_edge("e1")]).is_empty


def test_canvases_are_tracked_separately():
    tracker = EdgeDeltaTracker()
    tracker.reset("A.canvas", [_edge("e1")])
    tracker.reset("B.canvas")

    tracker.forget("A.canvas")

    assert not tracker.is_tracking("A.canvas")
    assert tracker.is_tracking("B.canvas")


def test_global_tracker_is_shared():
    assert get_edge_tracker() is get_edge_tracker()
