"""
Tests for logging and metrics infrastructure.
"""

import logging

import pytest

from semantic_canvas.core import build_canvas_graph
from semantic_canvas.shared import MetricsCollector, get_logger, get_metrics, timed_operation

from factories import canvas, edge, file_node


def test_counters_with_tags():
    metrics = MetricsCollector()

    metrics.counter("files_modified", 2, tags={"operation": "push"})
    metrics.counter("files_modified", tags={"operation": "push"})

    assert metrics.get_counter("files_modified", tags={"operation": "push"}) == 3
    assert metrics.get_counter("files_modified") == 0


def test_record_sync_run_skips_zero_counts():
    metrics = MetricsCollector()

    metrics.record_sync_run("pull", nodes_created=0, edges_created=2)

    assert metrics.get_all_metrics()["counters"] == {
        "runs_total[operation=pull]": 1,
        "edges_created[operation=pull]": 2,
    }


def test_timer_history_is_bounded():
    metrics = MetricsCollector(max_history=2)

    for duration in (3.0, 1.0, 2.0):
        metrics.timer("push_duration", duration)

    assert metrics.get_timer_stats("push_duration") == {"count": 2, "mean": 1.5, "min": 1.0, "max": 2.0}
    assert metrics.get_timer_stats("unknown")["count"] == 0


def test_timed_operation_records_failures():
    """Test that failing calls are timed under an error metric and re-raised."""
    get_metrics().reset()

    @timed_operation("flaky")
    def flaky():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        flaky()

    assert get_metrics().get_timer_stats("flaky_error")["count"] == 1
    assert get_metrics().get_timer_stats("flaky")["count"] == 0


def test_graph_builds_are_timed():
    get_metrics().reset()

    build_canvas_graph(canvas([file_node("f1", "doc.md")], [edge("e1", "f1", "f1")]))

    assert get_metrics().get_timer_stats("canvas_graph_build")["count"] == 1


def test_get_logger_returns_named_logger():
    logger = get_logger("semantic_canvas.tests")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "semantic_canvas.tests"
    assert get_logger("semantic_canvas.tests") is logger
