"""
Metrics collection for Semantic Canvas operations.
"""

import threading
import time
from collections import defaultdict
from functools import wraps
from typing import Any, Dict, List, Optional


class MetricsCollector:
    """
    Collects counters and timings for sync and synthesis runs.

    Counters are tagged by operation so a host can report how many
    properties, files, nodes and edges each command touched.
    """

    def __init__(self, max_history: int = 1000):
        """Initialize metrics collector."""
        self._lock = threading.RLock()
        self._counters: Dict[str, int] = defaultdict(int)
        self._timers: Dict[str, List[float]] = defaultdict(list)
        self.max_history = max_history

    def counter(self, name: str, value: int = 1, tags: Optional[Dict[str, str]] = None) -> None:
        """
        Increment a counter metric.

        Args:
            name: Counter name
            value: Increment value
            tags: Optional tags, folded into the counter key
        """
        with self._lock:
            self._counters[self._key(name, tags)] += value

    def timer(self, name: str, duration_seconds: float) -> None:
        """Record a timing metric."""
        with self._lock:
            timings = self._timers[name]
            timings.append(duration_seconds)
            if len(timings) > self.max_history:
                del timings[:-self.max_history]

    def get_counter(self, name: str, tags: Optional[Dict[str, str]] = None) -> int:
        """Get current counter value."""
        return self._counters.get(self._key(name, tags), 0)

    def get_timer_stats(self, name: str) -> Dict[str, float]:
        """Get timer statistics."""
        timings = sorted(self._timers.get(name, []))
        if not timings:
            return {'count': 0, 'mean': 0.0, 'min': 0.0, 'max': 0.0}

        return {
            'count': len(timings),
            'mean': sum(timings) / len(timings),
            'min': timings[0],
            'max': timings[-1],
        }

    def get_all_metrics(self) -> Dict[str, Any]:
        """Get all current metric values."""
        with self._lock:
            return {
                'counters': dict(self._counters),
                'timers': {name: self.get_timer_stats(name) for name in self._timers},
            }

    def record_sync_run(self, operation: str, **counts: int) -> None:
        """Record the outcome counts of one command run."""
        tags = {'operation': operation}
        self.counter('runs_total', tags=tags)
        for name, value in counts.items():
            if value:
                self.counter(name, value, tags=tags)

    def reset(self) -> None:
        """Drop every recorded value."""
        with self._lock:
            self._counters.clear()
            self._timers.clear()

    @staticmethod
    def _key(name: str, tags: Optional[Dict[str, str]]) -> str:
        if not tags:
            return name
        tag_str = ",".join(f"{k}={v}" for k, v in sorted(tags.items()))
        return f"{name}[{tag_str}]"


def timed_operation(metric_name: str):
    """
    Decorator for timing operations.

    Failed calls are recorded under ``<metric_name>_error``.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            metrics = get_metrics()
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
            except Exception:
                metrics.timer(f"{metric_name}_error", time.time() - start_time)
                raise

            metrics.timer(metric_name, time.time() - start_time)
            return result

        return wrapper
    return decorator


# Global instance
_metrics_collector = None
_metrics_lock = threading.Lock()


def get_metrics() -> MetricsCollector:
    """
    Get the global metrics collector instance.

    Returns:
        MetricsCollector singleton instance
    """
    global _metrics_collector

    if _metrics_collector is None:
        with _metrics_lock:
            if _metrics_collector is None:
                _metrics_collector = MetricsCollector()

    return _metrics_collector
