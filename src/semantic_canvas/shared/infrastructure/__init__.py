"""
Shared infrastructure components for Semantic Canvas.

- Logging setup
- Metrics collection
"""

from .monitoring.logger import get_logger, setup_logging
from .monitoring.metrics import MetricsCollector, get_metrics, timed_operation

__all__ = [
    "get_logger",
    "setup_logging",
    "MetricsCollector",
    "get_metrics",
    "timed_operation",
]
