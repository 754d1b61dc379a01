"""
Shared components for Semantic Canvas.

Contains common models, configuration, exceptions and infrastructure used by
the core engine and the services.
"""

from .config import NewFileLocation, Settings, get_settings
from .exceptions import (
    CanvasFormatError, FrontMatterError, GraphIntegrityError,
    SemanticCanvasError, UnresolvedEdgeEndpointError, VaultError,
)
from .infrastructure import MetricsCollector, get_logger, get_metrics, setup_logging, timed_operation
from .models import *  # noqa: F401,F403

__all__ = [
    # From config
    "NewFileLocation", "Settings", "get_settings",

    # From exceptions
    "SemanticCanvasError", "CanvasFormatError",
    "GraphIntegrityError", "UnresolvedEdgeEndpointError", "VaultError", "FrontMatterError",

    # From infrastructure
    "get_logger", "setup_logging", "MetricsCollector", "get_metrics", "timed_operation",

    # From models
    "BaseModel", "CanvasGraph", "CardNode", "FileNode", "UrlNode", "GroupNode",
    "Edge", "NodeKind", "PropertyMap", "DerivedResult", "ResolvedNode",
]
