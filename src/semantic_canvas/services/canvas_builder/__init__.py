"""
Canvas builder service for Semantic Canvas.

Creates canvases from note properties and pulls note properties onto
existing canvases.
"""

from .models import BuildResult, PullResult
from .service import CanvasBuilderService

__all__ = [
    "BuildResult",
    "CanvasBuilderService",
    "PullResult",
]
