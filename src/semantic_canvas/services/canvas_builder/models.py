"""
Service models for building canvases from note properties.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from ...shared import BaseModel


class BuildResult(BaseModel):
    """Result of creating a canvas from a note."""

    note_path: str = Field(..., description="Note the canvas was built from")
    canvas_path: Optional[str] = Field(default=None, description="Path of the written canvas")

    success: bool = Field(default=False, description="Whether the operation completed")
    notice: str = Field(default="", description="User-facing summary")
    warnings: List[str] = Field(default_factory=list, description="Non-fatal fallbacks taken")

    nodes_created: int = Field(default=0, description="Nodes in the new canvas")
    edges_created: int = Field(default=0, description="Edges in the new canvas")

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the build."""
        return {
            'note_path': self.note_path,
            'canvas_path': self.canvas_path,
            'success': self.success,
            'nodes_created': self.nodes_created,
            'edges_created': self.edges_created,
            'warnings': list(self.warnings),
            'notice': self.notice,
        }


class PullResult(BaseModel):
    """Result of pulling note properties onto an existing canvas."""

    canvas_path: str = Field(..., description="Canvas that was updated")
    note_path: Optional[str] = Field(default=None, description="Note pulled, or every note when empty")
    existing_only: bool = Field(default=False, description="Only connect to nodes already on the canvas")

    success: bool = Field(default=False, description="Whether the operation completed")
    notice: str = Field(default="", description="User-facing summary")

    nodes_created: int = Field(default=0, description="Nodes added to the canvas")
    edges_created: int = Field(default=0, description="Edges added to the canvas")
    values_skipped: int = Field(default=0, description="Values with no existing node in existing-only mode")

    @property
    def is_noop(self) -> bool:
        return self.success and self.nodes_created == 0 and self.edges_created == 0

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the pull."""
        return {
            'canvas_path': self.canvas_path,
            'note_path': self.note_path,
            'existing_only': self.existing_only,
            'success': self.success,
            'nodes_created': self.nodes_created,
            'edges_created': self.edges_created,
            'values_skipped': self.values_skipped,
            'notice': self.notice,
        }
