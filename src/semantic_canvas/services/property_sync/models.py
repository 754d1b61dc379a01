"""
Service models for pushing canvas connections into note properties.
"""

from typing import Any, Dict

from pydantic import Field

from ...core.merger import UpdateMode
from ...shared import BaseModel, PropertyMap


class SyncResult(BaseModel):
    """Result of one canvas -> properties run."""

    canvas_path: str = Field(..., description="Canvas that was read")
    mode: UpdateMode = Field(default=UpdateMode.OVERWRITE, description="Front matter update mode")

    success: bool = Field(default=False, description="Whether the run completed")
    notice: str = Field(default="", description="User-facing summary")

    properties_set: int = Field(default=0, description="Property keys whose value changed")
    files_modified: int = Field(default=0, description="Notes whose front matter was written")
    file_properties: Dict[str, PropertyMap] = Field(default_factory=dict, description="Properties written per note")

    edges_added: int = Field(default=0, description="Edges new since the previous push")
    edges_removed: int = Field(default=0, description="Edges gone since the previous push")

    duration_seconds: float = Field(default=0.0, description="Run time")

    @property
    def is_noop(self) -> bool:
        return self.success and self.files_modified == 0

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the run."""
        return {
            'canvas_path': self.canvas_path,
            'mode': self.mode,
            'success': self.success,
            'properties_set': self.properties_set,
            'files_modified': self.files_modified,
            'edges_added': self.edges_added,
            'edges_removed': self.edges_removed,
            'notice': self.notice,
        }
