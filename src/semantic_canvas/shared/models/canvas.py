"""
Canvas data models for Semantic Canvas.

These models represent the typed view of a JSON canvas document used across:
- core: ingests, resolves and normalizes canvas graphs
- services: reads canvases from the vault and writes synthesized layouts back

Raw canvas JSON uses camelCase keys (``fromNode``, ``toSide``...). Every model
accepts both the raw alias and the snake_case field name, and keeps any raw
key it does not know about so a canvas survives a read/write round trip.
"""

from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Union

from pydantic import ConfigDict, Field

from .base import BaseModel

Number = Union[int, float]

# Property key -> ordered list of string values
PropertyMap = Dict[str, List[str]]

# None means "this file node has nothing to contribute"
DerivedResult = Optional[PropertyMap]


class NodeKind(str, Enum):
    """Semantic node kinds on a canvas."""
    CARD = "card"
    FILE = "file"
    URL = "url"
    GROUP = "group"


# Canvas ``type`` discriminator -> node kind
CANVAS_TYPES: Dict[str, NodeKind] = {
    "text": NodeKind.CARD,
    "file": NodeKind.FILE,
    "link": NodeKind.URL,
    "group": NodeKind.GROUP,
}


class CanvasElement(BaseModel):
    """Common configuration for everything stored in a canvas document."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Identifier, unique within one canvas")

    def to_canvas_dict(self) -> Dict[str, Any]:
        """Convert to the raw JSON canvas representation."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CanvasNode(CanvasElement):
    """Geometry shared by every node type."""

    x: Number = Field(default=0, description="Left edge")
    y: Number = Field(default=0, description="Top edge")
    width: Number = Field(default=0, description="Node width")
    height: Number = Field(default=0, description="Node height")

    @property
    def right(self) -> Number:
        return self.x + self.width

    @property
    def bottom(self) -> Number:
        return self.y + self.height


class CardNode(CanvasNode):
    """A free-floating text card."""

    type: str = Field(default="text")
    text: str = Field(default="", description="Card markdown text")


class UrlNode(CanvasNode):
    """A web link node."""

    type: str = Field(default="link")
    url: str = Field(default="", description="Link address")


class FileNode(CanvasNode):
    """
    A node representing a document in the vault.

    ``in_groups`` is computed by group containment resolution and never
    serialized back into the canvas.
    """

    type: str = Field(default="file")
    file: str = Field(..., description="Vault-relative document path")
    subpath: Optional[str] = Field(default=None, description="Heading or block reference, e.g. '#Intro'")
    in_groups: List["GroupNode"] = Field(default_factory=list, exclude=True)


class GroupNode(CanvasNode):
    """
    A geometric container.

    ``contained_nodes`` never holds other groups and is never serialized.
    """

    type: str = Field(default="group")
    label: Optional[str] = Field(default=None, description="Group display label")
    contained_nodes: List[Union[CardNode, FileNode, UrlNode]] = Field(default_factory=list, exclude=True)


Node = Union[CardNode, FileNode, UrlNode, GroupNode]

FileNode.model_rebuild()


class Edge(CanvasElement):
    """
    A directed, optionally labelled connection between two nodes.

    Phantom edges synthesized for group targets use this same model with an
    id of ``<original id>-phantom``.
    """

    from_node: str = Field(..., alias="fromNode")
    to_node: str = Field(..., alias="toNode")
    from_side: Optional[str] = Field(default=None, alias="fromSide")
    to_side: Optional[str] = Field(default=None, alias="toSide")
    from_end: Optional[str] = Field(default=None, alias="fromEnd")
    to_end: Optional[str] = Field(default=None, alias="toEnd")
    label: Optional[str] = Field(default=None)
    is_bidirectional: bool = Field(default=False, exclude=True)

    @property
    def is_phantom(self) -> bool:
        return self.id.endswith("-phantom")


class ResolvedNode(NamedTuple):
    """A node found by id, tagged with its kind."""
    kind: NodeKind
    node: Node


class CanvasGraph(BaseModel):
    """
    Typed, partitioned view of one canvas document.

    Built fresh on every canvas read; each pipeline stage returns a new graph.
    """

    cards: List[CardNode] = Field(default_factory=list)
    files: List[FileNode] = Field(default_factory=list)
    urls: List[UrlNode] = Field(default_factory=list)
    groups: List[GroupNode] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.cards) + len(self.files) + len(self.urls) + len(self.groups)

    def member_nodes(self) -> List[Union[CardNode, FileNode, UrlNode]]:
        """All nodes that can be contained by a group, in canvas order by kind."""
        return [*self.cards, *self.files, *self.urls]

    def files_for_path(self, path: str) -> List[FileNode]:
        """Every file node pointing at ``path``."""
        return [f for f in self.files if f.file == path]
