"""
Common exceptions for Semantic Canvas.
"""


class SemanticCanvasError(Exception):
    """Base exception for all Semantic Canvas errors."""
    pass


class CanvasFormatError(SemanticCanvasError):
    """Raised when a canvas document cannot be parsed."""
    pass


class GraphIntegrityError(SemanticCanvasError):
    """Raised when a canvas graph references nodes that do not exist."""
    pass


class UnresolvedEdgeEndpointError(GraphIntegrityError):
    """Raised when an edge endpoint matches no card, file, url or group node."""

    def __init__(self, message: str, edge_id: str = None, node_id: str = None):
        super().__init__(message)
        self.edge_id = edge_id
        self.node_id = node_id


class VaultError(SemanticCanvasError):
    """Raised when document store operations fail."""
    pass


class FrontMatterError(VaultError):
    """Raised when a note's front matter cannot be parsed."""
    pass
