"""
Vault access: notes, canvases and front matter on disk.
"""

from .frontmatter import join_front_matter, split_front_matter
from .repository import CANVAS_EXTENSION, NOTE_EXTENSION, VaultRepository

__all__ = [
    "CANVAS_EXTENSION",
    "NOTE_EXTENSION",
    "VaultRepository",
    "join_front_matter",
    "split_front_matter",
]
