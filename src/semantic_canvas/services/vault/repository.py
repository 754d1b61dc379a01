"""
Filesystem document store for a vault folder.

All paths are vault-relative POSIX paths (``folder/Note.md``). Reads and
writes are independent; nothing guards against another process changing a
file between a read and the following write.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ...core.ingest import load_canvas_json
from ...core.links import PathLinkResolver
from ...shared import PropertyMap, VaultError, get_logger
from .frontmatter import join_front_matter, split_front_matter

T = TypeVar("T")

CANVAS_EXTENSION = ".canvas"
NOTE_EXTENSION = ".md"


class VaultRepository:
    """
    Read and write notes and canvases inside one vault folder.

    Hidden folders (``.obsidian``, ``.git``, ...) are invisible to listing and
    link resolution.
    """

    def __init__(self, root: str):
        """
        Initialize repository with a vault folder.

        Args:
            root: Path to the vault folder
        """
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise VaultError(f"Vault folder does not exist: {root}")
        self.logger = get_logger(__name__)

    def _abs(self, path: str) -> Path:
        """Absolute path for a vault-relative path, refusing escapes."""
        absolute = (self.root / path.strip("/")).resolve()
        if absolute != self.root and self.root not in absolute.parents:
            raise VaultError(f"Path escapes the vault: {path}")
        return absolute

    def exists(self, path: str) -> bool:
        return self._abs(path).is_file()

    def is_folder(self, path: str) -> bool:
        return self._abs(path).is_dir()

    def list_files(self, extension: Optional[str] = None) -> List[str]:
        """Vault-relative paths of every visible file, sorted."""
        files = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            for filename in filenames:
                if filename.startswith("."):
                    continue
                if extension and not filename.lower().endswith(extension):
                    continue
                relative = Path(dirpath, filename).relative_to(self.root)
                files.append(relative.as_posix())
        return sorted(files)

    def read_text(self, path: str) -> str:
        try:
            return self._abs(path).read_text(encoding="utf-8")
        except OSError as e:
            raise VaultError(f"Failed to read {path}: {e}")

    def write_text(self, path: str, text: str) -> None:
        """Write a file atomically, creating parent folders."""
        target = self._abs(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=target.parent, prefix=".tmp-", suffix=target.suffix)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, target)
        except OSError as e:
            raise VaultError(f"Failed to write {path}: {e}")

    def read_canvas(self, path: str) -> Dict[str, Any]:
        """Parsed JSON of a canvas document."""
        return load_canvas_json(self.read_text(path))

    def write_canvas(self, path: str, data: Dict[str, Any]) -> None:
        self.write_text(path, json.dumps(data, indent="\t", ensure_ascii=False))
        self.logger.debug(f"Wrote canvas {path}")

    def read_front_matter(self, path: str) -> Dict[str, Any]:
        data, _body = split_front_matter(self.read_text(path))
        return data

    def get_properties(self, path: str) -> PropertyMap:
        """
        List-typed front matter properties of a note.

        Scalar properties are ignored; list items are converted to strings and
        empty items dropped.
        """
        props: PropertyMap = {}
        for key, value in self.read_front_matter(path).items():
            if not isinstance(value, list):
                continue
            props[str(key)] = [str(item) for item in value if item is not None and str(item) != ""]
        return props

    def process_front_matter(self, path: str, fn: Callable[[Dict[str, Any]], T]) -> T:
        """
        Read-modify-write a note's front matter.

        ``fn`` mutates the mapping in place; its return value is passed back.
        The note is rewritten only when the mapping changed.
        """
        text = self.read_text(path)
        data, body = split_front_matter(text)
        before = json.dumps(data, sort_keys=True, default=str)

        result = fn(data)

        if json.dumps(data, sort_keys=True, default=str) != before:
            self.write_text(path, join_front_matter(data, body))
            self.logger.debug(f"Updated front matter of {path}")
        return result

    def link_resolver(self) -> PathLinkResolver:
        """Link resolver over every file currently in the vault."""
        return PathLinkResolver(self.list_files())
