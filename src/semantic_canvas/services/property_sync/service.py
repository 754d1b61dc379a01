"""
Property sync service: write canvas connections into note front matter.
"""

import time
from typing import Dict, List, Optional, Tuple

from ...core import (
    UpdateMode, apply_properties, build_canvas_graph, derive_properties,
    filter_excluded, merge_derived,
)
from ...shared import (
    CanvasFormatError, CanvasGraph, DerivedResult, PropertyMap, Settings,
    get_logger, get_metrics, get_settings,
)
from ..vault import CANVAS_EXTENSION, NOTE_EXTENSION, VaultRepository
from .edge_tracker import EdgeDeltaTracker, get_edge_tracker
from .models import SyncResult


class PropertySyncService:
    """
    Pushes what a canvas shows about each note into that note's properties.

    Each note is written independently as soon as its properties are known;
    a fatal canvas error stops the run but keeps notes already written.
    """

    def __init__(self,
                 vault: VaultRepository,
                 settings: Optional[Settings] = None,
                 edge_tracker: Optional[EdgeDeltaTracker] = None):
        """Initialize the service."""
        self.vault = vault
        self.settings = settings or get_settings()
        self.edge_tracker = edge_tracker or get_edge_tracker()
        self.logger = get_logger(__name__)
        self.metrics = get_metrics()

    def open_canvas(self, canvas_path: str) -> CanvasGraph:
        """Load a canvas and make its current edges the tracking baseline."""
        graph = build_canvas_graph(self.vault.read_canvas(canvas_path))
        self.edge_tracker.reset(canvas_path, [edge for edge in graph.edges if not edge.is_phantom])
        return graph

    def derive(self, graph: CanvasGraph, canvas_path: str) -> Dict[str, PropertyMap]:
        """Merged, exclusion-filtered properties per note path for a graph."""
        resolver = self.vault.link_resolver()
        derived: List[Tuple[str, DerivedResult]] = [
            (file.file, derive_properties(file, graph, self.settings, resolver))
            for file in graph.files
        ]

        merged = merge_derived(derived)
        filtered = {}
        for path, props in merged.items():
            props = filter_excluded(props, self.settings.excluded_keys)
            if props:
                filtered[path] = props
            else:
                self.logger.debug(f"{path}: every derived key is excluded")

        self.logger.debug(f"{canvas_path}: derived properties for {len(filtered)} notes")
        return filtered

    def push(self, canvas_path: str, mode: UpdateMode = UpdateMode.OVERWRITE) -> SyncResult:
        """
        Write the properties implied by ``canvas_path`` into every note on it.

        Args:
            canvas_path: Vault-relative canvas path
            mode: Overwrite existing keys or append new distinct values

        Returns:
            Sync result with counts and a user-facing notice
        """
        start_time = time.time()
        result = SyncResult(canvas_path=canvas_path, mode=mode)

        try:
            if not canvas_path.lower().endswith(CANVAS_EXTENSION):
                result.notice = f"{canvas_path} is not a canvas"
                return result

            if not self.vault.exists(canvas_path):
                result.notice = f"No canvas found at {canvas_path}"
                return result

            try:
                raw = self.vault.read_canvas(canvas_path)
            except CanvasFormatError as e:
                self.logger.warning(f"Could not parse {canvas_path}: {e}")
                result.notice = f"No canvas data found in {canvas_path}"
                return result

            if not raw.get("nodes"):
                result.notice = f"No canvas data found in {canvas_path}"
                return result

            self.logger.info(f"Pushing canvas properties from {canvas_path} ({UpdateMode(mode).value})")

            graph = build_canvas_graph(raw)
            delta = self.edge_tracker.observe_write(
                canvas_path, [edge for edge in graph.edges if not edge.is_phantom]
            )
            result.edges_added = len(delta.added)
            result.edges_removed = len(delta.removed)

            derived = self.derive(graph, canvas_path)
            for path, props in derived.items():
                changed = self._write_note(path, props, mode)
                if not changed:
                    continue
                result.properties_set += changed
                result.files_modified += 1
                result.file_properties[path] = props

            result.success = True
            if result.files_modified:
                result.notice = (
                    f"Set {result.properties_set} properties in {result.files_modified} files"
                )
            elif derived:
                result.notice = f"Notes on {canvas_path} are already up to date"
            else:
                result.notice = f"No connections found on {canvas_path}"

            self.logger.info(result.notice)
            self.metrics.record_sync_run(
                "push",
                properties_set=result.properties_set,
                files_modified=result.files_modified,
            )

        finally:
            result.duration_seconds = time.time() - start_time
            self.metrics.timer("push_duration", result.duration_seconds)

        return result

    def _write_note(self, path: str, props: PropertyMap, mode: UpdateMode) -> int:
        """
        Apply properties to one note and return how many keys changed.

        Notes that cannot hold front matter are skipped.
        """
        if not path.lower().endswith(NOTE_EXTENSION):
            self.logger.debug(f"Skipping {path}: only markdown notes carry properties")
            return 0

        if not self.vault.exists(path):
            self.logger.warning(f"Skipping {path}: note does not exist in the vault")
            return 0

        changed = self.vault.process_front_matter(
            path, lambda front_matter: apply_properties(front_matter, props, mode)
        )
        self.logger.debug(f"{path}: changed {changed} properties")
        return changed
