"""
Canvas builder service: lay out canvases from note properties.

Two operations:
- ``create_canvas``: a brand new canvas showing one note's list properties
- ``pull``: add a note's properties to an existing canvas, reusing nodes the
  canvas already has
"""

import posixpath
import time
from typing import List, Optional

from ...core import (
    CanvasSynthesizer, build_canvas_graph, build_target_index,
    edge_exists, filter_excluded, find_target, target_for_node,
)
from ...core.layout import COLUMN_GAP, MARGIN, IdFactory
from ...shared import (
    CanvasFormatError, CanvasNode, Edge, NewFileLocation, Settings,
    get_logger, get_metrics, get_settings,
)
from ..vault import CANVAS_EXTENSION, NOTE_EXTENSION, VaultRepository
from .models import BuildResult, PullResult


class CanvasBuilderService:
    """
    Service for building and extending canvases from note properties.

    Node and edge ids come from ``id_factory`` when given, which keeps
    layouts reproducible in tests.
    """

    def __init__(self,
                 vault: VaultRepository,
                 settings: Optional[Settings] = None,
                 id_factory: Optional[IdFactory] = None):
        """Initialize the service."""
        self.vault = vault
        self.settings = settings or get_settings()
        self.id_factory = id_factory
        self.logger = get_logger(__name__)
        self.metrics = get_metrics()

    def _synthesizer(self) -> CanvasSynthesizer:
        return CanvasSynthesizer(self.vault.link_resolver(), id_factory=self.id_factory)

    def create_canvas(self, note_path: str) -> BuildResult:
        """
        Create a canvas laying out the list properties of ``note_path``.

        Args:
            note_path: Vault-relative markdown note path

        Returns:
            Build result with the new canvas path and a user-facing notice
        """
        start_time = time.time()
        result = BuildResult(note_path=note_path)

        if not note_path.lower().endswith(NOTE_EXTENSION):
            result.notice = f"{note_path} is not a markdown note"
            return result

        if not self.vault.exists(note_path):
            result.notice = f"No note found at {note_path}"
            return result

        props = filter_excluded(self.vault.get_properties(note_path), self.settings.excluded_keys)
        props = {key: values for key, values in props.items() if values}
        if not props:
            result.success = True
            result.notice = f"No list properties found in {note_path}"
            return result

        self.logger.info(f"Building canvas for {note_path} from {len(props)} properties")

        data = self._synthesizer().synthesize(note_path, props)

        folder = self._target_folder(note_path, result)
        canvas_path = self._free_canvas_path(folder, posixpath.basename(note_path)[:-len(NOTE_EXTENSION)])
        self.vault.write_canvas(canvas_path, data)

        result.canvas_path = canvas_path
        result.nodes_created = len(data["nodes"])
        result.edges_created = len(data["edges"])
        result.success = True
        result.notice = f"Created {canvas_path}"

        self.logger.info(
            f"{result.notice}: {result.nodes_created} nodes, {result.edges_created} edges"
        )
        self.metrics.record_sync_run(
            "build", nodes_created=result.nodes_created, edges_created=result.edges_created
        )
        self.metrics.timer("build_duration", time.time() - start_time)
        return result

    def _target_folder(self, note_path: str, result: BuildResult) -> str:
        """Folder for a new canvas; a missing custom folder falls back to the vault root."""
        location = NewFileLocation(self.settings.new_file_location)

        if location == NewFileLocation.SAME_FOLDER:
            return posixpath.dirname(note_path)

        if location == NewFileLocation.CUSTOM:
            folder = self.settings.custom_file_location
            if folder and self.vault.is_folder(folder):
                return folder
            warning = f"Folder '{folder}' does not exist; saving the canvas in the vault root"
            self.logger.warning(warning)
            result.warnings.append(warning)

        return ""

    def _free_canvas_path(self, folder: str, name: str) -> str:
        """First ``<name>.canvas``, ``<name> 1.canvas``... not taken in ``folder``."""
        candidate = posixpath.join(folder, name + CANVAS_EXTENSION)
        counter = 1
        while self.vault.exists(candidate):
            candidate = posixpath.join(folder, f"{name} {counter}{CANVAS_EXTENSION}")
            counter += 1
        return candidate

    def pull(self,
             canvas_path: str,
             note_path: Optional[str] = None,
             existing_only: bool = False) -> PullResult:
        """
        Add the list properties of notes on a canvas to that canvas.

        Every value that matches an existing card, file or url node gets an
        edge to it, unless the same ``(from, to, label)`` edge already exists.
        Other values get a new node and edge, or are skipped when
        ``existing_only`` is set.

        Args:
            canvas_path: Vault-relative canvas path
            note_path: Only pull this note's file nodes; every note when omitted
            existing_only: Never create nodes, only connect existing ones

        Returns:
            Pull result with counts and a user-facing notice
        """
        start_time = time.time()
        result = PullResult(canvas_path=canvas_path, note_path=note_path, existing_only=existing_only)

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

        graph = build_canvas_graph(raw)
        sources = graph.files_for_path(note_path) if note_path else list(graph.files)
        sources = [
            source for source in sources
            if source.file.lower().endswith(NOTE_EXTENSION) and self.vault.exists(source.file)
        ]
        if not sources:
            result.notice = f"{note_path or 'No note'} is not on {canvas_path}"
            return result

        self.logger.info(f"Pulling properties of {len(sources)} file nodes onto {canvas_path}")

        synthesizer = self._synthesizer()
        edges: List[Edge] = list(graph.edges)
        new_nodes: List[CanvasNode] = []
        new_edges: List[Edge] = []

        for source in sources:
            index = build_target_index(graph, source.file, synthesizer.resolver)
            index.extend(
                target_for_node(node, source.file, synthesizer.resolver) for node in new_nodes
            )
            cursor_y = source.y
            props = filter_excluded(self.vault.get_properties(source.file), self.settings.excluded_keys)

            for key, values in props.items():
                for value in values:
                    target = find_target(index, value, exclude_id=source.id)

                    if target is not None:
                        if edge_exists(edges, source.id, target.id, key):
                            continue
                        edge = synthesizer.make_edge(source, target.as_node(), key)
                    elif existing_only:
                        result.values_skipped += 1
                        continue
                    else:
                        node = synthesizer.make_node(
                            value, source.file, source.right + COLUMN_GAP, cursor_y
                        )
                        cursor_y += node.height + MARGIN
                        new_nodes.append(node)
                        index.append(target_for_node(node, source.file, synthesizer.resolver))
                        edge = synthesizer.make_edge(source, node, key)

                    edges.append(edge)
                    new_edges.append(edge)

        result.nodes_created = len(new_nodes)
        result.edges_created = len(new_edges)
        result.success = True

        if new_nodes or new_edges:
            raw["nodes"].extend(node.to_canvas_dict() for node in new_nodes)
            raw["edges"].extend(edge.to_canvas_dict() for edge in new_edges)
            self.vault.write_canvas(canvas_path, raw)
            result.notice = (
                f"Added {result.nodes_created} nodes and {result.edges_created} edges to {canvas_path}"
            )
        else:
            result.notice = f"Nothing new to pull onto {canvas_path}"

        self.logger.info(result.notice)
        self.metrics.record_sync_run(
            "pull", nodes_created=result.nodes_created, edges_created=result.edges_created
        )
        self.metrics.timer("pull_duration", time.time() - start_time)
        return result
