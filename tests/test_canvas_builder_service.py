"""
Tests for building canvases from notes and pulling notes onto canvases.
"""

import pytest

from semantic_canvas.core import UpdateMode
from semantic_canvas.services import CanvasBuilderService, PropertySyncService
from semantic_canvas.shared import Settings

from factories import canvas, file_node

DOC_FRONT_MATTER = (
    "title: Doc\n"
    "topics:\n- '[[Other Note]]'\n"
    "status:\n- draft\n"
    "links:\n- a\n- b\n"
    "tags:\n- x\n"
)


@pytest.fixture
def builder(vault, settings, id_factory):
    return CanvasBuilderService(vault, settings=settings, id_factory=id_factory)


@pytest.fixture
def doc(write_note):
    write_note("Other Note.md")
    return write_note("doc.md", DOC_FRONT_MATTER)


def test_create_canvas(builder, doc, vault):
    """Test that a note's list properties are laid out on a new canvas."""
    result = builder.create_canvas("doc.md")

    assert result.success
    assert result.canvas_path == "doc.canvas"
    assert result.notice == "Created doc.canvas"
    assert (result.nodes_created, result.edges_created) == (6, 3)

    data = vault.read_canvas("doc.canvas")
    anchor = data["nodes"][0]
    assert (anchor["type"], anchor["file"]) == ("file", "doc.md")
    assert sorted(e["label"] for e in data["edges"]) == ["links", "status", "topics"]
    assert all(e["fromNode"] == anchor["id"] for e in data["edges"])
    assert "x" not in [n.get("text") for n in data["nodes"]]


def test_create_then_push_round_trip(builder, doc, vault, settings, edge_tracker):
    """Test that pushing a built canvas reproduces the note's properties."""
    before = vault.get_properties("doc.md")
    builder.create_canvas("doc.md")

    PropertySyncService(vault, settings=settings, edge_tracker=edge_tracker).push(
        "doc.canvas", mode=UpdateMode.OVERWRITE
    )

    assert vault.get_properties("doc.md") == before
    assert vault.read_front_matter("doc.md")["title"] == "Doc"


def test_create_canvas_picks_free_name(builder, doc, vault_dir):
    (vault_dir / "doc.canvas").write_text("{}", encoding="utf-8")
    (vault_dir / "doc 1.canvas").write_text("{}", encoding="utf-8")

    assert builder.create_canvas("doc.md").canvas_path == "doc 2.canvas"


def test_create_canvas_same_folder(vault, id_factory, write_note):
    write_note("Projects/Plan.md", "steps:\n- one\n")
    settings = Settings(_env_file=None, new_file_location="same_folder")

    result = CanvasBuilderService(vault, settings=settings, id_factory=id_factory).create_canvas("Projects/Plan.md")

    assert result.canvas_path == "Projects/Plan.canvas"


def test_create_canvas_custom_folder(vault, vault_dir, id_factory, doc):
    (vault_dir / "Canvases").mkdir()
    settings = Settings(_env_file=None, new_file_location="custom", custom_file_location="/Canvases/")

    result = CanvasBuilderService(vault, settings=settings, id_factory=id_factory).create_canvas("doc.md")

    assert result.canvas_path == "Canvases/doc.canvas"
    assert result.warnings == []


def test_create_canvas_missing_custom_folder_falls_back(vault, id_factory, doc):
    """Test that a missing custom folder saves to the vault root with a warning."""
    settings = Settings(_env_file=None, new_file_location="custom", custom_file_location="Nope")

    result = CanvasBuilderService(vault, settings=settings, id_factory=id_factory).create_canvas("doc.md")

    assert result.success
    assert result.canvas_path == "doc.canvas"
    assert result.warnings == ["Folder 'Nope' does not exist; saving the canvas in the vault root"]


def test_create_canvas_without_list_properties(builder, write_note, vault):
    write_note("plain.md", "title: Plain\ntags:\n- x\n")

    result = builder.create_canvas("plain.md")

    assert result.success
    assert result.canvas_path is None
    assert result.notice == "No list properties found in plain.md"
    assert vault.list_files(".canvas") == []


@pytest.mark.parametrize("path,notice", [
    ("Board.canvas", "Board.canvas is not a markdown note"),
    ("missing.md", "No note found at missing.md"),
])
def test_create_canvas_rejects_bad_paths(builder, path, notice):
    result = builder.create_canvas(path)

    assert not result.success
    assert result.notice == notice


@pytest.fixture
def board(write_note, write_canvas):
    """A canvas showing two notes with no edges between them."""
    write_note("doc.md", "topics:\n- '[[Other Note]]'\n")
    write_note("Other Note.md")
    write_canvas("Board.canvas", canvas([
        file_node("f1", "doc.md", 0, 0, 400, 400),
        file_node("f2", "Other Note.md", 800, 0, 400, 400),
    ]))


def test_pull_connects_existing_nodes(builder, board, vault):
    """Test that a property pointing at a note on the canvas becomes an edge."""
    result = builder.pull("Board.canvas", note_path="doc.md")

    assert result.success
    assert (result.nodes_created, result.edges_created) == (0, 1)
    assert result.notice == "Added 0 nodes and 1 edges to Board.canvas"

    (e,) = vault.read_canvas("Board.canvas")["edges"]
    assert (e["fromNode"], e["toNode"], e["label"]) == ("f1", "f2", "topics")
    assert (e["fromSide"], e["toSide"]) == ("right", "left")


def test_pull_twice_adds_nothing(builder, board):
    builder.pull("Board.canvas", note_path="doc.md")

    result = builder.pull("Board.canvas", note_path="doc.md")

    assert result.is_noop
    assert result.notice == "Nothing new to pull onto Board.canvas"


def test_pull_creates_missing_nodes(builder, write_note, write_canvas, vault):
    """Test that values without a node get one beside the note."""
    write_note("doc.md", "status:\n- draft\n- https://example.com\n")
    write_canvas("Board.canvas", canvas([file_node("f1", "doc.md", 0, 0, 400, 400)]))

    result = builder.pull("Board.canvas")

    assert (result.nodes_created, result.edges_created) == (2, 2)
    data = vault.read_canvas("Board.canvas")
    card, url = data["nodes"][1:]
    assert (card["type"], card["text"], card["x"], card["y"]) == ("text", "draft", 600, 0)
    assert (url["type"], url["url"], url["x"], url["y"]) == ("link", "https://example.com", 600, 110)
    assert [(e["fromNode"], e["toNode"]) for e in data["edges"]] == [("f1", card["id"]), ("f1", url["id"])]


def test_pull_reuses_nodes_created_in_same_run(builder, write_note, write_canvas):
    write_note("doc.md", "a:\n- draft\nb:\n- draft\n")
    write_canvas("Board.canvas", canvas([file_node("f1", "doc.md")]))

    result = builder.pull("Board.canvas")

    assert (result.nodes_created, result.edges_created) == (1, 2)


def test_pull_existing_only(builder, write_note, write_canvas, vault):
    """Test that existing-only mode never adds nodes."""
    write_note("doc.md", "status:\n- draft\n- done\n")
    write_canvas("Board.canvas", canvas([file_node("f1", "doc.md")]))

    result = builder.pull("Board.canvas", existing_only=True)

    assert result.values_skipped == 2
    assert result.notice == "Nothing new to pull onto Board.canvas"
    assert vault.read_canvas("Board.canvas")["nodes"] == [file_node("f1", "doc.md")]


@pytest.mark.parametrize("canvas_path,note_path,notice", [
    ("doc.md", None, "doc.md is not a canvas"),
    ("Missing.canvas", None, "No canvas found at Missing.canvas"),
    ("Board.canvas", "ghost.md", "ghost.md is not on Board.canvas"),
])
def test_pull_notices(builder, board, canvas_path, note_path, notice):
    result = builder.pull(canvas_path, note_path=note_path)

    assert not result.success
    assert result.notice == notice
