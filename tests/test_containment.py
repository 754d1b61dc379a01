"""
Tests for group containment resolution.
"""

from semantic_canvas.core import contains, ingest_canvas, resolve_containment

from factories import canvas, file_node, group_node, text_node


def _graph(*nodes):
    return ingest_canvas(canvas(nodes))


def test_contains_is_inclusive_on_the_boundary():
    """Test that a node touching every group edge is inside."""
    graph = _graph(group_node("g1", "G", 0, 0, 400, 400), file_node("f1", "doc.md", 0, 0, 400, 400))

    assert contains(graph.groups[0], graph.files[0])


def test_contains_rejects_partial_overlap():
    """Test that a node sticking out of the group is outside."""
    graph = _graph(group_node("g1", "G", 0, 0, 400, 400), file_node("f1", "doc.md", 10, 10, 400, 400))

    assert not contains(graph.groups[0], graph.files[0])


def test_resolve_fills_both_directions():
    """Test that groups list members and files list their groups."""
    graph = resolve_containment(_graph(
        group_node("g1", "Inbox", -50, -50, 1000, 500),
        file_node("f1", "doc.md", 0, 0, 400, 400),
        text_node("c1", "note", 450, 0),
        file_node("f2", "b.md", 2000, 0, 400, 400),
    ))

    group = graph.groups[0]
    assert [n.id for n in group.contained_nodes] == ["c1", "f1"]
    assert [g.id for g in graph.files[0].in_groups] == ["g1"]
    assert graph.files[1].in_groups == []


def test_file_in_several_groups():
    """Test that overlapping groups both claim the file."""
    graph = resolve_containment(_graph(
        group_node("g1", "A", 0, 0, 500, 500),
        group_node("g2", "B", -10, -10, 600, 600),
        file_node("f1", "doc.md", 50, 50, 100, 100),
    ))

    assert [g.label for g in graph.files[0].in_groups] == ["A", "B"]


def test_nested_groups_are_not_members():
    """Test that a group inside another group is not a member of it."""
    graph = resolve_containment(_graph(
        group_node("outer", "Outer", 0, 0, 1000, 1000),
        group_node("inner", "Inner", 100, 100, 500, 500),
        file_node("f1", "doc.md", 150, 150, 100, 100),
    ))

    outer = next(g for g in graph.groups if g.id == "outer")
    assert [n.id for n in outer.contained_nodes] == ["f1"]
    assert {g.id for g in graph.files[0].in_groups} == {"outer", "inner"}


def test_resolve_is_idempotent_and_pure():
    """Test that resolving twice matches and the input graph is untouched."""
    original = _graph(group_node("g1", "G", 0, 0, 500, 500), file_node("f1", "doc.md", 50, 50, 100, 100))

    once = resolve_containment(original)
    twice = resolve_containment(once)

    assert original.files[0].in_groups == []
    assert original.groups[0].contained_nodes == []
    assert [g.id for g in twice.files[0].in_groups] == [g.id for g in once.files[0].in_groups]
    assert [n.id for n in twice.groups[0].contained_nodes] == [n.id for n in once.groups[0].contained_nodes]
