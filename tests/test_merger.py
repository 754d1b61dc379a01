"""
Tests for merging derived properties and writing them into front matter.
"""

from semantic_canvas.core import UpdateMode, apply_properties, filter_excluded, merge_derived


def test_merge_concatenates_per_note():
    """Test that two nodes for one note merge their values."""
    merged = merge_derived([
        ("doc.md", {"cards": ["a"]}),
        ("doc.md", {"cards": ["b"], "urls": ["https://a.io"]}),
        ("b.md", {"files": ["[[doc]]"]}),
    ])

    assert merged == {
        "doc.md": {"cards": ["a", "b"], "urls": ["https://a.io"]},
        "b.md": {"files": ["[[doc]]"]},
    }


def test_merge_drops_empty_results():
    """Test that None and empty maps never reach the output."""
    merged = merge_derived([("doc.md", None), ("b.md", {}), ("c.md", {"k": []})])

    assert merged == {}


def test_merge_keeps_duplicates():
    """Test that the same value from two nodes is listed twice."""
    merged = merge_derived([("doc.md", {"cards": ["a"]}), ("doc.md", {"cards": ["a"]})])

    assert merged["doc.md"]["cards"] == ["a", "a"]


def test_filter_excluded_ignores_case():
    """Test that excluded keys match regardless of case."""
    props = {"Tags": ["x"], "aliases": ["y"], "status": ["z"]}

    assert filter_excluded(props, {"tags", "ALIASES"}) == {"status": ["z"]}


def test_overwrite_replaces_existing_values():
    """Test that overwrite mode replaces keys and keeps other keys."""
    front_matter = {"title": "Doc", "cards": ["old"]}

    written = apply_properties(front_matter, {"cards": ["new"]}, UpdateMode.OVERWRITE)

    assert written == 1
    assert front_matter == {"title": "Doc", "cards": ["new"]}


def test_append_adds_distinct_values():
    """Test that append mode keeps existing values and skips duplicates."""
    front_matter = {"cards": ["old", "keep"]}

    apply_properties(front_matter, {"cards": ["keep", "new"]}, UpdateMode.APPEND)

    assert front_matter == {"cards": ["old", "keep", "new"]}


def test_append_wraps_scalar_values():
    """Test that a scalar property becomes a list when appended to."""
    front_matter = {"status": "draft"}

    apply_properties(front_matter, {"status": ["done"], "new": ["x"]}, "append")

    assert front_matter == {"status": ["draft", "done"], "new": ["x"]}


def test_unchanged_keys_are_not_counted():
    """Test that writing values a note already has changes nothing."""
    front_matter = {"cards": ["hello"], "status": "draft"}

    assert apply_properties(front_matter, {"cards": ["hello"]}, UpdateMode.OVERWRITE) == 0
    assert apply_properties(front_matter, {"cards": ["hello"]}, UpdateMode.APPEND) == 0
    assert apply_properties(front_matter, {"cards": ["hello", "new"]}, UpdateMode.APPEND) == 1
    assert front_matter == {"cards": ["hello", "new"], "status": "draft"}


def test_new_empty_key_is_counted():
    front_matter = {}

    assert apply_properties(front_matter, {"cards": []}) == 1
    assert front_matter == {"cards": []}
