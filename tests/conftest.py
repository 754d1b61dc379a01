"""
Shared fixtures for the Semantic Canvas test suite.
"""

import itertools
import json

import pytest

from semantic_canvas.core import PathLinkResolver
from semantic_canvas.services import EdgeDeltaTracker, VaultRepository
from semantic_canvas.shared import Settings


@pytest.fixture
def settings():
    """Default settings, isolated from the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def resolver():
    return PathLinkResolver(["doc.md", "Other Note.md", "b.md", "c.md", "Projects/Plan.md"])


@pytest.fixture
def id_factory():
    """Sequential ids: n1, n2, ..."""
    counter = itertools.count(1)
    return lambda: f"n{next(counter)}"


@pytest.fixture
def edge_tracker():
    return EdgeDeltaTracker()


@pytest.fixture
def vault_dir(tmp_path):
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def vault(vault_dir):
    return VaultRepository(str(vault_dir))


@pytest.fixture
def write_note(vault_dir):
    """Write a markdown note, optionally with front matter lines."""
    def _write(path, front_matter=None, body="Body\n"):
        target = vault_dir / path
        target.parent.mkdir(parents=True, exist_ok=True)
        text = body
        if front_matter is not None:
            text = f"---\n{front_matter}---\n{body}"
        target.write_text(text, encoding="utf-8")
        return target
    return _write


@pytest.fixture
def write_canvas(vault_dir):
    def _write(path, data):
        target = vault_dir / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(data), encoding="utf-8")
        return target
    return _write
