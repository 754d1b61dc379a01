"""
Wikilink helpers and vault link resolution.

A wikilink is ``[[target]]`` where target may carry a sub-section
(``#Heading``) and an alias (``|shown text``). Resolution follows the vault's
own rules: an exact path wins, otherwise the file is found by name.
"""

import posixpath
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from ..shared.models.canvas import FileNode

MARKDOWN_EXTENSION = ".md"


def is_wikilink(value: str) -> bool:
    """True when ``value`` is wrapped in double-bracket link syntax."""
    return len(value) > 4 and value.startswith("[[") and value.endswith("]]")


def strip_wikilink(value: str) -> str:
    """Inner target of a wikilink, or the value unchanged."""
    return value[2:-2] if is_wikilink(value) else value


def make_wikilink(link_text: str) -> str:
    return f"[[{link_text}]]"


def split_link_target(target: str) -> Tuple[str, Optional[str], Optional[str]]:
    """
    Split a link target into ``(path, subpath, alias)``.

    ``"Note#Intro|see intro"`` -> ``("Note", "#Intro", "see intro")``
    """
    alias = None
    if "|" in target:
        target, alias = target.split("|", 1)

    subpath = None
    if "#" in target:
        target, section = target.split("#", 1)
        subpath = "#" + section

    return target.strip(), subpath, alias


def strip_markdown_extension(path: str) -> str:
    if path.lower().endswith(MARKDOWN_EXTENSION):
        return path[:-len(MARKDOWN_EXTENSION)]
    return path


class LinkResolver(ABC):
    """Resolves link text to vault paths and back."""

    @abstractmethod
    def first_linkpath_dest(self, linkpath: str, source_path: str) -> Optional[str]:
        """Best matching vault path for ``linkpath`` as written in ``source_path``."""

    @abstractmethod
    def file_to_linktext(self, path: str, source_path: str) -> str:
        """Shortest link text that points at ``path`` from ``source_path``."""


class PathLinkResolver(LinkResolver):
    """
    Link resolver over a fixed set of vault-relative paths.

    Matching is case-insensitive. When several files share a name, the one in
    the source note's folder wins, then the shortest path.
    """

    def __init__(self, paths: Iterable[str]):
        self.paths: List[str] = sorted({p.strip("/") for p in paths if p})
        self._by_lower: Dict[str, str] = {p.lower(): p for p in self.paths}
        self._by_name: Dict[str, List[str]] = defaultdict(list)
        for path in self.paths:
            self._by_name[posixpath.basename(path).lower()].append(path)

    def first_linkpath_dest(self, linkpath: str, source_path: str) -> Optional[str]:
        linkpath = linkpath.strip().strip("/")
        if not linkpath:
            return self._by_lower.get(source_path.lower())

        forms = [linkpath]
        if not linkpath.lower().endswith(MARKDOWN_EXTENSION):
            forms.append(linkpath + MARKDOWN_EXTENSION)

        source_folder = posixpath.dirname(source_path)
        for form in forms:
            exact = self._by_lower.get(form.lower())
            if exact:
                return exact
            if source_folder:
                relative = self._by_lower.get(posixpath.join(source_folder, form).lower())
                if relative:
                    return relative

        for form in forms:
            suffix = "/" + form.lower()
            candidates = [
                p for p in self._by_name.get(posixpath.basename(form).lower(), [])
                if p.lower().endswith(suffix) or p.lower() == form.lower()
            ]
            if candidates:
                return min(
                    candidates,
                    key=lambda p: (posixpath.dirname(p) != source_folder, len(p), p),
                )

        return None

    def file_to_linktext(self, path: str, source_path: str) -> str:
        name = posixpath.basename(path)
        if len(self._by_name.get(name.lower(), [])) <= 1:
            return strip_markdown_extension(name)
        return strip_markdown_extension(path)


def file_node_to_wikilink(node: FileNode, source_path: str, resolver: LinkResolver) -> str:
    """
    Wikilink to the document behind ``node``, relative to ``source_path``.

    Any sub-section stored on the node is kept. Files the resolver does not
    know are linked by their raw path without the markdown extension.
    """
    destination = resolver.first_linkpath_dest(node.file, source_path)
    if destination is None:
        link_text = strip_markdown_extension(node.file)
    else:
        link_text = resolver.file_to_linktext(destination, source_path)

    if node.subpath:
        link_text += node.subpath

    return make_wikilink(link_text)
