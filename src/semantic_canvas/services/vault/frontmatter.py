"""
YAML front matter codec for markdown notes.
"""

import re
from typing import Any, Dict, Tuple

import yaml

from ...shared.exceptions import FrontMatterError

FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a note into its front matter mapping and body.

    Notes without a front matter block yield an empty mapping and the full
    text as body.

    Raises:
        FrontMatterError: if the block is not a YAML mapping
    """
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1)) if match.group(1).strip() else {}
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML front matter: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("Front matter must be a YAML mapping")

    return data, text[match.end():]


def join_front_matter(data: Dict[str, Any], body: str) -> str:
    """Render front matter and body back into note text, keeping key order."""
    if not data:
        return body

    rendered = yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return f"---\n{rendered}---\n{body}"
