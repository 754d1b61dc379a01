"""
Property merging: one note may appear as several file nodes on a canvas.
"""

from enum import Enum
from typing import Any, Dict, Iterable, MutableMapping, Tuple

from ..shared.models.canvas import DerivedResult, PropertyMap


class UpdateMode(str, Enum):
    """How derived values are written into existing front matter."""
    OVERWRITE = "overwrite"
    APPEND = "append"


def merge_derived(results: Iterable[Tuple[str, DerivedResult]]) -> Dict[str, PropertyMap]:
    """
    Merge derived results per note path.

    Values for the same key are concatenated in first-seen order; None results
    contribute nothing and notes whose merged map is empty are dropped.
    """
    merged: Dict[str, PropertyMap] = {}

    for path, props in results:
        target = merged.setdefault(path, {})
        if not props:
            continue
        for key, values in props.items():
            target.setdefault(key, []).extend(values)

    return {
        path: {key: values for key, values in props.items() if values}
        for path, props in merged.items()
        if any(props.values())
    }


def filter_excluded(props: PropertyMap, excluded_keys: Iterable[str]) -> PropertyMap:
    """Drop keys that match an excluded key, ignoring case."""
    excluded = {key.lower() for key in excluded_keys}
    return {key: values for key, values in props.items() if key.lower() not in excluded}


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


def apply_properties(front_matter: MutableMapping[str, Any],
                     props: PropertyMap,
                     mode: UpdateMode = UpdateMode.OVERWRITE) -> int:
    """
    Write ``props`` into a front-matter mapping in place.

    Overwrite replaces each key. Append keeps what the note already has and
    adds any new distinct values after it.

    Returns:
        Number of keys whose value changed
    """
    mode = UpdateMode(mode)
    changed = 0

    for key, values in props.items():
        before = front_matter.get(key)
        if mode == UpdateMode.OVERWRITE:
            after = list(values)
        else:
            after = _as_list(before)
            for value in values:
                if value not in after:
                    after.append(value)

        if key in front_matter and before == after:
            continue
        front_matter[key] = after
        changed += 1

    return changed
