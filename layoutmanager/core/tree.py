"""
Helpers for nested property trees.

A property tree is a plain dict whose values are scalars, small numeric
vectors (lists) or further dicts of the same kind. Dotted paths such as
"XAxis.LineWidth" address nested values.
"""

import copy
from typing import Any, Dict, Iterator, List, Tuple

_MISSING = object()


def is_group(value: Any) -> bool:
    """True if value is a nested group rather than a leaf."""
    return isinstance(value, dict)


def join_path(prefix: str, key: str) -> str:
    """Append key to a dotted path prefix."""
    return f"{prefix}.{key}" if prefix else key


def _lookup(tree: Dict[str, Any], path: str) -> Any:
    if not path:
        return tree

    value: Any = tree
    for key in path.split('.'):
        if is_group(value) and key in value:
            value = value[key]
        else:
            return _MISSING
    return value


def get_path(tree: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Read the value at a dotted path.

    Args:
        tree: Property tree
        path: Dotted path, "" for the tree itself
        default: Returned when the path does not exist

    Returns:
        Value at path or default
    """
    value = _lookup(tree, path)
    return default if value is _MISSING else value


def is_group_at(tree: Dict[str, Any], path: str) -> bool:
    """True if the value at path exists and is a nested group."""
    return is_group(_lookup(tree, path))


def keys_at(tree: Dict[str, Any], path: str = "") -> List[str]:
    """Keys of the group at path; empty if the path is missing or a leaf."""
    value = _lookup(tree, path)
    return list(value.keys()) if is_group(value) else []


def set_path(tree: Dict[str, Any], path: str, value: Any) -> None:
    """
    Write a value at a dotted path, creating intermediate groups.

    Args:
        tree: Property tree to modify in place
        path: Dotted path
        value: Value to set
    """
    keys = path.split('.')
    target = tree

    for key in keys[:-1]:
        if key not in target or not is_group(target[key]):
            target[key] = {}
        target = target[key]

    target[keys[-1]] = value


def iter_leaves(tree: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    """Yield (path, value) for every leaf, depth-first in key order."""
    for key, value in tree.items():
        path = join_path(prefix, key)
        if is_group(value):
            yield from iter_leaves(value, path)
        else:
            yield path, value


def copy_tree(tree: Dict[str, Any]) -> Dict[str, Any]:
    """Deep copy of a property tree."""
    return copy.deepcopy(tree)
