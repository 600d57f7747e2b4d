"""Style tree value types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Union

Primitive = Union[str, int, float, bool, None]

# A style tree maps keys to primitives or to nested style trees.  Whether a
# key is a style property, an element or a modifier is decided by the
# selector at the call site, not by the tree.
StyleTree = Mapping[str, Any]


def is_subtree(value: object) -> bool:
    """Return True if *value* is a nested style tree rather than a property."""
    return isinstance(value, Mapping)


def primitives(tree: StyleTree | None) -> dict[str, Any]:
    """Return the entries of *tree* that are not nested style trees."""
    if not tree:
        return {}
    return {k: v for k, v in tree.items() if not is_subtree(v)}


def freeze(tree: StyleTree | None = None) -> Mapping[str, Any]:
    """Return a read-only copy of *tree*, nested trees included.

    *tree* must be acyclic; run it through ``deep_merge`` first if unsure.
    """
    if not tree:
        return MappingProxyType({})
    return MappingProxyType(
        {k: freeze(v) if is_subtree(v) else v for k, v in tree.items()}
    )


def subtree(tree: StyleTree | None, key: str) -> StyleTree | None:
    """Return ``tree[key]`` if it is a nested style tree, else None."""
    if not tree:
        return None
    value = tree.get(key)
    return value if is_subtree(value) else None
