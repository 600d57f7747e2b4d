"""Recursive merge of style trees."""

from __future__ import annotations

from typing import Any

from bemstyle.errors import StyleTreeError
from bemstyle.model.tree import StyleTree, is_subtree

__all__ = ["deep_merge"]


def _merge_into(
    target: dict[str, Any],
    layer: StyleTree,
    path: tuple[str, ...],
    ancestors: frozenset[int],
) -> None:
    """Merge *layer* into *target* in place.

    *target* and every dict nested in it are owned by the caller; nothing
    from *layer* is aliased into it.
    """
    if id(layer) in ancestors:
        raise StyleTreeError(
            f"Style tree contains a cycle at {'.'.join(path) or '<root>'}",
            path=path,
        )
    ancestors = ancestors | {id(layer)}
    for key, value in layer.items():
        if is_subtree(value):
            existing = target.get(key)
            if not isinstance(existing, dict):
                existing = {}
                target[key] = existing
            _merge_into(existing, value, path + (key,), ancestors)
        else:
            target[key] = value


def deep_merge(*layers: StyleTree | None) -> dict[str, Any]:
    """Merge style trees, later layers winning on conflicts.

    Nested trees merge key by key; any other value (including lists) replaces
    whatever was there.  Returns a fresh dict; the layers are not modified.

    Raises:
        StyleTreeError: a layer contains a reference cycle.
    """
    result: dict[str, Any] = {}
    for layer in layers:
        if layer:
            _merge_into(result, layer, (), frozenset())
    return result
