"""Style derivation: layer selection and flattening.

Precedence, lowest first:

    1. default style (bound by chaining)
    2. the block's own properties (block resolution only)
    3. the selected element trees, in selector order
    4. the active modifiers, in declaration order

Modifiers are looked up by their full key, prefix included, so nothing here
depends on the naming configuration.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from bemstyle.model.selection import Selection
from bemstyle.model.tree import StyleTree, primitives, subtree
from bemstyle.style.merge import deep_merge

__all__ = ["derive_style", "select_subtree", "style_layers"]


def style_layers(
    style_tree: StyleTree | None,
    element_keys: Sequence[str],
    modifiers: Iterable[str],
    *,
    keep_nested: bool = False,
) -> list[StyleTree]:
    """Return the layers of *style_tree* a resolution consumes, lowest first.

    With ``keep_nested`` the block layers keep their nested element trees,
    which is what a chained resolution needs to reach deeper elements.
    """
    if not style_tree:
        return []
    block = not element_keys
    layers: list[StyleTree] = []

    if block:
        layers.append(style_tree if keep_nested else primitives(style_tree))
    for key in element_keys:
        element = subtree(style_tree, key)
        if element is not None:
            layers.append(element)

    for modifier in modifiers:
        overrides = subtree(style_tree, modifier)
        if overrides is None:
            continue
        if block:
            layers.append(overrides if keep_nested else primitives(overrides))
            continue
        for key in element_keys:
            element = subtree(overrides, key)
            if element is not None:
                layers.append(element)
    return layers


def derive_style(
    style_tree: StyleTree | None,
    element_keys: Sequence[str],
    modifiers: Iterable[str],
    default_style: StyleTree | None = None,
) -> dict[str, Any]:
    """Compute the flat style mapping for one rendered node.

    Missing trees, elements and modifiers contribute nothing.  The result is a
    fresh dict holding only primitive values.

    Raises:
        StyleTreeError: a consumed part of the tree contains a cycle.
    """
    layers = style_layers(style_tree, element_keys, modifiers)
    return primitives(deep_merge(default_style, *layers))


def select_subtree(
    style_tree: StyleTree | None, selection: Selection
) -> dict[str, Any]:
    """Return the merged, still-nested scope a resolution consumed."""
    layers = style_layers(
        style_tree, selection.element_keys, selection.modifiers, keep_nested=True
    )
    return deep_merge(*layers)
