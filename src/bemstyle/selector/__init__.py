"""Selector normalizer: turns the selector argument into a Selection.

Accepted shapes:
    None                -> the block itself
    "title"             -> one element key
    "&active"           -> one modifier, block resolution
    ["title", "&big"]   -> element keys and modifiers, element order kept
    {"title": True, "&big": is_big}
                        -> truthy entries only, classified like the above
    Selection           -> returned unchanged
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from bemstyle.config import DEFAULT_CONFIG, BemConfig
from bemstyle.errors import SelectorError
from bemstyle.model.selection import BLOCK, Selection

__all__ = ["normalize_selector"]


def _classify(
    keys: Iterable[Any], config: BemConfig, selector: Any
) -> Selection:
    elements: list[str] = []
    modifiers: dict[str, None] = {}
    for key in keys:
        if not isinstance(key, str):
            raise SelectorError(
                f"Selector keys must be strings, got {type(key).__name__}: {key!r}",
                selector=selector,
            )
        # "" and a bare prefix select nothing.
        if not key or key == config.modifier_prefix:
            continue
        if config.is_modifier(key):
            modifiers.setdefault(key)
        else:
            elements.append(key)
    return Selection(element_keys=tuple(elements), modifiers=tuple(modifiers))


def normalize_selector(
    selector: Any = None, config: BemConfig = DEFAULT_CONFIG
) -> Selection:
    """Normalize *selector* into element keys and active modifiers.

    Raises:
        SelectorError: *selector* is not one of the accepted shapes, or one of
            its keys is not a string.  Empty keys and a bare modifier prefix
            are ignored.
    """
    if selector is None:
        return BLOCK
    if isinstance(selector, Selection):
        return selector
    if isinstance(selector, str):
        return _classify([selector], config, selector)
    if isinstance(selector, Mapping):
        return _classify(
            (key for key, active in selector.items() if active), config, selector
        )
    if isinstance(selector, (list, tuple)):
        return _classify(selector, config, selector)
    raise SelectorError(
        f"Unsupported selector type: {type(selector).__name__}", selector=selector
    )
