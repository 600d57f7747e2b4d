"""BEM class-name derivation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bemstyle.config import DEFAULT_CONFIG, BemConfig

__all__ = ["derive_class_name", "own_class_name"]


def _block_tokens(base: str | None) -> list[str]:
    # A chained base may carry several block tokens ("block__a block__b").
    return base.split() if base else []


def own_class_name(
    base: str | None,
    element_keys: Sequence[str],
    config: BemConfig = DEFAULT_CONFIG,
) -> str | None:
    """Return the block or element class name(s), without modifier tokens."""
    blocks = _block_tokens(base)
    if not blocks:
        return None
    if not element_keys:
        return " ".join(blocks)
    return " ".join(
        f"{block}{config.element_separator}{key}"
        for block in blocks
        for key in element_keys
    )


def derive_class_name(
    base: str | None,
    element_keys: Sequence[str],
    modifiers: Iterable[str],
    config: BemConfig = DEFAULT_CONFIG,
) -> str | None:
    """Compute the class attribute for one rendered node.

    Block resolution yields ``block`` followed by one ``block--name`` token per
    active modifier.  Element resolution yields one ``block__key`` token per
    element key; modifiers contribute nothing there.  Returns None when there
    is no base, so callers can omit the attribute entirely.

    >>> derive_class_name("card", [], ["&disabled"])
    'card card--disabled'
    >>> derive_class_name("card", ["title", "icon"], ["&disabled"])
    'card__title card__icon'
    """
    own = own_class_name(base, element_keys, config)
    if own is None:
        return None
    tokens = [own]
    if not element_keys:
        tokens.extend(
            f"{block}{config.modifier_separator}{config.modifier_name(modifier)}"
            for block in _block_tokens(base)
            for modifier in modifiers
        )
    return " ".join(tokens)
