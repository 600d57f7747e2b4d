"""Selection model: the canonical form of a selector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Selection:
    """Which part of a component a resolution targets.

    Attributes:
        element_keys: Element keys in selector order.  Duplicates are kept.
        modifiers: Active modifier keys, prefix included, in declaration
            order with duplicates removed.
    """

    element_keys: tuple[str, ...] = ()
    modifiers: tuple[str, ...] = ()

    @property
    def is_block(self) -> bool:
        """True when no element is selected, i.e. the block node itself."""
        return not self.element_keys


BLOCK = Selection()
