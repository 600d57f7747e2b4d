"""Naming configuration shared by the selector, naming and style modules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BemConfig:
    """BEM naming conventions.

    Attributes:
        modifier_prefix: Marks a style-tree or selector key as a modifier.
        element_separator: Joins a block token and an element key.
        modifier_separator: Joins a block token and a modifier name.
    """

    modifier_prefix: str = "&"
    element_separator: str = "__"
    modifier_separator: str = "--"

    def __post_init__(self) -> None:
        for name in ("modifier_prefix", "element_separator", "modifier_separator"):
            if not getattr(self, name):
                raise ValueError(f"{name} must be a non-empty string")

    def is_modifier(self, key: str) -> bool:
        return key.startswith(self.modifier_prefix)

    def modifier_name(self, key: str) -> str:
        """Strip the modifier prefix: ``"&disabled"`` -> ``"disabled"``."""
        return key[len(self.modifier_prefix):]


DEFAULT_CONFIG = BemConfig()
