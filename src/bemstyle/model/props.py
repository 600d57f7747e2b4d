"""StyleProps model: the externally supplied styling configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bemstyle.model.tree import StyleTree


@dataclass(frozen=True)
class StyleProps:
    """A component's class-name base and style tree, both optional."""

    class_name: str | None = None
    style: StyleTree | None = None

    @classmethod
    def coerce(cls, value: Any) -> StyleProps:
        """Build StyleProps from None, StyleProps, or a props mapping.

        Mappings may spell the class name as ``class_name`` or ``className``.
        """
        if value is None:
            return cls()
        if isinstance(value, StyleProps):
            return value
        if isinstance(value, Mapping):
            class_name = value.get("class_name", value.get("className"))
            return cls(class_name=class_name, style=value.get("style"))
        raise TypeError(f"Cannot build StyleProps from {type(value).__name__}")
