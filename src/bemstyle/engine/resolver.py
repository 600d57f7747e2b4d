"""Resolution engine: class name and style for one rendered node, plus chaining."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from bemstyle.config import DEFAULT_CONFIG, BemConfig
from bemstyle.model.props import StyleProps
from bemstyle.model.selection import Selection
from bemstyle.model.tree import StyleTree, freeze
from bemstyle.naming import derive_class_name
from bemstyle.selector import normalize_selector
from bemstyle.style import deep_merge, derive_style, select_subtree

__all__ = ["Resolution", "Resolver", "resolve"]


class Resolver:
    """Callable entry point of the engine, optionally pre-configured.

    A bare ``Resolver()`` resolves props from scratch.  Resolvers produced by
    chaining carry a default style (merged under every resolution) and a
    class-name base used when the props supply none.  Both are snapshotted at
    construction and never change afterwards.
    """

    def __init__(
        self,
        default_style: StyleTree | None = None,
        class_name: str | None = None,
        config: BemConfig = DEFAULT_CONFIG,
        logger: logging.Logger | None = None,
    ) -> None:
        self._default_style: Mapping[str, Any] = freeze(deep_merge(default_style))
        self._class_name = class_name
        self._config = config
        self._log = logger or logging.getLogger("bemstyle")

    @property
    def default_style(self) -> Mapping[str, Any]:
        return self._default_style

    @property
    def class_name(self) -> str | None:
        return self._class_name

    @property
    def config(self) -> BemConfig:
        return self._config

    def __call__(self, props: Any = None, selector: Any = None) -> Resolution:
        """Resolve *props* for the node described by *selector*.

        Raises:
            SelectorError: *selector* has an unsupported shape.
            StyleTreeError: the consumed part of the style tree is cyclic.
        """
        props = StyleProps.coerce(props)
        selection = normalize_selector(selector, self._config)
        base = props.class_name if props.class_name is not None else self._class_name
        keys, modifiers = selection.element_keys, selection.modifiers

        class_name = derive_class_name(base, keys, modifiers, self._config)
        style = derive_style(props.style, keys, modifiers, self._default_style)
        scope = select_subtree(props.style, selection)

        self._log.debug(
            "resolved elements=%s modifiers=%s class_name=%r properties=%d",
            list(keys),
            list(modifiers),
            class_name,
            len(style),
        )
        return Resolution(
            class_name=class_name,
            style=freeze(style),
            selection=selection,
            scope=freeze(scope),
            config=self._config,
            logger=self._log,
        )

    def __repr__(self) -> str:
        return (
            f"Resolver(class_name={self._class_name!r}, "
            f"default_style={dict(self._default_style)!r})"
        )


@dataclass(frozen=True)
class Resolution:
    """The outcome of one resolution.

    ``style`` and ``scope`` are read-only snapshots; use :meth:`props` for a
    mutable copy to hand to a renderer.

    Attributes:
        class_name: Space-joined class tokens, or None when no base was given.
        style: Flat style mapping for the node.
        selection: The normalized selector that produced this resolution.
        scope: The merged, still-nested part of the style tree this node
            consumed; chained resolutions select from it.
    """

    class_name: str | None
    style: Mapping[str, Any]
    selection: Selection = field(default_factory=Selection)
    scope: Mapping[str, Any] = field(default_factory=freeze, repr=False)
    config: BemConfig = field(default=DEFAULT_CONFIG, repr=False, compare=False)
    logger: logging.Logger | None = field(default=None, repr=False, compare=False)

    @property
    def resolver(self) -> Resolver:
        """A resolver defaulting to this node's style and class name."""
        return Resolver(
            default_style=self.style,
            class_name=self.class_name,
            config=self.config,
            logger=self.logger,
        )

    def resolve_child(self, selector: Any = None) -> Resolution:
        """Resolve a descendant of this node from the scope it consumed.

        ``resolve_child()`` with no selector reproduces this node's style.
        """
        return self.resolver(StyleProps(style=self.scope), selector)

    def props(self) -> dict[str, Any]:
        """Return node attributes: ``style`` and, when present, ``className``."""
        attrs: dict[str, Any] = {"style": dict(self.style)}
        if self.class_name is not None:
            attrs["className"] = self.class_name
        return attrs


def resolve(
    props: Any = None, selector: Any = None, config: BemConfig = DEFAULT_CONFIG
) -> Resolution:
    """Resolve *props* for the node described by *selector*.

    *props* is a :class:`StyleProps`, a mapping with ``class_name`` (or
    ``className``) and ``style`` keys, or None.
    """
    return Resolver(config=config)(props, selector)
