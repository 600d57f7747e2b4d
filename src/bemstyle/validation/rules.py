"""Validation rules for style trees.

Each rule is a function taking a style tree and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from bemstyle.config import DEFAULT_CONFIG, BemConfig
from bemstyle.model.diagnostic import Diagnostic, Severity
from bemstyle.model.tree import StyleTree, is_subtree

_PRIMITIVES = (str, int, float, bool, type(None))


def _walk(
    tree: StyleTree, path: tuple[Any, ...] = (), ancestors: frozenset[int] = frozenset()
) -> Iterator[tuple[tuple[Any, ...], Any, Any]]:
    """Yield ``(path, key, value)`` for every entry, stopping at cycles."""
    ancestors = ancestors | {id(tree)}
    for key, value in tree.items():
        entry_path = path + (key,)
        yield entry_path, key, value
        if is_subtree(value) and id(value) not in ancestors:
            yield from _walk(value, entry_path, ancestors)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_acyclic(
    tree: StyleTree, config: BemConfig = DEFAULT_CONFIG
) -> list[Diagnostic]:
    """No subtree may contain one of its own ancestors."""
    diagnostics: list[Diagnostic] = []

    def visit(node: StyleTree, path: tuple[Any, ...], ancestors: frozenset[int]) -> None:
        ancestors = ancestors | {id(node)}
        for key, value in node.items():
            if not is_subtree(value):
                continue
            if id(value) in ancestors:
                diagnostics.append(
                    Diagnostic(
                        rule="check_acyclic",
                        severity=Severity.ERROR,
                        message=f"Entry '{key}' refers back to an enclosing tree.",
                        path=tuple(str(p) for p in path + (key,)),
                        fix="Copy the shared tree instead of nesting it inside itself.",
                    )
                )
                continue
            visit(value, path + (key,), ancestors)

    visit(tree, (), frozenset())
    return diagnostics


def check_key_types(
    tree: StyleTree, config: BemConfig = DEFAULT_CONFIG
) -> list[Diagnostic]:
    """Every key must be a non-empty string."""
    diagnostics: list[Diagnostic] = []
    for path, key, _ in _walk(tree):
        if not isinstance(key, str) or not key:
            diagnostics.append(
                Diagnostic(
                    rule="check_key_types",
                    severity=Severity.ERROR,
                    message=f"Key {key!r} is not a non-empty string.",
                    path=tuple(str(p) for p in path),
                )
            )
    return diagnostics


def check_modifier_names(
    tree: StyleTree, config: BemConfig = DEFAULT_CONFIG
) -> list[Diagnostic]:
    """Modifier keys need a name after the prefix."""
    diagnostics: list[Diagnostic] = []
    for path, key, _ in _walk(tree):
        if isinstance(key, str) and key == config.modifier_prefix:
            diagnostics.append(
                Diagnostic(
                    rule="check_modifier_names",
                    severity=Severity.ERROR,
                    message=f"Modifier key '{key}' has no name.",
                    path=tuple(str(p) for p in path),
                    fix=f"Name the modifier, e.g. '{config.modifier_prefix}disabled'.",
                )
            )
    return diagnostics


def check_value_types(
    tree: StyleTree, config: BemConfig = DEFAULT_CONFIG
) -> list[Diagnostic]:
    """Values must be primitives, sequences of primitives, or nested trees."""
    diagnostics: list[Diagnostic] = []
    for path, key, value in _walk(tree):
        if isinstance(value, (_PRIMITIVES, Mapping, list, tuple)):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_value_types",
                severity=Severity.ERROR,
                message=f"Value of '{key}' has unsupported type {type(value).__name__}.",
                path=tuple(str(p) for p in path),
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_sequence_values(
    tree: StyleTree, config: BemConfig = DEFAULT_CONFIG
) -> list[Diagnostic]:
    """List values replace each other on merge; they are never combined."""
    diagnostics: list[Diagnostic] = []
    for path, key, value in _walk(tree):
        if isinstance(value, (list, tuple)):
            diagnostics.append(
                Diagnostic(
                    rule="check_sequence_values",
                    severity=Severity.WARNING,
                    message=f"'{key}' holds a list; later layers replace it whole.",
                    path=tuple(str(p) for p in path),
                    fix="Use a single string value, e.g. a space-separated list.",
                )
            )
    return diagnostics


def check_nested_modifiers(
    tree: StyleTree, config: BemConfig = DEFAULT_CONFIG
) -> list[Diagnostic]:
    """Modifiers inside modifiers only take effect through chained resolution."""
    diagnostics: list[Diagnostic] = []
    for path, key, value in _walk(tree):
        if not (isinstance(key, str) and config.is_modifier(key) and is_subtree(value)):
            continue
        outer = [p for p in path[:-1] if isinstance(p, str) and config.is_modifier(p)]
        if outer:
            diagnostics.append(
                Diagnostic(
                    rule="check_nested_modifiers",
                    severity=Severity.INFO,
                    message=(
                        f"Modifier '{key}' is nested inside modifier '{outer[-1]}'; "
                        "it applies only to chained resolutions."
                    ),
                    path=tuple(str(p) for p in path),
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_acyclic,
    check_key_types,
    check_modifier_names,
    check_value_types,
    check_sequence_values,
    check_nested_modifiers,
]
