"""Run the style tree rules and collect their findings."""

from __future__ import annotations

from collections import Counter
from typing import Callable

from bemstyle.config import DEFAULT_CONFIG, BemConfig
from bemstyle.errors import BemStyleError
from bemstyle.model.diagnostic import Diagnostic, Severity
from bemstyle.model.tree import StyleTree
from bemstyle.validation.rules import ALL_RULES

# A rule inspects the whole tree and returns one Diagnostic per offending key.
RuleFunc = Callable[[StyleTree, BemConfig], list[Diagnostic]]


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


class ValidationError(BemStyleError):
    """A style tree cannot be resolved safely; ``diagnostics`` says where."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        errors = [d for d in diagnostics if d.is_error]
        super().__init__(
            f"style tree has {plural(len(errors), 'error')}: "
            + "; ".join(str(d) for d in errors)
        )


def validate(
    tree: StyleTree,
    extra_rules: list[RuleFunc] | None = None,
    config: BemConfig = DEFAULT_CONFIG,
) -> list[Diagnostic]:
    """Check *tree* against the built-in rules, then *extra_rules*.

    Diagnostics come back in rule order; the tree is only read.
    """
    diagnostics: list[Diagnostic] = []
    for rule in [*ALL_RULES, *(extra_rules or ())]:
        diagnostics.extend(rule(tree, config))
    return diagnostics


def count_by_severity(diagnostics: list[Diagnostic]) -> dict[Severity, int]:
    """Map every severity, including absent ones, to its diagnostic count."""
    counts = Counter(d.severity for d in diagnostics)
    return {severity: counts[severity] for severity in Severity}


def validate_or_raise(
    tree: StyleTree,
    extra_rules: list[RuleFunc] | None = None,
    config: BemConfig = DEFAULT_CONFIG,
) -> list[Diagnostic]:
    """Like :func:`validate`, but a tree with errors raises :class:`ValidationError`.

    The warnings and notes of an error-free tree are returned.
    """
    diagnostics = validate(tree, extra_rules=extra_rules, config=config)
    if any(d.is_error for d in diagnostics):
        raise ValidationError(diagnostics)
    return diagnostics
