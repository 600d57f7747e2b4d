"""Diagnostic model: structured validation messages for style trees."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a style tree.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        path: Keys leading from the tree root to the offending entry.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    path: tuple[str, ...] = ()
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.path:
            location = f" [at={'.'.join(str(p) for p in self.path)}]"
        return f"{self.severity.value}{location}: {self.message}"
