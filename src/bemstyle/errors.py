"""Error types raised by bemstyle."""

from __future__ import annotations

from typing import Any


class BemStyleError(Exception):
    """Base class for all bemstyle errors."""


class SelectorError(BemStyleError, TypeError):
    """Raised when a selector has an unsupported shape or entry."""

    def __init__(self, message: str, selector: Any = None):
        self.selector = selector
        super().__init__(message)


class StyleTreeError(BemStyleError, ValueError):
    """Raised when a style tree is structurally broken (e.g. cyclic)."""

    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        super().__init__(message)


class SheetParseError(BemStyleError):
    """Raised when style-sheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
