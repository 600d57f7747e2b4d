"""Lark Transformer that converts a style-sheet parse tree into a style tree."""

from __future__ import annotations

import functools
import json
import re
from pathlib import Path
from typing import Any

from lark import Lark, Token, Transformer

from bemstyle.errors import SheetParseError
from bemstyle.style.merge import deep_merge

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_INT_RE = re.compile(r"^-?\d+$")
_FLOAT_RE = re.compile(r"^-?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$")
_KEYWORDS: dict[str, Any] = {"true": True, "false": False, "null": None}


def _coerce(raw: str) -> Any:
    """Coerce an unquoted value to int, float, bool or None where it looks like one."""
    if raw in _KEYWORDS:
        return _KEYWORDS[raw]
    if _INT_RE.match(raw):
        return int(raw)
    if _FLOAT_RE.match(raw):
        return float(raw)
    return raw


class _Declaration:
    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value


class _Block:
    def __init__(self, key: str, statements: list[object]):
        self.key = key
        self.statements = statements


class SheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a nested dict."""

    # ---- values ----

    def string_value(self, items: list[Token]) -> str:
        raw = str(items[0])
        return raw[1:-1].replace('\\"', '"').replace("\\n", "\n").replace("\\\\", "\\")

    def raw_value(self, items: list[Token]) -> Any:
        return _coerce(str(items[0]).strip())

    # ---- structural ----

    def declaration(self, items: list[object]) -> _Declaration:
        return _Declaration(str(items[0]), items[1])

    def block(self, items: list[object]) -> _Block:
        return _Block(str(items[0]), list(items[1:]))

    def start(self, items: list[object]) -> dict[str, Any]:
        return _assemble(items)


def _assemble(statements: list[object]) -> dict[str, Any]:
    """Build a tree; repeated blocks merge, repeated declarations overwrite."""
    tree: dict[str, Any] = {}
    for stmt in statements:
        if isinstance(stmt, _Declaration):
            tree[stmt.key] = stmt.value
        elif isinstance(stmt, _Block):
            nested = _assemble(stmt.statements)
            existing = tree.get(stmt.key)
            if isinstance(existing, dict):
                nested = deep_merge(existing, nested)
            tree[stmt.key] = nested
    return tree


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_sheet(source: str) -> dict[str, Any]:
    """Parse style-sheet source into a style tree."""
    try:
        tree = _parser().parse(source)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SheetParseError(str(e), line=line, column=column) from e
    return SheetTransformer().transform(tree)


def load_style_tree(path: str | Path) -> dict[str, Any]:
    """Load a style tree from a ``.json`` file or a style-sheet file."""
    path = Path(path)
    source = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            raise SheetParseError(e.msg, line=e.lineno, column=e.colno) from e
        if not isinstance(data, dict):
            raise SheetParseError(
                f"{path.name}: top-level JSON value must be an object"
            )
        return data
    return parse_sheet(source)
