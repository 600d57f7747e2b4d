from bemstyle.model.diagnostic import Diagnostic, Severity
from bemstyle.model.props import StyleProps
from bemstyle.model.selection import BLOCK, Selection
from bemstyle.model.tree import (
    Primitive,
    StyleTree,
    freeze,
    is_subtree,
    primitives,
    subtree,
)

__all__ = [
    "BLOCK",
    "Diagnostic",
    "Primitive",
    "Selection",
    "Severity",
    "StyleProps",
    "StyleTree",
    "freeze",
    "is_subtree",
    "primitives",
    "subtree",
]
