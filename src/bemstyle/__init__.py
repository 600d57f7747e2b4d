"""bemstyle - BEM class-name and style resolution for component props."""

from bemstyle.config import DEFAULT_CONFIG, BemConfig
from bemstyle.engine import Resolution, Resolver, resolve
from bemstyle.errors import BemStyleError, SelectorError, SheetParseError, StyleTreeError
from bemstyle.model import Selection, StyleProps
from bemstyle.naming import derive_class_name
from bemstyle.selector import normalize_selector
from bemstyle.style import deep_merge, derive_style

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "BemConfig",
    "BemStyleError",
    "Resolution",
    "Resolver",
    "Selection",
    "SelectorError",
    "SheetParseError",
    "StyleProps",
    "StyleTreeError",
    "deep_merge",
    "derive_class_name",
    "derive_style",
    "normalize_selector",
    "resolve",
]
