from bemstyle.style.deriver import derive_style, select_subtree, style_layers
from bemstyle.style.merge import deep_merge

__all__ = ["deep_merge", "derive_style", "select_subtree", "style_layers"]
