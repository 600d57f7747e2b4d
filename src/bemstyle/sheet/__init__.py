from bemstyle.errors import SheetParseError
from bemstyle.sheet.transformer import load_style_tree, parse_sheet

__all__ = ["SheetParseError", "load_style_tree", "parse_sheet"]
