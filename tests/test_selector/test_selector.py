"""Tests for selector normalization."""

import pytest

from bemstyle.config import BemConfig
from bemstyle.errors import SelectorError
from bemstyle.model.selection import Selection
from bemstyle.selector import normalize_selector


# ---------------------------------------------------------------------------
# Accepted shapes
# ---------------------------------------------------------------------------


class TestAbsentSelector:
    def test_none_is_block(self):
        sel = normalize_selector(None)
        assert sel == Selection()
        assert sel.is_block

    def test_default_argument(self):
        assert normalize_selector() == Selection()


class TestStringSelector:
    def test_element_key(self):
        sel = normalize_selector("title")
        assert sel.element_keys == ("title",)
        assert sel.modifiers == ()
        assert not sel.is_block

    def test_modifier_key(self):
        sel = normalize_selector("&disabled")
        assert sel.element_keys == ()
        assert sel.modifiers == ("&disabled",)
        assert sel.is_block


class TestSequenceSelector:
    def test_preserves_element_order(self):
        sel = normalize_selector(["icon", "title", "badge"])
        assert sel.element_keys == ("icon", "title", "badge")

    def test_splits_modifiers(self):
        sel = normalize_selector(["title", "&big", "icon", "&muted"])
        assert sel.element_keys == ("title", "icon")
        assert sel.modifiers == ("&big", "&muted")

    def test_keeps_duplicate_elements(self):
        sel = normalize_selector(["title", "title"])
        assert sel.element_keys == ("title", "title")

    def test_dedupes_modifiers(self):
        sel = normalize_selector(["&big", "&big"])
        assert sel.modifiers == ("&big",)

    def test_tuple(self):
        assert normalize_selector(("a", "&b")) == Selection(("a",), ("&b",))

    def test_empty_list_is_block(self):
        assert normalize_selector([]) == Selection()


class TestMappingSelector:
    def test_truthy_entries_only(self):
        sel = normalize_selector({"title": True, "icon": False, "&big": 1, "&muted": 0})
        assert sel.element_keys == ("title",)
        assert sel.modifiers == ("&big",)

    def test_preserves_iteration_order(self):
        sel = normalize_selector({"b": True, "a": True})
        assert sel.element_keys == ("b", "a")

    def test_all_falsy_is_block(self):
        assert normalize_selector({"title": False, "&big": None}) == Selection()


class TestSelectionPassthrough:
    def test_returns_same_object(self):
        sel = Selection(element_keys=("x",))
        assert normalize_selector(sel) is sel


class TestCustomPrefix:
    def test_prefix_from_config(self):
        config = BemConfig(modifier_prefix="_")
        sel = normalize_selector(["title", "_active", "&raw"], config)
        assert sel.element_keys == ("title", "&raw")
        assert sel.modifiers == ("_active",)


# ---------------------------------------------------------------------------
# Contract violations
# ---------------------------------------------------------------------------


class TestUnsupportedShapes:
    @pytest.mark.parametrize("selector", [42, 3.5, object(), {"a", "b"}])
    def test_unsupported_type(self, selector):
        with pytest.raises(SelectorError) as excinfo:
            normalize_selector(selector)
        assert excinfo.value.selector is selector

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            normalize_selector(42)

    def test_non_string_entry(self):
        with pytest.raises(SelectorError):
            normalize_selector(["title", 3])

    def test_non_string_mapping_key(self):
        with pytest.raises(SelectorError):
            normalize_selector({1: True})

    def test_empty_key_selects_block(self):
        assert normalize_selector("") == Selection()

    def test_bare_prefix_dropped(self):
        assert normalize_selector("&") == Selection()

    def test_empty_and_bare_prefix_entries_dropped(self):
        sel = normalize_selector(["title", "", "&", "&big"])
        assert sel == Selection(element_keys=("title",), modifiers=("&big",))

    def test_empty_mapping_key_dropped(self):
        assert normalize_selector({"": True, "&": True}) == Selection()

    def test_falsy_bad_key_is_dropped(self):
        # Falsy entries never reach classification.
        assert normalize_selector({"&": False}) == Selection()


class TestSelectionDataclass:
    def test_frozen(self):
        sel = Selection()
        with pytest.raises(AttributeError):
            sel.element_keys = ("x",)  # type: ignore[misc]
