"""Tests for style tree validation rules and the validator."""

import pytest

from bemstyle.config import BemConfig
from bemstyle.model.diagnostic import Diagnostic, Severity
from bemstyle.validation import ValidationError, validate, validate_or_raise
from bemstyle.validation.rules import (
    check_acyclic,
    check_key_types,
    check_modifier_names,
    check_nested_modifiers,
    check_sequence_values,
    check_value_types,
)
from bemstyle.validation.validator import count_by_severity, plural


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _valid_tree(**overrides) -> dict:
    tree = {
        "padding": 4,
        "title": {"color": "navy"},
        "&disabled": {"opacity": 0.5, "title": {"color": "gray"}},
    }
    tree.update(overrides)
    return tree


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestCheckAcyclic:
    def test_valid(self):
        assert check_acyclic(_valid_tree()) == []

    def test_self_reference(self):
        tree = _valid_tree()
        tree["title"]["again"] = tree
        diags = check_acyclic(tree)
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert diags[0].path == ("title", "again")

    def test_shared_subtree_ok(self):
        shared = {"color": "red"}
        assert check_acyclic({"a": shared, "b": shared}) == []


class TestCheckKeyTypes:
    def test_valid(self):
        assert check_key_types(_valid_tree()) == []

    def test_non_string_key(self):
        diags = check_key_types({"title": {1: "x"}})
        assert len(diags) == 1
        assert diags[0].path == ("title", "1")

    def test_empty_key(self):
        assert len(check_key_types({"": 1})) == 1


class TestCheckModifierNames:
    def test_valid(self):
        assert check_modifier_names(_valid_tree()) == []

    def test_bare_prefix(self):
        diags = check_modifier_names({"&": {"a": 1}})
        assert len(diags) == 1
        assert diags[0].fix is not None

    def test_custom_prefix(self):
        config = BemConfig(modifier_prefix="_")
        assert len(check_modifier_names({"_": {}, "&": {}}, config)) == 1


class TestCheckValueTypes:
    def test_valid(self):
        assert check_value_types(_valid_tree(shadows=["a", "b"])) == []

    def test_object_value(self):
        diags = check_value_types({"title": {"color": object()}})
        assert len(diags) == 1
        assert diags[0].rule == "check_value_types"


class TestCheckSequenceValues:
    def test_valid(self):
        assert check_sequence_values(_valid_tree()) == []

    def test_list_value_warns(self):
        diags = check_sequence_values({"title": {"shadows": ["a", "b"]}})
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].path == ("title", "shadows")


class TestCheckNestedModifiers:
    def test_valid(self):
        assert check_nested_modifiers(_valid_tree()) == []

    def test_nested_modifier_info(self):
        diags = check_nested_modifiers({"&a": {"title": {"&b": {"x": 1}}}})
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO
        assert "&a" in diags[0].message

    def test_modifier_inside_element_ok(self):
        assert check_nested_modifiers({"title": {"&b": {"x": 1}}}) == []


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidate:
    def test_clean_tree(self):
        assert validate(_valid_tree()) == []

    def test_collects_all_rules(self):
        tree = _valid_tree(shadows=["a"])
        tree["&"] = {}
        rules = {d.rule for d in validate(tree)}
        assert rules == {"check_modifier_names", "check_sequence_values"}

    def test_extra_rules(self):
        def no_padding(tree, config):
            if "padding" in tree:
                return [Diagnostic(rule="no_padding", severity=Severity.WARNING, message="x")]
            return []

        diags = validate(_valid_tree(), extra_rules=[no_padding])
        assert [d.rule for d in diags] == ["no_padding"]


class TestCounts:
    def test_count_by_severity(self):
        tree = _valid_tree(shadows=["a"])
        tree["&"] = {}
        counts = count_by_severity(validate(tree))
        assert counts == {Severity.ERROR: 1, Severity.WARNING: 1, Severity.INFO: 0}

    @pytest.mark.parametrize(
        "count, expected", [(0, "0 errors"), (1, "1 error"), (2, "2 errors")]
    )
    def test_plural(self, count, expected):
        assert plural(count, "error") == expected


class TestValidateOrRaise:
    def test_returns_warnings(self):
        diags = validate_or_raise(_valid_tree(shadows=["a"]))
        assert len(diags) == 1
        assert diags[0].is_warning

    def test_raises_on_errors(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_or_raise({"&": {}})
        assert len(excinfo.value.diagnostics) == 1
        assert str(excinfo.value).startswith("style tree has 1 error: ")


class TestDiagnosticStr:
    def test_with_path(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="bad", path=("a", "b"))
        assert str(d) == "ERROR [at=a.b]: bad"

    def test_without_path(self):
        d = Diagnostic(rule="r", severity=Severity.INFO, message="note")
        assert str(d) == "INFO: note"
