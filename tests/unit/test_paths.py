"""Tests for resolver_conformance.assertions.paths."""

import pytest

from resolver_conformance.assertions.paths import MISSING, get_field, get_nested_value, parse_path


class TestParsePath:
    def test_dotted_and_bracketed(self):
        assert parse_path("steps[0].saveAs") == ["steps", 0, "saveAs"]

    def test_leading_index(self):
        assert parse_path("[2].name") == [2, "name"]

    def test_nested_indices(self):
        assert parse_path("a[1][2]") == ["a", 1, 2]

    @pytest.mark.parametrize("path", [".a", "a..b", "a[x]", "a[1"])
    def test_rejects_malformed(self, path):
        with pytest.raises(ValueError, match="Invalid path expression"):
            parse_path(path)


class TestGetNestedValue:
    def test_empty_path_returns_value(self):
        value = {"a": 1}
        assert get_nested_value(value, "") is value
        assert get_nested_value(value, None) is value

    def test_resolves_mapping_and_sequence(self):
        ast = {"steps": [{"saveAs": "rate"}, {"saveAs": "total"}]}
        assert get_nested_value(ast, "steps[1].saveAs") == "total"

    def test_missing_intermediate_is_missing_not_error(self):
        assert get_nested_value({"steps": []}, "steps[3].saveAs") is MISSING
        assert get_nested_value({}, "a.b.c") is MISSING
        assert get_nested_value({"a": 5}, "a.b") is MISSING

    def test_none_intermediate_is_missing(self):
        assert get_nested_value({"a": None}, "a.b") is MISSING

    def test_sequence_length(self):
        status = {"__warnings": ["w1", "w2"]}
        assert get_nested_value(status, "__warnings.length") == 2

    def test_attribute_lookup(self):
        class Node:
            name = "wf"

        assert get_nested_value({"node": Node()}, "node.name") == "wf"

    def test_private_attributes_are_not_exposed(self):
        class Node:
            _secret = 1

        assert get_field(Node(), "_secret") is MISSING

    def test_missing_is_falsy_singleton(self):
        assert not MISSING
        assert type(MISSING)() is MISSING
