"""Tests for infrastructure.i18n.models module."""

import pytest

from infrastructure.i18n.models import (
    FallbackOptions,
    ObjectBranch,
    OtherLeaf,
    StringLeaf,
    classify_node,
    default_indicator_format,
)


@pytest.mark.unit
class TestClassifyNode:
    """Tests for classify_node."""

    def test_string_is_string_leaf(self):
        """Strings are classified as StringLeaf."""
        assert classify_node("Save") == StringLeaf("Save")

    def test_mapping_is_object_branch(self):
        """Mappings are classified as ObjectBranch."""
        node = classify_node({"save": "Save"})
        assert isinstance(node, ObjectBranch)
        assert node.children == {"save": "Save"}

    @pytest.mark.parametrize("value", [3, 2.5, True, None, ["a", "b"]])
    def test_other_values_are_other_leaf(self, value):
        """Numbers, booleans, nulls and lists are classified as OtherLeaf."""
        assert isinstance(classify_node(value), OtherLeaf)

    def test_object_branch_nodes_stringify_keys(self):
        """ObjectBranch.nodes() yields string keys in document order."""
        nodes = list(ObjectBranch({1: "one", "two": {"x": "y"}}).nodes())

        assert [key for key, _ in nodes] == ["1", "two"]
        assert nodes[0][1] == StringLeaf("one")
        assert isinstance(nodes[1][1], ObjectBranch)


@pytest.mark.unit
class TestFallbackDefaults:
    """Tests for fallback defaults."""

    def test_default_indicator_format(self):
        """Default indicator appends the default locale in brackets."""
        assert default_indicator_format("Hello", "en") == "Hello [en]"

    def test_fallback_options_defaults(self):
        """Fallback is disabled by default and uses the default indicator."""
        options = FallbackOptions()

        assert options.enabled is False
        assert options.show_indicator is False
        assert options.apply_on_dev is False
        assert options.should_show_indicator is None
        assert options.indicator_format is default_indicator_format
