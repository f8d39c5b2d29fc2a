"""Tests for NodeBinder — the bag materializer.

Covers:
- Untyped bags: every key a leaf at its segmented path, no extra branches
- Whole-object bags (bare "type"): one object rebound at the bag's name
- Scalar typed leaves ("db.type" + "db")
- Composite typed nodes ("ds.type" + "ds.url" ...) next to plain keys
- Idempotence across repeated loads
- Branch/leaf clash detection in both directions
- List fan-out, pass-through for unknown types, explicit converters
- Classification order: all keys seen before any conversion
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from simple_naming import (
    ConverterRegistry,
    ConverterResolutionError,
    LoaderConfig,
    MemoryBranch,
    StructuralClashError,
    UnsupportedOperationError,
)
from simple_naming.algorithm.binder import NodeBinder
from simple_naming.tree.nodes import VALUE_KEY, NodeKind

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def binder(config: LoaderConfig) -> NodeBinder:
    """A binder over the shared dot-delimited config."""
    return NodeBinder(config)


def _count_branches(branch: MemoryBranch) -> int:
    total = 0
    for name in branch.names():
        child = branch.lookup(name)
        if isinstance(child, MemoryBranch):
            total += 1 + _count_branches(child)
    return total


# ---------------------------------------------------------------------------
# Untyped bags
# ---------------------------------------------------------------------------


class TestUntypedBags:
    def test_flat_keys_become_leaves(self, binder: NodeBinder, root: MemoryBranch) -> None:
        binder.bind({"a": "1", "b": "2"}, root)
        assert root.to_dict() == {"a": "1", "b": "2"}

    def test_delimited_keys_become_nested_leaves(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        binder.bind({"x.y.z": "deep", "x.w": "shallow"}, root)
        assert root.to_dict() == {"x": {"y": {"z": "deep"}, "w": "shallow"}}

    def test_no_extra_branches(self, binder: NodeBinder, root: MemoryBranch) -> None:
        """Only the branches implied by the segments exist: x and x.y."""
        binder.bind({"x.y.z": "1", "x.y.q": "2", "x.w": "3", "top": "4"}, root)
        assert _count_branches(root) == 2

    def test_values_are_not_converted(self, binder: NodeBinder, root: MemoryBranch) -> None:
        binder.bind({"port": "5432"}, root)
        assert root.lookup("port") == "5432"

    def test_report_lists_bound_keys(self, binder: NodeBinder, root: MemoryBranch) -> None:
        report = binder.bind({"a.b": "1", "c": "2"}, root)
        assert report.bound_keys == ["a.b", "c"]
        assert report.converted_nodes == []
        assert report.created_branches == 1

    def test_duplicate_leaf_last_write_wins(
        self, root: MemoryBranch, registry: ConverterRegistry
    ) -> None:
        """With a pattern delimiter, "a.b" and "a/b" reach the same leaf."""
        binder = NodeBinder(LoaderConfig(delimiter=r"\.|/", converters=registry))
        binder.bind({"a.b": "first", "a/b": "second"}, root)
        assert root.to_dict() == {"a": {"b": "second"}}


# ---------------------------------------------------------------------------
# Whole-object bags
# ---------------------------------------------------------------------------


class TestWholeObjectBag:
    def test_rebinds_one_object_at_bag_name(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        binder.bind(
            {"type": "Widget", "user": "x", "password": "y"},
            root,
            parent=root,
            name="widget",
        )
        widget = root.lookup("widget")
        assert type(widget).__name__ == "Widget"
        assert widget.type_name == "Widget"
        assert widget.attributes == {"user": "x", "password": "y"}

    def test_no_attribute_branches_created(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        binder.bind(
            {"type": "Widget", "user": "x", "password": "y"},
            root,
            parent=root,
            name="widget",
        )
        assert root.names() == ["widget"]
        assert "user" not in root
        assert "password" not in root

    def test_overwrites_placeholder_branch(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        placeholder = root.create_child("ds")
        binder.bind({"type": "Widget", "url": "u"}, placeholder, parent=root, name="ds")
        assert root.kind("ds") == NodeKind.LEAF
        assert root.lookup("ds").attributes == {"url": "u"}

    def test_attribute_keys_kept_unmodified(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        binder.bind({"type": "Widget", "pool.size": "5"}, root, parent=root, name="w")
        assert root.lookup("w").attributes == {"pool.size": "5"}

    def test_requires_parent_and_name(self, binder: NodeBinder, root: MemoryBranch) -> None:
        with pytest.raises(UnsupportedOperationError):
            binder.bind({"type": "Widget", "user": "x"}, root)
        assert len(root) == 0

    def test_report_names_the_object(self, binder: NodeBinder, root: MemoryBranch) -> None:
        report = binder.bind({"type": "Widget"}, root, parent=root, name="w")
        assert report.converted_nodes == ["w"]
        assert report.bound_keys == []


# ---------------------------------------------------------------------------
# Typed nodes
# ---------------------------------------------------------------------------


class TestScalarTypedLeaf:
    def test_integer_leaf(self, binder: NodeBinder, root: MemoryBranch) -> None:
        binder.bind({"db.type": "Integer", "db": "42"}, root)
        assert root.to_dict() == {"db": 42}
        assert root.kind("db") == NodeKind.LEAF

    def test_value_before_type_declaration(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        """The extractor runs first, so key order does not matter."""
        binder.bind({"db": "42", "db.type": "Integer"}, root)
        assert root.lookup("db") == 42

    def test_nested_typed_leaf(self, binder: NodeBinder, root: MemoryBranch) -> None:
        binder.bind({"a.b.port.type": "int", "a.b.port": "8080"}, root)
        assert root.to_dict() == {"a": {"b": {"port": 8080}}}


class TestCompositeTypedNode:
    BAG = {
        "ds.url": "u",
        "ds.user": "v",
        "ds.type": "DataSource",
        "timeout": "30",
    }

    def test_composite_is_one_object(self, binder: NodeBinder, root: MemoryBranch) -> None:
        binder.bind(self.BAG, root)
        ds = root.lookup("ds")
        assert root.kind("ds") == NodeKind.LEAF
        assert ds.type_name == "DataSource"
        assert ds.attributes == {"url": "u", "user": "v"}

    def test_plain_sibling_unconverted(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        binder.bind(self.BAG, root)
        assert root.lookup("timeout") == "30"

    def test_report(self, binder: NodeBinder, root: MemoryBranch) -> None:
        report = binder.bind(self.BAG, root)
        assert report.bound_keys == ["timeout"]
        assert report.converted_nodes == ["ds"]
        assert report.created_branches == 0

    def test_doubled_delimiter_attribute(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        """"a..b" names the same attribute as "a.b"."""
        binder.bind({"a.type": "dict", "a..b": "x"}, root)
        assert root.kind("a") == NodeKind.LEAF
        assert root.lookup("a") == {"b": "x"}

    def test_trailing_delimiter_value_key(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        binder.bind({"port.type": "int", "port.": "5"}, root)
        assert root.lookup("port") == 5

    def test_deeper_keys_are_not_attributes(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        """Only direct children of a node path are attributes; ds.pool.max is not."""
        with pytest.raises(StructuralClashError):
            binder.bind({"ds.type": "DataSource", "ds.pool.max": "5"}, root)


class TestConversionDispatch:
    def test_unknown_type_passes_raw_value(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        binder.bind({"n.type": "NoSuchType", "n": "raw"}, root)
        assert root.lookup("n") == "raw"

    def test_fan_out_keeps_order(self, root: MemoryBranch) -> None:
        registry = ConverterRegistry()
        registry.register("Integer", _IntConverter)
        binder = NodeBinder(LoaderConfig(delimiter=".", converters=registry))
        binder.bind({"ports.type": "Integer", "ports": ["3", "1", "2"]}, root)
        assert root.lookup("ports") == [3, 1, 2]

    def test_explicit_converter_override(self, root: MemoryBranch) -> None:
        """The "converter" attribute wins over the declared type name."""
        registry = ConverterRegistry()
        registry.register("upper", _UpperConverter)
        binder = NodeBinder(LoaderConfig(delimiter=".", converters=registry))
        binder.bind({"w.type": "Text", "w.converter": "upper", "w": "abc"}, root)
        assert root.lookup("w") == "ABC"

    def test_unresolvable_explicit_converter(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        with pytest.raises(ConverterResolutionError):
            binder.bind(
                {"w.type": "Text", "w.converter": "unregistered", "w": "x"},
                root,
            )

    def test_import_path_converter_is_not_imported(
        self, binder: NodeBinder, root: MemoryBranch
    ) -> None:
        """A module path in "converter" is only ever a registry name."""
        with pytest.raises(ConverterResolutionError, match="find"):
            binder.bind({"x.type": "int", "x": "1", "x.converter": "os:getcwd"}, root)
        assert "x" not in root

    def test_converter_errors_propagate(self, binder: NodeBinder, root: MemoryBranch) -> None:
        with pytest.raises(ValueError):
            binder.bind({"db.type": "Integer", "db": "not-a-number"}, root)


# ---------------------------------------------------------------------------
# Idempotence and clashes
# ---------------------------------------------------------------------------


class TestIdempotence:
    def test_same_bag_twice(self, binder: NodeBinder, root: MemoryBranch) -> None:
        bag = {"a.b": "1", "db.type": "Integer", "db": "7", "ds.type": "Widget"}
        binder.bind(bag, root)
        first = root.to_dict()
        binder.bind(bag, root)
        assert root.to_dict() == first
        assert root.names() == ["a", "db", "ds"]

    def test_bags_share_branch(self, binder: NodeBinder, root: MemoryBranch) -> None:
        binder.bind({"app.name": "demo"}, root)
        binder.bind({"app.version": "1"}, root)
        assert root.to_dict() == {"app": {"name": "demo", "version": "1"}}


class TestClashes:
    def test_branch_below_leaf(self, binder: NodeBinder, root: MemoryBranch) -> None:
        binder.bind({"a": "leaf"}, root)
        with pytest.raises(StructuralClashError) as exc_info:
            binder.bind({"a.b": "x"}, root)
        assert exc_info.value.segment == "a"
        assert root.lookup("a") == "leaf"

    def test_leaf_over_branch(self, binder: NodeBinder, root: MemoryBranch) -> None:
        binder.bind({"a.b": "x"}, root)
        with pytest.raises(StructuralClashError):
            binder.bind({"a": "leaf"}, root)
        assert root.kind("a") == NodeKind.BRANCH

    def test_clash_within_one_bag(self, binder: NodeBinder, root: MemoryBranch) -> None:
        with pytest.raises(StructuralClashError):
            binder.bind({"a": "leaf", "a.b": "x"}, root)


# ---------------------------------------------------------------------------
# Helper converters
# ---------------------------------------------------------------------------


class _IntConverter:
    def convert(self, bag: Mapping[str, Any], type_name: str) -> int:
        return int(bag[VALUE_KEY])


class _UpperConverter:
    def convert(self, bag: Mapping[str, Any], type_name: str) -> str:
        return str(bag[VALUE_KEY]).upper()
