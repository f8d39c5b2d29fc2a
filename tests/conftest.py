"""Shared fixtures: fresh trees, configs and recording converters.

The converters here stand in for domain converters (connection descriptors,
beans).  They record every call so tests can assert what reached them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from simple_naming import ConverterRegistry, LoaderConfig, MemoryBranch, default_registry
from simple_naming.tree.nodes import VALUE_KEY


@dataclass(frozen=True)
class Widget:
    """A composite object built from a whole bag."""

    type_name: str
    attributes: dict[str, Any]


class WidgetConverter:
    """Builds a Widget from all attributes except ``type``."""

    def convert(self, bag: Mapping[str, Any], type_name: str) -> Widget:
        attrs = {k: v for k, v in bag.items() if k != "type"}
        return Widget(type_name=type_name, attributes=attrs)


class IntegerConverter:
    """Converts ``VALUE_KEY`` to int for the "Integer" type name."""

    def convert(self, bag: Mapping[str, Any], type_name: str) -> int:
        return int(bag[VALUE_KEY])


@dataclass
class RecordingConverter:
    """Records every (bag, type_name) it is called with and echoes the value."""

    calls: list[tuple[dict[str, Any], str]] = field(default_factory=list)

    def convert(self, bag: Mapping[str, Any], type_name: str) -> Any:
        self.calls.append((dict(bag), type_name))
        return f"converted:{bag.get(VALUE_KEY)}"


@pytest.fixture
def root() -> MemoryBranch:
    """A fresh, empty naming tree."""
    return MemoryBranch()


@pytest.fixture
def registry() -> ConverterRegistry:
    """Builtins plus Widget/DataSource/Integer converters."""
    registry = default_registry()
    registry.register("Widget", WidgetConverter)
    registry.register("DataSource", WidgetConverter)
    registry.register("Integer", IntegerConverter)
    return registry


@pytest.fixture
def config(registry: ConverterRegistry) -> LoaderConfig:
    """Dot-delimited config using the shared registry."""
    return LoaderConfig(delimiter=".", converters=registry)
