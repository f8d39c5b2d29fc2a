"""Structural protocols for the collaborators the loader consumes.

The naming tree, the converters and the property sources are extension
points.  Any class with conformant methods passes ``isinstance`` checks; no
base class is required.

Example::

    from simple_naming.protocols import Converter

    class UpperConverter:
        def convert(self, bag, type_name):
            return bag["value_to_convert"].upper()

    assert isinstance(UpperConverter(), Converter)  # structural conformance
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "Converter",
    "NamingTree",
    "PropertyBag",
    "PropertySource",
    "PropertyValue",
]

# A raw property value: one string, or an ordered list when a key repeats.
PropertyValue = str | list[str]

# One file's (or one node's) flat, insertion-ordered attributes.
PropertyBag = dict[str, PropertyValue]


@runtime_checkable
class NamingTree(Protocol):
    """A branch of a hierarchical naming tree.

    - ``lookup`` returns the child bound under ``name`` or ``None``.
    - ``create_child`` creates and returns a new branch; it fails when the
      name is occupied by an incompatible node.
    - ``bind`` inserts or overwrites a leaf.
    - ``rebind`` overwrites whatever occupies ``name``, branch or leaf.
    """

    def lookup(self, name: str) -> Any: ...

    def create_child(self, name: str) -> NamingTree: ...

    def bind(self, name: str, value: Any) -> None: ...

    def rebind(self, name: str, value: Any) -> None: ...


@runtime_checkable
class Converter(Protocol):
    """Turns an attribute bag plus a declared type name into a domain value.

    Scalar typed leaves arrive as a single-entry bag keyed by
    ``simple_naming.tree.nodes.VALUE_KEY``; composite objects arrive with
    their full attribute set.  Implementations must not mutate the naming
    tree.  Any exception they raise propagates to the caller unmodified.
    """

    def convert(self, bag: Mapping[str, Any], type_name: str) -> Any: ...


@runtime_checkable
class PropertySource(Protocol):
    """Reads one file into a flat, ordered ``PropertyBag``."""

    def read(self, path: Path) -> PropertyBag: ...
