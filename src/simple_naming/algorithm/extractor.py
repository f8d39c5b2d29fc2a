"""TypeNodeExtractor: first pass over a property bag.

Finds every ``type`` pseudo-attribute and returns a fresh ``TypeNode`` per
owning path.  This pass must complete before any key is classified, because
classification asks "is this key (or its parent) a typed node?" against the
full, fixed set of node paths.
"""

from __future__ import annotations

from collections.abc import Mapping

from simple_naming.algorithm.paths import NamespacePathResolver
from simple_naming.protocols import PropertyValue
from simple_naming.tree.nodes import TypeNode

__all__ = ["TypeNodeExtractor"]


def _type_name(value: PropertyValue) -> str:
    # A repeated "type" key keeps its last declaration.
    if isinstance(value, list):
        return value[-1] if value else ""
    return value


class TypeNodeExtractor:
    """Discovers typed nodes in one bag.

    Example::

        extractor = TypeNodeExtractor(NamespacePathResolver("."))
        nodes = extractor.extract({"db.type": "int", "db": "42"})
        nodes["db"].type_name   # "int"
    """

    def __init__(self, resolver: NamespacePathResolver) -> None:
        self._resolver = resolver

    def extract(self, bag: Mapping[str, PropertyValue]) -> dict[str, TypeNode]:
        """Map each owning node path (or ``ROOT_PATH``) to a new ``TypeNode``.

        The result preserves the order in which declarations appear in ``bag``.
        """
        nodes: dict[str, TypeNode] = {}
        for key, value in bag.items():
            declaration = self._resolver.type_declaration(key)
            if declaration is None:
                continue
            type_name = _type_name(value)
            nodes[declaration.owner] = TypeNode(
                path=declaration.owner, type_name=type_name
            )
        return nodes
