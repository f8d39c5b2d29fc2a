"""NodeBinder: materializes one flat property bag into a naming tree.

This is the central wiring layer between key segmentation, typed-node
discovery, branch creation and conversion.

Algorithm (per bag):
1. ``TypeNodeExtractor`` discovers every ``type`` pseudo-attribute and
   yields a fixed set of typed node paths.
2. A single pass over the remaining keys, in bag order, classifies each:
   - a bare ``type`` key exists -> the whole bag is one object; the key goes
     into that object's attributes unmodified;
   - the key IS a typed node path -> its value is the node's ``VALUE_KEY``;
   - the key's parent path is a typed node path -> the key's leaf name is an
     attribute of that composite node;
   - otherwise -> a direct value, bound as a leaf at the key's segmented path.
3. Only after the pass, every typed node is converted and bound: a whole-bag
   object replaces whatever occupies its own name in the parent branch; any
   other node is bound at its own path under the target branch.

Binding the same final leaf twice within one pass overwrites: last write wins.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from simple_naming.algorithm.extractor import TypeNodeExtractor
from simple_naming.algorithm.paths import NamespacePathResolver
from simple_naming.algorithm.subcontexts import SubcontextResolver
from simple_naming.config import LoaderConfig
from simple_naming.converters.dispatch import ConverterDispatch
from simple_naming.errors import UnsupportedOperationError
from simple_naming.protocols import NamingTree, PropertyValue
from simple_naming.tree.nodes import ROOT_PATH, VALUE_KEY, TypeNode

__all__ = ["BindReport", "NodeBinder"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BindReport:
    """Summary of one ``NodeBinder.bind()`` call.

    Attributes:
        bound_keys:       Keys bound directly as raw leaves, in bag order.
        converted_nodes:  Typed node paths converted and bound, in discovery
                          order.  The whole-bag object appears as its name.
        created_branches: Number of branches created during the call.
    """

    bound_keys: list[str]
    converted_nodes: list[str]
    created_branches: int


class NodeBinder:
    """Binds property bags into a naming tree.

    Example::

        binder = NodeBinder(LoaderConfig(delimiter="."))
        root = MemoryBranch()
        binder.bind({"db.type": "int", "db": "42", "a.b": "x"}, root)
        root.to_dict()   # {"a": {"b": "x"}, "db": 42}
    """

    def __init__(self, config: LoaderConfig) -> None:
        self._config = config
        self._resolver = NamespacePathResolver(config.delimiter)
        self._extractor = TypeNodeExtractor(self._resolver)
        self._dispatch = ConverterDispatch(config.converters)

    @property
    def resolver(self) -> NamespacePathResolver:
        return self._resolver

    def bind(
        self,
        bag: Mapping[str, PropertyValue],
        target: NamingTree,
        parent: NamingTree | None = None,
        name: str = "",
    ) -> BindReport:
        """Materialize ``bag`` under ``target``.

        Args:
            bag:    Flat, ordered property bag.
            target: Branch receiving direct keys and namespaced typed nodes.
            parent: Branch holding the bag's own logical name; required only
                    when the bag carries a bare ``type`` key.
            name:   The bag's own logical name inside ``parent``.

        Returns:
            A ``BindReport`` describing what was bound.

        Raises:
            StructuralClashError: On a branch/leaf collision.
            ConverterResolutionError: If an explicit converter is unusable.
            UnsupportedOperationError: If the bag is one whole object but no
                ``parent``/``name`` was given to place it.
        """
        nodes = self._extractor.extract(bag)
        root = nodes.get(ROOT_PATH)
        if root is not None and (parent is None or not name):
            msg = (
                "A bag with a bare 'type' key describes one whole object and "
                "needs a parent branch and a name to bind it under"
            )
            raise UnsupportedOperationError(msg)

        subcontexts = SubcontextResolver()
        bound_keys: list[str] = []

        # Pass 2: classify. Node bags fill up incrementally across the pass.
        for key, value in bag.items():
            if self._resolver.is_type_pseudo_attribute(key):
                continue
            if root is not None:
                root.attributes[key] = value
                continue
            path = self._resolver.normalize(key)
            if path in nodes:
                nodes[path].attributes[VALUE_KEY] = value
                continue
            match = self._resolver.last_delimiter_match(key)
            if match is not None and match.parent_path in nodes:
                nodes[match.parent_path].attributes[match.leaf_name] = value
                continue
            logger.debug("Binding %r as a raw leaf", key)
            self._put(target, key, value, subcontexts)
            bound_keys.append(key)

        # Pass 3: convert and bind every typed node.
        converted: list[str] = []
        for node in nodes.values():
            value = self._convert(node)
            if node.is_root and parent is not None:
                logger.debug("Rebinding whole object %r (%s)", name, node.type_name)
                parent.rebind(name, value)
                converted.append(name)
            else:
                logger.debug("Binding typed node %r (%s)", node.path, node.type_name)
                self._put(target, node.path, value, subcontexts)
                converted.append(node.path)

        return BindReport(
            bound_keys=bound_keys,
            converted_nodes=converted,
            created_branches=subcontexts.created,
        )

    def _convert(self, node: TypeNode) -> Any:
        return self._dispatch.convert(node.attributes, node.type_name)

    def _put(
        self,
        target: NamingTree,
        key: str,
        value: Any,
        subcontexts: SubcontextResolver,
    ) -> None:
        segments = self._resolver.split(key) or [key]
        branch = subcontexts.resolve(segments, target)
        branch.bind(segments[-1], value)
