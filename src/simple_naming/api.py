"""Public API functions for simple-naming.

This module provides the two user-facing functions: load and
load_properties.  Each call creates a fresh Loader so that no state survives
between calls apart from the naming tree the caller passes in.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from simple_naming.config import LoaderConfig
from simple_naming.loader import Loader
from simple_naming.protocols import NamingTree, PropertyValue
from simple_naming.tree.memory import MemoryBranch

__all__ = ["load", "load_properties"]


def load(
    path: Path | str,
    config: LoaderConfig,
    tree: NamingTree | None = None,
) -> NamingTree:
    """Load a file or directory of property files into a naming tree.

    Args:
        path:   A ``.properties``/``.ini`` file or a directory of them.
        config: Loader configuration (delimiter, colon replacement, converters).
        tree:   Branch to load into.  A fresh ``MemoryBranch`` when None.

    Returns:
        The branch that was loaded into.
    """
    target = tree if tree is not None else MemoryBranch()
    Loader(config).load(path, target)
    return target


def load_properties(
    bag: Mapping[str, PropertyValue],
    config: LoaderConfig,
    tree: NamingTree | None = None,
    name: str = "",
) -> NamingTree:
    """Bind one flat property bag into a naming tree.

    Args:
        bag:    Flat, ordered mapping of keys to a string or list of strings.
        config: Loader configuration.
        tree:   Branch to bind into.  A fresh ``MemoryBranch`` when None.
        name:   The bag's own name in ``tree``.  Needed only when the bag
                carries a bare ``type`` key and so describes one object.

    Returns:
        The branch that was bound into.
    """
    target = tree if tree is not None else MemoryBranch()
    parent = target if name else None
    Loader(config).load_properties(bag, target, parent=parent, name=name)
    return target
