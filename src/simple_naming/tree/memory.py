"""MemoryBranch: an in-memory naming tree.

Each ``MemoryBranch`` holds an insertion-ordered mapping of child names to
either nested ``MemoryBranch`` instances (branches) or arbitrary bound values
(leaves).  It satisfies the ``NamingTree`` Protocol structurally.

Example::

    root = MemoryBranch()
    db = root.create_child("db")
    db.bind("port", 5432)
    root.to_dict()   # {"db": {"port": 5432}}
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from simple_naming.errors import StructuralClashError
from simple_naming.tree.nodes import NodeKind

__all__ = ["MemoryBranch"]


class MemoryBranch:
    """A container node of an in-memory naming tree.

    Args:
        name: This branch's own name, informational only.  The root is "".
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._children: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"MemoryBranch({self.name!r}, children={list(self._children)!r})"

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    # ------------------------------------------------------------------
    # NamingTree Protocol surface
    # ------------------------------------------------------------------

    def lookup(self, name: str) -> Any:
        """Return the child bound under ``name``, or None."""
        return self._children.get(name)

    def create_child(self, name: str) -> MemoryBranch:
        """Create and return a new empty branch named ``name``.

        Raises:
            StructuralClashError: If ``name`` is already occupied.
        """
        if name in self._children:
            raise StructuralClashError(name, self._children[name])
        child = MemoryBranch(name)
        self._children[name] = child
        return child

    def bind(self, name: str, value: Any) -> None:
        """Bind ``value`` as a leaf, overwriting a previous leaf.

        Raises:
            StructuralClashError: If ``name`` holds a branch.
        """
        existing = self._children.get(name)
        if isinstance(existing, MemoryBranch):
            raise StructuralClashError(name, existing)
        self._children[name] = value

    def rebind(self, name: str, value: Any) -> None:
        """Bind ``value`` under ``name`` whatever currently occupies it."""
        self._children[name] = value

    # ------------------------------------------------------------------
    # Inspection helpers
    # ------------------------------------------------------------------

    def kind(self, name: str) -> NodeKind | None:
        """Return the kind of the child named ``name``, or None if absent."""
        if name not in self._children:
            return None
        if isinstance(self._children[name], MemoryBranch):
            return NodeKind.BRANCH
        return NodeKind.LEAF

    def names(self) -> list[str]:
        """Child names in insertion order."""
        return list(self._children)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot the subtree as nested plain dicts (branches become dicts)."""
        return {
            name: child.to_dict() if isinstance(child, MemoryBranch) else child
            for name, child in self._children.items()
        }
