"""Tree subpackage for naming-tree primitives.

Re-exports the public API for the tree module:
- TypeNode: transient descriptor of a typed node found in a property bag
- NodeKind: StrEnum of the two node kinds (BRANCH, LEAF)
- MemoryBranch: in-memory naming tree satisfying the NamingTree protocol
- ROOT_PATH / VALUE_KEY / TYPE_KEY / CONVERTER_KEY: reserved names
"""

from simple_naming.tree.memory import MemoryBranch
from simple_naming.tree.nodes import (
    CONVERTER_KEY,
    ROOT_PATH,
    TYPE_KEY,
    VALUE_KEY,
    NodeKind,
    TypeNode,
)

__all__ = [
    "CONVERTER_KEY",
    "ROOT_PATH",
    "TYPE_KEY",
    "VALUE_KEY",
    "MemoryBranch",
    "NodeKind",
    "TypeNode",
]
