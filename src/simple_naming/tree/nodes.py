"""TypeNode dataclass and NodeKind StrEnum for naming-tree materialization.

Provides the transient descriptor built for every "type" pseudo-attribute
found in a property bag, plus the reserved attribute names shared by the
binder and the converters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "CONVERTER_KEY",
    "ROOT_PATH",
    "TYPE_KEY",
    "VALUE_KEY",
    "NodeKind",
    "TypeNode",
]

# Reserved pseudo-attribute marking its owning path as a typed object.
TYPE_KEY = "type"

# Optional attribute naming an explicit converter for a typed node.
CONVERTER_KEY = "converter"

# Attribute under which a scalar typed leaf's raw value is accumulated.
VALUE_KEY = "value_to_convert"

# Owning path of a bag whose bare "type" key makes the whole bag one object.
# No real node path can be empty: a delimiter match needs text on both sides.
ROOT_PATH = ""


class NodeKind(StrEnum):
    """The two kinds of node a naming tree holds.

    - BRANCH -> "branch" : container with named children
    - LEAF   -> "leaf"   : bound value, no children
    """

    BRANCH = auto()
    LEAF = auto()


@dataclass(slots=True)
class TypeNode:
    """A typed node discovered in one bag, accumulating its attributes.

    Attributes:
        path:       Owning node path, or ``ROOT_PATH`` for a whole-bag object.
        type_name:  Declared type name (the pseudo-attribute's value).
        attributes: Accumulated bag.  Always holds ``type``; scalar leaves add
                    ``VALUE_KEY``, composite objects add their attributes.
    """

    path: str
    type_name: str
    attributes: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.attributes.setdefault(TYPE_KEY, self.type_name)

    @property
    def is_root(self) -> bool:
        """True when the whole bag describes this one object."""
        return self.path == ROOT_PATH

    @property
    def converter(self) -> str | None:
        """Explicit converter identifier, if the bag names one."""
        value = self.attributes.get(CONVERTER_KEY)
        return value if isinstance(value, str) else None
