"""algorithm subpackage — public API for bag materialization.

Provides key segmentation, typed-node discovery, branch resolution and the
binder that ties them together.  Import from this module (not from
sub-modules directly) to stay on the stable public interface.

Example::

    from simple_naming import LoaderConfig, MemoryBranch
    from simple_naming.algorithm import NodeBinder

    root = MemoryBranch()
    NodeBinder(LoaderConfig(delimiter=".")).bind({"a.b": "x"}, root)
    # root.to_dict() == {"a": {"b": "x"}}
"""

from __future__ import annotations

from simple_naming.algorithm.binder import BindReport, NodeBinder
from simple_naming.algorithm.extractor import TypeNodeExtractor
from simple_naming.algorithm.paths import (
    DelimiterMatch,
    NamespacePathResolver,
    TypeDeclaration,
)
from simple_naming.algorithm.subcontexts import SubcontextResolver

__all__ = [
    "BindReport",
    "DelimiterMatch",
    "NamespacePathResolver",
    "NodeBinder",
    "SubcontextResolver",
    "TypeDeclaration",
    "TypeNodeExtractor",
]
