"""Simple naming - hierarchical naming trees from flat property files."""

from __future__ import annotations

from simple_naming.algorithm.binder import BindReport, NodeBinder
from simple_naming.api import load, load_properties
from simple_naming.config import LoaderConfig
from simple_naming.converters import ConverterRegistry, default_registry
from simple_naming.errors import (
    ConfigurationError,
    ConverterResolutionError,
    NamingError,
    StructuralClashError,
    UnsupportedOperationError,
)
from simple_naming.loader import Loader
from simple_naming.tree import MemoryBranch, NodeKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "BindReport",
    "ConfigurationError",
    "ConverterRegistry",
    "ConverterResolutionError",
    "Loader",
    "LoaderConfig",
    "MemoryBranch",
    "NamingError",
    "NodeBinder",
    "NodeKind",
    "StructuralClashError",
    "UnsupportedOperationError",
    "default_registry",
    "load",
    "load_properties",
]
