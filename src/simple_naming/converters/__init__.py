"""Converters subpackage for simple-naming.

The registry is explicit: build one (``default_registry()`` gives the
builtins), register your own factories, and pass it in ``LoaderConfig``.

All converters satisfy the ``Converter`` Protocol structurally.
"""

from simple_naming.converters.builtin import (
    DateConverter,
    DateTimeConverter,
    MappingConverter,
    ScalarConverter,
    default_registry,
)
from simple_naming.converters.dispatch import ConverterDispatch
from simple_naming.converters.registry import ConverterFactory, ConverterRegistry

__all__ = [
    "ConverterDispatch",
    "ConverterFactory",
    "ConverterRegistry",
    "DateConverter",
    "DateTimeConverter",
    "MappingConverter",
    "ScalarConverter",
    "default_registry",
]
