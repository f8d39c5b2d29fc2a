"""Exception taxonomy for simple-naming.

Every error raised by the loader derives from ``NamingError`` so callers can
catch the whole family with one clause.  All of them are fatal to the current
load call; nothing is retried and no partial result is returned.

A declared type without a registered converter is deliberately NOT an error:
the raw value is passed through unconverted.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigurationError",
    "ConverterResolutionError",
    "NamingError",
    "StructuralClashError",
    "UnsupportedOperationError",
]


class NamingError(Exception):
    """Base class for all simple-naming errors."""


class ConfigurationError(NamingError, ValueError):
    """The loader configuration is missing a mandatory option or is invalid."""


class StructuralClashError(NamingError):
    """A path segment is required as a Branch but holds a Leaf, or vice versa.

    Attributes:
        segment: The name of the offending path segment.
        value:   The object currently occupying ``segment``.
    """

    def __init__(self, segment: str, value: Any) -> None:
        self.segment = segment
        self.value = value
        super().__init__(
            f"Illegal branch/leaf clash at segment {segment!r}: found {value!r}"
        )


class ConverterResolutionError(NamingError):
    """An explicitly named converter could not be found, accessed or instantiated.

    Attributes:
        identifier: The converter identifier as written in the property bag.
    """

    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        super().__init__(f"Unable to {reason} converter {identifier!r}")


class UnsupportedOperationError(NamingError, NotImplementedError):
    """The bag describes a whole-object definition that cannot be placed."""
