"""Builtin converters for common scalar types and plain composite objects.

All builtins satisfy the ``Converter`` Protocol structurally.  Scalar
converters read the raw string stored under ``VALUE_KEY``; the ``dict``
converter returns a composite object's attributes as a plain dict.

``default_registry()`` returns a NEW registry on every call so that callers
can extend it without affecting anyone else.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from simple_naming.converters.registry import ConverterRegistry
from simple_naming.tree.nodes import CONVERTER_KEY, TYPE_KEY, VALUE_KEY

__all__ = [
    "DateConverter",
    "DateTimeConverter",
    "MappingConverter",
    "ScalarConverter",
    "default_registry",
    "parse_bool",
]

# Optional attribute carrying a strptime() format for date/datetime values.
FORMAT_KEY = "format"

_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0"})


def _raw_value(bag: Mapping[str, Any], type_name: str) -> str:
    value = bag.get(VALUE_KEY)
    if value is None:
        msg = f"No value to convert for type {type_name!r}"
        raise ValueError(msg)
    return str(value).strip()


def parse_bool(text: str) -> bool:
    """Parse true/false, yes/no, on/off or 1/0, case-insensitively."""
    lowered = text.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    msg = f"Not a boolean: {text!r}"
    raise ValueError(msg)


def _parse_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        msg = f"Not a decimal: {text!r}"
        raise ValueError(msg) from exc


class ScalarConverter:
    """Applies a one-argument parser to the raw value.

    Args:
        parse: Callable turning the stripped raw string into a value.  Its
            exceptions propagate unmodified.
    """

    def __init__(self, parse: Callable[[str], Any]) -> None:
        self._parse = parse

    def convert(self, bag: Mapping[str, Any], type_name: str) -> Any:
        return self._parse(_raw_value(bag, type_name))


class DateTimeConverter:
    """Parses ISO-8601 datetimes, or ``strptime`` with a ``format`` attribute."""

    def convert(self, bag: Mapping[str, Any], type_name: str) -> datetime:
        text = _raw_value(bag, type_name)
        fmt = bag.get(FORMAT_KEY)
        if fmt:
            return datetime.strptime(text, fmt)
        return datetime.fromisoformat(text)


class DateConverter:
    """Parses ISO-8601 dates, or ``strptime`` with a ``format`` attribute."""

    def convert(self, bag: Mapping[str, Any], type_name: str) -> date:
        text = _raw_value(bag, type_name)
        fmt = bag.get(FORMAT_KEY)
        if fmt:
            return datetime.strptime(text, fmt).date()
        return date.fromisoformat(text)


class MappingConverter:
    """Returns a composite object's attributes as a plain dict.

    The reserved ``type`` and ``converter`` attributes are dropped.
    """

    def convert(self, bag: Mapping[str, Any], type_name: str) -> dict[str, Any]:
        return {
            key: value
            for key, value in bag.items()
            if key not in (TYPE_KEY, CONVERTER_KEY)
        }


def default_registry() -> ConverterRegistry:
    """Return a fresh registry holding the builtin converters."""
    registry = ConverterRegistry()
    registry.register("int", lambda: ScalarConverter(int))
    registry.register("float", lambda: ScalarConverter(float))
    registry.register("decimal", lambda: ScalarConverter(_parse_decimal))
    registry.register("str", lambda: ScalarConverter(str))
    registry.register("bool", lambda: ScalarConverter(parse_bool))
    registry.register("date", DateConverter)
    registry.register("datetime", DateTimeConverter)
    registry.register("dict", MappingConverter)
    return registry
