"""ConverterDispatch: picks a converter for a typed node and applies it.

Resolution order:
1. An explicit ``converter`` attribute in the bag -> ``registry.resolve()``;
   failures raise ``ConverterResolutionError``.
2. Otherwise the declared type name -> ``registry.lookup()``; a miss passes
   the raw ``VALUE_KEY`` entry through unconverted.

A ``VALUE_KEY`` entry holding a list fans out: the converter runs once per
element, each with a fresh single-entry bag, and the results keep input order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from simple_naming.converters.registry import ConverterRegistry
from simple_naming.protocols import Converter
from simple_naming.tree.nodes import CONVERTER_KEY, VALUE_KEY

__all__ = ["ConverterDispatch"]

logger = logging.getLogger(__name__)


class ConverterDispatch:
    """Applies converters from a ``ConverterRegistry``."""

    def __init__(self, registry: ConverterRegistry) -> None:
        self._registry = registry

    def convert(self, bag: Mapping[str, Any], type_name: str) -> Any:
        """Convert one typed node's accumulated bag.

        Args:
            bag:       The node's attributes (``type``, ``VALUE_KEY`` and/or
                       composite attributes, optionally ``converter``).
            type_name: The declared type name.

        Returns:
            The converted value, an ordered list of converted values for a
            multi-valued input, or the raw value when no converter is known.

        Raises:
            ConverterResolutionError: If an explicit converter cannot be
                resolved.  Converter exceptions propagate unmodified.
        """
        converter = self._select(bag, type_name)
        if converter is None:
            if VALUE_KEY not in bag:
                logger.warning(
                    "No converter registered for composite type %r; "
                    "binding the raw value",
                    type_name,
                )
            else:
                logger.debug("No converter for type %r, passing through", type_name)
            return bag.get(VALUE_KEY)

        values = bag.get(VALUE_KEY)
        if isinstance(values, list):
            return [converter.convert({VALUE_KEY: value}, type_name) for value in values]
        return converter.convert(bag, type_name)

    def _select(self, bag: Mapping[str, Any], type_name: str) -> Converter | None:
        identifier = bag.get(CONVERTER_KEY)
        if identifier:
            return self._registry.resolve(str(identifier))
        return self._registry.lookup(type_name)
