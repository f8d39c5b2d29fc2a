"""ConverterRegistry: explicit mapping from type name to converter factory.

The registry is a plain value built once by the caller and threaded through
``LoaderConfig``.  There is no process-wide registry and nothing registers
itself on import.

Two lookups are offered:
- ``lookup(type_name)`` — the declared-type path.  A miss returns None and the
  caller passes the raw value through; a miss is not an error.
- ``resolve(identifier)`` — the explicit-override path.  The identifier must
  name a registered factory; property files never import code.  Every failure
  raises ``ConverterResolutionError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from simple_naming.errors import ConverterResolutionError
from simple_naming.protocols import Converter

__all__ = ["ConverterFactory", "ConverterRegistry"]

logger = logging.getLogger(__name__)

# Zero-argument callable producing a converter (a class works).
ConverterFactory = Callable[[], Converter]


class ConverterRegistry:
    """Read-mostly registry of converter factories keyed by type name.

    Example::

        registry = ConverterRegistry()
        registry.register("upper", UpperConverter)
        registry.lookup("upper")     # a fresh UpperConverter
        registry.lookup("missing")   # None
    """

    def __init__(self, factories: dict[str, ConverterFactory] | None = None) -> None:
        self._factories: dict[str, ConverterFactory] = dict(factories or {})

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    @property
    def type_names(self) -> list[str]:
        """Registered type names in registration order."""
        return list(self._factories)

    def register(self, type_name: str, factory: ConverterFactory) -> None:
        """Register ``factory`` for ``type_name``, replacing any previous one."""
        self._factories[type_name] = factory

    def lookup(self, type_name: str) -> Converter | None:
        """Instantiate the converter registered for ``type_name``, or None."""
        factory = self._factories.get(type_name)
        if factory is None:
            return None
        return factory()

    def resolve(self, identifier: str) -> Converter:
        """Resolve an explicit converter identifier to a converter instance.

        Raises:
            ConverterResolutionError: If no factory is registered under
                ``identifier``, the factory is not callable or does not
                produce a ``Converter``, or the factory raises.
        """
        factory: Any = self._factories.get(identifier)
        if factory is None:
            raise ConverterResolutionError(identifier, "find")
        if not callable(factory):
            raise ConverterResolutionError(identifier, "access")
        try:
            converter = factory()
        except Exception as exc:
            raise ConverterResolutionError(identifier, "instantiate") from exc
        if not isinstance(converter, Converter):
            raise ConverterResolutionError(identifier, "access")
        logger.debug("Resolved explicit converter %r", identifier)
        return converter
