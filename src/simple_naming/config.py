"""LoaderConfig: immutable configuration for the naming-tree loader.

LoaderConfig is a frozen (immutable) dataclass holding the delimiter used to
segment keys, the optional colon-replacement token for filesystem names, and
the converter registry consulted for typed nodes.  The registry is an
explicit value owned by the caller; there is no process-wide registry.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from simple_naming.converters.builtin import default_registry
from simple_naming.converters.registry import ConverterRegistry
from simple_naming.errors import ConfigurationError

__all__ = ["COLON_REPLACE_OPTION", "DELIMITER_OPTION", "LoaderConfig"]

# Option names understood by LoaderConfig.from_environment().
DELIMITER_OPTION = "simple_naming.delimiter"
COLON_REPLACE_OPTION = "simple_naming.colon.replace"

# Reserved separator of the naming system, encoded on disk by colon_replace.
_RESERVED_SEPARATOR = ":"


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Immutable configuration for ``NodeBinder`` and ``Loader``.

    Attributes:
        delimiter: Separator segmenting composite keys into path segments.
            Mandatory; omitting it raises ``ConfigurationError``.  A single character is taken literally;
            anything longer is a regular expression (e.g. ``r"\\.|/"``).
        colon_replace: Token that stands for ``":"`` in directory and file
            names (``":"`` is not portable on every filesystem).  ``None``
            disables the substitution.
        converters: Registry consulted for typed nodes.  Defaults to a fresh
            ``default_registry()``.
    """

    # Empty means "not given"; __post_init__ rejects it.
    delimiter: str = ""
    colon_replace: str | None = None
    converters: ConverterRegistry = field(default_factory=default_registry)

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or not self.delimiter:
            msg = f"The option {DELIMITER_OPTION!r} is mandatory."
            raise ConfigurationError(msg)
        if len(self.delimiter) > 1:
            try:
                re.compile(self.delimiter)
            except re.error as exc:
                msg = f"Invalid delimiter pattern {self.delimiter!r}: {exc}"
                raise ConfigurationError(msg) from exc
        if self.colon_replace == "":
            msg = "colon_replace must be a non-empty string or None"
            raise ConfigurationError(msg)

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str],
        converters: ConverterRegistry | None = None,
    ) -> LoaderConfig:
        """Build a config from a flat option table.

        Args:
            env:        Mapping holding ``simple_naming.delimiter`` and
                        optionally ``simple_naming.colon.replace``.
            converters: Registry to use.  Defaults to ``default_registry()``.

        Raises:
            ConfigurationError: If the delimiter option is absent.
        """
        if DELIMITER_OPTION not in env:
            msg = f"The option {DELIMITER_OPTION!r} is mandatory."
            raise ConfigurationError(msg)
        return cls(
            delimiter=env[DELIMITER_OPTION],
            colon_replace=env.get(COLON_REPLACE_OPTION),
            converters=converters if converters is not None else default_registry(),
        )

    def replace_colons(self, name: str) -> str:
        """Substitute the colon-replacement token in ``name`` back to ``":"``."""
        if self.colon_replace is None:
            return name
        return name.replace(self.colon_replace, _RESERVED_SEPARATOR)
