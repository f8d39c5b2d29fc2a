"""Property sources: turn files into flat PropertyBags.

- ``PropertiesSource`` reads ``.properties`` files (repeated keys -> lists).
- ``IniSource`` reads ``.ini`` files (section names become key prefixes).

All sources satisfy the ``PropertySource`` Protocol structurally.
"""

from __future__ import annotations

import re
from pathlib import Path

from simple_naming.errors import ConfigurationError
from simple_naming.protocols import PropertySource
from simple_naming.sources.ini import IniSource
from simple_naming.sources.properties import PropertiesSource, parse_properties

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "IniSource",
    "PropertiesSource",
    "parse_properties",
    "source_for",
]

SUPPORTED_EXTENSIONS = (".properties", ".ini")


def source_for(path: Path, delimiter: str) -> PropertySource | None:
    """Return the source able to read ``path``, or None for other extensions.

    Args:
        path:      File to be read.
        delimiter: The configured delimiter; joins ``.ini`` section and key.

    Raises:
        ConfigurationError: For an ``.ini`` file when the delimiter is a
            regular expression rather than literal text.
    """
    suffix = Path(path).suffix
    if suffix == ".properties":
        return PropertiesSource()
    if suffix == ".ini":
        if len(delimiter) > 1 and re.escape(delimiter) != delimiter:
            msg = f"Cannot join .ini sections with pattern delimiter {delimiter!r}"
            raise ConfigurationError(msg)
        return IniSource(delimiter)
    return None
