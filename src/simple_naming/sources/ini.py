"""IniSource: reads ``.ini`` files into a flat PropertyBag.

Each key inside a section becomes ``<section><delimiter><key>``, so a section
maps onto a branch (or a typed node, when it holds a ``type`` key).  Keys of
the ``DEFAULT`` section stay bare and are NOT inherited by other sections.
Key case is preserved.
"""

from __future__ import annotations

import configparser
from pathlib import Path

from simple_naming.protocols import PropertyBag

__all__ = ["IniSource"]

_BARE_SECTION = "DEFAULT"

# configparser's own default-section handling is switched off by pointing it
# at a name no file can contain, so "DEFAULT" reads like any other section.
_NO_DEFAULT_SECTION = "\x00"


class IniSource:
    """Reads an ``.ini`` file.  Satisfies the ``PropertySource`` Protocol.

    Args:
        delimiter: Joined between section name and key.  Must be the literal
            delimiter text, even when the loader's delimiter is a pattern.
        encoding:  File encoding.
    """

    def __init__(self, delimiter: str, encoding: str = "utf-8") -> None:
        self.delimiter = delimiter
        self.encoding = encoding

    def read(self, path: Path) -> PropertyBag:
        parser = configparser.ConfigParser(
            interpolation=None, default_section=_NO_DEFAULT_SECTION
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        with Path(path).open(encoding=self.encoding) as handle:
            parser.read_file(handle)

        bag: PropertyBag = {}
        for section in parser.sections():
            prefix = "" if section == _BARE_SECTION else f"{section}{self.delimiter}"
            for key, value in parser.items(section, raw=True):
                bag[f"{prefix}{key}"] = value
        return bag
