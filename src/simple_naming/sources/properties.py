"""PropertiesSource: reads ``.properties`` files into a flat PropertyBag.

Supported syntax:
- ``#`` and ``!`` start comment lines; blank lines are ignored.
- The key ends at the first unescaped ``=``, ``:`` or whitespace; the
  separator and surrounding whitespace are dropped.
- A trailing odd backslash continues the logical line onto the next physical
  line (leading whitespace of the continuation is dropped).
- Escapes ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` are decoded; any
  other escaped character stands for itself.

A key that appears more than once becomes an ordered list of its values.
This is how multi-valued inputs reach the converters for fan-out.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from simple_naming.protocols import PropertyBag

__all__ = ["PropertiesSource", "parse_properties"]

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"


def _logical_lines(lines: Iterable[str]) -> Iterator[str]:
    pending = ""
    for raw in lines:
        line = raw.rstrip("\r\n")
        stripped = line.lstrip() if pending else line
        if not pending and (not stripped.strip() or stripped.lstrip()[0] in "#!"):
            continue
        trailing = len(stripped) - len(stripped.rstrip("\\"))
        if trailing % 2 == 1:
            pending += stripped[:-1]
            continue
        yield pending + stripped
        pending = ""
    if pending:
        yield pending


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 >= len(text):
            out.append(ch)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u" and i + 6 <= len(text):
            out.append(chr(int(text[i + 2 : i + 6], 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    line = line.lstrip()
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch.isspace():
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip()
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip()
    return _unescape(key), _unescape(rest)


def parse_properties(lines: Iterable[str]) -> PropertyBag:
    """Parse ``.properties`` text lines into an ordered bag."""
    bag: PropertyBag = {}
    for line in _logical_lines(lines):
        key, value = _split_entry(line)
        existing = bag.get(key)
        if existing is None:
            bag[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            bag[key] = [existing, value]
    return bag


class PropertiesSource:
    """Reads a ``.properties`` file.  Satisfies the ``PropertySource`` Protocol."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, path: Path) -> PropertyBag:
        with Path(path).open(encoding=self.encoding) as handle:
            return parse_properties(handle)
