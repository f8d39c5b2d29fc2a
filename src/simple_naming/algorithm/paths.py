"""NamespacePathResolver: pure key-segmentation logic.

Splits delimiter-structured property keys into path segments, locates the
last delimiter occurrence to separate a key's parent path from its leaf name,
and recognises the reserved ``type`` pseudo-attribute.

Delimiter semantics:
- A single character is a literal and is regex-escaped ("." matches only ".").
- Anything longer is a regular expression, e.g. ``r"\\.|/"`` accepts both.

Compiled patterns are memoised in a module-level LRU cache keyed by the
delimiter string, so resolvers built for the same delimiter share them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from cachetools import LRUCache, cached

from simple_naming.tree.nodes import ROOT_PATH, TYPE_KEY

__all__ = ["DelimiterMatch", "NamespacePathResolver", "TypeDeclaration"]


@cached(cache=LRUCache(maxsize=64))
def _compile(delimiter: str) -> re.Pattern[str]:
    """Compile the bare delimiter pattern."""
    if len(delimiter) == 1:
        return re.compile(re.escape(delimiter))
    return re.compile(f"(?:{delimiter})")


@cached(cache=LRUCache(maxsize=64))
def _compile_last(delimiter: str) -> re.Pattern[str]:
    """Compile a pattern whose group 1 is the LAST inner delimiter occurrence.

    The leading ``.+`` is greedy, so the group lands on the rightmost match
    that still leaves at least one character on each side.
    """
    return re.compile(f"^.+({_compile(delimiter).pattern}).+$", re.DOTALL)


@dataclass(frozen=True, slots=True)
class DelimiterMatch:
    """The last delimiter occurrence inside a key.

    Attributes:
        key:   The normalized key that was searched.
        text:  The delimiter text actually matched.
        start: Index of the first delimiter character.
        end:   Index just past the delimiter.
    """

    key: str
    text: str
    start: int
    end: int

    @property
    def parent_path(self) -> str:
        """Everything before the last delimiter ("a.b.c" -> "a.b")."""
        return self.key[: self.start]

    @property
    def leaf_name(self) -> str:
        """Everything after the last delimiter ("a.b.c" -> "c")."""
        return self.key[self.end :]


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """A recognised ``type`` pseudo-attribute.

    Attributes:
        key:   The pseudo-attribute key itself ("db.type" or "type").
        owner: Node path the declaration belongs to ("db"), or ``ROOT_PATH``.
    """

    key: str
    owner: str

    @property
    def is_root(self) -> bool:
        return self.owner == ROOT_PATH


class NamespacePathResolver:
    """Segments keys with a configured delimiter.

    Example::

        resolver = NamespacePathResolver(".")
        resolver.split("a.b.c")                          # ["a", "b", "c"]
        resolver.last_delimiter_match("a.b.c").leaf_name  # "c"
        resolver.type_declaration("db.type").owner        # "db"
    """

    def __init__(self, delimiter: str) -> None:
        self.delimiter = delimiter
        self._pattern = _compile(delimiter)
        self._last = _compile_last(delimiter)

    def _pieces(self, key: str) -> list[tuple[str, str]]:
        """Pair every segment with the delimiter text that follows it."""
        pieces: list[tuple[str, str]] = []
        pos = 0
        for match in self._pattern.finditer(key):
            if match.end() == match.start():
                continue
            pieces.append((key[pos : match.start()], match.group()))
            pos = match.end()
        pieces.append((key[pos:], ""))
        return [(segment, text) for segment, text in pieces if segment]

    def split(self, key: str) -> list[str]:
        """Split ``key`` into ordered path segments, dropping empty segments."""
        return [segment for segment, _ in self._pieces(key)]

    def normalize(self, key: str) -> str:
        """Drop empty segments from ``key`` ("a..b." -> "a.b").

        Kept segments stay joined by the delimiter text that followed them, so
        a key without empty segments comes back unchanged.
        """
        pieces = self._pieces(key)
        if not pieces:
            return ""
        head = "".join(segment + text for segment, text in pieces[:-1])
        return head + pieces[-1][0]

    def last_delimiter_match(self, key: str) -> DelimiterMatch | None:
        """Return the last inner delimiter occurrence in ``key``, or None.

        The match is taken on the normalized key, so its parent path and leaf
        name agree with ``split()``.
        """
        key = self.normalize(key)
        match = self._last.match(key)
        if match is None:
            return None
        return DelimiterMatch(
            key=key, text=match.group(1), start=match.start(1), end=match.end(1)
        )

    def type_declaration(self, key: str) -> TypeDeclaration | None:
        """Recognise ``key`` as a ``type`` pseudo-attribute.

        Returns:
            A ``TypeDeclaration`` owned by ``ROOT_PATH`` when ``key`` is
            exactly "type"; owned by the parent path when the key's leaf
            segment is "type"; otherwise None.
        """
        if key == TYPE_KEY:
            return TypeDeclaration(key=key, owner=ROOT_PATH)
        match = self.last_delimiter_match(key)
        if match is not None and match.leaf_name == TYPE_KEY:
            return TypeDeclaration(key=key, owner=match.parent_path)
        return None

    def is_type_pseudo_attribute(self, key: str) -> bool:
        """True iff ``key`` is a ``type`` pseudo-attribute."""
        return self.type_declaration(key) is not None
