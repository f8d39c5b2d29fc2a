"""SubcontextResolver: walks and creates branch chains in a naming tree.

Multiple bags may contribute to the same branch path, so an existing branch
is descended into rather than recreated.  Finding a leaf where a branch is
needed is a structural clash and is always fatal; a leaf is never silently
replaced by a branch.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from simple_naming.errors import StructuralClashError
from simple_naming.protocols import NamingTree

__all__ = ["SubcontextResolver"]

logger = logging.getLogger(__name__)


class SubcontextResolver:
    """Ensures branch chains exist below a starting branch.

    ``created`` counts the branches this resolver has created so far.
    """

    def __init__(self) -> None:
        self.created = 0

    def resolve(self, segments: Sequence[str], start: NamingTree) -> NamingTree:
        """Return the branch that should hold the last of ``segments``.

        Every segment except the last is looked up under the current branch:
        absent -> created, branch -> descended into, leaf -> clash.

        Raises:
            StructuralClashError: If an intermediate segment holds a leaf.
        """
        return self.materialize(segments[:-1], start)

    def materialize(self, segments: Sequence[str], start: NamingTree) -> NamingTree:
        """Like ``resolve`` but walks ALL of ``segments`` and returns the deepest.

        Used for directory-mirrored branches and explicit path prefixes.

        Raises:
            StructuralClashError: If any segment holds a leaf.
        """
        current = start
        for segment in segments:
            existing = current.lookup(segment)
            if existing is None:
                logger.debug("Creating branch %r", segment)
                current = current.create_child(segment)
                self.created += 1
            elif isinstance(existing, NamingTree):
                current = existing
            else:
                raise StructuralClashError(segment, existing)
        return current
