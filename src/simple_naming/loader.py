"""Loader: materializes files and directory trees into a naming tree.

Architecture:
- ``load(path, tree)`` accepts a single file or a directory.
- Directories are walked depth-first in sorted order; each sub-directory
  becomes a branch (reused when it already exists) so a subtree completes
  before its next sibling starts.  Version-control directories are skipped.
- Every supported file (``.properties`` or ``.ini``; XML property files are
  not read) is read into ONE PropertyBag and handed to
  ``NodeBinder``.  Where the bag lands depends on the file:
    * a bare ``type`` key -> the file is one object named after its stem,
      bound in the current branch;
    * ``default.<ext>`` -> keys bound straight into the current branch;
    * anything else -> keys bound under a branch named after the stem.
- Directory and file names pass through ``LoaderConfig.replace_colons``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from simple_naming.algorithm.binder import BindReport, NodeBinder
from simple_naming.algorithm.subcontexts import SubcontextResolver
from simple_naming.config import LoaderConfig
from simple_naming.protocols import NamingTree, PropertyBag, PropertyValue
from simple_naming.sources import source_for
from simple_naming.tree.nodes import TYPE_KEY

__all__ = ["Loader"]

logger = logging.getLogger(__name__)

_SKIPPED_DIRECTORIES = frozenset({".svn", "CVS", ".git"})
_DEFAULT_STEM = "default"


class Loader:
    """Drives ``NodeBinder`` over files and directories.

    Example::

        loader = Loader(LoaderConfig(delimiter="."))
        root = MemoryBranch()
        loader.load(Path("config/"), root)
    """

    def __init__(self, config: LoaderConfig) -> None:
        self._config = config
        self._binder = NodeBinder(config)

    @property
    def config(self) -> LoaderConfig:
        return self._config

    def load(self, path: Path | str, tree: NamingTree) -> list[BindReport]:
        """Load a file or a directory tree into ``tree``.

        Returns:
            One ``BindReport`` per loaded file, in load order.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """
        path = Path(path)
        reports: list[BindReport] = []
        if path.is_dir():
            self._load_directory(path, tree, reports)
        elif path.is_file():
            self._load_file(path, tree, reports)
        else:
            msg = f"No such file or directory: {str(path)!r}"
            raise FileNotFoundError(msg)
        return reports

    def load_properties(
        self,
        bag: Mapping[str, PropertyValue],
        tree: NamingTree,
        parent: NamingTree | None = None,
        name: str = "",
    ) -> BindReport:
        """Bind an already-parsed bag into ``tree``."""
        return self._binder.bind(bag, tree, parent=parent, name=name)

    def read(self, path: Path) -> PropertyBag | None:
        """Read one file into a bag, or None when its extension is unsupported."""
        source = source_for(path, self._config.delimiter)
        if source is None:
            return None
        return source.read(path)

    # ------------------------------------------------------------------
    # Internal traversal
    # ------------------------------------------------------------------

    def _load_directory(
        self, directory: Path, tree: NamingTree, reports: list[BindReport]
    ) -> None:
        logger.debug("Loading directory %s", directory)
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                if entry.name in _SKIPPED_DIRECTORIES:
                    continue
                name = self._config.replace_colons(entry.name)
                branch = SubcontextResolver().materialize([name], tree)
                self._load_directory(entry, branch, reports)
            else:
                self._load_file(entry, tree, reports)

    def _load_file(self, file: Path, tree: NamingTree, reports: list[BindReport]) -> None:
        bag = self.read(file)
        if bag is None:
            logger.debug("Skipping unsupported file %s", file)
            return
        logger.debug("Loading file %s (%d keys)", file, len(bag))
        stem = self._config.replace_colons(file.stem)

        if TYPE_KEY in bag:
            # The file itself is one object, named after the file.
            report = self._binder.bind(bag, tree, parent=tree, name=stem)
        elif file.stem == _DEFAULT_STEM:
            report = self._binder.bind(bag, tree)
        else:
            branch = SubcontextResolver().materialize([stem], tree)
            report = self._binder.bind(bag, branch)
        reports.append(report)
