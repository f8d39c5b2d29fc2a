"""pytest plugin for simple-naming.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from simple_naming import ConverterRegistry, LoaderConfig, MemoryBranch, default_registry
from simple_naming.loader import Loader


@pytest.fixture(scope="session")
def naming_tree() -> Any:
    """Fixture that returns a callable building an in-memory naming tree.

    The fixture is session-scoped because the returned callable is stateless
    (every call creates a fresh Loader and a fresh MemoryBranch).

    Usage in tests::

        def test_db_port(naming_tree):
            tree = naming_tree({"db.port.type": "int", "db.port": "5432"})
            assert tree.to_dict() == {"db": {"port": 5432}}

        def test_config_dir(naming_tree, tmp_path):
            (tmp_path / "app.properties").write_text("name=demo\\n")
            assert naming_tree(tmp_path).to_dict() == {"app": {"name": "demo"}}

    Returns:
        A callable ``_build(source, delimiter=".", converters=None, name="")``
        returning the populated ``MemoryBranch``.  ``source`` is either a
        property bag or a file/directory path.
    """

    def _build(
        source: Mapping[str, Any] | Path | str,
        delimiter: str = ".",
        converters: ConverterRegistry | None = None,
        name: str = "",
    ) -> MemoryBranch:
        """Materialize ``source`` into a fresh ``MemoryBranch``.

        Args:
            source:     A flat property bag, or a path to load from disk.
            delimiter:  Key delimiter.  Defaults to ".".
            converters: Registry to use.  Defaults to ``default_registry()``.
            name:       Bag name, for bags that describe one whole object.
        """
        config = LoaderConfig(
            delimiter=delimiter,
            converters=converters if converters is not None else default_registry(),
        )
        loader = Loader(config)
        root = MemoryBranch()
        if isinstance(source, Mapping):
            parent = root if name else None
            loader.load_properties(source, root, parent=parent, name=name)
        else:
            loader.load(source, root)
        return root

    return _build
