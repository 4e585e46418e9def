# topmark:header:start
#
#   project      : CStore
#   file         : manager.py
#   file_relpath : src/cstore/manager.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Name-keyed registry of record stores within one base directory.

A `Manager` owns a base directory and a table of `CStore` handles keyed by
store name. Each store's file lives at ``<base_dir_path>/<name>``.

Removing a store from the manager only evicts the handle; the backing file is
left on disk. Call the returned store's ``remove()`` to delete the file:

    ```python
    m = Manager("app", "/tmp/app-state")
    cs = m.new("settings.toml", Format.TOML)
    ...
    evicted = m.remove("settings.toml")  # file still present
    if evicted is not None:
        evicted.remove()                 # file deleted
    ```

Warning:
    The table is not synchronized. Callers sharing a manager across threads
    must serialize ``new`` / ``get`` / ``remove`` themselves.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from cstore.logging import CstoreLogger, get_logger
from cstore.store import CStore, new_cstore
from cstore.utils.file import create_dir

if TYPE_CHECKING:
    import os

    from cstore.formats import Format

logger: CstoreLogger = get_logger(__name__)


class Manager:
    """Registry of named stores sharing a base directory."""

    def __init__(self, name: str, base_dir_path: str | os.PathLike[str]) -> None:
        """Create a manager, creating ``base_dir_path`` if it is absent.

        Args:
            name (str): The manager's identifying name.
            base_dir_path (str | os.PathLike[str]): Directory holding the store files.

        Raises:
            OSError: If the base directory cannot be created.
        """
        self._name: str = name
        self._base_dir_path: Path = create_dir(base_dir_path)
        self._stores: dict[str, CStore] = {}

    @property
    def name(self) -> str:
        """The manager's identifying name."""
        return self._name

    @property
    def base_dir_path(self) -> Path:
        """Directory holding the store files."""
        return self._base_dir_path

    def new(self, name: str, fmt: Format | str) -> CStore:
        """Create and register a store named ``name`` in format ``fmt``.

        Any store previously registered under ``name`` is replaced in the
        table; its file is not touched.

        Args:
            name (str): Store name; also the file name inside the base directory.
            fmt (Format | str): Format tag, or a string accepted by `Format.parse`.

        Returns:
            CStore: The registered store.

        Raises:
            InvalidFormatError: If ``fmt`` is not a known format. Nothing is
                registered in that case.
        """
        cs: CStore = new_cstore(name, self._base_dir_path / name, fmt)
        if name in self._stores:
            logger.debug("Replacing store %r in manager %r", name, self._name)
        self._stores[name] = cs
        logger.debug("Registered store %r (%s) in manager %r", name, cs.format, self._name)
        return cs

    def get(self, name: str) -> CStore | None:
        """Return the store registered under ``name``, or None."""
        return self._stores.get(name)

    def remove(self, name: str) -> CStore | None:
        """Evict ``name`` from the table and return its store, or None.

        The backing file is not deleted.
        """
        cs: CStore | None = self._stores.pop(name, None)
        if cs is not None:
            logger.debug("Evicted store %r from manager %r", name, self._name)
        return cs

    def names(self) -> tuple[str, ...]:
        """Return all registered store names (sorted)."""
        return tuple(sorted(self._stores))

    def __contains__(self, name: object) -> bool:
        return name in self._stores

    def __len__(self) -> int:
        return len(self._stores)

    def __repr__(self) -> str:
        return f"Manager(name={self._name!r}, base_dir_path={str(self._base_dir_path)!r})"
