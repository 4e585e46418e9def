# topmark:header:start
#
#   project      : CStore
#   file         : store.py
#   file_relpath : src/cstore/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record stores: one named record bound to one file and one serializer.

Two families of entry points are offered:

- validated: `CStore.save` / `CStore.get` (and the module-level `save` /
  `get`) call the record's ``validate()`` when it has one;
- unvalidated: `CStore.save_without_validate` / `CStore.get_without_validate`
  never validate, which is handy for writing seed or template data before its
  required fields are filled in.

Validation is an optional capability: any record with a callable
``validate()`` method satisfies `Validatable`. ``validate()`` signals failure
by raising; the exception reaches the caller unchanged.

Typical usage:
    ```python
    from dataclasses import dataclass

    from cstore import Format, new_cstore
    from cstore.errors import ValidationError

    @dataclass
    class Sample:
        name: str = ""

        def validate(self) -> None:
            if not self.name:
                raise ValidationError("name should not be empty")

    cs = new_cstore("sample.json", "/tmp/sample.json", Format.JSON)
    cs.save(Sample(name="sample name"))

    s = Sample()
    cs.get(s)
    assert s.name == "sample name"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from cstore.logging import CstoreLogger, get_logger
from cstore.serializers import new_serializer

if TYPE_CHECKING:
    import os
    from pathlib import Path

    from cstore.formats import Format
    from cstore.serializers import FileSerializer, Serializable

logger: CstoreLogger = get_logger(__name__)


@runtime_checkable
class Validatable(Protocol):
    """A record that can check its own content.

    ``validate()`` returns ``None`` on success and raises on failure.
    """

    def validate(self) -> None:
        """Raise if the record is not valid."""
        ...


def _validate(record: object) -> None:
    if isinstance(record, Validatable):
        logger.trace("Validating %s", type(record).__name__)
        record.validate()


def get(record_out: object, serializer: Serializable) -> None:
    """Load into ``record_out`` through ``serializer``, then validate it.

    The record is populated before validation runs, so on a validation error
    ``record_out`` already holds the loaded values.
    """
    get_without_validate(record_out, serializer)
    _validate(record_out)


def get_without_validate(record_out: object, serializer: Serializable) -> None:
    """Load into ``record_out`` through ``serializer`` without validating."""
    serializer.load(record_out)


def save(record: object, serializer: Serializable) -> None:
    """Validate ``record``, then store it through ``serializer``.

    Storage is not touched when validation fails.
    """
    _validate(record)
    save_without_validate(record, serializer)


def save_without_validate(record: object, serializer: Serializable) -> None:
    """Store ``record`` through ``serializer`` without validating."""
    serializer.store(record)


class CStore:
    """A named record persisted to a single file in a fixed format.

    Instances are normally created by `cstore.manager.Manager.new`; use
    `new_cstore` to build one outside a manager. The name, file path and format
    are fixed for the lifetime of the store.
    """

    def __init__(self, name: str, serializer: FileSerializer) -> None:
        self._name: str = name
        self._serializer: FileSerializer = serializer

    @property
    def name(self) -> str:
        """The store's registered name."""
        return self._name

    @property
    def file_path(self) -> Path:
        """Path of the backing file."""
        return self._serializer.file_path

    @property
    def format(self) -> Format:
        """Serialization format of the backing file."""
        return self._serializer.format

    def exists(self) -> bool:
        """Return True if the backing file is present."""
        return self._serializer.file_path.is_file()

    def get(self, record_out: object) -> None:
        """Load into ``record_out``, then validate it if it is `Validatable`."""
        get(record_out, self._serializer)

    def save(self, record: object) -> None:
        """Validate ``record`` if it is `Validatable`, then store it."""
        save(record, self._serializer)

    def get_without_validate(self, record_out: object) -> None:
        get_without_validate(record_out, self._serializer)

    def save_without_validate(self, record: object) -> None:
        save_without_validate(record, self._serializer)

    def load(self, record_out: object) -> None:
        """Raw passthrough to the serializer's ``load``."""
        self._serializer.load(record_out)

    def store(self, record: object) -> None:
        """Raw passthrough to the serializer's ``store``."""
        self._serializer.store(record)

    def remove(self) -> None:
        """Delete the backing file; `FileNotFoundError` if it does not exist."""
        self._serializer.remove()

    def __repr__(self) -> str:
        return (
            f"CStore(name={self._name!r}, file_path={str(self.file_path)!r}, "
            f"format={self.format.value!r})"
        )


def new_cstore(name: str, file_path: str | os.PathLike[str], fmt: Format | str) -> CStore:
    """Create a `CStore` named ``name`` backed by ``file_path`` in format ``fmt``.

    Args:
        name (str): Store name.
        file_path (str | os.PathLike[str]): Backing file path.
        fmt (Format | str): Format tag, or a string accepted by `Format.parse`.

    Returns:
        CStore: The new store. No file is created until the first save.

    Raises:
        InvalidFormatError: If ``fmt`` is not a known format.
    """
    return CStore(name, new_serializer(fmt, file_path))
