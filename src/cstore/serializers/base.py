# topmark:header:start
#
#   project      : CStore
#   file         : base.py
#   file_relpath : src/cstore/serializers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer protocol and shared file I/O for the concrete formats.

Every format implements the same three operations (`Serializable`). The
format-specific modules only supply an *encoder* (mapping to text) and a
*decoder* (text to mapping); opening, reading, writing and removing files is
shared here so the contract holds identically for all formats:

- ``store`` encodes the record, then opens the file for writing (truncating
  it), writes and closes. An encoding failure leaves the file untouched, but
  there is no temp-file staging: an I/O failure while writing can leave an
  empty or truncated file.
- ``load`` opens the file, decodes and populates the target record in place.
- ``remove`` deletes the file.

`FileNotFoundError` and other `OSError`s are never wrapped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from cstore.constants import FILE_ENCODING
from cstore.errors import DecodingError, EncodingError
from cstore.logging import CstoreLogger, get_logger
from cstore.records import RecordShapeError, as_mapping, populate

if TYPE_CHECKING:
    import os
    from collections.abc import Callable

    from cstore.formats import Format

logger: CstoreLogger = get_logger(__name__)


@runtime_checkable
class Serializable(Protocol):
    """Protocol for objects that persist one record to one file."""

    def load(self, record_out: object) -> None:
        """Decode the backing file into ``record_out`` in place."""
        ...

    def store(self, record: object) -> None:
        """Encode ``record`` into the backing file, replacing its content."""
        ...

    def remove(self) -> None:
        """Delete the backing file."""
        ...


def write_document(
    file_path: str | os.PathLike[str],
    record: object,
    encode: Callable[[dict[str, Any]], str],
    *,
    errors: tuple[type[Exception], ...],
) -> None:
    """Encode ``record`` with ``encode`` and write it to ``file_path``.

    Args:
        file_path (str | os.PathLike[str]): Destination file; created or truncated.
        record (object): The record to persist.
        encode (Callable[[dict[str, Any]], str]): Format encoder.
        errors (tuple[type[Exception], ...]): Exceptions raised by ``encode``
            that mean "not representable in this format".

    Raises:
        EncodingError: The record cannot be represented in the format.
    """
    path = Path(file_path)
    try:
        data: dict[str, Any] = as_mapping(record)
    except RecordShapeError as exc:
        raise EncodingError(str(exc), path=path) from exc

    try:
        text: str = encode(data)
    except errors as exc:
        raise EncodingError(str(exc), path=path) from exc

    with path.open("w", encoding=FILE_ENCODING) as fh:
        fh.write(text)
    logger.debug("Stored %d top-level keys to %s", len(data), path)


def read_document(
    file_path: str | os.PathLike[str],
    record_out: object,
    decode: Callable[[str], object],
    *,
    errors: tuple[type[Exception], ...],
) -> None:
    """Read ``file_path``, decode it with ``decode`` and populate ``record_out``.

    Args:
        file_path (str | os.PathLike[str]): Source file.
        record_out (object): Record populated in place.
        decode (Callable[[str], object]): Format decoder.
        errors (tuple[type[Exception], ...]): Exceptions raised by ``decode``
            that mean "malformed content".

    Raises:
        DecodingError: Content is not valid UTF-8, is malformed for the format,
            or does not match the shape of ``record_out``.
    """
    path = Path(file_path)
    with path.open("r", encoding=FILE_ENCODING) as fh:
        try:
            text: str = fh.read()
        except UnicodeDecodeError as exc:
            raise DecodingError(str(exc), path=path) from exc

    try:
        data: object = decode(text)
    except errors as exc:
        raise DecodingError(str(exc), path=path) from exc

    if not isinstance(data, Mapping):
        raise DecodingError(
            f"expected a mapping at the top level, got {type(data).__name__}", path=path
        )

    try:
        populate(record_out, data)
    except RecordShapeError as exc:
        raise DecodingError(str(exc), path=path) from exc
    logger.debug("Loaded %d top-level keys from %s", len(data), path)


def remove_file(file_path: str | os.PathLike[str]) -> None:
    """Delete ``file_path``; `FileNotFoundError` if it does not exist."""
    Path(file_path).unlink()
    logger.debug("Removed %s", file_path)


class FileSerializer(ABC):
    """Common base for the file-backed serializers.

    Subclasses set `format` and implement `load` / `store`.
    """

    format: ClassVar[Format]

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self._file_path: Path = Path(file_path)

    @property
    def file_path(self) -> Path:
        """Path of the backing file."""
        return self._file_path

    @abstractmethod
    def load(self, record_out: object) -> None:
        """Decode the backing file into ``record_out`` in place."""

    @abstractmethod
    def store(self, record: object) -> None:
        """Encode ``record`` into the backing file, replacing its content."""

    def remove(self) -> None:
        """Delete the backing file."""
        remove_file(self._file_path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file_path={str(self._file_path)!r})"
