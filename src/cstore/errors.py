# topmark:header:start
#
#   project      : CStore
#   file         : errors.py
#   file_relpath : src/cstore/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by CStore.

Usage:
    Library code raises these for failures that have no natural built-in
    counterpart. Filesystem failures are *not* wrapped: a missing file surfaces
    as the built-in `FileNotFoundError`, and every other I/O failure as the
    matching `OSError` subclass, so callers can test for them directly.

Hierarchy:
    - `CStoreError`
        - `InvalidFormatError` (also a `ValueError`)
        - `EncodingError`
        - `DecodingError`
        - `ValidationError` (also a `ValueError`)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class CStoreError(Exception):
    """Base class for all CStore errors."""


class InvalidFormatError(CStoreError, ValueError):
    """Requested format tag is not one of the known formats.

    Attributes:
        value: The rejected format value, as given by the caller.
    """

    def __init__(self, value: object) -> None:
        self.value: object = value
        super().__init__(f"invalid format type: {value!r}")


class _FileCodecError(CStoreError):
    """Shared base for encode/decode failures bound to a file path."""

    def __init__(self, message: str, *, path: Path) -> None:
        self.path: Path = path
        super().__init__(f"{path}: {message}")


class EncodingError(_FileCodecError):
    """The record cannot be represented in the target format."""


class DecodingError(_FileCodecError):
    """File content is malformed or does not match the target record shape."""


class ValidationError(CStoreError, ValueError):
    """Raised by a record's ``validate()`` to reject its own content.

    Records may raise any exception from ``validate()``; CStore propagates it
    unchanged. This class exists so record authors have a ready-made type.
    """
