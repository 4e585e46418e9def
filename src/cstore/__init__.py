# topmark:header:start
#
#   project      : CStore
#   file         : __init__.py
#   file_relpath : src/cstore/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CStore package.

CStore persists in-memory records to files in TOML, JSON or YAML, and keeps a
name-keyed registry of such stores within a base directory.
"""

from __future__ import annotations

from cstore.errors import (
    CStoreError,
    DecodingError,
    EncodingError,
    InvalidFormatError,
    ValidationError,
)
from cstore.formats import Format
from cstore.manager import Manager
from cstore.serializers import JsonFile, Serializable, TomlFile, YamlFile, new_serializer
from cstore.store import (
    CStore,
    Validatable,
    get,
    get_without_validate,
    new_cstore,
    save,
    save_without_validate,
)

__all__: list[str] = [
    "CStore",
    "CStoreError",
    "DecodingError",
    "EncodingError",
    "Format",
    "InvalidFormatError",
    "JsonFile",
    "Manager",
    "Serializable",
    "TomlFile",
    "Validatable",
    "ValidationError",
    "YamlFile",
    "get",
    "get_without_validate",
    "new_cstore",
    "new_serializer",
    "save",
    "save_without_validate",
]
