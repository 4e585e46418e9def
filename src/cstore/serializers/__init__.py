# topmark:header:start
#
#   project      : CStore
#   file         : __init__.py
#   file_relpath : src/cstore/serializers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File serializers for the supported formats.

One `Serializable` contract, three implementations, selected by
`new_serializer` from a `cstore.formats.Format` tag:

| Format        | Class      | Library  |
|---------------|------------|----------|
| `Format.TOML` | `TomlFile` | tomlkit  |
| `Format.JSON` | `JsonFile` | json     |
| `Format.YAML` | `YamlFile` | PyYAML   |
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from cstore.errors import EncodingError, InvalidFormatError
from cstore.formats import Format

from . import json_file, toml_file, yaml_file
from .base import FileSerializer, Serializable, read_document, remove_file, write_document
from .json_file import JsonFile, load_from_json_file, store_to_json_file
from .toml_file import TomlFile, load_from_toml_file, store_to_toml_file
from .yaml_file import YamlFile, load_from_yaml_file, store_to_yaml_file

if TYPE_CHECKING:
    import os
    from collections.abc import Callable

SERIALIZERS: dict[Format, type[FileSerializer]] = {
    Format.TOML: TomlFile,
    Format.JSON: JsonFile,
    Format.YAML: YamlFile,
}


def new_serializer(fmt: Format | str, file_path: str | os.PathLike[str]) -> FileSerializer:
    """Return the serializer for ``fmt`` bound to ``file_path``.

    Args:
        fmt (Format | str): Format tag, or a string accepted by `Format.parse`.
        file_path (str | os.PathLike[str]): Backing file path.

    Returns:
        FileSerializer: A new serializer instance.

    Raises:
        InvalidFormatError: If ``fmt`` is not a known format.
    """
    resolved: Format | None = Format.parse(fmt)
    if resolved is None:
        raise InvalidFormatError(fmt)
    return SERIALIZERS[resolved](file_path)


_RENDERERS: dict[Format, tuple[Callable[[dict[str, Any]], str], tuple[type[Exception], ...]]] = {
    Format.TOML: (toml_file.to_toml, toml_file.ENCODE_ERRORS),
    Format.JSON: (json_file.to_json, json_file.ENCODE_ERRORS),
    Format.YAML: (yaml_file.to_yaml, yaml_file.ENCODE_ERRORS),
}


def render(fmt: Format, data: dict[str, Any], *, path: str | os.PathLike[str]) -> str:
    """Render ``data`` as a ``fmt`` document without touching the filesystem.

    Args:
        fmt (Format): Target format.
        data (dict[str, Any]): Plain mapping to render.
        path (str | os.PathLike[str]): Path reported in error messages.

    Returns:
        str: The rendered document.

    Raises:
        EncodingError: If ``data`` cannot be represented in ``fmt``.
    """
    encode, errors = _RENDERERS[fmt]
    try:
        return encode(data)
    except errors as exc:
        raise EncodingError(str(exc), path=Path(path)) from exc


__all__: list[str] = [
    "SERIALIZERS",
    "FileSerializer",
    "JsonFile",
    "Serializable",
    "TomlFile",
    "YamlFile",
    "load_from_json_file",
    "load_from_toml_file",
    "load_from_yaml_file",
    "new_serializer",
    "render",
    "read_document",
    "remove_file",
    "store_to_json_file",
    "store_to_toml_file",
    "store_to_yaml_file",
    "write_document",
]
