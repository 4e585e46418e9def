# topmark:header:start
#
#   project      : CStore
#   file         : toml_file.py
#   file_relpath : src/cstore/serializers/toml_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML serializer.

Parsing and rendering are done with `tomlkit` and exchanged as plain `dict`
structures.

TOML has no `null` value, so `None` entries are stripped during rendering.
A record field holding `None` is therefore absent from the file and keeps its
current value when loaded back.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from cstore.formats import Format
from cstore.logging import CstoreLogger, get_logger
from cstore.serializers.base import FileSerializer, read_document, write_document

if TYPE_CHECKING:
    import os

logger: CstoreLogger = get_logger(__name__)

# tomlkit signals unconvertible values with ConvertError (a TypeError/ValueError)
ENCODE_ERRORS: tuple[type[Exception], ...] = (TOMLKitError, TypeError, ValueError)
_DECODE_ERRORS: tuple[type[Exception], ...] = (TOMLKitError, ValueError)


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        out_list: list[object] = []
        for v_any in cast("list[object]", value):
            if v_any is None:
                logger.debug("Ignoring `None` entry in list")
                continue
            out_list.append(_strip_none_for_toml(v_any))
        return out_list

    return value


def to_toml(data: dict[str, Any]) -> str:
    """Serialize a mapping to a TOML document string.

    Args:
        data (dict[str, Any]): Mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(data)
    return cast("str", tomlkit.dumps(cast("Mapping[str, Any]", cleaned)))


def from_toml(text: str) -> object:
    """Parse a TOML document into plain Python values."""
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    return doc.unwrap()


def load_from_toml_file(file_path: str | os.PathLike[str], record_out: object) -> None:
    """Load a TOML file into ``record_out`` in place."""
    read_document(file_path, record_out, from_toml, errors=_DECODE_ERRORS)


def store_to_toml_file(file_path: str | os.PathLike[str], record: object) -> None:
    """Write ``record`` to a TOML file, replacing its content."""
    write_document(file_path, record, to_toml, errors=ENCODE_ERRORS)


class TomlFile(FileSerializer):
    """Serializer bound to one TOML file."""

    format: ClassVar[Format] = Format.TOML

    def load(self, record_out: object) -> None:
        load_from_toml_file(self.file_path, record_out)

    def store(self, record: object) -> None:
        store_to_toml_file(self.file_path, record)
