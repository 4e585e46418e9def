# topmark:header:start
#
#   project      : CStore
#   file         : yaml_file.py
#   file_relpath : src/cstore/serializers/yaml_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YAML serializer.

Uses PyYAML's *safe* dumper and loader, so only plain data (mappings, lists,
strings, numbers, booleans, null, dates) can be stored; arbitrary Python
objects are rejected with `cstore.errors.EncodingError`.

An empty YAML document decodes to an empty mapping, which leaves the target
record unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

import yaml

from cstore.formats import Format
from cstore.serializers.base import FileSerializer, read_document, write_document

if TYPE_CHECKING:
    import os

ENCODE_ERRORS: tuple[type[Exception], ...] = (yaml.YAMLError,)
_DECODE_ERRORS: tuple[type[Exception], ...] = (yaml.YAMLError,)


def to_yaml(data: dict[str, Any]) -> str:
    """Serialize a mapping to a YAML document string."""
    return yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def from_yaml(text: str) -> object:
    """Parse a YAML document into plain Python values."""
    data: object = yaml.safe_load(text)
    return {} if data is None else data


def load_from_yaml_file(file_path: str | os.PathLike[str], record_out: object) -> None:
    """Load a YAML file into ``record_out`` in place."""
    read_document(file_path, record_out, from_yaml, errors=_DECODE_ERRORS)


def store_to_yaml_file(file_path: str | os.PathLike[str], record: object) -> None:
    """Write ``record`` to a YAML file, replacing its content."""
    write_document(file_path, record, to_yaml, errors=ENCODE_ERRORS)


class YamlFile(FileSerializer):
    """Serializer bound to one YAML file."""

    format: ClassVar[Format] = Format.YAML

    def load(self, record_out: object) -> None:
        load_from_yaml_file(self.file_path, record_out)

    def store(self, record: object) -> None:
        store_to_yaml_file(self.file_path, record)
