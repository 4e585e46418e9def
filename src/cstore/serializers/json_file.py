# topmark:header:start
#
#   project      : CStore
#   file         : json_file.py
#   file_relpath : src/cstore/serializers/json_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON serializer.

Documents are written as a single JSON object followed by a newline. Non-ASCII
text is kept as UTF-8 rather than escaped, and non-finite floats (``NaN``,
``Infinity``) are rejected because they are not valid JSON.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar

from cstore.formats import Format
from cstore.serializers.base import FileSerializer, read_document, write_document

if TYPE_CHECKING:
    import os

# TypeError: unserializable value; ValueError: NaN or infinity
ENCODE_ERRORS: tuple[type[Exception], ...] = (TypeError, ValueError)
_DECODE_ERRORS: tuple[type[Exception], ...] = (json.JSONDecodeError,)


def to_json(data: dict[str, Any]) -> str:
    """Serialize a mapping to a JSON document string."""
    return json.dumps(data, ensure_ascii=False, allow_nan=False) + "\n"


def from_json(text: str) -> object:
    """Parse a JSON document into plain Python values."""
    return json.loads(text)


def load_from_json_file(file_path: str | os.PathLike[str], record_out: object) -> None:
    """Load a JSON file into ``record_out`` in place."""
    read_document(file_path, record_out, from_json, errors=_DECODE_ERRORS)


def store_to_json_file(file_path: str | os.PathLike[str], record: object) -> None:
    """Write ``record`` to a JSON file, replacing its content."""
    write_document(file_path, record, to_json, errors=ENCODE_ERRORS)


class JsonFile(FileSerializer):
    """Serializer bound to one JSON file."""

    format: ClassVar[Format] = Format.JSON

    def load(self, record_out: object) -> None:
        load_from_json_file(self.file_path, record_out)

    def store(self, record: object) -> None:
        store_to_json_file(self.file_path, record)
