# topmark:header:start
#
#   project      : CStore
#   file         : test_json_file.py
#   file_relpath : tests/serializers/test_json_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the JSON serializer in `cstore.serializers.json_file`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from cstore.errors import DecodingError, EncodingError
from cstore.serializers.json_file import JsonFile, load_from_json_file, store_to_json_file
from tests.sample_records import Sample

if TYPE_CHECKING:
    from pathlib import Path


def test_file_is_single_json_document(tmp_path: Path) -> None:
    path = tmp_path / "sample.json"
    store_to_json_file(path, Sample(name="é sample"))

    content = path.read_text(encoding="utf-8")
    assert content.endswith("}\n")
    assert "é" in content
    assert json.loads(content) == {"name": "é sample"}


def test_nan_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(EncodingError):
        store_to_json_file(tmp_path / "nan.json", {"value": float("nan")})


@pytest.mark.parametrize("content", ["", "{", "[1, 2]", '"text"', "null"])
def test_malformed_or_non_object_is_decoding_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(DecodingError):
        JsonFile(path).load(Sample())


def test_load_keeps_fields_missing_from_document(tmp_path: Path) -> None:
    path = tmp_path / "partial.json"
    path.write_text("{}", encoding="utf-8")
    record = Sample(name="kept")
    load_from_json_file(path, record)
    assert record.name == "kept"
