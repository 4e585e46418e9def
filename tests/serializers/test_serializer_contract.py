# topmark:header:start
#
#   project      : CStore
#   file         : test_serializer_contract.py
#   file_relpath : tests/serializers/test_serializer_contract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-agnostic contract tests run against every serializer.

The ``load`` / ``store`` / ``remove`` contract must hold identically for TOML,
JSON and YAML; only the bytes on disk differ.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cstore.errors import DecodingError, EncodingError, InvalidFormatError
from cstore.formats import Format
from cstore.serializers import (
    SERIALIZERS,
    FileSerializer,
    JsonFile,
    Serializable,
    TomlFile,
    YamlFile,
    new_serializer,
)
from tests.sample_records import Inner, Item, Order, Settings, Text

if TYPE_CHECKING:
    from pathlib import Path

ALL_FORMATS: list[Format] = list(Format)


def _serializer(tmp_path: Path, fmt: Format) -> FileSerializer:
    return new_serializer(fmt, tmp_path / f"record.{fmt.value}")


@pytest.mark.parametrize(
    ("fmt", "cls"),
    [(Format.TOML, TomlFile), (Format.JSON, JsonFile), (Format.YAML, YamlFile)],
)
def test_factory_selects_class(tmp_path: Path, fmt: Format, cls: type[FileSerializer]) -> None:
    s = new_serializer(fmt.value, tmp_path / "x")
    assert type(s) is cls
    assert s.format is fmt
    assert s.file_path == tmp_path / "x"
    assert isinstance(s, Serializable)


@pytest.mark.parametrize("fmt", ["xml", 4, None])
def test_factory_rejects_unknown_format(tmp_path: Path, fmt: object) -> None:
    with pytest.raises(InvalidFormatError) as excinfo:
        new_serializer(fmt, tmp_path / "x")  # type: ignore[arg-type]
    assert excinfo.value.value == fmt


def test_registry_covers_every_format() -> None:
    assert set(SERIALIZERS) == set(Format)


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_store_then_load_round_trip(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    original = Settings(
        title="round trip ✓",
        enabled=True,
        ratio=1.5,
        tags=["a", "b"],
        server=Inner(host="localhost", port=8080),
    )
    s.store(original)

    loaded = Settings()
    s.load(loaded)
    assert loaded == original


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_store_truncates_previous_content(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    s.store(Settings(title="x" * 200, tags=["long"] * 20))
    s.store(Text(text="short"))

    loaded: dict[str, object] = {}
    s.load(loaded)
    assert loaded == {"text": "short"}


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_load_missing_file_raises_not_found(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    with pytest.raises(FileNotFoundError):
        s.load(Text())


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_remove_deletes_file(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    s.store(Text(text="bye"))
    assert s.file_path.exists()

    s.remove()
    assert not s.file_path.exists()
    with pytest.raises(FileNotFoundError):
        s.remove()


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_store_into_missing_directory_is_io_error(tmp_path: Path, fmt: Format) -> None:
    s = new_serializer(fmt, tmp_path / "missing" / "record")
    with pytest.raises(OSError):
        s.store(Text(text="x"))


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_load_directory_is_io_error_not_not_found(tmp_path: Path, fmt: Format) -> None:
    (tmp_path / "adir").mkdir()
    s = new_serializer(fmt, tmp_path / "adir")
    with pytest.raises(OSError) as excinfo:
        s.load(Text())
    assert not isinstance(excinfo.value, FileNotFoundError)


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_load_shape_mismatch_is_decoding_error(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    s.store({"title": 42})
    with pytest.raises(DecodingError) as excinfo:
        s.load(Settings())
    assert excinfo.value.path == s.file_path


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_load_invalid_utf8_is_decoding_error(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    s.file_path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(DecodingError):
        s.load(Text())


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_store_unsupported_value_is_encoding_error(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    with pytest.raises(EncodingError):
        s.store({"value": object()})


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_store_unsupported_value_keeps_previous_content(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    s.store(Text(text="good"))
    before = s.file_path.read_bytes()

    with pytest.raises(EncodingError):
        s.store({"value": object()})
    assert s.file_path.read_bytes() == before


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_store_self_referencing_record_is_encoding_error(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    looped: dict[str, object] = {"name": "loop"}
    looped["self"] = looped
    with pytest.raises(EncodingError, match="circular"):
        s.store(looped)
    assert not s.file_path.exists()


@pytest.mark.parametrize("fmt", ALL_FORMATS)
@pytest.mark.parametrize(
    "original",
    [
        Order(),
        Order(
            items=[Item("a", 1), Item("b", 2)],
            coords=(1, 2),
            by_sku={"a": Item("a", 1)},
            backup=Inner(host="h", port=3),
        ),
    ],
    ids=["empty", "filled"],
)
def test_nested_containers_round_trip(tmp_path: Path, fmt: Format, original: Order) -> None:
    s = _serializer(tmp_path, fmt)
    s.store(original)

    loaded = Order()
    s.load(loaded)
    assert loaded == original
    assert type(loaded.coords) is tuple


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_store_non_record_is_encoding_error(tmp_path: Path, fmt: Format) -> None:
    s = _serializer(tmp_path, fmt)
    with pytest.raises(EncodingError):
        s.store(42)
    assert not s.file_path.exists()


def test_serializer_without_load_cannot_be_instantiated(tmp_path: Path) -> None:
    class WriteOnly(FileSerializer):
        format = Format.JSON

        def store(self, record: object) -> None:
            pass

    with pytest.raises(TypeError):
        WriteOnly(tmp_path / "x")  # type: ignore[abstract]
