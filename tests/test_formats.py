# topmark:header:start
#
#   project      : CStore
#   file         : test_formats.py
#   file_relpath : tests/test_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `cstore.formats.Format` parsing."""

from __future__ import annotations

import pytest

from cstore.formats import Format


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("toml", Format.TOML),
        ("JSON", Format.JSON),
        (" yaml ", Format.YAML),
        ("yml", Format.YAML),
        (Format.JSON, Format.JSON),
    ],
)
def test_parse_known_tokens(raw: object, expected: Format) -> None:
    """Keys, names, aliases and members all resolve."""
    assert Format.parse(raw) is expected


@pytest.mark.parametrize("raw", ["xml", "", None, 2, "tom"])
def test_parse_unknown_returns_none(raw: object) -> None:
    """Unknown tokens and non-strings are a miss, not an error."""
    assert Format.parse(raw) is None


def test_members_are_string_keys() -> None:
    assert Format.keys() == ("toml", "json", "yaml")
    assert str(Format.YAML) == "yaml"
    assert Format.YAML.aliases == ("yml",)
    assert Format.TOML.label == "TOML document"
