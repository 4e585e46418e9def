# topmark:header:start
#
#   project      : CStore
#   file         : formats.py
#   file_relpath : src/cstore/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialization format definitions.

This module centralizes the `Format` enum so the serializer factory, the
`Manager` and the CLI agree on the same format vocabulary.

Example:
    ```python
    from cstore.formats import Format

    assert Format.parse("yml") is Format.YAML
    assert Format.parse("TOML") is Format.TOML
    assert Format.parse("xml") is None
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string for format lookups."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class Format(str, Enum):
    """Serialization format of a store file.

    `.value` is a stable machine key; each member also carries a human label
    and optional aliases accepted by `parse()`.

    Attributes:
        TOML: A TOML key/value document.
        JSON: A JSON document.
        YAML: A YAML document.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(cls, key: str, label: str, aliases: Iterable[str] = ()) -> Format:
        """Create a member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            Format: The newly created enum member.
        """
        obj = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    TOML = ("toml", "TOML document")
    JSON = ("json", "JSON document")
    YAML = ("yaml", "YAML document", ("yml",))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: object) -> Format | None:
        """Parse a token into a format member.

        Matches against the stable key (`.value`), the member name (`.name`)
        and any configured aliases. Matching is case-insensitive.

        Args:
            raw (object): A `Format` member or a string token. Anything else
                never matches.

        Returns:
            Format | None: The matching member, or ``None`` on a miss.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        token: str = _norm_token(raw)
        for m in cls:
            if token in (m.value, _norm_token(m.name)):
                return m
            if token in (_norm_token(a) for a in m.aliases):
                return m
        return None

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return all machine keys, in declaration order."""
        return tuple(m.value for m in cls)
