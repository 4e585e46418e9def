# topmark:header:start
#
#   project      : CStore
#   file         : sample_records.py
#   file_relpath : tests/sample_records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record types shared by the CStore tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from cstore.errors import ValidationError


@dataclass
class Text:
    """Record without a validation capability."""

    text: str = ""


@dataclass
class Sample:
    """Record that rejects an empty name."""

    name: str = ""

    def validate(self) -> None:
        if not self.name:
            raise ValidationError("name should not be empty")


@dataclass
class Inner:
    """Nested section of `Settings`."""

    host: str = ""
    port: int = 0


@dataclass
class Settings:
    """Record exercising nested tables, lists and mixed scalar types."""

    title: str = ""
    enabled: bool = False
    ratio: float = 0.0
    tags: list[str] = field(default_factory=list)
    server: Inner = field(default_factory=Inner)


@dataclass
class Item:
    """Element of `Order.items`."""

    sku: str = ""
    qty: int = 0


@dataclass
class Order:
    """Record whose nested dataclasses sit inside containers and optionals."""

    items: list[Item] = field(default_factory=list)
    coords: tuple[int, int] = (0, 0)
    by_sku: dict[str, Item] = field(default_factory=dict)
    backup: Inner | None = None
