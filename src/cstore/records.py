# topmark:header:start
#
#   project      : CStore
#   file         : records.py
#   file_relpath : src/cstore/records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conversion between records and plain mappings.

Serializers work on plain ``dict`` structures; callers work on *records*. A
record is one of:

- a dataclass instance,
- a mapping (``dict`` or any `collections.abc.Mapping`),
- a plain object whose public instance attributes are its fields.

`as_mapping` turns a record into a plain, encoder-friendly mapping, and
`populate` fills an existing record *in place* from a decoded mapping. The
in-place contract lets callers pass a zero-valued record and read back the
stored values through the same object.

Decoding rules:
    * Keys without a matching field are ignored.
    * Fields without a matching key keep their current value.
    * Nested dataclass fields are filled recursively. Dataclasses nested in
      ``list[...]``, ``tuple[...]``, ``dict[str, ...]`` and ``Optional[...]``
      annotations are rebuilt, and lists become tuples for ``tuple`` fields.
    * A value whose type plainly contradicts a simple field annotation
      (``str``, ``int``, ``float``, ``bool``, ``list``, ``tuple``, ``dict``)
      raises `RecordShapeError`; other annotations are not checked.

Encoding rejects records that contain themselves with `RecordShapeError`.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping, MutableMapping
from typing import Any, Union, cast

from cstore.logging import CstoreLogger, get_logger

logger: CstoreLogger = get_logger(__name__)

_SIMPLE_TYPES: tuple[type, ...] = (str, int, float, bool, list, tuple, dict)
_NONE_TYPE: type = type(None)
_UNION_ORIGINS: tuple[Any, ...] = (Union, types.UnionType)


class RecordShapeError(TypeError):
    """Raised when a record or a decoded value does not fit the expected shape."""


def _is_dataclass_instance(obj: object) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def _public_attrs(obj: object) -> dict[str, Any]:
    return {k: v for k, v in vars(obj).items() if not k.startswith("_")}


def _to_plain(value: object, parents: frozenset[int] = frozenset()) -> object:
    """Recursively normalize a value into dict/list/scalar form.

    ``parents`` holds the ids of the containers currently being converted; a
    container that contains itself raises `RecordShapeError`. Containers that
    are merely shared between branches are converted once per occurrence.
    """
    is_container = _is_dataclass_instance(value) or isinstance(value, (Mapping, list, tuple))
    if not is_container:
        return value
    if id(value) in parents:
        raise RecordShapeError(f"circular reference through {type(value).__name__}")
    inner = parents | {id(value)}

    if _is_dataclass_instance(value):
        return {
            f.name: _to_plain(getattr(value, f.name), inner)
            for f in dataclasses.fields(value)  # type: ignore[arg-type]
        }
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v, inner) for k, v in value.items()}
    return [_to_plain(v, inner) for v in cast("list[object] | tuple[object, ...]", value)]


def as_mapping(record: object) -> dict[str, Any]:
    """Return ``record`` as a plain, string-keyed mapping.

    Tuples are converted to lists and nested dataclasses to mappings. Scalar
    values are passed through untouched; rejecting unsupported scalars is left
    to the format encoder.

    Args:
        record (object): The record to convert.

    Returns:
        dict[str, Any]: A new mapping; mutating it does not affect ``record``.

    Raises:
        RecordShapeError: If ``record`` is not a dataclass instance, a mapping,
            or an object with instance attributes.
    """
    if _is_dataclass_instance(record) or isinstance(record, Mapping):
        return typing.cast("dict[str, Any]", _to_plain(record))
    if hasattr(record, "__dict__") and not isinstance(record, type):
        return typing.cast("dict[str, Any]", _to_plain(_public_attrs(record)))
    raise RecordShapeError(f"cannot use {type(record).__name__} as a record")


def _field_hints(cls: type) -> dict[str, Any]:
    """Return resolved type hints for ``cls``, or an empty dict if unresolvable."""
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        # Forward references to names that are not module-level (e.g. classes
        # defined inside a function) cannot be resolved.
        return {}


def _check_simple(name: str, hint: Any, value: object) -> None:
    # list[str] -> list, dict[str, int] -> dict
    hint = typing.get_origin(hint) or hint
    if hint not in _SIMPLE_TYPES:
        return
    if hint is float and isinstance(value, int) and not isinstance(value, bool):
        return
    if hint is int and isinstance(value, bool):
        raise RecordShapeError(f"field {name!r}: expected int, got bool")
    if hint is tuple and isinstance(value, list):
        # every format stores sequences as lists
        return
    if not isinstance(value, hint):
        raise RecordShapeError(
            f"field {name!r}: expected {hint.__name__}, got {type(value).__name__}"
        )


def _is_dataclass_type(hint: Any) -> bool:
    return isinstance(hint, type) and dataclasses.is_dataclass(hint)


def _is_frozen(obj: object) -> bool:
    return bool(getattr(type(obj), "__dataclass_params__").frozen)


def _coerce_union(name: str, args: tuple[Any, ...], value: object) -> object:
    if value is None and _NONE_TYPE in args:
        return None
    members: list[Any] = [a for a in args if a is not _NONE_TYPE]
    if len(members) == 1:
        return _coerce_value(name, members[0], value)
    if isinstance(value, Mapping):
        for member in members:
            if _is_dataclass_type(member):
                return _build_dataclass(member, value)
    return value


def _coerce_tuple(name: str, args: tuple[Any, ...], value: list[Any] | tuple[Any, ...]) -> object:
    if len(args) == 2 and args[1] is Ellipsis:
        return tuple(_coerce_value(name, args[0], v) for v in value)
    if not args or args == ((),):
        return tuple(value)
    if len(args) != len(value):
        raise RecordShapeError(
            f"field {name!r}: expected {len(args)} items, got {len(value)}"
        )
    return tuple(_coerce_value(name, a, v) for a, v in zip(args, value))


def _coerce_value(name: str, hint: Any, value: object) -> object:
    """Rebuild a decoded ``value`` into the shape described by ``hint``.

    Decoded documents only hold mappings, lists and scalars. Nested dataclasses
    (also inside ``list``, ``tuple``, ``dict`` and ``Optional`` annotations) are
    rebuilt and lists are turned back into tuples where the annotation asks for
    one. Unknown or unresolvable annotations pass the value through unchanged.
    """
    if hint is None or hint is Any:
        return value
    origin: Any = typing.get_origin(hint)
    args: tuple[Any, ...] = typing.get_args(hint)

    if origin in _UNION_ORIGINS:
        return _coerce_union(name, args, value)
    if _is_dataclass_type(hint) and isinstance(value, Mapping):
        return _build_dataclass(hint, value)

    _check_simple(name, hint, value)
    container: Any = origin or hint
    if container is tuple and isinstance(value, (list, tuple)):
        return _coerce_tuple(name, args, cast("list[Any]", value))
    if container is list and args and isinstance(value, list):
        return [_coerce_value(name, args[0], v) for v in cast("list[Any]", value)]
    if container is dict and len(args) == 2 and isinstance(value, Mapping):
        return {k: _coerce_value(name, args[1], v) for k, v in value.items()}
    return value


def _coerce_field(name: str, hint: Any, current: object, value: object) -> object:
    """Return the value to assign to field ``name`` given the decoded ``value``.

    A mutable nested dataclass already held by the field is filled in place and
    a frozen one is replaced by a new instance; anything else is rebuilt from
    ``hint``.
    """
    if isinstance(value, Mapping) and _is_dataclass_instance(current):
        if _is_frozen(current):
            return _build_dataclass(type(current), value)
        populate(current, value)
        return current
    return _coerce_value(name, hint, value)


def _build_dataclass(cls: type, data: Mapping[str, Any]) -> object:
    """Construct a new ``cls`` instance from ``data``."""
    hints = _field_hints(cls)
    kwargs: dict[str, object] = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            kwargs[f.name] = _coerce_field(f.name, hints.get(f.name), None, data[f.name])
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise RecordShapeError(f"cannot build {cls.__name__}: {exc}") from exc


def populate(record: object, data: Mapping[str, Any]) -> None:
    """Fill ``record`` in place from the decoded mapping ``data``.

    Args:
        record (object): Target record (dataclass instance, mutable mapping or
            plain object).
        data (Mapping[str, Any]): Decoded content.

    Raises:
        RecordShapeError: If ``record`` cannot be filled in place, or a value
            contradicts a simple field annotation.
    """
    if isinstance(record, MutableMapping):
        record.clear()
        record.update(data)
        return

    if _is_dataclass_instance(record):
        hints = _field_hints(type(record))
        for f in dataclasses.fields(record):  # type: ignore[arg-type]
            if f.name not in data:
                continue
            current = getattr(record, f.name)
            new_value = _coerce_field(f.name, hints.get(f.name), current, data[f.name])
            if new_value is current:
                continue
            try:
                setattr(record, f.name, new_value)
            except dataclasses.FrozenInstanceError as exc:
                raise RecordShapeError(
                    f"cannot populate frozen {type(record).__name__} in place"
                ) from exc
        logger.trace("Populated %s from %d keys", type(record).__name__, len(data))
        return

    if isinstance(record, Mapping) or isinstance(record, type) or not hasattr(record, "__dict__"):
        raise RecordShapeError(f"cannot populate {type(record).__name__} in place")

    hints = _field_hints(type(record))
    for name, current in _public_attrs(record).items():
        if name in data:
            setattr(record, name, _coerce_field(name, hints.get(name), current, data[name]))
    logger.trace("Populated %s from %d keys", type(record).__name__, len(data))
