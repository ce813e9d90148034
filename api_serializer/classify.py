"""
api_serializer.classify

Purpose:
    Value classification helpers used by the traversal engine:
    primitives, string-convertible values, sequences, enum scalars,
    mapping keys and field-bearing introspection.

Notes:
    - Field-bearing values expose ordered (name, value) pairs. Sources, in order:
      explicit field_pairs() method, pydantic models, dataclasses, named tuples,
      plain __dict__ / __slots__ objects.
    - Classes, modules, functions and methods are never field-bearing.
    - Plain-object introspection (__dict__ / __slots__) is limited to types
      defined outside the standard library; stdlib value types keep their
      internals private and end in UnsupportedType unless converted earlier.
    - Sets have no order of their own; their items are sorted so output is
      stable across processes (hash randomization).
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import sys
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from types import BuiltinFunctionType, FunctionType, MethodType, ModuleType
from typing import Any

from pydantic import BaseModel

PRIMITIVE_TYPES = (str, int, float, bool)

# These define __str__ but it is not a domain string conversion.
_NOT_STRING_CONVERTIBLE = (
    dt.date,
    Enum,
    BaseModel,
    BaseException,
    bytes,
    bytearray,
    memoryview,
    Mapping,
    Sequence,
    Set,
    type,
)

_NEVER_FIELD_BEARING = (type, ModuleType, FunctionType, BuiltinFunctionType, MethodType)

_SLOT_INTERNALS = frozenset({"__dict__", "__weakref__"})

_STDLIB_MODULES = frozenset(sys.stdlib_module_names) | {"builtins"}


def is_primitive(value: Any) -> bool:
    return isinstance(value, PRIMITIVE_TYPES) and not isinstance(value, Enum)


def as_primitive(value: Any) -> Any:
    """Downcast primitive subclasses (e.g. a str subclass) to the builtin type."""
    t = type(value)
    if t in PRIMITIVE_TYPES:
        return value
    for base in (bool, int, float, str):
        if isinstance(value, base):
            return base(value)
    return value


def is_date_time(value: Any) -> bool:
    return isinstance(value, (dt.datetime, dt.date))


def is_string_convertible(value: Any) -> bool:
    if isinstance(value, _NOT_STRING_CONVERTIBLE):
        return False
    owner = next((k for k in type(value).__mro__ if "__str__" in vars(k)), object)
    return owner is not object


def is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and isinstance(getattr(type(value), "_fields", None), tuple)


def is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return False
    return isinstance(value, (Sequence, Set))


def sequence_items(value: Any) -> list[Any] | Any:
    """Items in output order; set items are sorted, mixed types grouped by type name."""
    if not isinstance(value, Set):
        return value
    try:
        return sorted(value)
    except TypeError:
        return sorted(value, key=lambda item: (type(item).__qualname__, repr(item)))


def enum_scalar(member: Enum) -> Any:
    v = member.value
    if is_primitive(v):
        return as_primitive(v)
    return member.name


def key_to_str(key: Any) -> str:
    if isinstance(key, str) and not isinstance(key, Enum):
        return str(key)
    if isinstance(key, Enum):
        key = enum_scalar(key)
    # Same spelling json.dumps uses for non-string keys.
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def field_pairs(value: Any) -> list[tuple[Any, Any]] | None:
    """
    Return ordered (name, value) pairs for a field-bearing value, or None.
    """
    if isinstance(value, _NEVER_FIELD_BEARING):
        return None

    explicit = getattr(type(value), "field_pairs", None)
    if callable(explicit):
        return list(value.field_pairs())

    if isinstance(value, BaseModel):
        pairs: list[tuple[Any, Any]] = [(name, getattr(value, name)) for name in type(value).model_fields]
        pairs.extend((value.model_extra or {}).items())
        return pairs

    if dataclasses.is_dataclass(value):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]

    if is_named_tuple(value):
        return list(zip(value._fields, value))

    return _object_pairs(value)


def is_stdlib_type(cls: type) -> bool:
    module = getattr(cls, "__module__", None) or ""
    return module.split(".", 1)[0] in _STDLIB_MODULES


def _object_pairs(value: Any) -> list[tuple[Any, Any]] | None:
    if is_stdlib_type(type(value)):
        return None

    pairs: list[tuple[Any, Any]] = []
    seen: set[str] = set()
    has_storage = False

    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict):
        has_storage = True
        pairs.extend(attrs.items())
        seen.update(attrs)

    for cls in type(value).__mro__:
        slots = vars(cls).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            has_storage = True
            if name in seen or name in _SLOT_INTERNALS:
                continue
            seen.add(name)
            if hasattr(value, name):
                pairs.append((name, getattr(value, name)))

    return pairs if has_storage else None
