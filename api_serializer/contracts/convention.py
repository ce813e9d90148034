# api_serializer/contracts/convention.py
"""
api_serializer.contracts.convention

Purpose:
    Immutable serialization conventions (date format, null handling,
    hidden keys, depth ceiling). Built once and shared read-only by every
    Serializer call.

Design Notes:
    - Alternate behavior = new instance (dataclasses.replace), never a subclass.
    - keys_to_hide is normalized to a lower-cased frozenset at construction.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from api_serializer.errors import ConfigurationError

DEFAULT_DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_DEPTH = 32
DEFAULT_KEYS_TO_HIDE: frozenset[str] = frozenset(
    {
        "password",
        "passwd",
        "pass",
        "pwd",
        "creditcard",
        "credit card",
        "cc",
        "pin",
    }
)

# Keys/fields starting with this prefix are internal and never serialized.
INTERNAL_KEY_PREFIX = "_"

MASK = "*****"


def _normalize_keys(keys: Iterable[str]) -> frozenset[str]:
    if isinstance(keys, str):
        raise ConfigurationError("keys_to_hide must be a collection of strings, not a single string")
    out = frozenset(str(k).strip().lower() for k in keys)
    if "" in out:
        raise ConfigurationError("keys_to_hide must not contain empty entries")
    return out


@dataclass(frozen=True)
class Convention:
    date_time_format: str = DEFAULT_DATE_TIME_FORMAT
    rewrite_to_string_method: bool = True
    rewrite_null_to_undefined: bool = False
    keys_to_hide: frozenset[str] = field(default=DEFAULT_KEYS_TO_HIDE)
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not self.date_time_format:
            raise ConfigurationError("date_time_format must be a non-empty strftime pattern")
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ConfigurationError(f"max_depth must be a positive int, got {self.max_depth!r}")
        # frozen: bypass __setattr__ once to store the normalized set
        object.__setattr__(self, "keys_to_hide", _normalize_keys(self.keys_to_hide))

    def is_hidden_key(self, key: str) -> bool:
        k = key.lower()
        return any(hidden in k for hidden in self.keys_to_hide)
