"""
api_serializer.bridges.protocols

Purpose:
    Narrow structural interfaces a value may satisfy to get specialized
    serialization. Third-party types never need to import these; matching
    is structural (typing.Protocol).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ListLike(Protocol):
    """Pre-serialized table/list payload (rows are already canonical)."""

    def get_data(self) -> Sequence[Mapping[str, Any]]: ...


@runtime_checkable
class StatusCountLike(Protocol):
    def get_key(self) -> str: ...

    def get_label(self) -> str: ...

    def get_count(self) -> int: ...


@runtime_checkable
class PaginatorLike(Protocol):
    page: int
    page_count: int
    item_count: int
    items_per_page: int


@runtime_checkable
class TranslationLike(Protocol):
    """Resolves itself for a locale; `None` means the value's own default."""

    def translate(self, locale: str | None = None) -> str: ...


@runtime_checkable
class PriceLike(Protocol):
    value: int | float | Decimal
    currency: str
    html: str
    is_free: bool
