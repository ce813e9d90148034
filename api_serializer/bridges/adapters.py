"""
api_serializer.bridges.adapters

Purpose:
    Fixed, closed set of bridge adapters (capability check + fixed-shape output).

Design Notes:
    - A Serializer is built with a tuple of adapters; leaving one out means its
      check never matches and such values fall through normal dispatch.
    - mandated_key: the only mapping key the adapter output may be placed under.
      Top-level values are exempt (the engine enforces this, not the adapter).
    - Adapter output is final: the engine does not traverse it again.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from api_serializer.bridges.protocols import (
    ListLike,
    PaginatorLike,
    PriceLike,
    StatusCountLike,
    TranslationLike,
)
from api_serializer.context import get_active_locale


@dataclass(frozen=True)
class BridgeAdapter:
    name: str
    capability: type
    convert: Callable[[Any], Any]
    mandated_key: str | None = None

    def matches(self, value: Any) -> bool:
        # str and bytes have an unrelated translate(); classes are never values.
        if isinstance(value, (str, bytes, bytearray, type)):
            return False
        return isinstance(value, self.capability)


def list_to_items(value: ListLike) -> list[Any]:
    return list(value.get_data())


def status_count_to_dict(value: StatusCountLike) -> dict[str, Any]:
    return {
        "key": value.get_key(),
        "label": value.get_label(),
        "count": value.get_count(),
    }


def paginator_to_dict(value: PaginatorLike) -> dict[str, Any]:
    page = value.page
    page_count = value.page_count
    return {
        "page": page,
        "pageCount": page_count,
        "itemCount": value.item_count,
        "itemsPerPage": value.items_per_page,
        "firstPage": 1,
        "lastPage": page_count,
        "isFirstPage": page == 1,
        "isLastPage": page == page_count,
    }


def translation_to_str(value: TranslationLike) -> str:
    return str(value.translate(get_active_locale()))


def price_to_dict(value: PriceLike) -> dict[str, Any]:
    return {
        "value": f"{value.value:.2f}",
        "currency": str(value.currency),
        "html": str(value.html),
        "isFree": bool(value.is_free),
    }


LIST_ADAPTER = BridgeAdapter("list", ListLike, list_to_items, mandated_key="items")
STATUS_COUNT_ADAPTER = BridgeAdapter("status_count", StatusCountLike, status_count_to_dict)
PAGINATOR_ADAPTER = BridgeAdapter("paginator", PaginatorLike, paginator_to_dict, mandated_key="paginator")
TRANSLATION_ADAPTER = BridgeAdapter("translation", TranslationLike, translation_to_str)
PRICE_ADAPTER = BridgeAdapter("price", PriceLike, price_to_dict)

CORE_ADAPTERS: tuple[BridgeAdapter, ...] = (LIST_ADAPTER, STATUS_COUNT_ADAPTER)
OPTIONAL_ADAPTERS: tuple[BridgeAdapter, ...] = (PAGINATOR_ADAPTER, TRANSLATION_ADAPTER, PRICE_ADAPTER)
DEFAULT_ADAPTERS: tuple[BridgeAdapter, ...] = CORE_ADAPTERS + OPTIONAL_ADAPTERS


def find_adapter(adapters: tuple[BridgeAdapter, ...], value: Any) -> BridgeAdapter | None:
    for adapter in adapters:
        if adapter.matches(value):
            return adapter
    return None
