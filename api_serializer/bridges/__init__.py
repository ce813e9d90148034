# Purpose: Bridge package entrypoint (capability protocols + fixed adapters).

from .adapters import (
    CORE_ADAPTERS,
    DEFAULT_ADAPTERS,
    LIST_ADAPTER,
    OPTIONAL_ADAPTERS,
    PAGINATOR_ADAPTER,
    PRICE_ADAPTER,
    STATUS_COUNT_ADAPTER,
    TRANSLATION_ADAPTER,
    BridgeAdapter,
    find_adapter,
)
from .protocols import ListLike, PaginatorLike, PriceLike, StatusCountLike, TranslationLike

__all__ = [
    "BridgeAdapter",
    "CORE_ADAPTERS",
    "DEFAULT_ADAPTERS",
    "OPTIONAL_ADAPTERS",
    "LIST_ADAPTER",
    "STATUS_COUNT_ADAPTER",
    "PAGINATOR_ADAPTER",
    "TRANSLATION_ADAPTER",
    "PRICE_ADAPTER",
    "find_adapter",
    "ListLike",
    "StatusCountLike",
    "PaginatorLike",
    "TranslationLike",
    "PriceLike",
]
