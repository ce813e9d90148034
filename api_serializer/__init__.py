"""Public API for api-serializer."""

from __future__ import annotations

from typing import Any

from api_serializer.bridges import (
    CORE_ADAPTERS,
    DEFAULT_ADAPTERS,
    OPTIONAL_ADAPTERS,
    BridgeAdapter,
    ListLike,
    PaginatorLike,
    PriceLike,
    StatusCountLike,
    TranslationLike,
)
from api_serializer.contracts.convention import MASK, Convention
from api_serializer.contracts.error_contract import ErrorResponse, SerializationErrorCode
from api_serializer.errors import (
    CircularReference,
    ConfigurationError,
    DefaultSerializerAlreadyConfigured,
    MisplacedBridgeValue,
    SerializationError,
    StructureTooDeep,
    UnsupportedType,
)
from api_serializer.serializer import Serializer
from api_serializer.settings import (
    SerializerSettings,
    configure_default_serializer,
    get_default_serializer,
)

__version__ = "0.1.0"


def serialize(value: Any) -> Any:
    """Serialize value with the process-wide default Serializer."""
    return get_default_serializer().serialize(value)


__all__ = [
    "__version__",
    "serialize",
    "Serializer",
    "SerializerSettings",
    "Convention",
    "MASK",
    "configure_default_serializer",
    "get_default_serializer",
    "BridgeAdapter",
    "CORE_ADAPTERS",
    "OPTIONAL_ADAPTERS",
    "DEFAULT_ADAPTERS",
    "ListLike",
    "StatusCountLike",
    "PaginatorLike",
    "TranslationLike",
    "PriceLike",
    "SerializationError",
    "StructureTooDeep",
    "CircularReference",
    "UnsupportedType",
    "MisplacedBridgeValue",
    "ConfigurationError",
    "DefaultSerializerAlreadyConfigured",
    "SerializationErrorCode",
    "ErrorResponse",
]
