"""
api_serializer.serializer

Purpose:
    Recursive traversal engine. Converts arbitrary values (DTOs, entities,
    enums, dates, collections) into a canonical tree of None/bool/int/float/str,
    lists and insertion-ordered dicts, ready for JSON encoding.

Design Notes:
    - Dispatch order: primitives -> bridges -> string-convertible -> date/time
      -> enum -> sequences -> mappings / field-bearing -> UnsupportedType.
    - All mutable traversal state lives in a TraversalState created per call.
    - A failure anywhere aborts the whole call; nothing partial is returned.
    - The only side effect is security-event logging via KeyMasker.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable

from api_serializer import classify
from api_serializer.bridges.adapters import DEFAULT_ADAPTERS, BridgeAdapter, find_adapter
from api_serializer.contracts.convention import INTERNAL_KEY_PREFIX, Convention
from api_serializer.errors import MisplacedBridgeValue, SerializationError, UnsupportedType
from api_serializer.guards import TraversalState
from api_serializer.masking import KeyMasker, SecurityEventSink
from api_serializer.utils.logging import LogCtx, get_logger, with_ctx

logger = get_logger(__name__)

# Placement marker for the value passed to serialize() itself.
_TOP_LEVEL = object()


class Serializer:
    def __init__(
        self,
        convention: Convention | None = None,
        *,
        adapters: Iterable[BridgeAdapter] = DEFAULT_ADAPTERS,
        security_sink: SecurityEventSink | None = None,
    ) -> None:
        self._convention = convention or Convention()
        self._adapters: tuple[BridgeAdapter, ...] = tuple(adapters)
        self._masker = KeyMasker(self._convention, sink=security_sink)

    @property
    def convention(self) -> Convention:
        return self._convention

    @property
    def adapters(self) -> tuple[BridgeAdapter, ...]:
        return self._adapters

    def serialize(self, value: Any) -> Any:
        """
        Convert value into a canonical output tree.

        Raises:
            StructureTooDeep, CircularReference, UnsupportedType, MisplacedBridgeValue
        """
        state = TraversalState(self._convention.max_depth)
        try:
            return self._process(value, state, _TOP_LEVEL)
        except SerializationError as e:
            with_ctx(logger, LogCtx(type_name=type(value).__name__)).debug(
                "serialize failed: %s", e
            )
            raise

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _process(self, value: Any, state: TraversalState, slot: Any) -> Any:
        if value is None:
            return None

        if classify.is_primitive(value):
            return classify.as_primitive(value)

        adapter = find_adapter(self._adapters, value)
        if adapter is not None:
            self._check_placement(adapter, slot)
            return adapter.convert(value)

        conv = self._convention

        if conv.rewrite_to_string_method and classify.is_string_convertible(value):
            return str(value)

        if classify.is_date_time(value):
            return value.strftime(conv.date_time_format)

        if isinstance(value, Enum):
            return classify.enum_scalar(value)

        if isinstance(value, Mapping):
            return self._process_pairs(value.items(), value, state)

        # Named tuples are field-bearing, not plain sequences.
        if classify.is_sequence(value) and not classify.is_named_tuple(value):
            return self._process_sequence(value, state)

        pairs = classify.field_pairs(value)
        if pairs is not None:
            return self._process_pairs(pairs, value, state)

        raise UnsupportedType(type(value).__qualname__)

    def _check_placement(self, adapter: BridgeAdapter, slot: Any) -> None:
        if slot is _TOP_LEVEL or adapter.mandated_key is None:
            return
        if slot != adapter.mandated_key:
            raise MisplacedBridgeValue(adapter.name, slot, adapter.mandated_key)

    def _process_sequence(self, value: Iterable[Any], state: TraversalState) -> list[Any]:
        with state.container(value):
            return [self._process(item, state, None) for item in classify.sequence_items(value)]

    def _process_pairs(
        self,
        pairs: Iterable[tuple[Any, Any]],
        owner: Any,
        state: TraversalState,
    ) -> dict[str, Any]:
        drop_nulls = self._convention.rewrite_null_to_undefined
        out: dict[str, Any] = {}

        with state.container(owner):
            for raw_key, raw_value in pairs:
                key = classify.key_to_str(raw_key)
                if key.startswith(INTERNAL_KEY_PREFIX):
                    continue

                value = self._process(raw_value, state, key)
                if value is None and drop_nulls:
                    continue

                out[key] = self._masker.mask(key, value)

        return out
