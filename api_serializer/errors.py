"""
api_serializer.errors

Purpose:
    Exception types raised by the serializer.
    Every traversal failure is fatal to the enclosing serialize() call;
    no partial output is returned and nothing is retried.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

from typing import Any

from api_serializer.contracts.error_contract import SerializationErrorCode


class SerializationError(Exception):
    error_code: SerializationErrorCode = SerializationErrorCode.UNSUPPORTED_TYPE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, Any] | None:
        return None

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class StructureTooDeep(SerializationError):
    error_code = SerializationErrorCode.STRUCTURE_TOO_DEEP

    def __init__(self, max_depth: int) -> None:
        super().__init__(
            f"Structure is too deep: maximum allowed nesting is {max_depth} levels."
        )
        self.max_depth = max_depth

    def details(self) -> dict[str, Any]:
        return {"max_depth": self.max_depth}


class CircularReference(SerializationError):
    error_code = SerializationErrorCode.CIRCULAR_REFERENCE

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"Circular reference detected: instance of '{type_name}' "
            "is already being serialized higher up the structure."
        )
        self.type_name = type_name

    def details(self) -> dict[str, Any]:
        return {"type": self.type_name}


class UnsupportedType(SerializationError):
    error_code = SerializationErrorCode.UNSUPPORTED_TYPE

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Value of type '{type_name}' can not be serialized.")
        self.type_name = type_name

    def details(self) -> dict[str, Any]:
        return {"type": self.type_name}


class MisplacedBridgeValue(SerializationError):
    error_code = SerializationErrorCode.MISPLACED_BRIDGE_VALUE

    def __init__(self, bridge: str, key: str | None, expected_key: str) -> None:
        where = f"key '{key}'" if key is not None else "a sequence slot"
        super().__init__(
            f"Value of '{bridge}' must be placed under key '{expected_key}', "
            f"but it was found under {where}."
        )
        self.bridge = bridge
        self.key = key
        self.expected_key = expected_key

    def details(self) -> dict[str, Any]:
        return {"bridge": self.bridge, "key": self.key, "expected_key": self.expected_key}


class ConfigurationError(ValueError):
    """Invalid convention or settings input."""

    error_code = SerializationErrorCode.CONFIGURATION_ERROR


class DefaultSerializerAlreadyConfigured(ConfigurationError):
    pass
