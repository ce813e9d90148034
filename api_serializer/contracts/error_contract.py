"""
api_serializer.contracts.error_contract

Purpose:
    Stable error contract for serialization failures (codes + response model).
    Used by the exception types and by the FastAPI handlers so clients see
    a consistent envelope.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SerializationErrorCode(str, Enum):
    # Traversal
    STRUCTURE_TOO_DEEP = "STRUCTURE_TOO_DEEP"
    CIRCULAR_REFERENCE = "CIRCULAR_REFERENCE"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"

    # Bridges
    MISPLACED_BRIDGE_VALUE = "MISPLACED_BRIDGE_VALUE"

    # Setup
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class ErrorResponse(BaseModel):
    request_id: str = Field(..., description="Request correlation id for debugging")
    error_code: SerializationErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")
