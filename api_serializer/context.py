"""
api_serializer.context

Purpose:
    Request-scoped context storage using contextvars.
    Carries the request id into security-event logs, the active locale
    into translation bridges and the app's installed serializer into
    SerializedJSONResponse.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import contextvars
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api_serializer.serializer import Serializer

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)

locale_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "locale",
    default=None,
)

serializer_ctx_var: contextvars.ContextVar[Serializer | None] = contextvars.ContextVar(
    "serializer",
    default=None,
)


def get_active_locale() -> str | None:
    return locale_ctx_var.get()
