"""
api_serializer.contracts.request_context_policy

Purpose:
    Central policy for request-scoped context headers (request/correlation id
    and locale negotiation).

Author:
    Kanir Pandya

Created:
    2026-02-22
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContextPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    response_header: str = "X-Request-Id"
    locale_header: str = "Accept-Language"
    default_locale: str | None = None
