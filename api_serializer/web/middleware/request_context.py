"""
api_serializer.web.middleware.request_context

Purpose:
    Middleware that ensures each request has a request-id (echoed on the
    response), exposes the negotiated locale to translation bridges and
    scopes the app's installed serializer to the request.

Author:
    Kanir Pandya

Created:
    2026-02-22
"""

from __future__ import annotations

import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from api_serializer.context import locale_ctx_var, request_id_ctx_var, serializer_ctx_var
from api_serializer.contracts.request_context_policy import RequestContextPolicy
from api_serializer.serializer import Serializer


def parse_accept_language(header: str | None) -> str | None:
    """
    Return the first language tag of an Accept-Language header.

    "cs-CZ,cs;q=0.9,en;q=0.8" -> "cs-CZ"; "*" / "" -> None
    """
    if not header:
        return None
    first = header.split(",", 1)[0].split(";", 1)[0].strip()
    if not first or first == "*":
        return None
    return first


class RequestContextMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        policy: RequestContextPolicy | None = None,
        serializer: Serializer | None = None,
    ) -> None:
        super().__init__(app)
        self._policy = policy or RequestContextPolicy()
        self._serializer = serializer

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        policy = self._policy

        incoming = (
            request.headers.get(policy.request_id_header)
            or request.headers.get(policy.correlation_id_header)
        )
        request_id = incoming if incoming else str(uuid.uuid4())
        locale = parse_accept_language(request.headers.get(policy.locale_header)) or policy.default_locale

        # Attach for handlers/logging
        request.state.request_id = request_id
        request.state.locale = locale
        rid_token = request_id_ctx_var.set(request_id)
        locale_token = locale_ctx_var.set(locale)
        serializer_token = serializer_ctx_var.set(self._serializer)

        try:
            response: Response = await call_next(request)
        finally:
            request_id_ctx_var.reset(rid_token)
            locale_ctx_var.reset(locale_token)
            serializer_ctx_var.reset(serializer_token)

        # Echo back for client correlation
        response.headers[policy.response_header] = request_id
        return response
