"""
api_serializer.web.error_handlers

Purpose:
    Register exception handlers that turn serialization failures into a
    stable ErrorResponse (HTTP 500) that always carries the request_id.

Author:
    Kanir Pandya

Created:
    2026-02-22
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api_serializer.context import request_id_ctx_var
from api_serializer.contracts.error_contract import ErrorResponse
from api_serializer.errors import SerializationError
from api_serializer.utils.logging import LogCtx, get_logger, with_ctx

logger = get_logger(__name__)


def _get_request_id(request: Request) -> str:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    rid2 = request_id_ctx_var.get()
    if isinstance(rid2, str) and rid2:
        return rid2

    return "-"


def register_error_handlers(app: FastAPI) -> None:
    """
    Register serialization exception handlers on the FastAPI app.
    """

    @app.exception_handler(SerializationError)
    async def handle_serialization_error(request: Request, exc: SerializationError) -> JSONResponse:
        rid = _get_request_id(request)
        with_ctx(logger, LogCtx(request_id=rid)).error(
            "Response could not be serialized: %s", exc
        )

        payload = ErrorResponse(
            request_id=rid,
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details(),
        )
        return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))
