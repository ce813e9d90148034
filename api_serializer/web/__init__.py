"""
api_serializer.web

Purpose:
    FastAPI integration: request context middleware, serialization error
    handlers and a JSON response class backed by the Serializer.

Usage:
    app = FastAPI()
    install_serializer(app)

    @app.get("/users/{user_id}")
    def get_user(user_id: int):
        return SerializedJSONResponse(load_user(user_id))
"""

from __future__ import annotations

from fastapi import FastAPI

from api_serializer.contracts.request_context_policy import RequestContextPolicy
from api_serializer.serializer import Serializer
from api_serializer.settings import get_default_serializer
from api_serializer.web.error_handlers import register_error_handlers
from api_serializer.web.middleware.request_context import RequestContextMiddleware
from api_serializer.web.responses import SerializedJSONResponse


def install_serializer(
    app: FastAPI,
    serializer: Serializer | None = None,
    *,
    policy: RequestContextPolicy | None = None,
) -> Serializer:
    """
    Wire middleware + error handlers and expose the serializer as app.state.serializer.

    SerializedJSONResponse built while handling a request of this app uses
    `serializer` unless one is passed explicitly.
    """
    active = serializer or get_default_serializer()
    app.state.serializer = active

    app.add_middleware(
        RequestContextMiddleware,
        policy=policy or RequestContextPolicy(),
        serializer=active,
    )
    register_error_handlers(app)
    return active


__all__ = [
    "install_serializer",
    "register_error_handlers",
    "RequestContextMiddleware",
    "SerializedJSONResponse",
]
