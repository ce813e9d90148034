"""
api_serializer.web.responses

Purpose:
    JSON response class that runs content through a Serializer before
    encoding, so routes can return entities/DTOs directly.

Notes:
    - Serializer resolution: explicit argument, then the one installed on the
      app handling the request (install_serializer), then the process default.
    - Serialization errors propagate; register_error_handlers() turns them
      into a stable ErrorResponse envelope.

Author:
    Kanir Pandya

Created:
    2026-02-22
"""

from __future__ import annotations

from typing import Any, Mapping

from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask

from api_serializer.context import serializer_ctx_var
from api_serializer.serializer import Serializer
from api_serializer.settings import get_default_serializer


class SerializedJSONResponse(JSONResponse):
    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
        *,
        serializer: Serializer | None = None,
    ) -> None:
        # render() runs inside super().__init__, so this must be set first.
        self._serializer = serializer or serializer_ctx_var.get() or get_default_serializer()
        super().__init__(content, status_code, headers, media_type, background)

    def render(self, content: Any) -> bytes:
        return super().render(self._serializer.serialize(content))
