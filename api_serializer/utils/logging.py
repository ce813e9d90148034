# Purpose: Logger factory and request-aware line prefixes for api-serializer.
# Notes: The host application owns handlers/format/level. This module must never print.

from __future__ import annotations

import logging
from dataclasses import dataclass

from api_serializer.context import request_id_ctx_var

LOGGER_NAMESPACE = "api_serializer"

SECURITY_LOGGER_NAME = f"{LOGGER_NAMESPACE}.security"


def get_logger(name: str) -> logging.Logger:
    """
    Logger under the package namespace. Module __name__ values pass through;
    bare names ("security") are nested under it. Never configures handlers.
    """
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


@dataclass(frozen=True)
class LogCtx:
    """
    Where in a traversal (or which request) a log line is about.

    request_id falls back to the id of the request being handled, so call
    sites inside the serializer never need to look it up.
    """
    type_name: str | None = None
    key: str | None = None
    request_id: str | None = None

    def prefix(self) -> str:
        rid = self.request_id or request_id_ctx_var.get()
        parts = (("request_id", rid), ("type", self.type_name), ("key", self.key))
        return " ".join(f"{name}={v}" for name, v in parts if v is not None)


class _CtxAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        prefix = self.extra["ctx"].prefix()
        return (f"{prefix} | {msg}" if prefix else msg), kwargs


def with_ctx(logger: logging.Logger, ctx: LogCtx) -> logging.LoggerAdapter:
    return _CtxAdapter(logger, {"ctx": ctx})
