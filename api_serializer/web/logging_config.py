"""
api_serializer.web.logging_config

Purpose:
    Logging configuration for services that expose serializer output over HTTP.
    Ensures request_id is present in logs, including security events emitted
    when a sensitive value gets masked.

Author:
    Kanir Pandya

Created:
    2026-02-22
"""

from __future__ import annotations

import logging

from api_serializer.context import request_id_ctx_var
from api_serializer.utils.logging import LOGGER_NAMESPACE


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx_var.get() or "-"
        return True


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())
    return handler


def configure_logging(level: int = logging.INFO) -> logging.Handler:
    """
    Attach a request-id aware handler to the api_serializer logger namespace.
    Returns the installed handler. Idempotent per process.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    for h in logger.handlers:
        if any(isinstance(f, RequestIdFilter) for f in h.filters):
            return h

    handler = _make_handler(level)
    logger.addHandler(handler)
    return handler
