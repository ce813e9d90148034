"""
api_serializer.masking

Purpose:
    Replace values of security-sensitive keys (password, pin, credit card, ...)
    with a fixed mask and record a security event for every hit.

Notes:
    - Matching is case-insensitive and substring based: "userPassword" matches "password".
    - Only string values are masked. bcrypt hashes are already safe and pass through.
    - The event sink is fire-and-forget: a failing sink is logged, never raised.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import re
from typing import Any, Callable

from api_serializer.context import request_id_ctx_var
from api_serializer.contracts.convention import MASK, Convention
from api_serializer.utils.logging import SECURITY_LOGGER_NAME, LogCtx, get_logger, with_ctx

SecurityEventSink = Callable[[str], None]

BCRYPT_HASH_RE = re.compile(r"^\$2[ayb]\$\d{2}\$[./A-Za-z0-9]{53}$")

logger = get_logger(__name__)
security_logger = get_logger(SECURITY_LOGGER_NAME)


def is_bcrypt_hash(value: str) -> bool:
    return BCRYPT_HASH_RE.fullmatch(value) is not None


def log_security_event(message: str) -> None:
    """Default sink: CRITICAL on the security logger."""
    security_logger.critical(message)


class KeyMasker:
    def __init__(self, convention: Convention, sink: SecurityEventSink | None = None) -> None:
        self._convention = convention
        self._sink: SecurityEventSink = sink or log_security_event

    def mask(self, key: str, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        if not self._convention.is_hidden_key(key):
            return value
        if is_bcrypt_hash(value):
            return value

        self._emit(
            key,
            f"Security risk: key '{key}' looks like a secret and its plain value "
            "was about to be exposed in an API response; value has been masked."
        )
        return MASK

    def _emit(self, key: str, message: str) -> None:
        rid = request_id_ctx_var.get()
        if rid:
            message = f"{message} (request_id={rid})"
        try:
            self._sink(message)
        except Exception:
            with_ctx(logger, LogCtx(key=key)).exception("Security event sink failed")
