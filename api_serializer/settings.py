# api_serializer/settings.py
"""
api_serializer.settings

Purpose:
    Centralized configuration for the serializer (env-driven) and the
    process-wide default Serializer.

Notes:
    - SerializerSettings is the mutable-at-build-time input; Convention is the
      immutable value the engine actually reads.
    - The process default is init-once: configure_default_serializer() may be
      called at most once, before or instead of the lazy env-based default.
      reset_default_serializer() exists for tests only.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import os
import threading
from typing import Mapping

from pydantic import BaseModel, Field, field_validator

from api_serializer.bridges.adapters import CORE_ADAPTERS, DEFAULT_ADAPTERS
from api_serializer.contracts.convention import (
    DEFAULT_DATE_TIME_FORMAT,
    DEFAULT_KEYS_TO_HIDE,
    DEFAULT_MAX_DEPTH,
    Convention,
)
from api_serializer.errors import ConfigurationError, DefaultSerializerAlreadyConfigured
from api_serializer.masking import SecurityEventSink
from api_serializer.serializer import Serializer
from api_serializer.utils.logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "API_SERIALIZER_"


# ---------------------------------------------------------------------------
# Env Parsing Helpers
# ---------------------------------------------------------------------------

def _as_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    v = value.strip().lower()
    if v in ("1", "true", "yes", "y", "on"):
        return True
    if v in ("0", "false", "no", "n", "off"):
        return False
    return None


def _as_int(raw: str | None, *, default: int | None = None) -> int | None:
    """
    Parse an environment variable-ish value into an int.

    Accepts:
      - None / "" -> default
      - "30" -> 30
    Raises:
      ValueError for non-integer strings.
    """
    if raw is None:
        return default
    s = str(raw).strip()
    if not s:
        return default
    return int(s)


def _as_key_list(raw: str | None) -> list[str] | None:
    if raw is None or not raw.strip():
        return None
    return [part.strip() for part in raw.split(",") if part.strip()]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class SerializerSettings(BaseModel):
    date_time_format: str = Field(default=DEFAULT_DATE_TIME_FORMAT)
    rewrite_to_string_method: bool = Field(default=True)
    rewrite_null_to_undefined: bool = Field(default=False)
    keys_to_hide: list[str] = Field(default_factory=lambda: sorted(DEFAULT_KEYS_TO_HIDE))
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)

    # Paginator / translation / price bridges.
    enable_optional_bridges: bool = Field(default=True)

    @field_validator("keys_to_hide")
    @classmethod
    def _strip_keys(cls, v: list[str]) -> list[str]:
        return [k.strip().lower() for k in v if k and k.strip()]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SerializerSettings":
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        def _bool(name: str, field_name: str) -> None:
            raw = env.get(ENV_PREFIX + name)
            if raw is None:
                return
            parsed = _as_bool(raw)
            if parsed is None:
                raise ConfigurationError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")
            values[field_name] = parsed

        fmt = env.get(ENV_PREFIX + "DATE_TIME_FORMAT")
        if fmt:
            values["date_time_format"] = fmt

        _bool("REWRITE_TO_STRING", "rewrite_to_string_method")
        _bool("NULL_TO_UNDEFINED", "rewrite_null_to_undefined")
        _bool("OPTIONAL_BRIDGES", "enable_optional_bridges")

        keys = _as_key_list(env.get(ENV_PREFIX + "KEYS_TO_HIDE"))
        if keys is not None:
            values["keys_to_hide"] = keys

        try:
            max_depth = _as_int(env.get(ENV_PREFIX + "MAX_DEPTH"), default=None)
        except ValueError as e:
            raise ConfigurationError(f"{ENV_PREFIX}MAX_DEPTH must be an integer: {e}") from e
        if max_depth is not None:
            values["max_depth"] = max_depth

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigurationError(f"Invalid serializer settings: {e}") from e

    def to_convention(self) -> Convention:
        return Convention(
            date_time_format=self.date_time_format,
            rewrite_to_string_method=self.rewrite_to_string_method,
            rewrite_null_to_undefined=self.rewrite_null_to_undefined,
            keys_to_hide=frozenset(self.keys_to_hide),
            max_depth=self.max_depth,
        )

    def build_serializer(self, *, security_sink: SecurityEventSink | None = None) -> Serializer:
        adapters = DEFAULT_ADAPTERS if self.enable_optional_bridges else CORE_ADAPTERS
        return Serializer(self.to_convention(), adapters=adapters, security_sink=security_sink)


def get_settings() -> SerializerSettings:
    return SerializerSettings.from_env()


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default_lock = threading.Lock()
_default_serializer: Serializer | None = None
_default_explicit = False


def configure_default_serializer(serializer: Serializer) -> Serializer:
    """
    Install the process-wide default Serializer. May be called once.
    """
    global _default_serializer, _default_explicit
    with _default_lock:
        if _default_explicit:
            raise DefaultSerializerAlreadyConfigured(
                "Default serializer has already been configured for this process"
            )
        if _default_serializer is not None:
            logger.warning("Replacing lazily created default serializer with an explicit one")
        _default_serializer = serializer
        _default_explicit = True
        return serializer


def get_default_serializer() -> Serializer:
    """
    Return the process-wide default Serializer, building it from env on first use.
    """
    global _default_serializer
    with _default_lock:
        if _default_serializer is None:
            _default_serializer = get_settings().build_serializer()
            logger.debug("Default serializer created from environment settings")
        return _default_serializer


def reset_default_serializer() -> None:
    """Test helper: forget the process-wide default."""
    global _default_serializer, _default_explicit
    with _default_lock:
        _default_serializer = None
        _default_explicit = False
