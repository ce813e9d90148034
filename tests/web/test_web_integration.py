"""
tests.web.test_web_integration

Purpose:
    FastAPI integration regression tests.

Covers:
    - SerializedJSONResponse renders DTOs through the Serializer
    - Masking + security events in HTTP responses (with request_id)
    - Serialization failures -> stable ErrorResponse envelope (500)
    - Accept-Language -> translation bridge locale
    - x-request-id propagation
    - Serializer resolution: explicit, installed on the app, process default
"""

from __future__ import annotations

import datetime as dt
import json
import logging

import pytest

from api_serializer import MASK, Convention
from api_serializer.context import request_id_ctx_var
from api_serializer.web import SerializedJSONResponse
from api_serializer.web.logging_config import RequestIdFilter, configure_logging
from api_serializer.web.middleware.request_context import parse_accept_language


def test_dto_response_is_serialized(client, security_events) -> None:
    r = client.get("/customer")
    assert r.status_code == 200, r.text
    assert r.json() == {
        "customer": {
            "name": "Jan",
            "password": MASK,
            "registered": "2026-02-22 08:00:00",
            "notes": [],
        }
    }
    assert r.headers.get("x-request-id")
    assert len(security_events) == 1


def test_security_event_carries_incoming_request_id(client, security_events) -> None:
    r = client.get("/customer", headers={"X-Request-Id": "req-abc"})
    assert r.status_code == 200
    assert r.headers["x-request-id"] == "req-abc"
    assert "request_id=req-abc" in security_events[0]


def test_correlation_id_header_is_accepted(client) -> None:
    r = client.get("/customer", headers={"X-Correlation-Id": "corr-1"})
    assert r.headers["x-request-id"] == "corr-1"


def test_circular_reference_returns_error_envelope(client) -> None:
    r = client.get("/loop", headers={"X-Request-Id": "req-loop"})
    assert r.status_code == 500

    data = r.json()
    assert data["request_id"] == "req-loop"
    assert data["error_code"] == "CIRCULAR_REFERENCE"
    assert "Customer" in data["message"]
    assert data["details"] == {"type": "Customer"}
    assert r.headers.get("x-request-id") == "req-loop"


def test_convention_applies_per_app(client_factory, serializer_factory) -> None:
    client = client_factory(serializer_factory(Convention(date_time_format="%d.%m.%Y")))
    r = client.get("/customer")
    assert r.json()["customer"]["registered"] == "22.02.2026"


@pytest.mark.parametrize(
    "header,expected",
    [(None, "Hello"), ("en-US,en;q=0.9", "Hello"), ("cs-CZ,cs;q=0.9,en;q=0.8", "Ahoj")],
)
def test_accept_language_drives_translation(client, header, expected) -> None:
    headers = {"Accept-Language": header} if header else {}
    r = client.get("/greeting", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"title": expected}


def test_response_uses_installed_serializer(client_factory, serializer_factory) -> None:
    client = client_factory(serializer_factory(Convention(date_time_format="%Y")))
    r = client.get("/when")
    assert r.status_code == 200, r.text
    assert r.json() == {"when": "2026"}


def test_explicit_serializer_wins_over_installed(client_factory, serializer_factory) -> None:
    client = client_factory(serializer_factory(Convention(date_time_format="%Y")))
    r = client.get("/explicit")
    assert r.json() == {"when": "2026-02"}


def test_response_outside_request_uses_process_default() -> None:
    response = SerializedJSONResponse({"when": dt.date(2026, 2, 22)})
    assert json.loads(response.body) == {"when": "2026-02-22 00:00:00"}


@pytest.mark.parametrize(
    "header,expected",
    [
        (None, None),
        ("", None),
        ("*", None),
        ("cs-CZ,cs;q=0.9", "cs-CZ"),
        ("en;q=0.8", "en"),
    ],
)
def test_parse_accept_language(header, expected) -> None:
    assert parse_accept_language(header) == expected


def test_request_id_filter() -> None:
    record = logging.LogRecord("api_serializer", logging.INFO, __file__, 1, "msg", None, None)
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"

    token = request_id_ctx_var.set("req-9")
    try:
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx_var.reset(token)
    assert record.request_id == "req-9"


def test_configure_logging_is_idempotent() -> None:
    logger = logging.getLogger("api_serializer")
    before = list(logger.handlers)
    before_level = logger.level
    try:
        h1 = configure_logging()
        h2 = configure_logging()
        assert h1 is h2
        assert sum(1 for h in logger.handlers if h is h1) == 1
    finally:
        for h in list(logger.handlers):
            if h not in before:
                logger.removeHandler(h)
        logger.setLevel(before_level)
