"""
tests.web.conftest

Shared pytest fixtures for FastAPI integration tests.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api_serializer import Convention, Serializer
from api_serializer.web import SerializedJSONResponse, install_serializer


@dataclass
class Customer:
    name: str
    password: str
    registered: dt.datetime
    notes: list[Any] = field(default_factory=list)


class Greeting:
    __slots__ = ()

    def translate(self, locale: str | None = None) -> str:
        return "Ahoj" if (locale or "").startswith("cs") else "Hello"


def build_app(serializer: Serializer) -> FastAPI:
    app = FastAPI()
    install_serializer(app, serializer)

    @app.get("/customer")
    def customer() -> SerializedJSONResponse:
        c = Customer("Jan", "secret123", dt.datetime(2026, 2, 22, 8, 0, 0))
        return SerializedJSONResponse({"customer": c})

    @app.get("/loop")
    def loop() -> SerializedJSONResponse:
        c = Customer("Loop", "x", dt.datetime(2026, 1, 1))
        c.notes.append(c)
        return SerializedJSONResponse(c)

    @app.get("/greeting")
    def greeting() -> SerializedJSONResponse:
        return SerializedJSONResponse({"title": Greeting()})

    @app.get("/when")
    def when() -> SerializedJSONResponse:
        return SerializedJSONResponse({"when": dt.date(2026, 2, 22)})

    @app.get("/explicit")
    def explicit() -> SerializedJSONResponse:
        month = Serializer(Convention(date_time_format="%Y-%m"))
        return SerializedJSONResponse({"when": dt.date(2026, 2, 22)}, serializer=month)

    return app


@pytest.fixture()
def client_factory(serializer_factory):
    """
    Factory fixture that creates a fresh TestClient around a fresh app.
    """

    def _make(serializer: Serializer | None = None) -> TestClient:
        app = build_app(serializer or serializer_factory())
        return TestClient(app, raise_server_exceptions=True)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
