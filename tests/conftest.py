"""
tests.conftest

Shared pytest fixtures for serializer tests.
"""

from __future__ import annotations

import pytest

from api_serializer import Convention, Serializer
from api_serializer.settings import reset_default_serializer


@pytest.fixture(autouse=True)
def _fresh_default_serializer():
    """
    The process-wide default is init-once; tests must not leak it into each other.
    """
    reset_default_serializer()
    yield
    reset_default_serializer()


@pytest.fixture()
def security_events() -> list[str]:
    return []


@pytest.fixture()
def serializer_factory(security_events):
    """
    Factory fixture: build a Serializer whose security events land in `security_events`.
    """

    def _make(convention: Convention | None = None, **kwargs) -> Serializer:
        kwargs.setdefault("security_sink", security_events.append)
        return Serializer(convention or Convention(), **kwargs)

    return _make


@pytest.fixture()
def serializer(serializer_factory) -> Serializer:
    return serializer_factory()
