"""
tests.core.test_key_masking

Purpose:
    Sensitive-key masking and security event emission.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pytest

from api_serializer import MASK, Convention, Serializer
from api_serializer.context import request_id_ctx_var
from api_serializer.masking import KeyMasker, is_bcrypt_hash

BCRYPT = "$2y$10$" + "a" * 22 + "B./9" * 7 + "xyz"


@dataclass
class Account:
    username: str
    password: str
    pin_code: int


def test_bcrypt_fixture_shape() -> None:
    assert len(BCRYPT) == 60
    assert is_bcrypt_hash(BCRYPT)
    assert not is_bcrypt_hash("$2x$10$" + "a" * 53)
    assert not is_bcrypt_hash(BCRYPT[:-1])


def test_password_is_masked_and_event_recorded(serializer, security_events) -> None:
    out = serializer.serialize({"password": "secret123"})
    assert out == {"password": MASK}
    assert len(security_events) == 1
    assert "password" in security_events[0]


def test_bcrypt_value_passes_through(serializer, security_events) -> None:
    assert serializer.serialize({"password": BCRYPT}) == {"password": BCRYPT}
    assert security_events == []


@pytest.mark.parametrize("key", ["userPassword", "PASSWD", "credit card number", "ccNumber", "Pin"])
def test_substring_case_insensitive_match(serializer, key) -> None:
    assert serializer.serialize({key: "value"}) == {key: MASK}


def test_non_string_values_are_not_masked(serializer, security_events) -> None:
    out = serializer.serialize(Account("jan", "hunter2", 1234))
    assert out == {"username": "jan", "password": MASK, "pin_code": 1234}
    assert len(security_events) == 1


def test_nested_mapping_under_hidden_key_is_traversed_not_masked(serializer) -> None:
    out = serializer.serialize({"password": {"hint": "pet name", "old": "abc"}})
    assert out == {"password": {"hint": "pet name", "old": "abc"}}


def test_only_immediate_key_is_checked(serializer) -> None:
    out = serializer.serialize({"passwords": ["one", "two"]})
    assert out == {"passwords": ["one", "two"]}


def test_custom_hidden_keys(serializer_factory) -> None:
    s = serializer_factory(Convention(keys_to_hide=frozenset({"Token"})))
    assert s.serialize({"accessToken": "t", "password": "p"}) == {"accessToken": MASK, "password": "p"}


def test_default_sink_logs_critical(caplog) -> None:
    s = Serializer()
    with caplog.at_level(logging.CRITICAL, logger="api_serializer.security"):
        s.serialize({"pwd": "x"})

    records = [r for r in caplog.records if r.name == "api_serializer.security"]
    assert len(records) == 1
    assert records[0].levelno == logging.CRITICAL
    assert "pwd" in records[0].getMessage()


def test_event_carries_request_id(security_events) -> None:
    masker = KeyMasker(Convention(), sink=security_events.append)
    token = request_id_ctx_var.set("req-42")
    try:
        assert masker.mask("password", "x") == MASK
    finally:
        request_id_ctx_var.reset(token)
    assert "request_id=req-42" in security_events[0]


def test_failing_sink_does_not_break_serialization(caplog) -> None:
    def broken_sink(message: str) -> None:
        raise RuntimeError("sink down")

    s = Serializer(security_sink=broken_sink)
    with caplog.at_level(logging.ERROR, logger="api_serializer"):
        assert s.serialize({"password": "x"}) == {"password": MASK}
    assert any("sink failed" in r.getMessage() for r in caplog.records)
