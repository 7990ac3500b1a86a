"""Utility tests: retry with backoff, masking, byte formatting, safe JSON, validators."""

from unittest.mock import AsyncMock

import pytest

from adivalt.core import utils
from adivalt.core.constants import ErrorCode, message_for
from adivalt.domain.exceptions import DomainError


@pytest.fixture
def no_sleep(monkeypatch):
    sleep = AsyncMock(return_value=None)
    monkeypatch.setattr(utils.asyncio, "sleep", sleep)
    return sleep


async def test_retry_returns_first_success(no_sleep):
    func = AsyncMock(side_effect=[RuntimeError("a"), "ok"])
    assert await utils.retry(func, max_attempts=3, delay_seconds=0.5) == "ok"
    assert func.await_count == 2
    no_sleep.assert_awaited_once_with(0.5)


async def test_retry_backoff_and_exhaustion(no_sleep):
    last = RuntimeError("c")
    func = AsyncMock(side_effect=[RuntimeError("a"), RuntimeError("b"), last])

    with pytest.raises(DomainError) as exc_info:
        await utils.retry(func, max_attempts=3, delay_seconds=1.0, backoff_multiplier=2.0)

    err = exc_info.value
    assert err.code == ErrorCode.UTL_RETRY_EXHAUSTED.value
    assert err.status_code == 500
    assert err.context == {"attempts": 3}
    assert err.original_error is last
    assert [call.args[0] for call in no_sleep.await_args_list] == [1.0, 2.0]


async def test_retry_should_retry_stops_early(no_sleep):
    func = AsyncMock(side_effect=ValueError("fatal"))
    with pytest.raises(DomainError) as exc_info:
        await utils.retry(func, should_retry=lambda exc: not isinstance(exc, ValueError))
    assert exc_info.value.context == {"attempts": 1}
    no_sleep.assert_not_awaited()


async def test_retry_rejects_zero_attempts():
    with pytest.raises(ValueError):
        await utils.retry(AsyncMock(), max_attempts=0)


@pytest.mark.parametrize(
    "value, expected",
    [(None, True), ("", True), ([], True), ({}, True), (set(), True), (0, False), (False, False), ("a", False)],
)
def test_is_empty(value, expected):
    assert utils.is_empty(value) is expected


def test_safe_json():
    assert utils.safe_json_loads('{"a": 1}') == {"a": 1}
    assert utils.safe_json_loads("not json", default={}) == {}
    assert utils.safe_json_dumps({"a": 1}) == '{"a": 1}'
    assert utils.safe_json_dumps({"a": object()}) == "{}"


def test_validators():
    assert utils.is_valid_email("a@b.co")
    assert not utils.is_valid_email("a@b")
    assert not utils.is_valid_email("")
    assert utils.is_valid_url("https://example.com/path")
    assert not utils.is_valid_url("not a url")


@pytest.mark.parametrize(
    "num_bytes, expected",
    [(0, "0 Bytes"), (500, "500 Bytes"), (1024, "1 KB"), (1536, "1.5 KB"), (1048576, "1 MB"), (1234567, "1.18 MB")],
)
def test_format_bytes(num_bytes, expected):
    assert utils.format_bytes(num_bytes) == expected


def test_generate_id():
    first = utils.generate_id("ord_")
    second = utils.generate_id("ord_")
    assert first.startswith("ord_")
    assert first != second
    assert first[4:].isalnum()


def test_mask_sensitive_data():
    assert utils.mask_sensitive_data("4111111111111111") == "4111********1111"
    assert utils.mask_sensitive_data("short") == "*****"
    assert utils.mask_sensitive_data("abcdef", visible_chars=2) == "ab**ef"


def test_message_for():
    assert message_for("DB_UNIQUE_CONSTRAINT") == "Duplicate entry found"
    assert message_for("NOT_A_CODE") == "An error occurred"
    assert message_for("AUTH_MFA_REQUIRED", "fallback") == "fallback"
