"""Redaction tests: nested masking, idempotence, no mutation, header masking."""

from dataclasses import dataclass

from pydantic import BaseModel

from adivalt.security.redaction import REDACTION_MARKER, redact, redact_headers


class Credentials(BaseModel):
    username: str
    password: str


@dataclass
class Session:
    user_id: str
    token: str


def test_redacts_nested_sensitive_keys():
    data = {"password": "x", "nested": {"token": "y", "ok": "z"}}
    assert redact(data) == {"password": "[REDACTED]", "nested": {"token": "[REDACTED]", "ok": "z"}}


def test_input_not_mutated():
    data = {"password": "x", "nested": {"token": "y"}}
    redact(data)
    assert data == {"password": "x", "nested": {"token": "y"}}


def test_idempotent():
    data = {"secret": "s", "items": [{"apiKey": "k", "name": "n"}], "count": 3}
    once = redact(data)
    assert redact(once) == once


def test_substring_and_case_insensitive_match():
    data = {"userPassword": "a", "ACCESS_TOKEN": "b", "user_email": "c", "phoneNumber": "d", "username": "e"}
    assert redact(data) == {
        "userPassword": REDACTION_MARKER,
        "ACCESS_TOKEN": REDACTION_MARKER,
        "user_email": REDACTION_MARKER,
        "phoneNumber": REDACTION_MARKER,
        "username": "e",
    }


def test_snake_case_matches_camel_case_tokens():
    assert redact({"api_key": "k", "credit-card": "c"}) == {"api_key": REDACTION_MARKER, "credit-card": REDACTION_MARKER}


def test_sensitive_container_replaced_wholesale():
    assert redact({"secret": {"a": 1}}) == {"secret": REDACTION_MARKER}


def test_lists_and_tuples_recursed():
    data = {"users": [{"name": "a", "password": "p"}, "plain"], "pair": ({"token": "t"}, 1)}
    assert redact(data) == {
        "users": [{"name": "a", "password": REDACTION_MARKER}, "plain"],
        "pair": ({"token": REDACTION_MARKER}, 1),
    }


def test_models_and_dataclasses_redacted_by_field():
    data = {"login": Credentials(username="ada", password="pw"), "sessions": [Session(user_id="u1", token="t")]}
    assert redact(data) == {
        "login": {"username": "ada", "password": REDACTION_MARKER},
        "sessions": [{"user_id": "u1", "token": REDACTION_MARKER}],
    }


def test_model_instance_not_mutated():
    creds = Credentials(username="ada", password="pw")
    redact(creds)
    assert creds.password == "pw"


def test_extra_fields():
    assert redact({"pin": "1234", "name": "n"}, ["PIN"]) == {"pin": REDACTION_MARKER, "name": "n"}


def test_primitives_pass_through():
    assert redact("password") == "password"
    assert redact(None) is None
    assert redact(42) == 42


def test_redact_headers():
    headers = {
        "Authorization": "Bearer abc",
        "Cookie": "sid=1",
        "X-API-Key": "k",
        "x-auth-token": "t",
        "Content-Type": "application/json",
        "Accept": ["a", "b"],
    }
    assert redact_headers(headers) == {
        "Authorization": REDACTION_MARKER,
        "Cookie": REDACTION_MARKER,
        "X-API-Key": REDACTION_MARKER,
        "x-auth-token": REDACTION_MARKER,
        "Content-Type": "application/json",
        "Accept": ["a", "b"],
    }
