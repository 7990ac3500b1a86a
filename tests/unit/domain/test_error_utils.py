"""Error utility tests: factories, wrapping and coercion at trust boundaries, assertions."""

import pytest

from adivalt.core.constants import ErrorCode
from adivalt.domain.error_utils import (
    assert_client_error,
    assert_domain_error,
    create_authentication_error,
    create_domain_error,
    create_not_found_error,
    create_validation_error,
    to_client_error,
    to_server_error,
    wrap_error,
)
from adivalt.domain.exceptions import (
    ClientError,
    DomainError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from adivalt.security.exceptions import AuthenticationError


def test_create_domain_error():
    cause = ValueError("inner")
    err = create_domain_error("boom", code="GEN_CONFLICT", status_code=409, context={"k": 1}, original_error=cause)
    assert type(err) is DomainError
    assert (err.message, err.code, err.status_code) == ("boom", "GEN_CONFLICT", 409)
    assert err.context == {"k": 1}
    assert err.original_error is cause


def test_factory_defaults():
    assert isinstance(create_validation_error(), ValidationError)
    assert create_validation_error().message == "Validation failed"
    assert create_not_found_error("User missing", {"id": 1}).context == {"id": 1}
    assert isinstance(create_not_found_error(), NotFoundError)
    auth = create_authentication_error()
    assert isinstance(auth, AuthenticationError)
    assert auth.status_code == 401


def test_wrap_error_passes_domain_errors_through():
    err = NotFoundError()
    assert wrap_error(err) is err
    assert wrap_error(err, "ignored", "GEN_CONFLICT") is err


def test_wrap_error_wraps_exception():
    cause = RuntimeError("disk full")
    wrapped = wrap_error(cause)
    assert type(wrapped) is DomainError
    assert wrapped.message == "disk full"
    assert wrapped.code == ErrorCode.SRV_INTERNAL_ERROR.value
    assert wrapped.status_code == 500
    assert wrapped.original_error is cause


def test_wrap_error_message_and_code_override():
    wrapped = wrap_error(RuntimeError("raw"), "Storage failed", "DB_QUERY_ERROR")
    assert wrapped.message == "Storage failed"
    assert wrapped.code == "DB_QUERY_ERROR"


def test_wrap_error_non_exception_kept_in_context():
    wrapped = wrap_error({"weird": True})
    assert wrapped.original_error is None
    assert wrapped.context == {"original_error": {"weird": True}}
    assert wrapped.status_code == 500


def test_to_client_error():
    err = NotFoundError()
    assert to_client_error(err) is err

    cause = ValueError("bad id")
    coerced = to_client_error(cause)
    assert isinstance(coerced, ClientError)
    assert coerced.status_code == 400
    assert coerced.code == ErrorCode.GEN_BAD_REQUEST.value
    assert coerced.message == "bad id"
    assert coerced.context["original_error"] is cause


def test_to_client_error_from_server_error_synthesizes():
    coerced = to_client_error(ServerError("oops"))
    assert isinstance(coerced, ClientError)
    assert coerced.status_code == 400


def test_to_server_error():
    err = ServerError()
    assert to_server_error(err) is err

    coerced = to_server_error("text")
    assert isinstance(coerced, ServerError)
    assert coerced.status_code == 500
    assert coerced.message == "Server error occurred"
    assert coerced.context == {"original_error": "text"}


def test_assert_domain_error():
    assert_domain_error(NotFoundError())
    with pytest.raises(ServerError) as exc_info:
        assert_domain_error(ValueError("x"))
    assert exc_info.value.message == "Expected DomainError instance"
    assert isinstance(exc_info.value.context["actual_error"], ValueError)


def test_assert_client_error():
    assert_client_error(NotFoundError())
    with pytest.raises(ServerError) as exc_info:
        assert_client_error(ServerError())
    assert exc_info.value.message == "Expected client error"
    with pytest.raises(ServerError, match="custom"):
        assert_client_error(None, "custom")
