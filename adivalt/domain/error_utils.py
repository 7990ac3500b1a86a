"""Factories and coercion helpers for trust boundaries.

Coercions always return a domain error and never raise. The ``assert_*``
helpers raise a new ``ServerError`` (not the input) when the check fails.
"""

from typing import Any, Mapping, Optional

from adivalt.core.constants import ErrorCode
from adivalt.domain.exceptions import (
    ClientError,
    DomainError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from adivalt.domain.guards import is_client_error, is_domain_error, is_server_error
from adivalt.security.exceptions import AuthenticationError


def create_domain_error(
    message: str,
    *,
    code: str,
    status_code: int,
    context: Optional[Mapping[str, Any]] = None,
    original_error: Optional[BaseException] = None,
) -> DomainError:
    return DomainError(message, code, status_code, context, original_error)


def create_validation_error(
    message: str = "Validation failed", context: Optional[Mapping[str, Any]] = None
) -> ValidationError:
    return ValidationError(message, context=context)


def create_not_found_error(
    message: str = "Resource not found", context: Optional[Mapping[str, Any]] = None
) -> NotFoundError:
    return NotFoundError(message, context=context)


def create_authentication_error(
    message: str = "Authentication failed", context: Optional[Mapping[str, Any]] = None
) -> AuthenticationError:
    return AuthenticationError(message, context=context)


def wrap_error(
    error: Any,
    message: Optional[str] = None,
    code: str = ErrorCode.SRV_INTERNAL_ERROR.value,
) -> DomainError:
    """
    Return ``error`` unchanged if it is already a domain error, else wrap it.
    Only real exceptions become ``original_error``; other values are kept as inert context.
    """
    if is_domain_error(error):
        return error
    if isinstance(error, BaseException):
        return DomainError(message or str(error) or DomainError.default_message, code, 500, None, error)
    return DomainError(message or DomainError.default_message, code, 500, {"original_error": error})


def to_client_error(error: Any) -> ClientError:
    """Pass client-classified domain errors through; otherwise synthesize a 400."""
    if is_client_error(error):
        return error
    message = str(error) if isinstance(error, BaseException) else ""
    return ClientError(
        message or "Client error occurred",
        ErrorCode.GEN_BAD_REQUEST.value,
        400,
        {"original_error": error},
    )


def to_server_error(error: Any) -> ServerError:
    """Pass server-classified domain errors through; otherwise synthesize a 500."""
    if is_server_error(error):
        return error
    message = str(error) if isinstance(error, BaseException) else ""
    return ServerError(
        message or "Server error occurred",
        ErrorCode.SRV_INTERNAL_ERROR.value,
        500,
        {"original_error": error},
    )


def assert_domain_error(error: Any, message: Optional[str] = None) -> None:
    if not is_domain_error(error):
        raise ServerError(
            message or "Expected DomainError instance",
            ErrorCode.SRV_INTERNAL_ERROR.value,
            500,
            {"actual_error": error},
        )


def assert_client_error(error: Any, message: Optional[str] = None) -> None:
    assert_domain_error(error, message)
    if not is_client_error(error):
        raise ServerError(
            message or "Expected client error",
            ErrorCode.SRV_INTERNAL_ERROR.value,
            500,
            {"actual_error": error},
        )
