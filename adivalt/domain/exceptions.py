"""Domain error taxonomy. Pure domain layer: no HTTP framework, no logging.

Every error carries a namespaced ``code`` and an HTTP-shaped ``status_code``.
Errors are immutable; the ``with_*`` builders return a new instance of the same
concrete class and keep the original ``stack``, ``timestamp`` and cause.
"""

import traceback
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping, Optional, TypeVar

from adivalt.core.constants import ErrorCode


_E = TypeVar("_E", bound="DomainError")


def _capture_stack(error: BaseException, message: str) -> str:
    frames = [frame for frame in traceback.extract_stack() if frame.filename != __file__]
    return f"{type(error).__name__}: {message}\n" + "".join(traceback.format_list(frames))


class DomainError(Exception):
    """Base for all classified errors. Defaults describe an unclassified server fault."""

    default_message: str = "An error occurred"
    default_code: str = ErrorCode.SRV_INTERNAL_ERROR.value
    default_status_code: int = 500

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[Mapping[str, Any]] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        if code is not None and not isinstance(code, str):
            raise TypeError(f"code must be a str, got {type(code).__name__}")
        if context is not None and not isinstance(context, Mapping):
            raise TypeError(f"context must be a mapping, got {type(context).__name__}")
        self._message = message if message is not None else self.default_message
        self._code = str(code if code is not None else self.default_code)
        self._status_code = int(status_code if status_code is not None else self.default_status_code)
        self._context = dict(context or {})
        self._original_error = original_error
        self._timestamp = datetime.now(timezone.utc)
        self._stack = _capture_stack(self, self._message)
        super().__init__(self._message)
        if isinstance(original_error, BaseException):
            self.__cause__ = original_error

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> str:
        return self._code

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def context(self) -> Mapping[str, Any]:
        return MappingProxyType(self._context)

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def original_error(self) -> Optional[BaseException]:
        return self._original_error

    @property
    def stack(self) -> str:
        return self._stack

    def __repr__(self) -> str:
        return f"{self.name}(message={self._message!r}, code={self._code!r}, status_code={self._status_code})"

    # ------------------------------------------------------------------
    # Builders: each returns a new instance, self is never mutated
    # ------------------------------------------------------------------

    def with_context(self: _E, context: Mapping[str, Any]) -> _E:
        """Return a copy whose context is this context shallow-merged with ``context``."""
        return self._clone(context={**self._context, **context})

    def with_code(self: _E, code: str) -> _E:
        return self._clone(code=str(code))

    def with_status_code(self: _E, status_code: int) -> _E:
        return self._clone(status_code=int(status_code))

    def with_message(self: _E, message: str) -> _E:
        return self._clone(message=message)

    def _clone(self: _E, **overrides: Any) -> _E:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._context = dict(self._context)
        for field, value in overrides.items():
            setattr(clone, f"_{field}", value)
        clone.args = (clone._message,)
        clone.__cause__ = self.__cause__
        clone.__traceback__ = self.__traceback__
        return clone

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """API-facing view. ``original_error`` is flattened to name/message/stack."""
        data: dict[str, Any] = {
            "name": self.name,
            "message": self._message,
            "code": self._code,
            "status_code": self._status_code,
            "timestamp": self._timestamp,
            "context": dict(self._context),
            "stack": self._stack,
        }
        if self._original_error is not None:
            data["original_error"] = {
                "name": type(self._original_error).__name__,
                "message": str(self._original_error),
                "stack": _format_exception(self._original_error),
            }
        return data

    def to_log(self) -> dict[str, Any]:
        """Log-facing view. Chained causes keep name and message only."""
        data: dict[str, Any] = {
            "error": {
                "name": self.name,
                "message": self._message,
                "code": self._code,
                "status_code": self._status_code,
                "stack": self._stack,
            },
            "context": dict(self._context),
            "timestamp": self._timestamp.isoformat(),
        }
        if self._original_error is not None:
            data["original_error"] = {
                "name": type(self._original_error).__name__,
                "message": str(self._original_error),
            }
        return data


def _format_exception(error: BaseException) -> str:
    if isinstance(error, DomainError):
        return error.stack
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


class LeafErrorMixin:
    """Constructor shared by concrete errors: ``(message, context)`` positionally.

    Code, status and cause are keyword-only overrides of the class defaults.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        DomainError.__init__(self, message, code, status_code, context, original_error)


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class ClientError(DomainError):
    """Caller-caused failure (4xx)."""

    default_message = "Client error occurred"
    default_code = ErrorCode.GEN_VALIDATION_ERROR.value
    default_status_code = 400


class ServerError(DomainError):
    """Server-caused failure (5xx)."""

    default_message = "Server error occurred"
    default_code = ErrorCode.SRV_INTERNAL_ERROR.value
    default_status_code = 500


# ---------------------------------------------------------------------------
# Client leaves
# ---------------------------------------------------------------------------

class ValidationError(LeafErrorMixin, ClientError):
    default_message = "Validation failed"
    default_code = ErrorCode.VAL_INVALID_INPUT.value
    default_status_code = 422


class NotFoundError(LeafErrorMixin, ClientError):
    default_message = "Resource not found"
    default_code = ErrorCode.GEN_NOT_FOUND.value
    default_status_code = 404


class UnauthorizedError(LeafErrorMixin, ClientError):
    default_message = "Unauthorized access"
    default_code = ErrorCode.AUTH_UNAUTHORIZED.value
    default_status_code = 401


class ForbiddenError(LeafErrorMixin, ClientError):
    default_message = "Access forbidden"
    default_code = ErrorCode.AUTH_INSUFFICIENT_PERMISSIONS.value
    default_status_code = 403


class InputValidationError(LeafErrorMixin, ClientError):
    """Raised when request input fails field-level checks."""

    default_message = "Input validation failed"
    default_code = ErrorCode.VAL_INVALID_INPUT.value
    default_status_code = 400


class SchemaValidationError(LeafErrorMixin, ClientError):
    """Raised when a payload does not match its schema."""

    default_message = "Schema validation failed"
    default_code = ErrorCode.VAL_SCHEMA_ERROR.value
    default_status_code = 422


class BusinessRuleError(LeafErrorMixin, ClientError):
    """Raised when input is well-formed but violates a business rule."""

    default_message = "Business rule violation"
    default_code = ErrorCode.VAL_BUSINESS_RULE.value
    default_status_code = 409


# ---------------------------------------------------------------------------
# Server leaves
# ---------------------------------------------------------------------------

class InternalServerError(LeafErrorMixin, ServerError):
    default_message = "Internal server error"


class ExternalServiceError(LeafErrorMixin, ServerError):
    """Raised when an upstream dependency fails."""

    default_message = "External service error"
    default_code = ErrorCode.SRV_EXTERNAL_SERVICE.value
    default_status_code = 502


class ConfigurationError(LeafErrorMixin, ServerError):
    default_message = "Configuration error"
    default_code = ErrorCode.SRV_CONFIGURATION_ERROR.value


class DatabaseError(LeafErrorMixin, ServerError):
    """Base for persistence failures. Subclasses may carry 4xx statuses (e.g. conflicts)."""

    default_message = "Database error occurred"
    default_code = ErrorCode.DB_QUERY_ERROR.value


class UniqueConstraintError(DatabaseError):
    default_message = "Unique constraint violation"
    default_code = ErrorCode.DB_UNIQUE_CONSTRAINT.value
    default_status_code = 409


class DatabaseConnectionError(DatabaseError):
    default_message = "Database connection error"
    default_code = ErrorCode.DB_CONNECTION_ERROR.value
    default_status_code = 503


class DatabaseTimeoutError(DatabaseError):
    default_message = "Database operation timed out"
    default_code = ErrorCode.DB_TIMEOUT_ERROR.value
    default_status_code = 504
