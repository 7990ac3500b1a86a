"""adivalt: typed error taxonomy, structured logging and response envelopes for Python services.

The HTTP glue lives in ``adivalt.api`` and is imported on demand.
"""

from adivalt.core.constants import ErrorCode
from adivalt.domain import (
    BusinessRuleError,
    ClientError,
    ConfigurationError,
    DatabaseConnectionError,
    DatabaseError,
    DatabaseTimeoutError,
    DomainError,
    ExternalServiceError,
    ForbiddenError,
    InputValidationError,
    InternalServerError,
    NotFoundError,
    SchemaValidationError,
    ServerError,
    UnauthorizedError,
    UniqueConstraintError,
    ValidationError,
    is_authentication_error,
    is_client_error,
    is_database_error,
    is_domain_error,
    is_external_service_error,
    is_server_error,
    is_validation_error,
)
from adivalt.security import (
    AuthenticationError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
    SessionRevokedError,
    TokenExpiredError,
    redact,
    redact_headers,
)
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
from adivalt.observability import FailureCategory, FailureClassifier, Logger, LoggerConfig, LogLevel
from adivalt.config import AppSettings, configure_logging, get_settings
from adivalt.responses import ResponseBuilder, ResponseFormatter

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "DomainError",
    "ClientError",
    "ServerError",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "InputValidationError",
    "SchemaValidationError",
    "BusinessRuleError",
    "InternalServerError",
    "ExternalServiceError",
    "ConfigurationError",
    "DatabaseError",
    "UniqueConstraintError",
    "DatabaseConnectionError",
    "DatabaseTimeoutError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "TokenExpiredError",
    "SessionRevokedError",
    "InsufficientPermissionsError",
    "is_domain_error",
    "is_client_error",
    "is_server_error",
    "is_authentication_error",
    "is_validation_error",
    "is_database_error",
    "is_external_service_error",
    "create_domain_error",
    "create_validation_error",
    "create_not_found_error",
    "create_authentication_error",
    "wrap_error",
    "to_client_error",
    "to_server_error",
    "assert_domain_error",
    "assert_client_error",
    "redact",
    "redact_headers",
    "FailureCategory",
    "FailureClassifier",
    "Logger",
    "LoggerConfig",
    "LogLevel",
    "AppSettings",
    "configure_logging",
    "get_settings",
    "ResponseBuilder",
    "ResponseFormatter",
]
