"""Domain layer: error taxonomy and classification predicates. Pure, no HTTP or logging."""

from adivalt.domain.exceptions import (
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
)
from adivalt.domain.guards import (
    is_authentication_error,
    is_client_error,
    is_database_error,
    is_domain_error,
    is_external_service_error,
    is_server_error,
    is_validation_error,
)

__all__ = [
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
    "is_domain_error",
    "is_client_error",
    "is_server_error",
    "is_authentication_error",
    "is_validation_error",
    "is_database_error",
    "is_external_service_error",
]
