"""Failure categorization for error logs. Maps exceptions to taxonomy."""

from enum import Enum

from adivalt.domain.guards import (
    is_authentication_error,
    is_client_error,
    is_database_error,
    is_domain_error,
    is_external_service_error,
    is_server_error,
    is_validation_error,
)


class FailureCategory(str, Enum):
    """Taxonomy for failure classification."""

    AUTHENTICATION = "AUTHENTICATION"
    VALIDATION = "VALIDATION"
    DATABASE = "DATABASE"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    CLIENT = "CLIENT"
    SERVER = "SERVER"
    UNEXPECTED = "UNEXPECTED"


class FailureClassifier:
    """
    Classifies exceptions into FailureCategory. The HTTP error handlers attach
    the category to the error log line; callers may use it for alerting.
    """

    @staticmethod
    def classify(exception: BaseException) -> FailureCategory:
        """Map exception to FailureCategory by code first, then status. Unknown -> UNEXPECTED."""
        if is_authentication_error(exception):
            return FailureCategory.AUTHENTICATION
        if is_validation_error(exception):
            return FailureCategory.VALIDATION
        if is_database_error(exception):
            return FailureCategory.DATABASE
        if is_external_service_error(exception):
            return FailureCategory.EXTERNAL_SERVICE
        if is_client_error(exception):
            return FailureCategory.CLIENT
        if is_server_error(exception):
            return FailureCategory.SERVER
        if is_domain_error(exception):
            # Domain error with a non-HTTP-range status
            return FailureCategory.SERVER
        return FailureCategory.UNEXPECTED
