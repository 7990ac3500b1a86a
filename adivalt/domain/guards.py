"""Classification predicates over arbitrary values. Never raise.

Classification reads only ``code`` and ``status_code`` so cloned or generically
constructed errors classify the same as the named subclasses.
"""

from typing import Any

from adivalt.core.constants import ErrorCode
from adivalt.domain.exceptions import DomainError


def is_domain_error(error: Any) -> bool:
    return isinstance(error, DomainError)


def is_client_error(error: Any) -> bool:
    """True for domain errors with a 4xx status."""
    return is_domain_error(error) and 400 <= error.status_code < 500


def is_server_error(error: Any) -> bool:
    """True for domain errors with a 5xx (or higher) status."""
    return is_domain_error(error) and error.status_code >= 500


def is_authentication_error(error: Any) -> bool:
    return is_domain_error(error) and error.code.startswith("AUTH_")


def is_validation_error(error: Any) -> bool:
    return is_domain_error(error) and error.code.startswith("VAL_")


def is_database_error(error: Any) -> bool:
    return is_domain_error(error) and error.code.startswith("DB_")


def is_external_service_error(error: Any) -> bool:
    """Exact match: external-service is a single code, not a category."""
    return is_domain_error(error) and error.code == ErrorCode.SRV_EXTERNAL_SERVICE.value
