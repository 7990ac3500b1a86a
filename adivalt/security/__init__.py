"""Security: authentication error types and sensitive-data redaction."""

from adivalt.security.exceptions import (
    AuthenticationError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
    SessionRevokedError,
    TokenExpiredError,
)
from adivalt.security.redaction import REDACTION_MARKER, redact, redact_headers

__all__ = [
    "AuthenticationError",
    "InvalidCredentialsError",
    "TokenExpiredError",
    "SessionRevokedError",
    "InsufficientPermissionsError",
    "REDACTION_MARKER",
    "redact",
    "redact_headers",
]
