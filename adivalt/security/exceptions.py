"""Security-layer exceptions: authentication and authorization failures. Typed, no HTTP."""

from adivalt.core.constants import ErrorCode
from adivalt.domain.exceptions import ClientError, LeafErrorMixin


class AuthenticationError(LeafErrorMixin, ClientError):
    """Base for failed identity checks."""

    default_message = "Authentication failed"
    default_code = ErrorCode.AUTH_INVALID_CREDENTIALS.value
    default_status_code = 401


class InvalidCredentialsError(AuthenticationError):
    default_message = "Invalid credentials"


class TokenExpiredError(AuthenticationError):
    """Raised when a bearer or refresh token is past its expiry."""

    default_message = "Token has expired"
    default_code = ErrorCode.AUTH_TOKEN_EXPIRED.value


class SessionRevokedError(AuthenticationError):
    default_message = "Session has been revoked"
    default_code = ErrorCode.AUTH_SESSION_REVOKED.value


class InsufficientPermissionsError(LeafErrorMixin, ClientError):
    """Raised when the caller is authenticated but lacks the required role."""

    default_message = "Insufficient permissions"
    default_code = ErrorCode.AUTH_INSUFFICIENT_PERMISSIONS.value
    default_status_code = 403
