"""Error code taxonomy and default user-facing messages. Prefix selects category."""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes. Predicates match on the prefix."""

    # --- Authentication ---
    AUTH_INVALID_CREDENTIALS = "AUTH_INVALID_CREDENTIALS"
    AUTH_TOKEN_EXPIRED = "AUTH_TOKEN_EXPIRED"
    AUTH_INVALID_TOKEN = "AUTH_INVALID_TOKEN"
    AUTH_TOKEN_REQUIRED = "AUTH_TOKEN_REQUIRED"
    AUTH_INSUFFICIENT_PERMISSIONS = "AUTH_INSUFFICIENT_PERMISSIONS"
    AUTH_SESSION_EXPIRED = "AUTH_SESSION_EXPIRED"
    AUTH_SESSION_REVOKED = "AUTH_SESSION_REVOKED"
    AUTH_UNAUTHORIZED = "AUTH_UNAUTHORIZED"
    AUTH_ACCOUNT_LOCKED = "AUTH_ACCOUNT_LOCKED"
    AUTH_MFA_REQUIRED = "AUTH_MFA_REQUIRED"

    # --- Validation ---
    VAL_INVALID_INPUT = "VAL_INVALID_INPUT"
    VAL_SCHEMA_ERROR = "VAL_SCHEMA_ERROR"
    VAL_BUSINESS_RULE = "VAL_BUSINESS_RULE"
    VAL_REQUIRED_FIELD = "VAL_REQUIRED_FIELD"
    VAL_INVALID_FORMAT = "VAL_INVALID_FORMAT"

    # --- Database ---
    DB_CONNECTION_ERROR = "DB_CONNECTION_ERROR"
    DB_UNIQUE_CONSTRAINT = "DB_UNIQUE_CONSTRAINT"
    DB_FOREIGN_KEY_CONSTRAINT = "DB_FOREIGN_KEY_CONSTRAINT"
    DB_TIMEOUT_ERROR = "DB_TIMEOUT_ERROR"
    DB_QUERY_ERROR = "DB_QUERY_ERROR"
    DB_TRANSACTION_ERROR = "DB_TRANSACTION_ERROR"
    DB_RECORD_NOT_FOUND = "DB_RECORD_NOT_FOUND"

    # --- Server ---
    SRV_INTERNAL_ERROR = "SRV_INTERNAL_ERROR"
    SRV_EXTERNAL_SERVICE = "SRV_EXTERNAL_SERVICE"
    SRV_CONFIGURATION_ERROR = "SRV_CONFIGURATION_ERROR"
    SRV_SERVICE_UNAVAILABLE = "SRV_SERVICE_UNAVAILABLE"
    SRV_RATE_LIMIT = "SRV_RATE_LIMIT"

    # --- General ---
    GEN_VALIDATION_ERROR = "GEN_VALIDATION_ERROR"
    GEN_NOT_FOUND = "GEN_NOT_FOUND"
    GEN_BAD_REQUEST = "GEN_BAD_REQUEST"
    GEN_UNAUTHORIZED = "GEN_UNAUTHORIZED"
    GEN_FORBIDDEN = "GEN_FORBIDDEN"
    GEN_CONFLICT = "GEN_CONFLICT"
    GEN_TIMEOUT = "GEN_TIMEOUT"
    GEN_UNKNOWN_ERROR = "GEN_UNKNOWN_ERROR"

    # --- Routing / utilities ---
    CLI_NOT_FOUND = "CLI_NOT_FOUND"
    UTL_RETRY_EXHAUSTED = "UTL_RETRY_EXHAUSTED"

    def __str__(self) -> str:
        return self.value


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_INVALID_CREDENTIALS: "Invalid email or password",
    ErrorCode.AUTH_TOKEN_EXPIRED: "Authentication token has expired",
    ErrorCode.AUTH_INVALID_TOKEN: "Invalid authentication token",
    ErrorCode.AUTH_TOKEN_REQUIRED: "Authentication token is required",
    ErrorCode.AUTH_INSUFFICIENT_PERMISSIONS: "Insufficient permissions to access this resource",
    ErrorCode.AUTH_SESSION_EXPIRED: "Session has expired",
    ErrorCode.AUTH_SESSION_REVOKED: "Session has been revoked",
    ErrorCode.AUTH_UNAUTHORIZED: "Unauthorized access",
    ErrorCode.VAL_INVALID_INPUT: "Invalid input provided",
    ErrorCode.VAL_SCHEMA_ERROR: "Data validation failed",
    ErrorCode.VAL_BUSINESS_RULE: "Business rule violation",
    ErrorCode.DB_CONNECTION_ERROR: "Database connection failed",
    ErrorCode.DB_UNIQUE_CONSTRAINT: "Duplicate entry found",
    ErrorCode.DB_TIMEOUT_ERROR: "Database operation timed out",
    ErrorCode.DB_QUERY_ERROR: "Database query failed",
    ErrorCode.SRV_INTERNAL_ERROR: "Internal server error",
    ErrorCode.SRV_EXTERNAL_SERVICE: "External service error",
    ErrorCode.SRV_CONFIGURATION_ERROR: "Configuration error",
    ErrorCode.GEN_NOT_FOUND: "Resource not found",
    ErrorCode.GEN_BAD_REQUEST: "Bad request",
}


def message_for(code: str, default: str = "An error occurred") -> str:
    """Return the default message for a code, or ``default`` when none is registered."""
    try:
        return ERROR_MESSAGES[ErrorCode(code)]
    except (ValueError, KeyError):
        return default
