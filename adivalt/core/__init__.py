"""Core: error codes, request-scoped context, small shared helpers. No FastAPI."""

from adivalt.core.constants import ERROR_MESSAGES, ErrorCode, message_for
from adivalt.core.context import request_id_ctx

__all__ = [
    "ERROR_MESSAGES",
    "ErrorCode",
    "message_for",
    "request_id_ctx",
]
