"""HTTP glue for FastAPI apps: middleware, envelope responses, exception handlers."""

from adivalt.api.app import create_app
from adivalt.api.errors import register_error_handlers
from adivalt.api.middleware import RequestIdMiddleware, RequestLoggingMiddleware
from adivalt.api.responses import EnvelopeJSONResponse, envelope_response_class

__all__ = [
    "create_app",
    "register_error_handlers",
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "EnvelopeJSONResponse",
    "envelope_response_class",
]
