"""Response envelopes: models, builder, formatter and shape guards. No FastAPI."""

from adivalt.responses.schemas import (
    EmptyResponse,
    ErrorDetail,
    ErrorResponse,
    PaginatedResponse,
    PaginationParams,
    SuccessResponse,
)
from adivalt.responses.builder import ResponseBuilder
from adivalt.responses.formatter import ResponseFormatter
from adivalt.responses.guards import (
    is_empty_response,
    is_error_response,
    is_paginated_response,
    is_success_response,
)

__all__ = [
    "EmptyResponse",
    "ErrorDetail",
    "ErrorResponse",
    "PaginatedResponse",
    "PaginationParams",
    "SuccessResponse",
    "ResponseBuilder",
    "ResponseFormatter",
    "is_empty_response",
    "is_error_response",
    "is_paginated_response",
    "is_success_response",
]
