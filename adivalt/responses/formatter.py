"""Higher-level envelope helpers used by the HTTP layer.

``format_error`` accepts anything a handler might catch and always returns an
``ErrorResponse``; raw exception messages leak only when ``include_details``.
"""

import math
from typing import Any, Dict, List, Optional

from adivalt.core.constants import ErrorCode, message_for
from adivalt.domain.exceptions import DomainError
from adivalt.responses.builder import ResponseBuilder
from adivalt.responses.schemas import ErrorResponse, PaginatedResponse, PaginationParams, SuccessResponse


class ResponseFormatter:
    @staticmethod
    def format_success(
        data: Any,
        *,
        message: Optional[str] = None,
        request_id: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> SuccessResponse:
        return ResponseBuilder.success(data, message, request_id, meta)

    @staticmethod
    def format_error(
        error: Any,
        *,
        request_id: Optional[str] = None,
        include_details: bool = False,
    ) -> ErrorResponse:
        if isinstance(error, DomainError):
            return ResponseBuilder.error(error, request_id)

        if isinstance(error, Exception):
            message = str(error) if include_details else message_for(ErrorCode.SRV_INTERNAL_ERROR.value)
            wrapped = DomainError(message, ErrorCode.SRV_INTERNAL_ERROR.value, 500, {}, error)
            return ResponseBuilder.error(wrapped, request_id)

        wrapped = DomainError("An unexpected error occurred", ErrorCode.SRV_INTERNAL_ERROR.value, 500)
        return ResponseBuilder.error(wrapped, request_id)

    @staticmethod
    def format_paginated(
        data: List[Any],
        *,
        page: int,
        limit: int,
        total: int,
        request_id: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> PaginatedResponse:
        """Derive ``total_pages``, ``has_next`` and ``has_prev`` from page, limit and total."""
        total_pages = math.ceil(total / limit) if limit > 0 else 0
        pagination = PaginationParams(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )
        return ResponseBuilder.paginated(data, pagination, request_id, meta)
