"""Envelope construction. Stateless; every method returns a fresh pydantic model."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from adivalt.core.constants import ErrorCode
from adivalt.domain.exceptions import DomainError
from adivalt.responses.schemas import (
    EmptyResponse,
    ErrorDetail,
    ErrorResponse,
    PaginatedResponse,
    PaginationParams,
    SuccessResponse,
)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResponseBuilder:
    @staticmethod
    def success(
        data: Any,
        message: Optional[str] = None,
        request_id: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> SuccessResponse:
        return SuccessResponse(
            data=data,
            message=message,
            timestamp=_timestamp(),
            request_id=request_id,
            meta=meta,
        )

    @staticmethod
    def error(error: Union[DomainError, BaseException], request_id: Optional[str] = None) -> ErrorResponse:
        """
        Domain errors keep their code, status and context. Anything else is
        reported as GEN_UNKNOWN_ERROR / 500 with a generic ``details`` line.
        """
        if isinstance(error, DomainError):
            detail = ErrorDetail(
                code=error.code,
                message=error.message,
                status_code=error.status_code,
                timestamp=_timestamp(),
                context=dict(error.context),
                request_id=request_id,
            )
        else:
            detail = ErrorDetail(
                code=ErrorCode.GEN_UNKNOWN_ERROR.value,
                message=str(error),
                details="An unexpected error occurred",
                status_code=500,
                timestamp=_timestamp(),
                request_id=request_id,
            )
        return ErrorResponse(error=detail)

    @staticmethod
    def paginated(
        data: List[Any],
        pagination: PaginationParams,
        request_id: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> PaginatedResponse:
        return PaginatedResponse(
            data=list(data),
            pagination=pagination,
            timestamp=_timestamp(),
            request_id=request_id,
            meta=meta,
        )

    @staticmethod
    def empty(message: Optional[str] = None, request_id: Optional[str] = None) -> EmptyResponse:
        return EmptyResponse(message=message, timestamp=_timestamp(), request_id=request_id)

    @staticmethod
    def created(
        data: Any, message: str = "Resource created successfully", request_id: Optional[str] = None
    ) -> SuccessResponse:
        return ResponseBuilder.success(data, message, request_id)

    @staticmethod
    def updated(
        data: Any, message: str = "Resource updated successfully", request_id: Optional[str] = None
    ) -> SuccessResponse:
        return ResponseBuilder.success(data, message, request_id)

    @staticmethod
    def deleted(message: str = "Resource deleted successfully", request_id: Optional[str] = None) -> EmptyResponse:
        return ResponseBuilder.empty(message, request_id)
