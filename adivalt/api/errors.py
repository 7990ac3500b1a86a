"""FastAPI exception handlers: log every failure once, answer with the error envelope."""

from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from adivalt.api.middleware import REQUEST_ID_HEADER, get_request_id
from adivalt.api.responses import apply_envelope_settings
from adivalt.config.settings import AppSettings
from adivalt.core.constants import ErrorCode
from adivalt.domain.exceptions import DomainError, SchemaValidationError
from adivalt.observability.failure_classifier import FailureClassifier
from adivalt.observability.logger import Logger
from adivalt.responses.formatter import ResponseFormatter

_HTTP_STATUS_CODES: Dict[int, str] = {
    400: ErrorCode.GEN_BAD_REQUEST.value,
    401: ErrorCode.GEN_UNAUTHORIZED.value,
    403: ErrorCode.GEN_FORBIDDEN.value,
    404: ErrorCode.CLI_NOT_FOUND.value,
    408: ErrorCode.GEN_TIMEOUT.value,
    409: ErrorCode.GEN_CONFLICT.value,
}


def _http_error(request: Request, exc: StarletteHTTPException) -> DomainError:
    """Translate a framework HTTPException into a domain error. Unmatched routes get a descriptive 404."""
    route = {"method": request.method, "path": request.url.path}
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
        return DomainError(message, ErrorCode.CLI_NOT_FOUND.value, 404, route)
    if exc.status_code >= 500:
        code = ErrorCode.SRV_INTERNAL_ERROR.value
    else:
        code = _HTTP_STATUS_CODES.get(exc.status_code, ErrorCode.GEN_BAD_REQUEST.value)
    return DomainError(str(exc.detail), code, exc.status_code, route)


def register_error_handlers(app: FastAPI, logger: Logger, settings: AppSettings) -> None:
    """Attach handlers for domain errors, HTTP errors, request validation and anything unexpected."""
    expose_details = settings.effective_expose_details

    def report(request: Request, exc: BaseException) -> Optional[str]:
        request_id = get_request_id(request)
        if settings.log_errors:
            logger.error(
                "Request processing error",
                {
                    "method": request.method,
                    "path": request.url.path,
                    "request_id": request_id,
                    "ip": request.client.host if request.client else None,
                    "user_agent": request.headers.get("user-agent"),
                    "category": FailureClassifier.classify(exc).value,
                },
                exc,
            )
        return request_id

    def respond(error: Any, request_id: Optional[str], headers: Optional[Dict[str, str]] = None) -> JSONResponse:
        envelope = ResponseFormatter.format_error(
            error,
            request_id=request_id if settings.include_request_id else None,
            include_details=expose_details,
        )
        if settings.effective_include_stack and isinstance(error, DomainError):
            envelope.error.details = error.stack
        body = apply_envelope_settings(envelope.to_dict(), include_timestamp=settings.include_timestamp)
        response_headers = dict(headers or {})
        if request_id:
            response_headers[REQUEST_ID_HEADER] = request_id
        return JSONResponse(status_code=envelope.error.status_code, content=body, headers=response_headers)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return respond(exc, report(request, exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        error = _http_error(request, exc)
        return respond(error, report(request, error), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        error = SchemaValidationError(
            "Request validation failed",
            context={"errors": jsonable_encoder(exc.errors())},
            original_error=exc,
        )
        return respond(error, report(request, error))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        return respond(exc, report(request, exc))
