"""API middleware: request id propagation and request/response logging."""

import time
import uuid
from http import HTTPStatus
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from adivalt.core.context import request_id_ctx
from adivalt.observability.logger import Logger

REQUEST_ID_HEADER = "x-request-id"


def get_request_id(request: Request) -> Optional[str]:
    """Request id stored by RequestIdMiddleware, falling back to the raw header."""
    return getattr(request.state, "request_id", None) or request.headers.get(REQUEST_ID_HEADER)


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Reuse or generate x-request-id; attach to request.state, response header, and logging context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_ctx.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log "Incoming request" before the handler and "Request completed" after it.
    Completion is WARN for status >= 400, INFO otherwise. Paths in ``skip_paths`` are not logged.
    """

    def __init__(self, app: ASGIApp, logger: Logger, skip_paths: Iterable[str] = ()) -> None:
        super().__init__(app)
        self.logger = logger
        self.skip_paths = frozenset(skip_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if path in self.skip_paths:
            return await call_next(request)

        request_id = get_request_id(request)
        user_agent = request.headers.get("user-agent")
        self.logger.info(
            "Incoming request",
            {
                "method": request.method,
                "path": path,
                "request_id": request_id,
                "ip": request.client.host if request.client else None,
                "user_agent": user_agent,
                "query": dict(request.query_params),
            },
        )

        start = time.perf_counter()
        response = await call_next(request)
        duration = round((time.perf_counter() - start) * 1000)

        context = {
            "method": request.method,
            "path": path,
            "request_id": request_id,
            "status_code": response.status_code,
            "duration": duration,
            "content_length": response.headers.get("content-length"),
            "user_agent": user_agent,
        }
        message = f"Request completed: {response.status_code} {_status_phrase(response.status_code)} in {duration}ms"
        if response.status_code >= 400:
            self.logger.warn(message, context)
        else:
            self.logger.info(message, context)
        return response
