# adivalt/api/app.py

from typing import Optional

from fastapi import FastAPI, Request

from adivalt.api.errors import register_error_handlers
from adivalt.api.middleware import RequestIdMiddleware, RequestLoggingMiddleware
from adivalt.api.responses import envelope_response_class
from adivalt.config.logging import configure_logging
from adivalt.config.settings import AppSettings, get_settings
from adivalt.observability.logger import Logger


def create_app(settings: Optional[AppSettings] = None, logger: Optional[Logger] = None) -> FastAPI:
    """
    Build a FastAPI app with request ids, request logging, envelope responses
    and error handlers. Settings and logger are explicit; defaults come from the environment.
    """
    settings = settings or get_settings()
    if logger is None:
        configure_logging()
        logger = Logger(settings.logger_config())

    app = FastAPI(
        title=settings.service_name,
        version=settings.version,
        default_response_class=envelope_response_class(settings),
    )
    app.state.settings = settings
    app.state.logger = logger

    # Middleware order: last added runs first (outermost). Request flow: RequestId -> RequestLogging.
    if settings.enable_logging:
        app.add_middleware(RequestLoggingMiddleware, logger=logger, skip_paths=settings.skip_paths)
    app.add_middleware(RequestIdMiddleware)

    if settings.enable_error_handler:
        register_error_handlers(app, logger, settings)

    @app.get("/health")
    async def health(request: Request):
        """Liveness check with service identity and request id."""
        return {
            "status": "ok",
            "service": settings.service_name,
            "environment": settings.environment,
            "version": settings.version,
            "request_id": request.state.request_id,
        }

    return app
