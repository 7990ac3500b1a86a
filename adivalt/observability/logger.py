"""Structured logger: level filtering, redaction, format strategy, child context, timing.

Synchronous and in-process. Each call builds an immutable ``LogEntry``, formats
it with the strategy chosen at construction and hands the line to a stdlib
``logging.Logger`` sink on the channel matching its severity.
"""

import inspect
import logging
import time as _time
import traceback
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, TypeVar, Union, runtime_checkable

from adivalt.config.logging import get_sink
from adivalt.core.context import request_id_ctx
from adivalt.domain.exceptions import DomainError
from adivalt.observability.formats import JsonFormat, PrettyFormat
from adivalt.observability.log_models import ErrorSnapshot, LogEntry, LoggerConfig, LogLevel
from adivalt.security.redaction import redact

T = TypeVar("T")

SLOW_OPERATION_MS = 1000

# Output channel per severity. DEBUG and TRACE share a channel.
CHANNELS: dict[LogLevel, int] = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: logging.DEBUG,
}


@runtime_checkable
class _HasCode(Protocol):
    code: Any


@runtime_checkable
class _HasStatusCode(Protocol):
    status_code: Any


def _monotonic_ms() -> float:
    return _time.perf_counter() * 1000


class Logger:
    """
    Config is fixed at construction. ``child()`` returns a new Logger with extra
    bound context; it shares config and sink but no mutable state.
    """

    def __init__(
        self,
        config: LoggerConfig,
        *,
        sink: Optional[logging.Logger] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._config = config
        self._formatter = PrettyFormat(config) if config.pretty_print else JsonFormat(config)
        self._sink = sink if sink is not None else get_sink(config.service)
        self._bound_context: dict[str, Any] = dict(context or {})

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def bound_context(self) -> dict[str, Any]:
        return dict(self._bound_context)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def error(self, message: str, context: Optional[Mapping[str, Any]] = None, error: Optional[BaseException] = None) -> None:
        self.log(LogLevel.ERROR, message, context, error)

    def warn(self, message: str, context: Optional[Mapping[str, Any]] = None, error: Optional[BaseException] = None) -> None:
        self.log(LogLevel.WARN, message, context, error)

    def info(self, message: str, context: Optional[Mapping[str, Any]] = None, error: Optional[BaseException] = None) -> None:
        self.log(LogLevel.INFO, message, context, error)

    def debug(self, message: str, context: Optional[Mapping[str, Any]] = None, error: Optional[BaseException] = None) -> None:
        self.log(LogLevel.DEBUG, message, context, error)

    def trace(self, message: str, context: Optional[Mapping[str, Any]] = None, error: Optional[BaseException] = None) -> None:
        self.log(LogLevel.TRACE, message, context, error)

    def log(
        self,
        level: Union[LogLevel, int, str],
        message: str,
        context: Optional[Mapping[str, Any]] = None,
        error: Optional[BaseException] = None,
        *,
        duration: Optional[float] = None,
    ) -> None:
        """Single entry path used by every level method, the timer and child loggers.

        ``level`` may be a member, its int value or its name. Unrecognised levels log at INFO.
        """
        try:
            level = LogLevel.parse(level)
        except (KeyError, ValueError, TypeError):
            level = LogLevel.INFO
        if not self.should_log(level):
            return
        entry = self._create_entry(level, message, context, error, duration)
        self._sink.log(CHANNELS[entry.level], self._formatter.format(entry))

    def should_log(self, level: LogLevel) -> bool:
        return level <= self._config.level

    def child(self, context: Mapping[str, Any]) -> "Logger":
        """New logger whose calls merge ``context`` under the call-site context."""
        return Logger(self._config, sink=self._sink, context={**self._bound_context, **context})

    def time(self, operation: str, fn: Callable[[], T], context: Optional[Mapping[str, Any]] = None) -> T:
        """
        Run ``fn`` and log its duration: INFO up to 1000ms, WARN above.
        Awaitable results are timed until they settle; the caller awaits the returned coroutine.
        Exceptions are logged with the duration and re-raised unchanged.
        """
        start = _monotonic_ms()
        try:
            result = fn()
        except BaseException as exc:
            self._log_duration(operation, _monotonic_ms() - start, {**(context or {}), "error": exc})
            raise
        if inspect.isawaitable(result):
            return self._time_awaitable(operation, result, start, context)  # type: ignore[return-value]
        self._log_duration(operation, _monotonic_ms() - start, context)
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _time_awaitable(
        self,
        operation: str,
        awaitable: Awaitable[T],
        start: float,
        context: Optional[Mapping[str, Any]],
    ) -> T:
        try:
            value = await awaitable
        except BaseException as exc:
            self._log_duration(operation, _monotonic_ms() - start, {**(context or {}), "error": exc})
            raise
        self._log_duration(operation, _monotonic_ms() - start, context)
        return value

    def _log_duration(self, operation: str, duration: float, context: Optional[Mapping[str, Any]]) -> None:
        duration = round(duration, 3)
        level = LogLevel.WARN if duration > SLOW_OPERATION_MS else LogLevel.INFO
        self.log(
            level,
            f"{operation} completed in {duration}ms",
            {**(context or {}), "operation": operation, "duration": duration, "duration_unit": "ms"},
            duration=duration,
        )

    def _create_entry(
        self,
        level: LogLevel,
        message: str,
        context: Optional[Mapping[str, Any]],
        error: Optional[BaseException],
        duration: Optional[float],
    ) -> LogEntry:
        merged = {**self._bound_context, **(context or {})}
        redacted = _string_keys(redact(merged, self._config.redact_fields)) if merged else None
        return LogEntry(
            level=level,
            message=message,
            service=self._config.service,
            environment=self._config.environment,
            version=self._config.version,
            timestamp=datetime.now(timezone.utc),
            context=redacted,
            error=self._snapshot(error) if error is not None else None,
            duration=duration,
            request_id=_as_str(merged.get("request_id")) or request_id_ctx.get(),
            user_id=_as_str(merged.get("user_id")),
            session_id=_as_str(merged.get("session_id")),
        )

    def _snapshot(self, error: BaseException) -> ErrorSnapshot:
        stack = None
        if self._config.is_development:
            if isinstance(error, DomainError):
                stack = error.stack
            else:
                stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))

        code = status_code = None
        if isinstance(error, DomainError):
            code, status_code = error.code, error.status_code
        else:
            if isinstance(error, _HasCode) and isinstance(error.code, str) and error.code:
                code = error.code
            if isinstance(error, _HasStatusCode) and isinstance(error.status_code, int):
                status_code = error.status_code

        return ErrorSnapshot(
            name=type(error).__name__,
            message=str(error),
            stack=stack,
            code=code,
            status_code=status_code,
        )


def _string_keys(value: Any) -> Any:
    """Stringify non-str mapping keys at any depth so the context stays JSON-encodable."""
    if isinstance(value, Mapping):
        return {key if isinstance(key, str) else str(key): _string_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_string_keys(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_string_keys(item) for item in value)
    return value


def _as_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)
