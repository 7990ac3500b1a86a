"""Log entry formatters: single-line JSON for machines, colored multi-line text for humans."""

import json
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any, Dict

from adivalt.observability.log_models import LogEntry, LoggerConfig, LogLevel

COLORS: Dict[LogLevel, str] = {
    LogLevel.ERROR: "\x1b[31m",
    LogLevel.WARN: "\x1b[33m",
    LogLevel.INFO: "\x1b[36m",
    LogLevel.DEBUG: "\x1b[35m",
    LogLevel.TRACE: "\x1b[90m",
}
RESET = "\x1b[0m"


def format_timestamp(timestamp: datetime, timestamp_format: str) -> str:
    """Render ``timestamp`` as ISO (default), UTC (RFC 1123) or LOCAL. Unknown formats fall back to ISO."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    fmt = (timestamp_format or "").upper()
    if fmt == "UTC":
        return format_datetime(timestamp.astimezone(timezone.utc), usegmt=True)
    if fmt == "LOCAL":
        return timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonFormat:
    """Compact JSON, one line per entry. Optional fields are omitted rather than null."""

    def __init__(self, config: LoggerConfig) -> None:
        self._config = config

    def format(self, entry: LogEntry) -> str:
        payload: Dict[str, Any] = {
            "timestamp": format_timestamp(entry.timestamp, self._config.timestamp_format),
            "level": entry.level.name,
            "service": entry.service,
            "environment": entry.environment,
            "version": entry.version,
            "message": entry.message,
        }
        if entry.context:
            payload["context"] = entry.context
        if entry.error is not None:
            payload["error"] = entry.error.to_dict()
        if entry.duration is not None:
            payload["duration"] = entry.duration
        if entry.request_id:
            payload["request_id"] = entry.request_id
        if entry.user_id:
            payload["user_id"] = entry.user_id
        if entry.session_id:
            payload["session_id"] = entry.session_id
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


class PrettyFormat:
    """ANSI-colored output for terminals. Stack traces only in development."""

    def __init__(self, config: LoggerConfig) -> None:
        self._config = config

    def format(self, entry: LogEntry) -> str:
        color = COLORS.get(entry.level, RESET)
        timestamp = format_timestamp(entry.timestamp, self._config.timestamp_format)
        lines = [f"{color}[{timestamp}] {entry.level.name:<5} {entry.service}: {entry.message}{RESET}"]

        if entry.context:
            rendered = json.dumps(entry.context, indent=2, ensure_ascii=False, default=str)
            lines.append(f"{color}  Context: {rendered}{RESET}")
        if entry.error is not None:
            lines.append(f"{color}  Error: {entry.error.name}: {entry.error.message}{RESET}")
            if entry.error.stack and self._config.is_development:
                lines.append(f"{color}  Stack: {entry.error.stack}{RESET}")
        if entry.duration is not None:
            lines.append(f"{color}  Duration: {entry.duration}ms{RESET}")
        return "\n".join(lines)
