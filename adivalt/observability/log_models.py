"""Immutable logger configuration and log entry models."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple


class LogLevel(IntEnum):
    """Lower is more severe. A logger configured at a level emits that level and below."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4

    @classmethod
    def parse(cls, value: Any) -> "LogLevel":
        """Accept a member, its int value, or a case-insensitive name (``WARNING`` maps to WARN)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARNING":
                name = "WARN"
            if name.isdigit():
                return cls(int(name))
            return cls[name]
        return cls(value)


@dataclass(frozen=True)
class LoggerConfig:
    level: LogLevel
    service: str
    environment: str
    version: str = "1.0.0"
    redact_fields: Tuple[str, ...] = ()
    pretty_print: bool = False
    timestamp_format: str = "ISO"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@dataclass(frozen=True)
class ErrorSnapshot:
    """Flattened copy of an exception. Not a live reference."""

    name: str
    message: str
    stack: Optional[str] = None
    code: Optional[str] = None
    status_code: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Only populated fields."""
        data: Dict[str, Any] = {"name": self.name, "message": self.message}
        if self.stack is not None:
            data["stack"] = self.stack
        if self.code is not None:
            data["code"] = self.code
        if self.status_code is not None:
            data["status_code"] = self.status_code
        return data


@dataclass(frozen=True)
class LogEntry:
    """One log line before formatting. Built, formatted, discarded."""

    level: LogLevel
    message: str
    service: str
    environment: str
    version: str
    timestamp: datetime
    context: Optional[Dict[str, Any]] = None
    error: Optional[ErrorSnapshot] = None
    duration: Optional[float] = None
    request_id: Optional[str] = None
    user_id: Optional[str] = None
    session_id: Optional[str] = None
