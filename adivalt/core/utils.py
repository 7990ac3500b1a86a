"""Small general-purpose helpers shared by services. No FastAPI."""

import asyncio
import json
import re
import secrets
import string
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar
from urllib.parse import urlparse

from adivalt.core.constants import ErrorCode
from adivalt.domain.exceptions import DomainError

T = TypeVar("T")

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_ID_ALPHABET = string.ascii_lowercase + string.digits


async def retry(
    func: Callable[[], Awaitable[T]],
    *,
    max_attempts: int = 3,
    delay_seconds: float = 1.0,
    backoff_multiplier: float = 2.0,
    should_retry: Optional[Callable[[Exception], bool]] = None,
) -> T:
    """
    Await ``func`` up to ``max_attempts`` times with exponential backoff.
    When attempts run out (or ``should_retry`` declines) raise UTL_RETRY_EXHAUSTED
    with the last error as ``original_error``.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    delay = delay_seconds
    attempt = 0
    while True:
        attempt += 1
        try:
            return await func()
        except Exception as exc:
            if attempt == max_attempts or (should_retry is not None and not should_retry(exc)):
                raise DomainError(
                    f"Operation failed after {attempt} attempts",
                    ErrorCode.UTL_RETRY_EXHAUSTED.value,
                    500,
                    {"attempts": attempt},
                    exc,
                ) from exc
            await asyncio.sleep(delay)
            delay *= backoff_multiplier


def is_empty(value: Any) -> bool:
    """None, empty strings and empty containers are empty. Numbers and booleans never are."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def safe_json_loads(raw: str, default: Any = None) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return default


def safe_json_dumps(obj: Any, default: str = "{}") -> str:
    try:
        return json.dumps(obj)
    except (TypeError, ValueError):
        return default


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email or ""))


def is_valid_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path)


def format_bytes(num_bytes: int, decimals: int = 2) -> str:
    """Human-readable size using 1024 steps, e.g. ``1.5 KB``."""
    if num_bytes == 0:
        return "0 Bytes"
    size = float(num_bytes)
    index = 0
    while abs(size) >= 1024 and index < len(_BYTE_UNITS) - 1:
        size /= 1024
        index += 1
    value = round(size, max(decimals, 0))
    if value == int(value):
        value = int(value)
    return f"{value} {_BYTE_UNITS[index]}"


def generate_id(prefix: str = "") -> str:
    """Short sortable-ish id: base36 milliseconds plus six random characters."""
    millis = int(time.time() * 1000)
    stamp = ""
    while millis:
        millis, rem = divmod(millis, 36)
        stamp = _ID_ALPHABET[rem] + stamp
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(6))
    return f"{prefix}{stamp}{suffix}"


def mask_sensitive_data(value: str, visible_chars: int = 4) -> str:
    """Keep ``visible_chars`` at each end and star the middle; short values are fully masked."""
    if len(value) <= visible_chars * 2:
        return "*" * len(value)
    hidden = len(value) - visible_chars * 2
    return f"{value[:visible_chars]}{'*' * hidden}{value[-visible_chars:]}"
