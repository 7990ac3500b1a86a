"""Sensitive-data redaction for logs and error payloads. Pure functions, input never mutated.

Field matching is by substring: any key whose lowercased name contains a
sensitive token is redacted, so ``user_email`` and ``phoneNumberCount`` are
both masked. Separators (``_``/``-``) are ignored when matching so snake_case
keys hit camelCase tokens (``api_key`` matches ``apiKey``).

Pydantic models and dataclass instances are redacted as the dict of their
fields, so a nested ``password`` attribute is masked like a dict key.
"""

import dataclasses
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

REDACTION_MARKER = "[REDACTED]"

DEFAULT_SENSITIVE_FIELDS: tuple[str, ...] = (
    "password",
    "token",
    "secret",
    "authorization",
    "apiKey",
    "creditCard",
    "ssn",
    "phone",
    "email",
)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key", "x-auth-token"})


def _is_sensitive(key: Any, needles: tuple[str, ...]) -> bool:
    name = str(key).lower()
    compact = name.replace("_", "").replace("-", "")
    return any(needle in name or needle in compact for needle in needles)


def _redact(data: Any, needles: tuple[str, ...]) -> Any:
    # Structured objects are redacted through their field mapping.
    if isinstance(data, BaseModel):
        data = data.model_dump()
    elif dataclasses.is_dataclass(data) and not isinstance(data, type):
        data = {field.name: getattr(data, field.name) for field in dataclasses.fields(data)}
    if isinstance(data, Mapping):
        return {
            key: REDACTION_MARKER if _is_sensitive(key, needles) else _redact(value, needles)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [_redact(item, needles) for item in data]
    if isinstance(data, tuple):
        return tuple(_redact(item, needles) for item in data)
    return data


def redact(data: Any, extra_fields: Iterable[str] = ()) -> Any:
    """Recursively replace values of sensitive keys with ``REDACTION_MARKER``."""
    needles = tuple(field.lower() for field in (*DEFAULT_SENSITIVE_FIELDS, *extra_fields) if field)
    return _redact(data, needles)


def redact_headers(headers: Mapping[str, Any]) -> dict[str, Any]:
    """Mask credential-bearing HTTP headers wholesale. Other headers are left as-is."""
    return {
        name: REDACTION_MARKER if str(name).lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }
