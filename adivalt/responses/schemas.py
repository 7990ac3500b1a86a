"""Pydantic envelope models for API responses. No HTTP framework.

Every envelope carries ``success``. Optional fields that are unset are left out
of the serialized form rather than rendered as null; ``data`` is always kept.
"""

import json
from typing import Any, ClassVar, Dict, FrozenSet, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, field_serializer, model_serializer

T = TypeVar("T")


def _jsonable(value: Any) -> Any:
    """Round-trip through json so exceptions and other opaque values render as strings."""
    return json.loads(json.dumps(value, default=str))


class _Envelope(BaseModel):
    keep_none_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def drop_unset_optionals(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        return {k: v for k, v in data.items() if v is not None or k in self.keep_none_fields}

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

class PaginationParams(_Envelope):
    """Page metadata. ``total_pages`` and the has_* flags are derived by the formatter."""

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    has_next: bool
    has_prev: bool


# ---------------------------------------------------------------------------
# Success envelopes
# ---------------------------------------------------------------------------

class SuccessResponse(_Envelope, Generic[T]):
    keep_none_fields: ClassVar[FrozenSet[str]] = frozenset({"data"})

    success: Literal[True] = True
    data: T
    message: Optional[str] = None
    timestamp: Optional[str] = None
    request_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None


class PaginatedResponse(_Envelope, Generic[T]):
    success: Literal[True] = True
    data: List[T]
    pagination: PaginationParams
    timestamp: Optional[str] = None
    request_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None


class EmptyResponse(_Envelope):
    """Success without a payload, e.g. after a delete."""

    success: Literal[True] = True
    message: Optional[str] = None
    timestamp: Optional[str] = None
    request_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------

class ErrorDetail(_Envelope):
    code: str
    message: str
    details: Optional[str] = None
    status_code: int
    timestamp: Optional[str] = None
    context: Optional[Dict[str, Any]] = None
    request_id: Optional[str] = None

    @field_serializer("context")
    def serialize_context(self, context: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        return _jsonable(context) if context is not None else None


class ErrorResponse(_Envelope):
    success: Literal[False] = False
    error: ErrorDetail
