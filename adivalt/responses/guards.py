"""Envelope shape checks over pydantic models or plain dicts (e.g. decoded JSON)."""

from typing import Any, Mapping

from pydantic import BaseModel


def _as_mapping(response: Any) -> Mapping[str, Any]:
    if isinstance(response, BaseModel):
        return response.model_dump(mode="json")
    if isinstance(response, Mapping):
        return response
    return {}


def is_success_response(response: Any) -> bool:
    body = _as_mapping(response)
    return body.get("success") is True and "data" in body


def is_error_response(response: Any) -> bool:
    body = _as_mapping(response)
    return body.get("success") is False and "error" in body


def is_paginated_response(response: Any) -> bool:
    body = _as_mapping(response)
    return body.get("success") is True and "pagination" in body


def is_empty_response(response: Any) -> bool:
    body = _as_mapping(response)
    return body.get("success") is True and "data" not in body and "pagination" not in body
