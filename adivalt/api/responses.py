"""Response class that wraps plain route payloads into the success envelope."""

from typing import Any, Dict, Type

from starlette.responses import JSONResponse

from adivalt.config.settings import AppSettings
from adivalt.core.context import request_id_ctx
from adivalt.responses.formatter import ResponseFormatter

CREATED_MESSAGE = "Resource created successfully"


def apply_envelope_settings(body: Dict[str, Any], *, include_timestamp: bool) -> Dict[str, Any]:
    """Drop envelope timestamps (top level and inside ``error``) when disabled."""
    if include_timestamp:
        return body
    body = {k: v for k, v in body.items() if k != "timestamp"}
    if isinstance(body.get("error"), dict):
        body["error"] = {k: v for k, v in body["error"].items() if k != "timestamp"}
    return body


class EnvelopeJSONResponse(JSONResponse):
    """
    Payloads that already carry ``success`` pass through untouched; anything
    else becomes ``data`` of a success envelope. A 201 gets the created message.
    """

    include_timestamp: bool = True
    include_request_id: bool = True

    def render(self, content: Any) -> bytes:
        if not (isinstance(content, dict) and "success" in content):
            request_id = request_id_ctx.get() if self.include_request_id else None
            message = CREATED_MESSAGE if self.status_code == 201 else None
            envelope = ResponseFormatter.format_success(content, message=message, request_id=request_id)
            content = apply_envelope_settings(envelope.to_dict(), include_timestamp=self.include_timestamp)
        return super().render(content)


def envelope_response_class(settings: AppSettings) -> Type[EnvelopeJSONResponse]:
    """EnvelopeJSONResponse bound to the response options in ``settings``."""
    return type(
        "AppEnvelopeJSONResponse",
        (EnvelopeJSONResponse,),
        {
            "include_timestamp": settings.include_timestamp,
            "include_request_id": settings.include_request_id,
        },
    )
