"""Decoding of the Telegram Bot API response envelope.

Every Bot API response is wrapped as ``{"ok": ..., "result": ..., "description": ...}``.
:class:`EnvelopeCodec` turns a raw :class:`requests.Response` into either the
typed ``result`` or one of the exceptions in :mod:`botapi.exceptions`.

The codec is a frozen value owned by each client rather than module state,
so two clients can decode with different settings side by side.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Optional, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from botapi.exceptions import ProtocolError, StaleClient

T = TypeVar("T")

_logger = logging.getLogger("botapi.envelope")

HTTP_OK = 200
HTTP_NOT_FOUND = 404


class Envelope(BaseModel, Generic[T]):
    """Wire-level wrapper shared by every Bot API response."""

    ok: bool
    result: Optional[T] = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional[Dict[str, Any]] = None

    model_config = {"frozen": True}


class EnvelopeCodec(BaseModel):
    """Immutable decoder configuration.

    Attributes:
        strict: Validate payloads in pydantic strict mode (no type coercion).
    """

    strict: bool = False

    model_config = {"frozen": True}

    def decode(self, response: requests.Response, result_type: Any) -> Any:
        """Return the envelope ``result`` of *response* validated as *result_type*.

        Raises:
            StaleClient: If the HTTP status is 404, whatever the body says.
            ProtocolError: If the body is not a successful envelope, or if
                ``ok`` is true but ``result`` is absent. The error carries the
                HTTP status code and reason phrase.
        """
        status_code = response.status_code
        reason = response.reason
        if status_code == HTTP_NOT_FOUND:
            raise StaleClient()

        try:
            envelope = Envelope[result_type].model_validate_json(response.content, strict=self.strict)
        except ValidationError as exc:
            _logger.debug("Envelope validation failed", extra={"status_code": status_code, "error": str(exc)})
            raise ProtocolError(status_code, reason) from exc

        if envelope.ok and envelope.result is not None:
            return envelope.result
        raise ProtocolError(status_code, reason, envelope.model_dump(mode="json", exclude_none=True))

    def check_status(self, response: requests.Response, expected: int = HTTP_OK) -> None:
        """Validate only the status line of *response*, ignoring the body.

        Raises:
            StaleClient: If the HTTP status is 404.
            ProtocolError: If the HTTP status is anything other than *expected*.
        """
        if response.status_code == HTTP_NOT_FOUND:
            raise StaleClient()
        if response.status_code != expected:
            raise ProtocolError(response.status_code, response.reason)

    def encode(self, result: Any) -> str:
        """Serialise *result* as a successful envelope JSON document."""
        return Envelope[Any](ok=True, result=result).model_dump_json(by_alias=True, exclude_none=True)
