"""Exception hierarchy for the botapi Telegram client."""

from typing import Any, Dict, Optional


class BotApiError(Exception):
    """Base class for every error raised by :mod:`botapi`."""


class InvalidArgument(BotApiError, ValueError):
    """A required parameter was missing or malformed.

    Raised before any network call is made; never worth retrying.
    """


class APIException(BotApiError):
    """Base exception for failed responses from the Telegram Bot API.

    Attributes:
        status_code: HTTP status code returned by the API.
        reason: HTTP reason phrase from the status line.
        response_body: Decoded response body as a dict, when available.
    """

    def __init__(
        self,
        status_code: int,
        reason: Optional[str] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialise with the HTTP status line and optional body."""
        self.status_code = status_code
        self.reason = reason or "Unknown error"
        self.response_body = response_body or {}
        super().__init__(f"API error {status_code}: {self.reason}")

    @property
    def description(self) -> Optional[str]:
        """The envelope's own ``description`` field, if the server sent one."""
        return self.response_body.get("description")


class ProtocolError(APIException):
    """The call completed but the envelope or status signals failure."""


class StaleClient(APIException):
    """HTTP 404 for a known operation: the client no longer matches the API."""

    def __init__(
        self,
        status_code: int = 404,
        reason: Optional[str] = "Telegram bot API out of date.",
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(status_code, reason, response_body)
