"""Immutable base endpoint for a single bot."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_SCHEME = "https"
DEFAULT_HOST = "api.telegram.org"


class Endpoint(BaseModel):
    """Scheme, host and ``/bot<token>/`` base path every operation resolves against.

    The base path embeds the bot token, so it is kept out of ``repr()``.
    """

    scheme: str = DEFAULT_SCHEME
    host: str = DEFAULT_HOST
    base_path: str = Field(repr=False)

    model_config = {"frozen": True}

    @classmethod
    def for_token(cls, token: str, host: str = DEFAULT_HOST) -> "Endpoint":
        """Build the endpoint for *token* on *host*."""
        return cls(host=host, base_path=f"/bot{token}/")

    def url(self, operation: str) -> str:
        """Resolve *operation* (e.g. ``getMe``) to an absolute URL."""
        return f"{self.scheme}://{self.host}{self.base_path}{operation.lstrip('/')}"
