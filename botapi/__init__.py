"""Typed Telegram Bot API client — pydantic models, envelope codec, and exceptions.

Usage::

    from botapi import BotApiClient, APIException
    from botapi.models import User, Message, Update

    client = BotApiClient.create("123456:ABC-DEF1234ghIkl")
    me = client.get_me()
"""

from botapi.client import BotApiClient
from botapi.endpoint import Endpoint
from botapi.envelope import Envelope, EnvelopeCodec
from botapi.exceptions import (
    APIException,
    BotApiError,
    InvalidArgument,
    ProtocolError,
    StaleClient,
)

__all__ = [
    "BotApiClient",
    "Endpoint",
    "Envelope",
    "EnvelopeCodec",
    "APIException",
    "BotApiError",
    "InvalidArgument",
    "ProtocolError",
    "StaleClient",
]
