"""BotApiClient -- typed operations over the Telegram Bot API.

Each public method builds one HTTP request against the client's fixed
:class:`~botapi.endpoint.Endpoint`, sends it through ``requests`` and hands
the response to the client's :class:`~botapi.envelope.EnvelopeCodec`.

The client keeps no per-call state, performs no retries and sets no
deadline of its own; pass ``timeout=`` to :meth:`BotApiClient.create` for a
transport-level timeout. Transport errors (:class:`requests.RequestException`)
propagate unchanged.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

import requests

from botapi.endpoint import DEFAULT_HOST, Endpoint
from botapi.envelope import EnvelopeCodec
from botapi.exceptions import APIException, InvalidArgument
from botapi.models import (
    ForceReply,
    InlineKeyboardMarkup,
    Message,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
    Update,
    User,
)

logger = logging.getLogger("botapi.client")

_MARKUP_TYPES = (ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply, InlineKeyboardMarkup)


# ── Parameter checks ─────────────────────────────────────────────────────────


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_chat_id(chat_id: Any) -> None:
    if chat_id is None:
        raise InvalidArgument("chat_id is required")
    if not (_is_int(chat_id) or (isinstance(chat_id, str) and chat_id)):
        raise InvalidArgument(f"chat_id must be an integer or a non-empty string, got {type(chat_id).__name__}")


def _require_str(name: str, value: Any) -> None:
    if value is None:
        raise InvalidArgument(f"{name} is required")
    if not isinstance(value, str):
        raise InvalidArgument(f"{name} must be a string, got {type(value).__name__}")


def _optional_int(name: str, value: Any) -> None:
    if value is not None and not _is_int(value):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")


def _encode_markup(reply_markup: Union[ReplyMarkup, Dict[str, Any]]) -> str:
    """Serialise *reply_markup* to the JSON string Telegram expects in a form field."""
    if isinstance(reply_markup, _MARKUP_TYPES):
        return reply_markup.model_dump_json(by_alias=True, exclude_none=True)
    if isinstance(reply_markup, dict):
        return json.dumps(reply_markup, separators=(",", ":"))
    raise InvalidArgument(f"reply_markup must be a keyboard markup, got {type(reply_markup).__name__}")


# ── Client ───────────────────────────────────────────────────────────────────


class BotApiClient:
    """Client-side binding for ``getMe``, ``sendMessage``, ``getUpdates`` and ``setWebHook``.

    Build instances with :meth:`create`; the constructor takes an already
    validated :class:`Endpoint`.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        codec: Optional[EnvelopeCodec] = None,
    ) -> None:
        self._endpoint = endpoint
        self._session = session
        self._timeout = timeout
        self._codec = codec or EnvelopeCodec()

    @classmethod
    def create(
        cls,
        token: Optional[str],
        *,
        host: str = DEFAULT_HOST,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        codec: Optional[EnvelopeCodec] = None,
    ) -> "BotApiClient":
        """Create a client for the bot identified by *token*.

        Args:
            token: Bot token issued by @BotFather, e.g. ``123456:ABC-DEF1234ghIkl``.
            host: API host; only worth changing for a self-hosted Bot API server.
            session: Optional :class:`requests.Session` to send requests through.
            timeout: Transport timeout in seconds forwarded to ``requests``.
                ``None`` (the default) waits indefinitely.
            codec: Envelope decoder configuration.

        Raises:
            InvalidArgument: If *token* is missing, not a string, or blank.
        """
        if token is None:
            raise InvalidArgument("token is required")
        if not isinstance(token, str) or not token.strip():
            raise InvalidArgument("token must be a non-empty string")
        return cls(Endpoint.for_token(token, host=host), session=session, timeout=timeout, codec=codec)

    @property
    def codec(self) -> EnvelopeCodec:
        return self._codec

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self._endpoint.host!r})"

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        operation: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """Send one HTTP request for *operation* and return the raw response.

        Raises:
            requests.RequestException: On transport-level failures.
        """
        url = self._endpoint.url(operation)
        send = self._session.request if self._session is not None else requests.request
        logger.debug("Calling Telegram API", extra={"api_endpoint": operation, "http_method": method})
        response = send(method, url, params=params, data=data, timeout=self._timeout)
        logger.debug("Telegram API responded", extra={"api_endpoint": operation, "status_code": response.status_code})
        return response

    def _call(
        self,
        method: str,
        operation: str,
        result_type: Any,
        *,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and decode its envelope as *result_type*."""
        response = self._request(method, operation, params=params, data=data)
        try:
            return self._codec.decode(response, result_type)
        except APIException as exc:
            logger.warning(
                "Telegram API call failed",
                extra={"api_endpoint": operation, "status_code": exc.status_code, "error": str(exc)},
            )
            raise

    # ------------------------------------------------------------------
    #  Operations
    # ------------------------------------------------------------------

    def get_me(self) -> User:
        """Return basic information about the bot. Useful for testing the token."""
        return self._call("GET", "getMe", User)

    def send_message(
        self,
        chat_id: Union[int, str],
        text: str,
        *,
        disable_web_page_preview: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        reply_markup: Optional[Union[ReplyMarkup, Dict[str, Any]]] = None,
        parse_mode: Optional[str] = None,
    ) -> Message:
        """Send a text message and return the sent :class:`Message`.

        The body is form-encoded. Optional fields are only included when
        supplied; nothing is sent for the ones left as ``None``.

        Raises:
            InvalidArgument: If *chat_id* or *text* is missing or malformed.
        """
        _require_chat_id(chat_id)
        _require_str("text", text)
        _optional_int("reply_to_message_id", reply_to_message_id)
        if disable_web_page_preview is not None and not isinstance(disable_web_page_preview, bool):
            raise InvalidArgument("disable_web_page_preview must be a boolean")
        if parse_mode is not None:
            _require_str("parse_mode", parse_mode)

        payload: Dict[str, Any] = {"chat_id": chat_id, "text": text}
        if disable_web_page_preview is not None:
            payload["disable_web_page_preview"] = "true" if disable_web_page_preview else "false"
        if reply_to_message_id is not None:
            payload["reply_to_message_id"] = reply_to_message_id
        if reply_markup is not None:
            payload["reply_markup"] = _encode_markup(reply_markup)
        if parse_mode is not None:
            payload["parse_mode"] = parse_mode
        return self._call("POST", "sendMessage", Message, data=payload)

    def get_updates(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        timeout: Optional[int] = None,
    ) -> List[Update]:
        """Receive incoming updates using long polling.

        Only the arguments actually given are sent as query parameters;
        with none, the server applies its defaults (short polling, limit 100).
        *limit* is passed through as-is, the server enforces its 1-100 range.
        To avoid duplicates, pass an *offset* one greater than the highest
        ``update_id`` received so far.

        Returns:
            The updates in the order the server returned them.
        """
        _optional_int("offset", offset)
        _optional_int("limit", limit)
        _optional_int("timeout", timeout)

        params: Dict[str, Any] = {}
        if offset is not None:
            params["offset"] = offset
        if limit is not None:
            params["limit"] = limit
        if timeout is not None:
            params["timeout"] = timeout
        return self._call("GET", "getUpdates", List[Update], params=params)

    def set_webhook(self, url: str) -> None:
        """Register *url* to receive updates via an outgoing webhook.

        Pass an empty string to remove the webhook. Only the HTTP status is
        checked; the response body is not decoded.

        Raises:
            InvalidArgument: If *url* is ``None`` or not a string.
            StaleClient: If the server answers 404.
            ProtocolError: For any other status than 200.
        """
        _require_str("url", url)
        response = self._request("POST", "setWebHook", data={"url": url})
        try:
            self._codec.check_status(response)
        except APIException as exc:
            logger.warning(
                "Telegram API call failed",
                extra={"api_endpoint": "setWebHook", "status_code": exc.status_code, "error": str(exc)},
            )
            raise
        logger.info("Webhook updated", extra={"api_endpoint": "setWebHook", "cleared": url == ""})
