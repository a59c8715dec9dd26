"""Tests for the click command-line front end."""

import json
import sys
import os
from unittest.mock import patch, MagicMock

import requests
from click.testing import CliRunner

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Console logging only while testing.
os.environ.setdefault("LOG_DIR", "")

from main import cli


def _response(status_code: int = 200, body: object = None, reason: str = "OK") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    resp.content = json.dumps(body).encode()
    return resp


class TestCli:
    """Each sub-command drives one client operation."""

    @patch("botapi.client.requests.request")
    def test_get_me(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response(body={"ok": True, "result": {"id": 1, "first_name": "Bot"}})

        result = CliRunner().invoke(cli, ["--token", "T123", "get-me"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"id": 1, "first_name": "Bot"}
        assert mock_request.call_args.args[1] == "https://api.telegram.org/botT123/getMe"

    @patch("botapi.client.requests.request")
    def test_send_message_options(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response(body={
            "ok": True,
            "result": {"message_id": 9, "date": 0, "chat": {"id": 42, "type": "private"}, "text": "hi"},
        })

        result = CliRunner().invoke(
            cli, ["--token", "T123", "send-message", "42", "hi", "--disable-preview", "--reply-to", "3"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["message_id"] == 9
        assert mock_request.call_args.kwargs["data"] == {
            "chat_id": 42,
            "text": "hi",
            "disable_web_page_preview": "true",
            "reply_to_message_id": 3,
        }

    @patch("botapi.client.requests.request")
    def test_send_message_without_flags(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response(body={
            "ok": True,
            "result": {"message_id": 9, "date": 0, "chat": {"id": 42, "type": "private"}},
        })

        result = CliRunner().invoke(cli, ["--token", "T123", "send-message", "42", "hi"])

        assert result.exit_code == 0, result.output
        assert mock_request.call_args.kwargs["data"] == {"chat_id": 42, "text": "hi"}

    @patch("botapi.client.requests.request")
    def test_get_updates(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response(body={"ok": True, "result": [{"update_id": 10}, {"update_id": 11}]})

        result = CliRunner().invoke(cli, ["--token", "T123", "get-updates", "--offset", "10", "--limit", "5"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [{"update_id": 10}, {"update_id": 11}]
        assert mock_request.call_args.kwargs["params"] == {"offset": 10, "limit": 5}

    @patch("botapi.client.requests.request")
    def test_clear_webhook(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response(body={"ok": True, "result": True})

        result = CliRunner().invoke(cli, ["--token", "T123", "set-webhook", ""])

        assert result.exit_code == 0, result.output
        assert "removed" in result.output
        assert mock_request.call_args.kwargs["data"] == {"url": ""}

    @patch("botapi.client.requests.request")
    def test_api_error_exits_with_message(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response(401, {"ok": False, "description": "Unauthorized"}, reason="Unauthorized")

        result = CliRunner().invoke(cli, ["--token", "T123", "get-me"])

        assert result.exit_code == 1
        assert "API error 401: Unauthorized" in result.output

    @patch("botapi.client.requests.request")
    def test_transport_error_exits_with_message(self, mock_request: MagicMock) -> None:
        mock_request.side_effect = requests.ConnectionError("offline")

        result = CliRunner().invoke(cli, ["--token", "T123", "get-updates"])

        assert result.exit_code == 1
        assert "transport error" in result.output

    @patch("main.BOT_TOKEN", None)
    def test_missing_token_is_usage_error(self) -> None:
        with patch("botapi.client.requests.request") as mock_request:
            result = CliRunner().invoke(cli, ["get-me"])

        assert result.exit_code == 2
        assert "bot token is required" in result.output
        mock_request.assert_not_called()

    @patch("main.BOT_TOKEN", "FROMENV")
    @patch("botapi.client.requests.request")
    def test_token_from_config(self, mock_request: MagicMock) -> None:
        mock_request.return_value = _response(body={"ok": True, "result": {"id": 1, "first_name": "Bot"}})

        result = CliRunner().invoke(cli, ["get-me"])

        assert result.exit_code == 0, result.output
        assert "/botFROMENV/getMe" in mock_request.call_args.args[1]
