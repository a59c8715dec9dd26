"""Command-line front end for the botapi client.

Usage::

    python main.py get-me
    python main.py send-message 42 "hello" --disable-preview
    python main.py get-updates --offset 10 --limit 5
    python main.py set-webhook ""      # clear the webhook

The token is read from ``--token`` or the ``BOT_TOKEN`` environment variable.
"""

from __future__ import annotations

import functools
import json
from contextlib import contextmanager
from typing import Any, Callable, Iterator

import click
import requests

from botapi import BotApiClient, BotApiError, InvalidArgument
from config import API_HOST, BOT_TOKEN, HTTP_TIMEOUT, logger


@contextmanager
def _reported_errors(operation: str) -> Iterator[None]:
    """Turn library and transport failures into a clean CLI error (exit code 1)."""
    try:
        yield
    except BotApiError as exc:
        logger.error("Command failed", extra={"api_endpoint": operation, "error": str(exc)})
        raise click.ClickException(str(exc)) from exc
    except requests.RequestException as exc:
        logger.error("Transport error", extra={"api_endpoint": operation, "error": str(exc)})
        raise click.ClickException(f"transport error: {exc}") from exc


def _pass_client(func: Callable[..., Any]) -> Callable[..., Any]:
    """Build a client from the group's token and pass it as the first argument."""

    @click.pass_obj
    @functools.wraps(func)
    def wrapper(token: str | None, *args: Any, **kwargs: Any) -> Any:
        try:
            client = BotApiClient.create(token, host=API_HOST, timeout=HTTP_TIMEOUT)
        except InvalidArgument as exc:
            raise click.UsageError("a bot token is required: pass --token or set BOT_TOKEN") from exc
        return func(client, *args, **kwargs)

    return wrapper


@click.group()
@click.option("--token", default=None, help="Bot token (defaults to BOT_TOKEN).")
@click.pass_context
def cli(ctx: click.Context, token: str | None) -> None:
    """Call the Telegram Bot API from the command line."""
    ctx.obj = token or BOT_TOKEN


@cli.command("get-me")
@_pass_client
def get_me(client: BotApiClient) -> None:
    """Print the bot's own user record."""
    with _reported_errors("getMe"):
        user = client.get_me()
    click.echo(user.model_dump_json(by_alias=True, exclude_none=True, indent=2))


@cli.command("send-message")
@click.argument("chat_id", type=int)
@click.argument("text")
@click.option("--disable-preview", is_flag=True, help="Disable link previews.")
@click.option("--reply-to", "reply_to", type=int, default=None, help="Message id to reply to.")
@click.option("--parse-mode", default=None, help="Markdown, MarkdownV2 or HTML.")
@_pass_client
def send_message(
    client: BotApiClient,
    chat_id: int,
    text: str,
    disable_preview: bool,
    reply_to: int | None,
    parse_mode: str | None,
) -> None:
    """Send TEXT to CHAT_ID and print the sent message."""
    with _reported_errors("sendMessage"):
        message = client.send_message(
            chat_id,
            text,
            disable_web_page_preview=disable_preview or None,
            reply_to_message_id=reply_to,
            parse_mode=parse_mode,
        )
    click.echo(message.model_dump_json(by_alias=True, exclude_none=True, indent=2))


@cli.command("get-updates")
@click.option("--offset", type=int, default=None, help="First update_id to return.")
@click.option("--limit", type=int, default=None, help="Maximum number of updates (1-100).")
@click.option("--timeout", type=int, default=None, help="Long-poll timeout in seconds.")
@_pass_client
def get_updates(client: BotApiClient, offset: int | None, limit: int | None, timeout: int | None) -> None:
    """Print pending updates as a JSON array."""
    with _reported_errors("getUpdates"):
        updates = client.get_updates(offset=offset, limit=limit, timeout=timeout)
    payload = [update.model_dump(mode="json", by_alias=True, exclude_none=True) for update in updates]
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@cli.command("set-webhook")
@click.argument("url")
@_pass_client
def set_webhook(client: BotApiClient, url: str) -> None:
    """Register URL as the bot's webhook; an empty URL removes it."""
    with _reported_errors("setWebHook"):
        client.set_webhook(url)
    click.echo("Webhook removed." if url == "" else f"Webhook set to {url}")


if __name__ == "__main__":
    cli()
