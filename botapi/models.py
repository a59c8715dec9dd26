"""Pydantic data models for the Telegram Bot API payloads this client handles.

Every class mirrors a Telegram JSON object. Instances are frozen once
decoded, unknown keys are ignored, and absent optional fields stay ``None``.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class TelegramObject(BaseModel):
    """Common configuration shared by every payload model."""

    model_config = {"populate_by_name": True, "frozen": True, "extra": "ignore"}


class User(TelegramObject):
    """This object represents a Telegram user or bot."""

    id: int
    first_name: str
    is_bot: Optional[bool] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class Chat(TelegramObject):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class MessageEntity(TelegramObject):
    """One special entity in a text message: hashtag, username, URL, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None
    language: Optional[str] = None


class PhotoSize(TelegramObject):
    """One size of a photo or a file / sticker thumbnail."""

    file_id: str
    width: int
    height: int
    file_unique_id: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    """An audio file to be treated as music by the Telegram clients."""

    file_id: str
    duration: int
    file_unique_id: Optional[str] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Document(TelegramObject):
    """A general file (as opposed to photos, voice messages and audio files)."""

    file_id: str
    file_unique_id: Optional[str] = None
    thumb: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Sticker(TelegramObject):
    file_id: str
    width: int
    height: int
    file_unique_id: Optional[str] = None
    emoji: Optional[str] = None
    thumb: Optional["PhotoSize"] = None
    file_size: Optional[int] = None


class Video(TelegramObject):
    """This object represents a video file."""

    file_id: str
    width: int
    height: int
    duration: int
    file_unique_id: Optional[str] = None
    thumb: Optional["PhotoSize"] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    """This object represents a voice note."""

    file_id: str
    duration: int
    file_unique_id: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Contact(TelegramObject):
    """This object represents a phone contact."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None


class Location(TelegramObject):
    """A point on the map."""

    longitude: float
    latitude: float


class Message(TelegramObject):
    """This object represents a message."""

    message_id: int
    date: int
    chat: "Chat"
    from_user: Optional["User"] = Field(None, alias="from")
    forward_from: Optional["User"] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional["Message"] = None
    edit_date: Optional[int] = None
    text: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    audio: Optional["Audio"] = None
    document: Optional["Document"] = None
    photo: Optional[List["PhotoSize"]] = None
    sticker: Optional["Sticker"] = None
    video: Optional["Video"] = None
    voice: Optional["Voice"] = None
    caption: Optional[str] = None
    contact: Optional["Contact"] = None
    location: Optional["Location"] = None
    new_chat_members: Optional[List["User"]] = None
    left_chat_member: Optional["User"] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List["PhotoSize"]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None


class Update(TelegramObject):
    """An incoming update. At most one of the optional fields is present."""

    update_id: int
    message: Optional["Message"] = None
    edited_message: Optional["Message"] = None
    channel_post: Optional["Message"] = None
    edited_channel_post: Optional["Message"] = None


class WebhookInfo(TelegramObject):
    """Current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Reply markup ─────────────────────────────────────────────────────────────


class KeyboardButton(TelegramObject):
    """One button of the reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None


class ReplyKeyboardMarkup(TelegramObject):
    """A custom keyboard with reply options."""

    keyboard: List[List["KeyboardButton"]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramObject):
    """Tells Telegram clients to hide the current custom keyboard."""

    remove_keyboard: bool = True
    selective: Optional[bool] = None


class ForceReply(TelegramObject):
    """Tells Telegram clients to display a reply interface to the user."""

    force_reply: bool = True
    selective: Optional[bool] = None


class InlineKeyboardButton(TelegramObject):
    """One button of an inline keyboard. Exactly one optional field must be used."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None


class InlineKeyboardMarkup(TelegramObject):
    """An inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List["InlineKeyboardButton"]]


ReplyMarkup = Union[ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply, InlineKeyboardMarkup]
