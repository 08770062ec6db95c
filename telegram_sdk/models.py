"""Pydantic models for objects returned by the Telegram Bot API.

These are the decode side of the SDK: the client feeds the ``result`` payload
of a response into ``Model.model_validate``.  Field names match the wire keys
one-to-one, except ``from`` which is exposed as ``from_field``.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from telegram_sdk.enums import MessageType


class User(BaseModel):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None

    model_config = {"populate_by_name": True}


class Chat(BaseModel):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None

    model_config = {"populate_by_name": True}


class MessageEntity(BaseModel):
    """This object represents one special entity in a text message. For example, hashtags, usernames, URLs, etc.

    ``offset`` and ``length`` are measured in UTF-16 code units.
    """

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None
    language: Optional[str] = None

    model_config = {"populate_by_name": True}


class PhotoSize(BaseModel):
    """This object represents one size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Audio(BaseModel):
    """This object represents an audio file to be treated as music by the Telegram clients."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional["PhotoSize"] = None

    model_config = {"populate_by_name": True}


class Document(BaseModel):
    """This object represents a general file (as opposed to photos, voice messages and audio files)."""

    file_id: str
    file_unique_id: str
    thumb: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Video(BaseModel):
    """This object represents a video file."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Voice(BaseModel):
    """This object represents a voice note."""

    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Sticker(BaseModel):
    """This object represents a sticker."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    thumb: Optional["PhotoSize"] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Contact(BaseModel):
    """This object represents a phone contact."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None

    model_config = {"populate_by_name": True}


class Location(BaseModel):
    """This object represents a point on the map."""

    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None

    model_config = {"populate_by_name": True}


class Venue(BaseModel):
    """This object represents a venue."""

    location: "Location"
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None

    model_config = {"populate_by_name": True}


class File(BaseModel):
    """This object represents a file ready to be downloaded via ``/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None

    model_config = {"populate_by_name": True}


class LoginUrl(BaseModel):
    """This object represents a parameter of the inline keyboard button used to automatically authorize a user."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None

    model_config = {"populate_by_name": True}


class InlineKeyboardButton(BaseModel):
    """This object represents one button of an inline keyboard. You **must** use exactly one of the optional fields."""

    text: str
    url: Optional[str] = None
    login_url: Optional["LoginUrl"] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    pay: Optional[bool] = None

    model_config = {"populate_by_name": True}


class InlineKeyboardMarkup(BaseModel):
    """This object represents an inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List["InlineKeyboardButton"]]

    model_config = {"populate_by_name": True}


class ResponseParameters(BaseModel):
    """Contains information about why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None

    model_config = {"populate_by_name": True}


def _slice_utf16(text: Optional[str], entities: Optional[List[MessageEntity]]) -> List[str]:
    """Cut the substring covered by each entity out of *text*.

    Telegram counts offsets in UTF-16 code units, so characters outside the
    BMP (most emoji) occupy two positions.
    """
    if not text or not entities:
        return []
    encoded = text.encode("utf-16-le")
    return [
        encoded[entity.offset * 2:(entity.offset + entity.length) * 2].decode("utf-16-le")
        for entity in entities
    ]


class Message(BaseModel):
    """This object represents a message."""

    message_id: int
    date: int
    chat: "Chat"
    from_field: Optional["User"] = Field(None, alias="from")
    sender_chat: Optional["Chat"] = None
    forward_from: Optional["User"] = None
    forward_from_chat: Optional["Chat"] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional["Message"] = None
    via_bot: Optional["User"] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    audio: Optional["Audio"] = None
    document: Optional["Document"] = None
    photo: Optional[List["PhotoSize"]] = None
    sticker: Optional["Sticker"] = None
    video: Optional["Video"] = None
    voice: Optional["Voice"] = None
    caption: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    contact: Optional["Contact"] = None
    venue: Optional["Venue"] = None
    location: Optional["Location"] = None
    new_chat_members: Optional[List["User"]] = None
    left_chat_member: Optional["User"] = None
    new_chat_title: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None

    model_config = {"populate_by_name": True}

    @property
    def type(self) -> MessageType:
        """Kind of this message, taken from the first content field that is set."""
        # venue messages also carry a location, so venue is checked first
        if self.text is not None:
            return MessageType.TEXT
        if self.photo:
            return MessageType.PHOTO
        if self.audio is not None:
            return MessageType.AUDIO
        if self.video is not None:
            return MessageType.VIDEO
        if self.voice is not None:
            return MessageType.VOICE
        if self.document is not None:
            return MessageType.DOCUMENT
        if self.sticker is not None:
            return MessageType.STICKER
        if self.venue is not None:
            return MessageType.VENUE
        if self.location is not None:
            return MessageType.LOCATION
        if self.contact is not None:
            return MessageType.CONTACT
        if self.new_chat_members:
            return MessageType.CHAT_MEMBERS_ADDED
        if self.left_chat_member is not None:
            return MessageType.CHAT_MEMBER_LEFT
        if self.new_chat_title is not None:
            return MessageType.CHAT_TITLE_CHANGED
        return MessageType.UNKNOWN

    @property
    def entity_values(self) -> List[str]:
        """Text covered by each of :attr:`entities`, in order."""
        return _slice_utf16(self.text, self.entities)

    @property
    def caption_entity_values(self) -> List[str]:
        return _slice_utf16(self.caption, self.caption_entities)
