"""Tests for the response models decoded from Bot API results."""

import sys
import os
import pytest

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import ValidationError

from telegram_sdk.enums import ChatType, MessageEntityType, MessageType
from telegram_sdk.models import (
    Chat,
    InlineKeyboardMarkup,
    Message,
    MessageEntity,
    User,
)


def _message(**fields) -> Message:
    data = {"message_id": 1, "date": 0, "chat": {"id": 1, "type": "private"}}
    data.update(fields)
    return Message.model_validate(data)


# ── User ─────────────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_minimal_user(self) -> None:
        u = User(id=42, is_bot=False, first_name="Ada")
        assert u.id == 42
        assert u.is_bot is False
        assert u.last_name is None
        assert u.username is None

    def test_64_bit_id(self) -> None:
        """Telegram IDs can be 64-bit integers."""
        big_id = 5_000_000_000
        u = User(id=big_id, is_bot=False, first_name="Big")
        assert u.id == big_id

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User(id=1, is_bot=False)


# ── Chat ─────────────────────────────────────────────────────────────────────


class TestChatModel:
    def test_negative_group_id(self) -> None:
        """Groups/channels use negative IDs."""
        c = Chat(id=-1001234567890, type="supergroup", title="Testers")
        assert c.id < 0
        assert c.type == ChatType.SUPERGROUP


# ── Message ──────────────────────────────────────────────────────────────────


class TestMessageModel:
    def test_from_alias(self) -> None:
        """The 'from' key is exposed as 'from_field' in Python."""
        msg = _message(**{"from": {"id": 7, "is_bot": False, "first_name": "X"}})
        assert msg.from_field is not None
        assert msg.from_field.id == 7

    def test_text_type(self) -> None:
        assert _message(text="hello").type == MessageType.TEXT

    def test_venue_wins_over_location(self) -> None:
        location = {"latitude": 1.0, "longitude": 2.0}
        msg = _message(location=location, venue={"location": location, "title": "Cafe", "address": "Main St"})
        assert msg.type == MessageType.VENUE

    def test_photo_type(self) -> None:
        msg = _message(photo=[{"file_id": "f", "file_unique_id": "u", "width": 1, "height": 1}])
        assert msg.type == MessageType.PHOTO

    def test_service_message_type(self) -> None:
        msg = _message(new_chat_members=[{"id": 2, "is_bot": False, "first_name": "New"}])
        assert msg.type == MessageType.CHAT_MEMBERS_ADDED

    def test_unknown_type(self) -> None:
        assert _message().type == MessageType.UNKNOWN

    def test_reply_markup_decoded(self) -> None:
        msg = _message(text="x", reply_markup={"inline_keyboard": [[{"text": "Click", "callback_data": "go"}]]})
        assert isinstance(msg.reply_markup, InlineKeyboardMarkup)
        assert msg.reply_markup.inline_keyboard[0][0].callback_data == "go"


# ── Entity values ────────────────────────────────────────────────────────────


class TestEntityValues:
    def test_plain_ascii(self) -> None:
        msg = _message(
            text="#TelegramBots\n@BotFather",
            entities=[
                {"type": "hashtag", "offset": 0, "length": 13},
                {"type": "mention", "offset": 14, "length": 10},
            ],
        )
        assert msg.entity_values == ["#TelegramBots", "@BotFather"]
        assert [e.type for e in msg.entities] == [MessageEntityType.HASHTAG, MessageEntityType.MENTION]

    def test_offsets_count_utf16_units(self) -> None:
        """An emoji outside the BMP occupies two UTF-16 positions."""
        msg = _message(text="\U0001F600 #tag", entities=[{"type": "hashtag", "offset": 3, "length": 4}])
        assert msg.entity_values == ["#tag"]

    def test_no_entities(self) -> None:
        assert _message(text="plain").entity_values == []

    def test_caption_entity_values(self) -> None:
        msg = _message(caption="look here", caption_entities=[{"type": "bold", "offset": 5, "length": 4}])
        assert msg.caption_entity_values == ["here"]


class TestRoundTrip:
    def test_entity_round_trip(self) -> None:
        e = MessageEntity(type="bold", offset=0, length=5)
        assert MessageEntity.model_validate(e.model_dump()) == e
