"""Tests for capability facets and the generic capability checks."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegram_sdk.capabilities import (
    CaptionedResult,
    InputContentResult,
    TitledResult,
    as_captioned,
    as_input_content,
    as_located,
    as_thumbnailed,
    as_titled,
    supports_caption,
    supports_input_message_content,
    supports_location,
    supports_thumbnail,
    supports_title,
)
from telegram_sdk.exceptions import CapabilityNotSupportedError, TelegramSDKError
from telegram_sdk.inline_query_results import (
    InlineQueryResultArticle,
    InlineQueryResultAudio,
    InlineQueryResultCachedAudio,
    InlineQueryResultCachedSticker,
    InlineQueryResultContact,
    InlineQueryResultGame,
    InlineQueryResultPhoto,
    InlineQueryResultVenue,
)
from telegram_sdk.input_message_contents import (
    InputContactMessageContent,
    InputMessageContent,
    InputTextMessageContent,
)
from telegram_sdk.serialization import to_payload


@pytest.fixture()
def audio() -> InlineQueryResultAudio:
    return InlineQueryResultAudio(id="1", url="http://x/a.mp3", title="T")


@pytest.fixture()
def game() -> InlineQueryResultGame:
    return InlineQueryResultGame(id="g", game_short_name="tetris")


# ── Membership is fixed per class ────────────────────────────────────────────


class TestMembership:
    def test_audio_facets(self, audio) -> None:
        assert supports_caption(audio)
        assert supports_title(audio)
        assert supports_input_message_content(audio)
        assert not supports_thumbnail(audio)
        assert not supports_location(audio)

    def test_game_has_no_facets(self, game) -> None:
        assert not supports_caption(game)
        assert not supports_title(game)
        assert not supports_input_message_content(game)

    def test_cached_audio_is_untitled(self) -> None:
        cached = InlineQueryResultCachedAudio(id="c", file_id="AgAD")
        assert supports_caption(cached)
        assert not supports_title(cached)

    def test_contact_has_thumbnail_but_no_caption(self) -> None:
        contact = InlineQueryResultContact(id="c", phone_number="+100", first_name="Ada")
        assert supports_thumbnail(contact)
        assert not supports_caption(contact)

    def test_venue_is_located(self) -> None:
        venue = InlineQueryResultVenue(id="v", latitude=1.0, longitude=2.0, title="Cafe", address="Main St")
        assert as_located(venue).latitude == 1.0

    def test_facets_are_class_level(self) -> None:
        assert issubclass(InlineQueryResultAudio, CaptionedResult)
        assert issubclass(InlineQueryResultAudio, TitledResult)
        assert issubclass(InlineQueryResultAudio, InputContentResult)
        assert not issubclass(InlineQueryResultCachedSticker, CaptionedResult)


# ── Facet accessors ──────────────────────────────────────────────────────────


class TestAccessors:
    def test_as_captioned_returns_same_object(self, audio) -> None:
        facet = as_captioned(audio)
        assert facet is audio
        facet.caption = "hi"
        assert to_payload(audio)["caption"] == "hi"

    def test_unsupported_caption_raises(self, game) -> None:
        with pytest.raises(CapabilityNotSupportedError) as exc_info:
            as_captioned(game)
        assert exc_info.value.capability == "caption"
        assert exc_info.value.result_type == "InlineQueryResultGame"

    def test_error_is_type_error(self, game) -> None:
        with pytest.raises(TypeError):
            as_titled(game)
        assert issubclass(CapabilityNotSupportedError, TelegramSDKError)

    def test_unsupported_input_content_raises(self, game) -> None:
        with pytest.raises(CapabilityNotSupportedError):
            as_input_content(game)

    def test_unsupported_thumbnail_raises(self, audio) -> None:
        with pytest.raises(CapabilityNotSupportedError):
            as_thumbnailed(audio)

    def test_titled_photo_may_have_no_title(self) -> None:
        photo = InlineQueryResultPhoto(id="p", url="http://x/p.jpg", thumb_url="http://x/t.jpg")
        assert as_titled(photo).title is None

    def test_generic_caption_pass(self, audio, game) -> None:
        """Generic code can stamp a caption on whatever supports one."""
        for result in (audio, game):
            if supports_caption(result):
                result.caption = "via @bot"
        assert audio.caption == "via @bot"
        assert not hasattr(game, "caption")


# ── Input message content ────────────────────────────────────────────────────


class TestInputContentFacet:
    def test_nested_content_keeps_its_variant(self, audio) -> None:
        as_input_content(audio).input_message_content = InputContactMessageContent(
            phone_number="+100", first_name="Ada"
        )
        assert to_payload(audio)["input_message_content"] == {"phone_number": "+100", "first_name": "Ada"}

    def test_article_requires_content(self) -> None:
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            InlineQueryResultArticle(id="a", title="News")

    def test_article_content_is_replaceable(self) -> None:
        article = InlineQueryResultArticle(
            id="a", title="News", input_message_content=InputTextMessageContent(message_text="one")
        )
        article.input_message_content = InputTextMessageContent(message_text="two")
        assert to_payload(article)["input_message_content"] == {"message_text": "two"}

    def test_bare_content_base_rejected(self) -> None:
        with pytest.raises(TypeError):
            InputMessageContent()

    def test_article_cannot_carry_empty_content(self) -> None:
        with pytest.raises(TypeError):
            InlineQueryResultArticle(id="a", title="t", input_message_content=InputMessageContent())
