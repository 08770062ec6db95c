"""Inline query result variants sent with ``answerInlineQuery``.

Every variant fixes its ``type`` discriminator and takes the fields the Bot
API marks as required as constructor keywords.  All other fields start out
unset (``None``), can be assigned later, and are left out of the encoded
payload while unset.  Python attribute names follow the semantic name of the
field (``url``, ``duration``); the wire key lives in the field alias
(``audio_url``, ``audio_duration``).

Example::

    result = InlineQueryResultAudio(id="1", url="http://x/a.mp3", title="T")
    result.performer = "Band"
    result.duration = 0          # emitted as "audio_duration": 0
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field, SerializeAsAny

from telegram_sdk.capabilities import (
    CaptionedResult,
    InputContentResult,
    LocationResult,
    ThumbnailResult,
    ThumbnailUrlResult,
    TitledResult,
)
from telegram_sdk.enums import InlineQueryResultType
from telegram_sdk.input_message_contents import InputMessageContent
from telegram_sdk.models import InlineKeyboardMarkup


class InlineQueryResult(BaseModel):
    """One result of an inline query.

    Only the concrete variants below can be instantiated; each one fixes its
    own ``type`` tag.  ``id`` must be unique within one ``answerInlineQuery``
    call (1-64 bytes).  Frozen fields (``id``, ``type`` and the media
    URL/file id) can be neither reassigned nor replaced through
    :meth:`model_copy`.
    """

    id: str = Field(..., min_length=1, max_length=64, frozen=True)
    type: InlineQueryResultType = Field(..., frozen=True)
    reply_markup: Optional[InlineKeyboardMarkup] = None

    model_config = {"populate_by_name": True, "validate_assignment": True, "extra": "forbid"}

    def __init__(self, **data: Any) -> None:
        if type(self) is InlineQueryResult:
            raise TypeError("InlineQueryResult is abstract; instantiate one of its variants")
        super().__init__(**data)

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> InlineQueryResult:
        if update:
            fields = type(self).model_fields
            frozen = sorted(
                key for key in update
                if any(key in (name, field.alias) and field.frozen for name, field in fields.items())
            )
            if frozen:
                raise ValueError(f"{type(self).__name__} cannot copy with frozen fields replaced: {', '.join(frozen)}")
        return super().model_copy(update=update, deep=deep)


# ── Results linking to external content ──────────────────────────────────────


class InlineQueryResultArticle(InlineQueryResult, TitledResult, InputContentResult, ThumbnailResult):
    """Represents a link to an article or web page."""

    type: Literal["article"] = Field("article", frozen=True)
    input_message_content: SerializeAsAny[InputMessageContent]
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None


class InlineQueryResultPhoto(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult, ThumbnailUrlResult):
    """Represents a link to a photo. By default, this photo will be sent by the user with optional caption."""

    type: Literal["photo"] = Field("photo", frozen=True)
    url: str = Field(..., alias="photo_url", frozen=True)
    width: Optional[int] = Field(None, alias="photo_width", ge=0)
    height: Optional[int] = Field(None, alias="photo_height", ge=0)
    title: Optional[str] = None
    description: Optional[str] = None


class InlineQueryResultGif(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult, ThumbnailUrlResult):
    """Represents a link to an animated GIF file."""

    type: Literal["gif"] = Field("gif", frozen=True)
    url: str = Field(..., alias="gif_url", frozen=True)
    width: Optional[int] = Field(None, alias="gif_width", ge=0)
    height: Optional[int] = Field(None, alias="gif_height", ge=0)
    duration: Optional[int] = Field(None, alias="gif_duration", ge=0)
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None


class InlineQueryResultMpeg4Gif(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult, ThumbnailUrlResult):
    """Represents a link to a video animation (H.264/MPEG-4 AVC video without sound)."""

    type: Literal["mpeg4_gif"] = Field("mpeg4_gif", frozen=True)
    url: str = Field(..., alias="mpeg4_url", frozen=True)
    width: Optional[int] = Field(None, alias="mpeg4_width", ge=0)
    height: Optional[int] = Field(None, alias="mpeg4_height", ge=0)
    duration: Optional[int] = Field(None, alias="mpeg4_duration", ge=0)
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None


class InlineQueryResultVideo(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult, ThumbnailUrlResult):
    """Represents a link to a page containing an embedded video player or a video file.

    If an embedded player is linked (e.g. YouTube), ``input_message_content``
    must be set.
    """

    type: Literal["video"] = Field("video", frozen=True)
    url: str = Field(..., alias="video_url", frozen=True)
    mime_type: str = Field(..., frozen=True)
    width: Optional[int] = Field(None, alias="video_width", ge=0)
    height: Optional[int] = Field(None, alias="video_height", ge=0)
    duration: Optional[int] = Field(None, alias="video_duration", ge=0)
    description: Optional[str] = None


class InlineQueryResultAudio(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult):
    """Represents a link to an MP3 audio file.

    By default, this audio file will be sent by the user.  Alternatively, use
    ``input_message_content`` to send a message with the specified content
    instead of the audio.
    """

    type: Literal["audio"] = Field("audio", frozen=True)
    url: str = Field(..., alias="audio_url", frozen=True)
    performer: Optional[str] = None
    duration: Optional[int] = Field(None, alias="audio_duration", ge=0)


class InlineQueryResultVoice(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult):
    """Represents a link to a voice recording in an .OGG container encoded with OPUS."""

    type: Literal["voice"] = Field("voice", frozen=True)
    url: str = Field(..., alias="voice_url", frozen=True)
    duration: Optional[int] = Field(None, alias="voice_duration", ge=0)


class InlineQueryResultDocument(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult, ThumbnailResult):
    """Represents a link to a file. Only .PDF and .ZIP files can be sent this way."""

    type: Literal["document"] = Field("document", frozen=True)
    url: str = Field(..., alias="document_url", frozen=True)
    mime_type: str = Field(..., frozen=True)
    description: Optional[str] = None


class InlineQueryResultLocation(InlineQueryResult, LocationResult, TitledResult, InputContentResult, ThumbnailResult):
    """Represents a location on a map."""

    type: Literal["location"] = Field("location", frozen=True)
    horizontal_accuracy: Optional[float] = Field(None, ge=0, le=1500)
    live_period: Optional[int] = Field(None, ge=60, le=86400)
    heading: Optional[int] = Field(None, ge=1, le=360)
    proximity_alert_radius: Optional[int] = Field(None, ge=1, le=100000)


class InlineQueryResultVenue(InlineQueryResult, LocationResult, TitledResult, InputContentResult, ThumbnailResult):
    """Represents a venue."""

    type: Literal["venue"] = Field("venue", frozen=True)
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InlineQueryResultContact(InlineQueryResult, InputContentResult, ThumbnailResult):
    """Represents a contact with a phone number."""

    type: Literal["contact"] = Field("contact", frozen=True)
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InlineQueryResultGame(InlineQueryResult):
    """Represents a Game."""

    type: Literal["game"] = Field("game", frozen=True)
    game_short_name: str = Field(..., frozen=True)


# ── Results pointing at files already on Telegram's servers ──────────────────


class InlineQueryResultCachedPhoto(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult):
    """Represents a link to a photo stored on the Telegram servers."""

    type: Literal["photo"] = Field("photo", frozen=True)
    file_id: str = Field(..., alias="photo_file_id", frozen=True)
    title: Optional[str] = None
    description: Optional[str] = None


class InlineQueryResultCachedGif(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult):
    """Represents a link to an animated GIF file stored on the Telegram servers."""

    type: Literal["gif"] = Field("gif", frozen=True)
    file_id: str = Field(..., alias="gif_file_id", frozen=True)
    title: Optional[str] = None


class InlineQueryResultCachedMpeg4Gif(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult):
    """Represents a link to a video animation (H.264/MPEG-4 AVC video without sound) stored on the Telegram servers."""

    type: Literal["mpeg4_gif"] = Field("mpeg4_gif", frozen=True)
    file_id: str = Field(..., alias="mpeg4_file_id", frozen=True)
    title: Optional[str] = None


class InlineQueryResultCachedSticker(InlineQueryResult, InputContentResult):
    """Represents a link to a sticker stored on the Telegram servers."""

    type: Literal["sticker"] = Field("sticker", frozen=True)
    file_id: str = Field(..., alias="sticker_file_id", frozen=True)


class InlineQueryResultCachedDocument(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult):
    """Represents a link to a file stored on the Telegram servers."""

    type: Literal["document"] = Field("document", frozen=True)
    file_id: str = Field(..., alias="document_file_id", frozen=True)
    description: Optional[str] = None


class InlineQueryResultCachedVideo(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult):
    """Represents a link to a video file stored on the Telegram servers."""

    type: Literal["video"] = Field("video", frozen=True)
    file_id: str = Field(..., alias="video_file_id", frozen=True)
    description: Optional[str] = None


class InlineQueryResultCachedVoice(InlineQueryResult, CaptionedResult, TitledResult, InputContentResult):
    """Represents a link to a voice message stored on the Telegram servers."""

    type: Literal["voice"] = Field("voice", frozen=True)
    file_id: str = Field(..., alias="voice_file_id", frozen=True)


class InlineQueryResultCachedAudio(InlineQueryResult, CaptionedResult, InputContentResult):
    """Represents a link to an MP3 audio file stored on the Telegram servers."""

    type: Literal["audio"] = Field("audio", frozen=True)
    file_id: str = Field(..., alias="audio_file_id", frozen=True)
