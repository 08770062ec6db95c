"""Telegram Bot API SDK: request/response models, serializer, async client.

Usage::

    from telegram_sdk import BotClient, InlineQueryResultAudio
    from telegram_sdk.serialization import to_payload

    result = InlineQueryResultAudio(id="1", url="http://x/a.mp3", title="T")
    to_payload(result)
    # {"type": "audio", "id": "1", "audio_url": "http://x/a.mp3", "title": "T"}
"""

from telegram_sdk.client import BotClient, get_default_client, reset_default_client
from telegram_sdk.exceptions import (
    APIException,
    CapabilityNotSupportedError,
    RequiredFieldError,
    TelegramSDKError,
)
from telegram_sdk.inline_query_results import (
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultAudio,
    InlineQueryResultCachedAudio,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedGif,
    InlineQueryResultCachedMpeg4Gif,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedSticker,
    InlineQueryResultCachedVideo,
    InlineQueryResultCachedVoice,
    InlineQueryResultContact,
    InlineQueryResultDocument,
    InlineQueryResultGame,
    InlineQueryResultGif,
    InlineQueryResultLocation,
    InlineQueryResultMpeg4Gif,
    InlineQueryResultPhoto,
    InlineQueryResultVenue,
    InlineQueryResultVideo,
    InlineQueryResultVoice,
)
from telegram_sdk.input_message_contents import (
    InputContactMessageContent,
    InputLocationMessageContent,
    InputMessageContent,
    InputTextMessageContent,
    InputVenueMessageContent,
)

__all__ = [
    "BotClient",
    "get_default_client",
    "reset_default_client",
    "APIException",
    "CapabilityNotSupportedError",
    "RequiredFieldError",
    "TelegramSDKError",
    "InlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultAudio",
    "InlineQueryResultCachedAudio",
    "InlineQueryResultCachedDocument",
    "InlineQueryResultCachedGif",
    "InlineQueryResultCachedMpeg4Gif",
    "InlineQueryResultCachedPhoto",
    "InlineQueryResultCachedSticker",
    "InlineQueryResultCachedVideo",
    "InlineQueryResultCachedVoice",
    "InlineQueryResultContact",
    "InlineQueryResultDocument",
    "InlineQueryResultGame",
    "InlineQueryResultGif",
    "InlineQueryResultLocation",
    "InlineQueryResultMpeg4Gif",
    "InlineQueryResultPhoto",
    "InlineQueryResultVenue",
    "InlineQueryResultVideo",
    "InlineQueryResultVoice",
    "InputContactMessageContent",
    "InputLocationMessageContent",
    "InputMessageContent",
    "InputTextMessageContent",
    "InputVenueMessageContent",
]
