"""String enumerations shared by request and response models.

Every member subclasses :class:`str`, so values compare equal to the raw
strings Telegram puts on the wire (``MessageEntityType.BOLD == "bold"``).
"""

from enum import Enum


class InlineQueryResultType(str, Enum):
    """Discriminator carried in the ``type`` key of every inline query result."""

    ARTICLE = "article"
    PHOTO = "photo"
    GIF = "gif"
    MPEG4_GIF = "mpeg4_gif"
    VIDEO = "video"
    AUDIO = "audio"
    VOICE = "voice"
    DOCUMENT = "document"
    LOCATION = "location"
    VENUE = "venue"
    CONTACT = "contact"
    GAME = "game"
    STICKER = "sticker"


class ParseMode(str, Enum):
    """Formatting options for message text and captions."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class ChatType(str, Enum):
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


class MessageType(str, Enum):
    """Kind of a received message, derived from the content field it carries."""

    UNKNOWN = "unknown"
    TEXT = "text"
    PHOTO = "photo"
    AUDIO = "audio"
    VIDEO = "video"
    VOICE = "voice"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACT = "contact"
    VENUE = "venue"
    CHAT_MEMBERS_ADDED = "chat_members_added"
    CHAT_MEMBER_LEFT = "chat_member_left"
    CHAT_TITLE_CHANGED = "chat_title_changed"


class MessageEntityType(str, Enum):
    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"
