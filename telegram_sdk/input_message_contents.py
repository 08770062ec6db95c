"""Content sent into the chat when a user picks an inline query result.

The wire format carries no discriminator for this family; the variant is
recognised by its field set (``message_text``, ``phone_number``, ...).
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from telegram_sdk.enums import ParseMode
from telegram_sdk.models import MessageEntity


class InputMessageContent(BaseModel):
    """Base of the four content variants Telegram clients support.

    The base carries no fields of its own and cannot be instantiated.
    """

    model_config = {"populate_by_name": True, "validate_assignment": True, "extra": "forbid"}

    def __init__(self, **data: Any) -> None:
        if type(self) is InputMessageContent:
            raise TypeError("InputMessageContent is abstract; instantiate one of its variants")
        super().__init__(**data)


class InputTextMessageContent(InputMessageContent):
    """Represents the content of a text message to be sent as the result of an inline query."""

    message_text: str = Field(..., max_length=4096)
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(InputMessageContent):
    """Represents the content of a location message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = Field(None, ge=0, le=1500)
    live_period: Optional[int] = Field(None, ge=60, le=86400)
    heading: Optional[int] = Field(None, ge=1, le=360)
    proximity_alert_radius: Optional[int] = Field(None, ge=1, le=100000)


class InputVenueMessageContent(InputMessageContent):
    """Represents the content of a venue message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(InputMessageContent):
    """Represents the content of a contact message to be sent as the result of an inline query."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
