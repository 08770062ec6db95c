"""Capability facets shared by a subset of inline query result variants.

Each facet is a pydantic model that only declares fields; a variant gains a
facet by inheriting from it, so membership is fixed per class.  Generic code
asks ``supports_caption(result)`` (a type-narrowing predicate) or calls
``as_captioned(result)``, which hands back the same object typed as the facet
or raises :class:`~telegram_sdk.exceptions.CapabilityNotSupportedError`.

Usage::

    for result in results:
        if supports_caption(result):
            result.caption = result.caption or "via @mybot"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field, SerializeAsAny

from telegram_sdk.enums import ParseMode
from telegram_sdk.exceptions import CapabilityNotSupportedError
from telegram_sdk.input_message_contents import InputMessageContent
from telegram_sdk.models import MessageEntity

if TYPE_CHECKING:
    from typing import TypeGuard

    from telegram_sdk.inline_query_results import InlineQueryResult

_FacetT = TypeVar("_FacetT", bound=BaseModel)

_FACET_CONFIG = {"populate_by_name": True, "validate_assignment": True, "extra": "forbid"}


class CaptionedResult(BaseModel):
    """Result that may carry a caption (0-1024 characters after entity parsing)."""

    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None

    model_config = _FACET_CONFIG


class TitledResult(BaseModel):
    """Result with a title.

    The title is required here; variants whose title is optional in the Bot
    API relax the field in their own declaration.
    """

    title: str

    model_config = _FACET_CONFIG


class InputContentResult(BaseModel):
    """Result that can replace what is sent with an :class:`InputMessageContent`."""

    input_message_content: Optional[SerializeAsAny[InputMessageContent]] = None

    model_config = _FACET_CONFIG


class ThumbnailUrlResult(BaseModel):
    """Result with a preview thumbnail URL."""

    thumb_url: str

    model_config = _FACET_CONFIG


class ThumbnailResult(ThumbnailUrlResult):
    """Result with an optional, sized preview thumbnail."""

    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = Field(None, ge=0)
    thumb_height: Optional[int] = Field(None, ge=0)


class LocationResult(BaseModel):
    """Result pinned to a point on the map."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    model_config = _FACET_CONFIG


def supports_caption(result: InlineQueryResult) -> TypeGuard[CaptionedResult]:
    return isinstance(result, CaptionedResult)


def supports_title(result: InlineQueryResult) -> TypeGuard[TitledResult]:
    return isinstance(result, TitledResult)


def supports_input_message_content(result: InlineQueryResult) -> TypeGuard[InputContentResult]:
    return isinstance(result, InputContentResult)


def supports_thumbnail(result: InlineQueryResult) -> TypeGuard[ThumbnailUrlResult]:
    return isinstance(result, ThumbnailUrlResult)


def supports_location(result: InlineQueryResult) -> TypeGuard[LocationResult]:
    return isinstance(result, LocationResult)


def _require(result: InlineQueryResult, facet: Type[_FacetT], capability: str) -> _FacetT:
    if not isinstance(result, facet):
        raise CapabilityNotSupportedError(capability, type(result).__name__)
    return result


def as_captioned(result: InlineQueryResult) -> CaptionedResult:
    """Return *result* as a :class:`CaptionedResult` or raise ``CapabilityNotSupportedError``."""
    return _require(result, CaptionedResult, "caption")


def as_titled(result: InlineQueryResult) -> TitledResult:
    return _require(result, TitledResult, "title")


def as_input_content(result: InlineQueryResult) -> InputContentResult:
    return _require(result, InputContentResult, "input_message_content")


def as_thumbnailed(result: InlineQueryResult) -> ThumbnailUrlResult:
    return _require(result, ThumbnailUrlResult, "thumbnail")


def as_located(result: InlineQueryResult) -> LocationResult:
    return _require(result, LocationResult, "location")
