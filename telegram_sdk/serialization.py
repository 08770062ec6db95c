"""Encode request objects into Telegram wire JSON.

The pydantic field table of each model is the schema: the alias (or the
attribute name) is the wire key, ``is_required()`` marks required fields, and
``None`` is the "unset" sentinel.  Encoding:

1. walks the object and its nested models and fails with
   :class:`~telegram_sdk.exceptions.RequiredFieldError` if a required field is
   ``None`` or an empty string;
2. dumps with ``by_alias=True`` and ``exclude_none=True`` so unset optionals
   never reach the wire, while explicit falsy values such as ``0`` do.

The functions hold no state and never mutate their input, so they are safe to
call concurrently on shared objects.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List

from pydantic import BaseModel

from telegram_sdk.exceptions import RequiredFieldError

_logger = logging.getLogger("telegram_sdk.serialization")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value == ""


def validate_required(obj: BaseModel) -> None:
    """Check that every required field of *obj*, recursively, holds a value.

    Raises:
        RequiredFieldError: naming the model and the wire key of the first
            offending field.
    """
    model_cls = type(obj)
    for name, field in model_cls.model_fields.items():
        value = getattr(obj, name, None)
        if field.is_required() and _is_blank(value):
            raise RequiredFieldError(model_cls.__name__, field.alias or name)
        _validate_nested(value)


def _validate_nested(value: Any) -> None:
    if isinstance(value, BaseModel):
        validate_required(value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _validate_nested(item)


def to_payload(obj: BaseModel) -> Dict[str, Any]:
    """Validate *obj* and return its wire representation as a JSON-ready dict."""
    validate_required(obj)
    return obj.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_json(obj: BaseModel) -> str:
    """Validate *obj* and return its wire representation as JSON text."""
    validate_required(obj)
    return obj.model_dump_json(by_alias=True, exclude_none=True)


def to_payload_list(objects: Iterable[BaseModel]) -> List[Dict[str, Any]]:
    """Encode a batch, e.g. the ``results`` array of ``answerInlineQuery``."""
    encoded = [to_payload(obj) for obj in objects]
    _logger.debug("Encoded batch", extra={"object_count": len(encoded)})
    return encoded


def encode_value(value: Any) -> Any:
    """Encode a request parameter: models via :func:`to_payload`, lists element-wise, the rest as-is."""
    if isinstance(value, BaseModel):
        return to_payload(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value
