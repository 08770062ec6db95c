"""Exception hierarchy for the Telegram Bot API SDK."""

from typing import Any, Dict, Optional


class TelegramSDKError(Exception):
    """Base class for errors raised locally by the SDK."""


class RequiredFieldError(TelegramSDKError, ValueError):
    """A required field is missing or empty when an object is encoded.

    Attributes:
        model: Class name of the object that failed validation.
        field: Wire key of the offending field (e.g. ``audio_url``).
    """

    def __init__(self, model: str, field: str) -> None:
        self.model = model
        self.field = field
        super().__init__(f"{model}: required field '{field}' is missing or empty")


class CapabilityNotSupportedError(TelegramSDKError, TypeError):
    """Raised when a capability facet is requested from a result that lacks it."""

    def __init__(self, capability: str, result_type: str) -> None:
        self.capability = capability
        self.result_type = result_type
        super().__init__(f"{result_type} does not support the '{capability}' capability")


class APIException(TelegramSDKError):
    """Raised for non-2xx responses, or ``"ok": false`` bodies, from the Telegram Bot API.

    Attributes:
        status_code: HTTP status code returned by the API.
        response_body: Raw response body as a dict, when available.
    """

    def __init__(self, status_code: int, response_body: Optional[Dict[str, Any]] = None) -> None:
        """Initialise with the HTTP status code and optional body."""
        self.status_code = status_code
        self.response_body = response_body or {}
        description = self.response_body.get("description", "Unknown error")
        super().__init__(f"API error {status_code}: {description}")

    @property
    def error_code(self) -> int:
        """Telegram's own error code, falling back to the HTTP status."""
        return self.response_body.get("error_code", self.status_code)

    @property
    def description(self) -> Optional[str]:
        return self.response_body.get("description")

    @property
    def parameters(self) -> Dict[str, Any]:
        """``ResponseParameters`` payload (``retry_after``, ``migrate_to_chat_id``) if present."""
        return self.response_body.get("parameters") or {}
