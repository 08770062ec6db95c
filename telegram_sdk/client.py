"""BotClient -- thin async wrappers over Telegram Bot API endpoints.

Each method builds the request payload, encodes any SDK models through
:mod:`telegram_sdk.serialization`, posts it with :mod:`requests` on a worker
thread via :func:`asyncio.to_thread`, and decodes the ``result`` field of the
response into a Pydantic model.

Transport failures (``requests.RequestException``) are not caught here; they
reach the caller unchanged.  API-level failures raise :class:`APIException`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Sequence, Union

import requests

from telegram_sdk.enums import ParseMode
from telegram_sdk.exceptions import APIException
from telegram_sdk.inline_query_results import InlineQueryResult
from telegram_sdk.models import Chat, File, InlineKeyboardMarkup, Message, User
from telegram_sdk.serialization import encode_value, to_payload_list

_sdk_logger = logging.getLogger("telegram_sdk.client")

MAX_INLINE_QUERY_RESULTS = 50


class BotClient:
    """Client-side service layer for the Telegram Bot API.

    The client keeps no per-request state, so one instance can serve many
    concurrent coroutines.
    """

    _DEFAULT_TIMEOUT: int = 10

    def __init__(self, base_url: str, timeout: int = _DEFAULT_TIMEOUT, bot_token: str | None = None) -> None:
        """Create a new client bound to *base_url*.

        Args:
            base_url: Full Bot API base URL (e.g. ``https://api.telegram.org/bot<token>``).
            timeout: Default request timeout in seconds.
            bot_token: Raw bot token, used for file-download URLs.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._bot_token = bot_token

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _post(self, endpoint: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send a POST request and return the parsed JSON body.

        Raises:
            APIException: If the response status code is not 2xx or the body says ``"ok": false``.
            requests.RequestException: On transport-level failures.
        """
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        _sdk_logger.debug("Calling Bot API", extra={"api_endpoint": endpoint})
        response = requests.post(url, json=payload, timeout=self._timeout)
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not response.ok or body.get("ok") is False:
            _sdk_logger.warning(
                "Bot API error",
                extra={"api_endpoint": endpoint, "status_code": response.status_code, "api_response": body},
            )
            raise APIException(response.status_code, body)
        return body

    async def call(self, method: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """Invoke *method* off the event loop and return the raw ``result`` value.

        ``None`` values are dropped from *payload*; SDK models inside it are
        validated and encoded first.
        """
        params = None
        if payload is not None:
            params = {key: encode_value(value) for key, value in payload.items() if value is not None}
        body = await asyncio.to_thread(self._post, method, params)
        return body.get("result")

    # ------------------------------------------------------------------
    #  Endpoints
    # ------------------------------------------------------------------

    async def get_me(self) -> User:
        """A simple method for testing your bot's auth token. Returns basic information about the bot."""
        result = await self.call("getMe")
        return User.model_validate(result)

    async def get_chat(self, chat_id: Union[int, str]) -> Chat:
        """Get up to date information about the chat (``@channelusername`` or numeric id)."""
        result = await self.call("getChat", {"chat_id": chat_id})
        return Chat.model_validate(result)

    async def send_text_message(
        self,
        chat_id: Union[int, str],
        text: str,
        parse_mode: Optional[Union[ParseMode, str]] = None,
        disable_web_page_preview: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        reply_to_message_id: Optional[int] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        """Use this method to send text messages. On success, the sent :class:`Message` is returned."""
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": ParseMode(parse_mode) if parse_mode is not None else None,
            "disable_web_page_preview": disable_web_page_preview,
            "disable_notification": disable_notification,
            "reply_to_message_id": reply_to_message_id,
            "reply_markup": reply_markup,
        }
        result = await self.call("sendMessage", payload)
        message = Message.model_validate(result)
        _sdk_logger.info("Message sent", extra={"chat_id": chat_id, "api_endpoint": "sendMessage", "message_id": message.message_id})
        return message

    async def get_file(self, file_id: str) -> File:
        """Use this method to get basic info about a file and prepare it for downloading."""
        result = await self.call("getFile", {"file_id": file_id})
        return File.model_validate(result)

    def file_url(self, file_path: str) -> str:
        """Return the download link for a ``file_path`` obtained from :meth:`get_file`.

        Raises:
            ValueError: If the client was created without a ``bot_token``.
        """
        if not self._bot_token:
            raise ValueError("file downloads need the client to be created with bot_token")
        server = self._base_url.rsplit("/bot", 1)[0]
        return f"{server}/file/bot{self._bot_token}/{file_path.lstrip('/')}"

    async def download_file(self, file_path: str) -> bytes:
        """Download raw bytes from the Telegram file CDN.

        Raises:
            requests.HTTPError: If the HTTP response status is not 2xx.
            requests.RequestException: On transport-level failures.
        """
        url = self.file_url(file_path)
        response = await asyncio.to_thread(requests.get, url, timeout=self._timeout)
        response.raise_for_status()
        return response.content

    async def answer_inline_query(
        self,
        inline_query_id: str,
        results: Sequence[InlineQueryResult],
        cache_time: Optional[int] = None,
        is_personal: Optional[bool] = None,
        next_offset: Optional[str] = None,
        switch_pm_text: Optional[str] = None,
        switch_pm_parameter: Optional[str] = None,
    ) -> bool:
        """Use this method to send answers to an inline query. No more than 50 results per query are allowed.

        Every result is validated before anything goes over the network; a
        result with a missing required field raises
        :class:`~telegram_sdk.exceptions.RequiredFieldError`.

        Raises:
            ValueError: More than 50 results, or duplicate result ids.
        """
        if len(results) > MAX_INLINE_QUERY_RESULTS:
            raise ValueError(f"answerInlineQuery accepts at most {MAX_INLINE_QUERY_RESULTS} results, got {len(results)}")
        ids = [result.id for result in results]
        if len(set(ids)) != len(ids):
            raise ValueError("inline query result ids must be unique within one answer")

        payload: Dict[str, Any] = {
            "inline_query_id": inline_query_id,
            "results": to_payload_list(results),
            "cache_time": cache_time,
            "is_personal": is_personal,
            "next_offset": next_offset,
            "switch_pm_text": switch_pm_text,
            "switch_pm_parameter": switch_pm_parameter,
        }
        result = await self.call("answerInlineQuery", payload)
        _sdk_logger.info(
            "Inline query answered",
            extra={"api_endpoint": "answerInlineQuery", "inline_query_id": inline_query_id, "result_count": len(ids)},
        )
        return bool(result)


# ── Module-level default client ──────────────────────────────────────────────
#
# A lazily-initialised :class:`BotClient` carrying the ``BASE_URL`` and
# ``REQUEST_TIMEOUT`` values from :mod:`config`.
# ─────────────────────────────────────────────────────────────────────────────

_default_client: BotClient | None = None


def get_default_client() -> BotClient:
    """Return (and lazily create) the module-level client singleton."""
    global _default_client
    if _default_client is None:
        from config import BASE_URL, BOT_TOKEN, REQUEST_TIMEOUT  # deferred so importing the SDK never reads the environment
        _default_client = BotClient(BASE_URL, timeout=REQUEST_TIMEOUT, bot_token=BOT_TOKEN)
    return _default_client


def reset_default_client() -> None:
    """Forget the cached default client so the next call rebuilds it from :mod:`config`."""
    global _default_client
    _default_client = None
