"""Shared fixture for tests that talk to the live Telegram Bot API.

Requires ``BOT_TOKEN`` and ``SUPERGROUP_CHAT_ID`` in the environment (or a
``.env`` file); every test in this package is skipped otherwise.  Each test
announces itself in the supergroup before it runs so the chat history reads
as a test log.
"""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import config
from telegram_sdk.client import BotClient
from telegram_sdk.enums import ParseMode
from telegram_sdk.models import Message


class BotTestsFixture:
    """Bot client plus the chat the tests write into."""

    def __init__(self, client: BotClient, supergroup_chat_id: int | str) -> None:
        self.client = client
        self.supergroup_chat_id = supergroup_chat_id

    async def send_test_case_notification(self, test_case: str) -> Message:
        return await self.client.send_text_message(
            self.supergroup_chat_id,
            f"Executing test case:\n*{test_case}*",
            parse_mode=ParseMode.MARKDOWN,
            disable_notification=True,
        )


@pytest.fixture(scope="session")
def bot_fixture() -> BotTestsFixture:
    if not config.BOT_TOKEN or config.SUPERGROUP_CHAT_ID is None:
        pytest.skip("BOT_TOKEN and SUPERGROUP_CHAT_ID are required for live API tests")
    client = BotClient(config.BASE_URL, timeout=config.REQUEST_TIMEOUT)
    return BotTestsFixture(client, config.SUPERGROUP_CHAT_ID)


@pytest.fixture(scope="session")
def channel_chat_id():
    if config.CHANNEL_CHAT_ID is None:
        pytest.skip("CHANNEL_CHAT_ID is required for channel tests")
    return config.CHANNEL_CHAT_ID
