"""Application configuration: environment variables and derived constants.

Loads ``BOT_TOKEN`` and friends from the environment via ``python-dotenv``.
All values are resolved at import time so other modules can
``from config import …`` without repeated lookups.  The chat ids are only
needed by the live-API tests under ``tests/integ``.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import SDKLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_chat_id(raw: str | None) -> int | str | None:
    """Parse a chat id: numeric ids become ints, ``@channelusername`` stays a string."""
    if not raw:
        return None
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        return raw


def _parse_level(raw: str | None) -> int:
    """Map a level name such as ``"DEBUG"`` to its number, defaulting to INFO."""
    level = logging.getLevelName((raw or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _parse_int(raw: str | None, default: int) -> int:
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_SERVER: str = os.environ.get("TELEGRAM_API_SERVER", "https://api.telegram.org").rstrip("/")
BASE_URL: str = f"{API_SERVER}/bot{BOT_TOKEN or ''}"
REQUEST_TIMEOUT: int = _parse_int(os.environ.get("REQUEST_TIMEOUT"), 10)
LOG_LEVEL: int = _parse_level(os.environ.get("LOG_LEVEL"))
LOG_DIR: str | None = os.environ.get("LOG_DIR") or None
SUPERGROUP_CHAT_ID: int | str | None = _parse_chat_id(os.environ.get("SUPERGROUP_CHAT_ID"))
CHANNEL_CHAT_ID: int | str | None = _parse_chat_id(os.environ.get("CHANNEL_CHAT_ID"))

# ── Logger (used for startup diagnostics at the bottom of this module) ───────
logger = SDKLogger.get_logger(LOG_LEVEL, LOG_DIR)


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded, BOT_TOKEN is set, BASE_URL ready")
else:
    logger.warning("Config loaded, BOT_TOKEN is NOT set")

if SUPERGROUP_CHAT_ID is None:
    logger.debug("SUPERGROUP_CHAT_ID not configured; live API tests will be skipped")
