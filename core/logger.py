"""SDKLogger: Singleton JSON logger for the ``telegram_sdk`` logger tree.

Every SDK module logs through a child of the ``telegram_sdk`` logger
(``telegram_sdk.client``, ``telegram_sdk.serialization``).  Configuring the
parent once here gives all of them structured JSON output on stdout and,
when a log directory is given, in a rotating ``telegram_sdk.log`` file.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


class _JsonFormatter(logging.Formatter):
    """Format every log record as a single-line JSON object.

    Standard fields (timestamp, level, logger, message, module, func_name)
    are always present.  Any *extra* key-value pairs passed via the ``extra``
    parameter of a logging call are merged into the JSON object, so callers
    can attach request context such as ``api_endpoint`` or ``chat_id``.

    Example::

        logger.info("Message sent", extra={"chat_id": 42, "api_endpoint": "sendMessage"})

    Produces::

        {"timestamp": "…", "level": "INFO", …, "chat_id": 42, "api_endpoint": "sendMessage"}
    """

    # Keys that belong to the standard LogRecord: everything else is extra.
    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    ))) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        """Serialize *record* to a JSON string."""
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class SDKLogger:
    """Singleton configurator for the ``telegram_sdk`` logger.

    Usage::

        from core.logger import SDKLogger

        logger = SDKLogger.get_logger(logging.DEBUG, log_dir="logs")
        logger.info("Bot started")
    """

    _instance: Optional["SDKLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "telegram_sdk"

    # Rotation settings
    _LOG_FILE: str = "telegram_sdk.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_dir: Optional[str] = None) -> "SDKLogger":
        """Ensure only one instance is ever created (Singleton)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_dir)
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_dir: Optional[str]) -> None:
        """Attach the JSON handlers to the ``telegram_sdk`` logger."""
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, self._LOG_FILE),
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def get_logger(level: int = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
        """Return the shared ``telegram_sdk`` :class:`logging.Logger`.

        Creates the singleton on first call; later calls return the same
        logger regardless of the arguments.
        """
        instance = SDKLogger(level, log_dir)
        assert instance._logger is not None  # guaranteed by __new__
        return instance._logger

    def cleanup(self) -> None:
        """Flush and close all handlers attached to the logger."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Tear down the singleton so the next :meth:`get_logger` reconfigures."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None
