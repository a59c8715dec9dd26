"""BotApiLogger — Singleton JSON logger with console and rotating file output.

Provides a single, project-wide logger named ``botapi``. The library modules
log through its children (``botapi.client``, ``botapi.envelope``), so once an
application calls :meth:`BotApiLogger.get_logger` their records come out as
structured JSON on stderr and in ``logs/botapi.log`` (with rotation).
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
    are always present. Keys passed through ``extra`` are merged in, which is
    how the client attaches ``api_endpoint`` and ``status_code``::

        logger.warning(
            "Telegram API call failed",
            extra={"api_endpoint": "getMe", "status_code": 401},
        )
    """

    # Standard LogRecord attributes; anything else came from ``extra``.
    _BUILTIN_ATTRS: frozenset = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
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


class BotApiLogger:
    """Singleton logger with dual handlers (console + rotating file).

    Usage::

        from core.logger import BotApiLogger

        logger = BotApiLogger.get_logger()
        logger.info("Polling started")

    Pass ``log_dir=""`` to skip the file handler.
    """

    _instance: Optional["BotApiLogger"] = None
    _logger: Optional[logging.Logger] = None

    _LOGGER_NAME: str = "botapi"

    # Rotation settings
    _LOG_DIR: str = "logs"
    _LOG_FILE: str = "botapi.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_dir: Optional[str] = None) -> "BotApiLogger":
        """Ensure only one instance is ever created (Singleton)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, cls._LOG_DIR if log_dir is None else log_dir)
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_dir: str) -> None:
        """Create the underlying :class:`logging.Logger` and attach handlers."""
        self._logger = logging.getLogger(self._LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if not log_dir:
            return

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
        """Return the shared :class:`logging.Logger` instance.

        Creates the singleton on first call; later calls return the same
        logger and ignore *level* and *log_dir*.
        """
        instance = BotApiLogger(level, log_dir)
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

    def __del__(self) -> None:
        """Best-effort cleanup on garbage collection."""
        self.cleanup()
