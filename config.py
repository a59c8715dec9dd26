"""Application configuration — environment variables and derived constants.

Loads ``BOT_TOKEN``, ``API_HOST``, ``HTTP_TIMEOUT``, ``LOG_LEVEL`` and
``LOG_DIR`` from the environment via ``python-dotenv``. All values are
resolved at import time so the CLI can ``from config import …`` directly.
The :mod:`botapi` library itself never reads this module.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import BotApiLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: str | None) -> float | None:
    """Parse ``HTTP_TIMEOUT`` seconds; unset, empty or invalid means no timeout."""
    if not raw or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _parse_log_level(raw: str | None) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` constant."""
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN") or None
API_HOST: str = os.environ.get("API_HOST") or "api.telegram.org"
HTTP_TIMEOUT: float | None = _parse_timeout(os.environ.get("HTTP_TIMEOUT"))
LOG_LEVEL: int = _parse_log_level(os.environ.get("LOG_LEVEL"))
LOG_DIR: str = os.environ.get("LOG_DIR", "logs")

logger = BotApiLogger.get_logger(LOG_LEVEL, log_dir=LOG_DIR)


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.debug("Config loaded, BOT_TOKEN is set", extra={"api_host": API_HOST})
else:
    logger.debug("Config loaded, BOT_TOKEN is NOT set", extra={"api_host": API_HOST})

if HTTP_TIMEOUT is not None:
    logger.debug("HTTP_TIMEOUT resolved", extra={"http_timeout": HTTP_TIMEOUT})
