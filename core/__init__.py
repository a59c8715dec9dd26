"""Application plumbing shared by the command-line front end.

This package must NEVER import from ``botapi/``; the library stays usable
without it.
"""

from core.logger import BotApiLogger

__all__ = [
    "BotApiLogger",
]
