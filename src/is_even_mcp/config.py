"""Process-wide settings.

Fixed identity constants plus environment lookups. Nothing here changes
after startup.
"""

from __future__ import annotations

import logging
import os

from .core.models import SUPPORTED_FORMATS

SERVER_NAME = "is-even-server"
VERSION = "1.0.0"
TOOL_NAME = "is_even"

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "SERVER_NAME",
    "SUPPORTED_FORMATS",
    "TOOL_NAME",
    "VERSION",
    "get_log_level",
]


def get_log_level() -> int:
    """Get the logging level from IS_EVEN_LOG_LEVEL, falling back to INFO."""
    name = os.environ.get("IS_EVEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level
