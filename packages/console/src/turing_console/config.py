"""
Configuration read from the environment.

Provides:
- ENV_BACKEND: selects the terminal backend ("ansi", "curses" or "auto")
- ENV_WRITE_LOG: file that receives a copy of everything the ANSI backend writes
"""
from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

APP_NAME: str = "turing_console"

ENV_BACKEND: str = f"{APP_NAME.upper()}_BACKEND"
ENV_WRITE_LOG: str = f"{APP_NAME.upper()}_WRITE_LOG"

BACKEND_ANSI = "ansi"
BACKEND_CURSES = "curses"
BACKEND_AUTO = "auto"

BACKEND_NAMES = (BACKEND_ANSI, BACKEND_CURSES, BACKEND_AUTO)


def get_backend_name() -> str:
    """Get the requested backend name, "auto" when unset or unknown."""
    value = os.environ.get(ENV_BACKEND, "").strip().lower()
    if not value:
        return BACKEND_AUTO
    if value not in BACKEND_NAMES:
        logger.warning("Unknown %s value %r, using %r", ENV_BACKEND, value, BACKEND_AUTO)
        return BACKEND_AUTO
    return value


def get_write_log_path() -> str:
    return os.environ.get(ENV_WRITE_LOG, "")
