"""Runtime configuration defaults for the booking form."""

from __future__ import annotations

import os

DEBUG_LOG_ENV = "MOVIE_TICKET_DEBUG_LOG"
DEFAULT_DEBUG_LOG_PATH = "/tmp/movie-ticket-debug.log"


def debug_log_path() -> str:
    """Return the debug trace path, honouring MOVIE_TICKET_DEBUG_LOG when set."""
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return override or DEFAULT_DEBUG_LOG_PATH
