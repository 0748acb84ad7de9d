"""Append-only debug trace shared by the form and the booking core."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from movie_ticket.config import debug_log_path


def log_debug(message: str) -> None:
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path = Path(debug_log_path())
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except Exception:
        # Logging must never interfere with app flow.
        return
