"""Process-wide booking confirmation access point."""

from __future__ import annotations

from typing import Callable

from movie_ticket.catalog import Genre
from movie_ticket.debug_log import log_debug

Presenter = Callable[[str], None]


def _log_only(message: str) -> None:
    log_debug(f"registry_present_unbound message={message!r}")


class BookingRegistry:
    """Formats booking confirmations and hands them to the current presenter."""

    def __init__(self, presenter: Presenter | None = None) -> None:
        self._presenter: Presenter = presenter or _log_only

    def set_presenter(self, presenter: Presenter | None) -> None:
        """Route confirmations to ``presenter``; ``None`` restores log-only output."""
        self._presenter = presenter or _log_only

    def confirm_booking(self, movie_name: str, theater_name: str, genre: Genre, seat_count: int) -> str:
        """Format the confirmation, pass it to the presenter, and return it."""
        message = (
            f"Booking confirmed for {movie_name} at {theater_name}.\n"
            f"Genre: {genre.display_name}, Seats: {seat_count}"
        )
        log_debug(f"registry_confirm movie={movie_name!r} theater={theater_name!r} seats={seat_count}")
        self._presenter(message)
        return message


_registry: BookingRegistry | None = None


def get_registry() -> BookingRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _registry
    if _registry is None:
        _registry = BookingRegistry()
    return _registry


def install_registry(registry: BookingRegistry) -> None:
    """Replace the process-wide registry."""
    global _registry
    _registry = registry


def reset_registry() -> None:
    """Drop the process-wide registry so the next get_registry() builds a fresh one."""
    global _registry
    _registry = None
