"""Booking lifecycle: compose, snapshot, notify, confirm."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from movie_ticket.catalog import resolve_genre, resolve_theater
from movie_ticket.composer import compose
from movie_ticket.constant import MAX_SEAT_COUNT, SEATS_ERROR_MESSAGE
from movie_ticket.debug_log import log_debug
from movie_ticket.errors import InvalidInputError, NoCurrentBookingError
from movie_ticket.models import Ticket
from movie_ticket.notifier import BookingNotifier
from movie_ticket.registry import BookingRegistry, get_registry
from movie_ticket.snapshot import TicketSnapshot, to_snapshot

_SEATS_PATTERN = re.compile(r"\+?[0-9]+")


class BookingState(Enum):
    IDLE = "idle"
    COMPOSED = "composed"
    SNAPSHOTTED = "snapshotted"
    NOTIFIED = "notified"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class BookingForm:
    """Raw values collected from the booking form."""

    movie_name: str
    theater_key: str
    genre_key: str
    seats_text: str
    window_seat: bool = False
    meal_included: bool = False


@dataclass(frozen=True)
class BookingResult:
    ticket: Ticket
    snapshot: TicketSnapshot

    @property
    def display_text(self) -> str:
        """Text for the primary ticket pane."""
        return f"{self.ticket.details}\nTotal Price: ${self.ticket.price}"


def parse_seat_count(text: str) -> int:
    """Parse the seats field into a positive integer no larger than MAX_SEAT_COUNT."""
    raw = text.strip()
    if not _SEATS_PATTERN.fullmatch(raw):
        raise InvalidInputError(SEATS_ERROR_MESSAGE, field="seats")
    seats = int(raw)
    if not 0 < seats <= MAX_SEAT_COUNT:
        raise InvalidInputError(SEATS_ERROR_MESSAGE, field="seats")
    return seats


class BookingSession:
    """
    Owns the last finalized booking and walks each booking through its lifecycle.

    A booking moves IDLE -> COMPOSED -> SNAPSHOTTED -> NOTIFIED -> CONFIRMED.
    Input errors abort before anything is recorded, so the previous snapshot
    and the notifier's listeners are left as they were.
    """

    def __init__(self, notifier: BookingNotifier | None = None, registry: BookingRegistry | None = None) -> None:
        self.notifier = notifier or BookingNotifier()
        self._registry = registry
        self._last_snapshot: TicketSnapshot | None = None
        self._state = BookingState.IDLE

    @property
    def registry(self) -> BookingRegistry:
        return self._registry or get_registry()

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def last_snapshot(self) -> TicketSnapshot | None:
        return self._last_snapshot

    def book(self, form: BookingForm) -> BookingResult:
        log_debug(f"book_enter movie={form.movie_name!r} seats={form.seats_text!r}")
        seat_count = parse_seat_count(form.seats_text)
        theater = resolve_theater(form.theater_key)
        genre = resolve_genre(form.genre_key)
        movie_name = form.movie_name.strip()

        ticket = compose(
            movie_name,
            theater.display_name,
            genre,
            seat_count,
            want_window_seat=form.window_seat,
            want_meal=form.meal_included,
        )
        self._state = BookingState.COMPOSED

        snapshot = to_snapshot(ticket, movie_name, theater.display_name, genre, seat_count)
        self._last_snapshot = snapshot
        self._state = BookingState.SNAPSHOTTED

        self.notifier.publish(snapshot.details())
        self._state = BookingState.NOTIFIED

        self.registry.confirm_booking(movie_name, theater.display_name, genre, seat_count)
        self._state = BookingState.CONFIRMED

        log_debug(f"book_confirmed price={ticket.price}")
        return BookingResult(ticket=ticket, snapshot=snapshot)

    def redisplay(self) -> TicketSnapshot:
        """Return the last snapshot as recorded, without recomputing it."""
        if self._last_snapshot is None:
            raise NoCurrentBookingError("No ticket booked yet!")
        log_debug("redisplay")
        return self._last_snapshot

    def clone_last(self) -> TicketSnapshot:
        """Return an independent copy of the last snapshot."""
        if self._last_snapshot is None:
            raise NoCurrentBookingError("No ticket to clone!")
        log_debug("clone_last")
        return self._last_snapshot.clone()
