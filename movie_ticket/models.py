"""Ticket models for movie-ticket."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol

from movie_ticket.catalog import Genre
from movie_ticket.constant import (
    MAX_SEAT_COUNT,
    MEAL_INCLUDED_LABEL,
    MEAL_INCLUDED_PRICE,
    SEATS_ERROR_MESSAGE,
    UNIT_SEAT_PRICE,
    WINDOW_SEAT_LABEL,
    WINDOW_SEAT_PRICE,
)
from movie_ticket.errors import InvalidInputError


class Ticket(Protocol):
    """Anything with a rendered description and a total price."""

    @property
    def details(self) -> str: ...

    @property
    def price(self) -> float: ...


@dataclass(frozen=True)
class BasicTicket:
    """An undecorated ticket priced per seat."""

    movie_name: str
    theater_name: str
    genre: Genre
    seat_count: int

    def __post_init__(self) -> None:
        if isinstance(self.seat_count, bool) or not isinstance(self.seat_count, int):
            raise InvalidInputError("Seat count must be a whole number.", field="seats")
        if self.seat_count <= 0:
            raise InvalidInputError("Seat count must be at least 1.", field="seats")
        if self.seat_count > MAX_SEAT_COUNT:
            raise InvalidInputError(SEATS_ERROR_MESSAGE, field="seats")

    @property
    def details(self) -> str:
        return (
            f"Movie: {self.movie_name}\n"
            f"Theater: {self.theater_name}\n"
            f"Genre: {self.genre.display_name}\n"
            f"Seats: {self.seat_count}"
        )

    @property
    def price(self) -> float:
        return self.seat_count * UNIT_SEAT_PRICE


@dataclass(frozen=True)
class TicketFeature:
    """
    A ticket wrapped with one paid add-on.

    Subclasses set ``label`` and ``extra_price``; the wrapper appends one
    ``Feature:`` line and adds its price to whatever it wraps. Only
    subclasses with a label can be created.
    """

    inner: Ticket

    label: ClassVar[str] = ""
    extra_price: ClassVar[float] = 0.0

    def __post_init__(self) -> None:
        if not self.label:
            raise TypeError(f"{type(self).__name__} has no feature label; use WindowSeat or MealIncluded")

    @property
    def details(self) -> str:
        return f"{self.inner.details}\nFeature: {self.label}"

    @property
    def price(self) -> float:
        return self.inner.price + self.extra_price


@dataclass(frozen=True)
class WindowSeat(TicketFeature):
    label: ClassVar[str] = WINDOW_SEAT_LABEL
    extra_price: ClassVar[float] = WINDOW_SEAT_PRICE


@dataclass(frozen=True)
class MealIncluded(TicketFeature):
    label: ClassVar[str] = MEAL_INCLUDED_LABEL
    extra_price: ClassVar[float] = MEAL_INCLUDED_PRICE


def make_basic_ticket(movie_name: str, theater_name: str, genre: Genre, seat_count: int) -> BasicTicket:
    """Create an undecorated ticket; raises InvalidInputError for a bad seat count."""
    return BasicTicket(movie_name=movie_name, theater_name=theater_name, genre=genre, seat_count=seat_count)


def apply_window_seat(ticket: Ticket) -> WindowSeat:
    """Wrap a ticket with the window seat add-on."""
    return WindowSeat(ticket)


def apply_meal_included(ticket: Ticket) -> MealIncluded:
    """Wrap a ticket with the meal add-on."""
    return MealIncluded(ticket)
