"""Assemble a priced ticket from the base fields and requested add-ons."""

from __future__ import annotations

from movie_ticket.catalog import Genre
from movie_ticket.errors import InvalidInputError
from movie_ticket.models import Ticket, apply_meal_included, apply_window_seat, make_basic_ticket


class TicketBuilder:
    """Collects the booking fields, then builds the decorated ticket in a fixed order."""

    def __init__(self, movie_name: str, theater_name: str, genre: Genre, seat_count: int) -> None:
        self.movie_name = movie_name
        self.theater_name = theater_name
        self.genre = genre
        self.seat_count = seat_count
        self.window_seat = False
        self.meal_included = False

    def with_window_seat(self, enabled: bool = True) -> TicketBuilder:
        self.window_seat = enabled
        return self

    def with_meal_included(self, enabled: bool = True) -> TicketBuilder:
        self.meal_included = enabled
        return self

    def build(self) -> Ticket:
        if not self.movie_name.strip():
            raise InvalidInputError("Please enter a movie name.", field="movie_name")
        if not self.theater_name.strip():
            raise InvalidInputError("Please choose a theater type.", field="theater")

        ticket: Ticket = make_basic_ticket(self.movie_name, self.theater_name, self.genre, self.seat_count)
        if self.window_seat:
            ticket = apply_window_seat(ticket)
        if self.meal_included:
            ticket = apply_meal_included(ticket)
        return ticket


def compose(
    movie_name: str,
    theater_name: str,
    genre: Genre,
    seat_count: int,
    want_window_seat: bool,
    want_meal: bool,
) -> Ticket:
    """Build the base ticket, then window seat, then meal."""
    return (
        TicketBuilder(movie_name, theater_name, genre, seat_count)
        .with_window_seat(want_window_seat)
        .with_meal_included(want_meal)
        .build()
    )
