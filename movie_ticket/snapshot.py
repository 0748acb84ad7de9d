"""Copyable record of a finalized booking."""

from __future__ import annotations

from dataclasses import dataclass

from movie_ticket.catalog import Genre
from movie_ticket.models import Ticket


@dataclass
class TicketSnapshot:
    """A finalized booking, safe to duplicate with clone()."""

    movie_name: str
    theater_name: str
    genre: Genre
    seat_count: int
    price: float

    def clone(self) -> TicketSnapshot:
        """Return an independent copy; every field is an immutable value."""
        return TicketSnapshot(
            movie_name=self.movie_name,
            theater_name=self.theater_name,
            genre=self.genre,
            seat_count=self.seat_count,
            price=self.price,
        )

    def details(self) -> str:
        return (
            f"Movie: {self.movie_name}\n"
            f"Theater: {self.theater_name}\n"
            f"Genre: {self.genre.display_name}\n"
            f"Seats: {self.seat_count}\n"
            f"Price: ${self.price}"
        )


def to_snapshot(ticket: Ticket, movie_name: str, theater_name: str, genre: Genre, seat_count: int) -> TicketSnapshot:
    """
    Record a priced ticket together with its structured fields.

    A decorated ticket only keeps its rendered text and total, so the caller
    passes the fields it composed the ticket from.
    """
    return TicketSnapshot(
        movie_name=movie_name,
        theater_name=theater_name,
        genre=genre,
        seat_count=seat_count,
        price=ticket.price,
    )
