"""Entry point for the movie-ticket Textual app."""

from __future__ import annotations

from movie_ticket.booking_app import MovieTicketApp


def main() -> None:
    """Run the Textual application."""
    MovieTicketApp().run()


if __name__ == "__main__":
    main()
