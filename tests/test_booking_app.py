"""Headless tests for the booking form."""

import pytest
from textual.widgets import Checkbox, Input, Select

from movie_ticket.booking_app import MovieTicketApp
from movie_ticket.message_modal import MessageModal
from movie_ticket.registry import BookingRegistry

SIZE = (110, 50)


def _fill(app: MovieTicketApp, movie: str = "Inception", seats: str = "3", window: bool = True) -> None:
    app.query_one("#movie-name", Input).value = movie
    app.query_one("#theater", Select).value = "IMAX"
    app.query_one("#genre", Select).value = "Action"
    app.query_one("#seats", Input).value = seats
    app.query_one("#window-seat", Checkbox).value = window


async def _settle(pilot) -> None:
    # Dialogs are pushed via call_later, so give the queue two passes.
    await pilot.pause()
    await pilot.pause()


async def _close_dialogs(app: MovieTicketApp, pilot) -> None:
    while isinstance(app.screen, MessageModal):
        await pilot.press("escape")
        await _settle(pilot)


@pytest.mark.asyncio
async def test_book_fills_ticket_pane_and_shows_dialogs():
    """Booking shows the priced ticket, then the update and confirmation dialogs."""
    app = MovieTicketApp(registry=BookingRegistry())
    async with app.run_test(size=SIZE) as pilot:
        _fill(app)
        app.action_book()
        await _settle(pilot)

        assert app.ticket_text.endswith("Feature: Window Seat\nTotal Price: $35.0")
        assert isinstance(app.screen, MessageModal)
        assert app.screen.message == "Booking confirmed for Inception at IMAX.\nGenre: Action, Seats: 3"

        await pilot.press("escape")
        await _settle(pilot)
        assert isinstance(app.screen, MessageModal)
        assert app.screen.message.startswith("Ticket details updated:\nMovie: Inception")
        assert app.screen.message.endswith("Price: $35.0")

        await _close_dialogs(app, pilot)
        assert not isinstance(app.screen, MessageModal)


@pytest.mark.asyncio
async def test_invalid_seats_shows_message_and_books_nothing():
    app = MovieTicketApp(registry=BookingRegistry())
    async with app.run_test(size=SIZE) as pilot:
        _fill(app, seats="0")
        app.action_book()
        await _settle(pilot)

        assert isinstance(app.screen, MessageModal)
        assert app.screen.message == "Please enter a valid number for seats."
        assert app.session.last_snapshot is None
        assert app.ticket_text == ""


@pytest.mark.asyncio
async def test_rebuild_and_clone_without_booking():
    app = MovieTicketApp(registry=BookingRegistry())
    async with app.run_test(size=SIZE) as pilot:
        app.action_rebuild()
        await _settle(pilot)
        assert app.screen.message == "No ticket booked yet!"
        await _close_dialogs(app, pilot)

        app.action_clone()
        await _settle(pilot)
        assert app.screen.message == "No ticket to clone!"


@pytest.mark.asyncio
async def test_rebuild_and_clone_after_booking():
    """Build redisplays the stored snapshot; Clone fills the second pane."""
    app = MovieTicketApp(registry=BookingRegistry())
    async with app.run_test(size=SIZE) as pilot:
        _fill(app)
        app.action_book()
        await _settle(pilot)
        await _close_dialogs(app, pilot)

        snapshot_details = app.session.last_snapshot.details()
        app.action_rebuild()
        await _settle(pilot)
        assert app.ticket_text == snapshot_details

        app.action_clone()
        await _settle(pilot)
        assert app.cloned_text == snapshot_details


@pytest.mark.asyncio
async def test_clear_resets_form_but_keeps_booking():
    app = MovieTicketApp(registry=BookingRegistry())
    async with app.run_test(size=SIZE) as pilot:
        _fill(app)
        app.action_book()
        await _settle(pilot)
        await _close_dialogs(app, pilot)
        app.action_clone()
        await _settle(pilot)

        await pilot.press("ctrl+l")
        await _settle(pilot)

        assert app.query_one("#movie-name", Input).value == ""
        assert app.query_one("#seats", Input).value == ""
        assert app.query_one("#theater", Select).value == "Cinema Hall"
        assert app.query_one("#genre", Select).value == "Action"
        assert app.query_one("#window-seat", Checkbox).value is False
        assert app.ticket_text == ""
        assert app.cloned_text == ""
        assert app.session.last_snapshot is not None


@pytest.mark.asyncio
async def test_actions_ignored_while_dialog_open():
    app = MovieTicketApp(registry=BookingRegistry())
    async with app.run_test(size=SIZE) as pilot:
        app.action_rebuild()
        await _settle(pilot)
        assert isinstance(app.screen, MessageModal)

        app.action_book()
        await _settle(pilot)
        assert len(app.screen_stack) == 2

