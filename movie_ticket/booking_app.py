"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import Button, Checkbox, Header, Input, Select, Static

from movie_ticket.booking import BookingForm, BookingSession
from movie_ticket.catalog import genre_keys, theater_keys
from movie_ticket.debug_log import log_debug
from movie_ticket.errors import BookingError, NoCurrentBookingError
from movie_ticket.message_modal import MessageModal
from movie_ticket.registry import BookingRegistry
from movie_ticket.rendering import format_details, pane_placeholder

TICKET_PANE_TITLE = "Ticket Details"
CLONED_PANE_TITLE = "Cloned Ticket Details"


class _UpdatePopup:
    """Booking listener that shows each finalized booking in a dialog."""

    def __init__(self, app: MovieTicketApp) -> None:
        self.app = app

    def receive(self, snapshot_details: str) -> None:
        self.app.show_message(f"Ticket details updated:\n{snapshot_details}", title="Ticket Updated")


class MovieTicketApp(App):
    """A Textual form for composing and booking a movie ticket."""

    TITLE = "Movie Ticket Booking"
    SUB_TITLE = "Book / Build / Clone"

    CSS = """
    Screen {
        layout: vertical;
    }

    #form-pane {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }

    .form-row {
        height: 3;
    }

    .field-label {
        width: 18;
        height: 3;
        content-align: left middle;
        text-style: bold;
    }

    .form-row Input, .form-row Select {
        width: 1fr;
    }

    #button-row {
        height: 3;
        margin: 1 0;
    }

    #button-row Button {
        margin-right: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    #output-layout {
        height: 1fr;
    }

    .output-pane {
        width: 1fr;
        border: round $secondary;
        padding: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+b", "book", "Book Ticket", priority=True),
        Binding("ctrl+r", "rebuild", "Build Ticket", priority=True),
        Binding("ctrl+o", "clone", "Clone Ticket", priority=True),
        Binding("ctrl+l", "clear", "Clear", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: BookingSession | None = None, registry: BookingRegistry | None = None) -> None:
        super().__init__()
        self.session = session or BookingSession(registry=registry)
        self.system_status = ""
        self.ticket_text = ""
        self.cloned_text = ""
        self._popup = _UpdatePopup(self)
        self.session.notifier.register(self._popup)
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="form-pane"):
            with Horizontal(classes="form-row"):
                yield Static("Movie Name:", classes="field-label")
                yield Input(placeholder="e.g. Inception", id="movie-name")
            with Horizontal(classes="form-row"):
                yield Static("Theater Type:", classes="field-label")
                yield Select([(key, key) for key in theater_keys()], allow_blank=False, id="theater")
            with Horizontal(classes="form-row"):
                yield Static("Genre:", classes="field-label")
                yield Select([(key, key) for key in genre_keys()], allow_blank=False, id="genre")
            with Horizontal(classes="form-row"):
                yield Static("Number of Seats:", classes="field-label")
                yield Input(placeholder="e.g. 2", id="seats")
            with Horizontal(classes="form-row"):
                yield Checkbox("Window Seat", id="window-seat")
                yield Checkbox("Meal Included", id="meal-included")
        with Horizontal(id="button-row"):
            yield Button("Book Ticket", id="book", variant="primary")
            yield Button("Build Ticket", id="rebuild")
            yield Button("Clone Ticket", id="clone")
            yield Button("Clear", id="clear", variant="warning")
        yield Static(id="status-bar")
        with Horizontal(id="output-layout"):
            with Vertical(classes="output-pane"):
                yield Static(TICKET_PANE_TITLE, classes="pane-title")
                yield Static(pane_placeholder(TICKET_PANE_TITLE), id="ticket-details")
            with Vertical(classes="output-pane"):
                yield Static(CLONED_PANE_TITLE, classes="pane-title")
                yield Static(pane_placeholder(CLONED_PANE_TITLE), id="cloned-details")

    def on_mount(self) -> None:
        self.session.registry.set_presenter(self._present_confirmation)
        log_debug("on_mount")
        self._refresh_status()

    def on_unmount(self) -> None:
        self.session.registry.set_presenter(None)
        self.session.notifier.unregister(self._popup)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        handlers = {
            "book": self.action_book,
            "rebuild": self.action_rebuild,
            "clone": self.action_clone,
            "clear": self.action_clear,
        }
        handler = handlers.get(event.button.id or "")
        if handler is None:
            return
        handler()
        event.stop()

    def show_message(self, message: str, title: str = "Message") -> None:
        # The form screen stays active until the current handler returns.
        self.call_later(self.push_screen, MessageModal(message, title=title))

    def _modal_open(self) -> bool:
        return isinstance(self.screen, MessageModal)

    def _present_confirmation(self, message: str) -> None:
        self.show_message(message, title="Booking Confirmed")

    def action_book(self) -> None:
        if self._modal_open():
            return
        form = self._read_form()
        try:
            result = self.session.book(form)
        except BookingError as exc:
            log_debug(f"book_rejected code={exc.code.value} field={getattr(exc, 'field', None)!r}")
            self.system_status = exc.message
            self._refresh_status()
            self.show_message(exc.message, title="Invalid Input")
            return

        self._set_ticket_pane(result.display_text)
        self.system_status = f"Booked {result.snapshot.movie_name}: ${result.ticket.price}"
        self._refresh_status()

    def action_rebuild(self) -> None:
        if self._modal_open():
            return
        try:
            snapshot = self.session.redisplay()
        except NoCurrentBookingError as exc:
            self.show_message(exc.message)
            return
        self._set_ticket_pane(snapshot.details())

    def action_clone(self) -> None:
        if self._modal_open():
            return
        try:
            cloned = self.session.clone_last()
        except NoCurrentBookingError as exc:
            self.show_message(exc.message)
            return
        self._set_cloned_pane(cloned.details())

    def action_clear(self) -> None:
        if self._modal_open():
            return
        self.query_one("#movie-name", Input).value = ""
        self.query_one("#seats", Input).value = ""
        self.query_one("#theater", Select).value = theater_keys()[0]
        self.query_one("#genre", Select).value = genre_keys()[0]
        self.query_one("#window-seat", Checkbox).value = False
        self.query_one("#meal-included", Checkbox).value = False
        self._set_ticket_pane("")
        self._set_cloned_pane("")
        self.system_status = ""
        self._refresh_status()
        log_debug("form_cleared")

    def _read_form(self) -> BookingForm:
        theater = self.query_one("#theater", Select).value
        genre = self.query_one("#genre", Select).value
        return BookingForm(
            movie_name=self.query_one("#movie-name", Input).value,
            theater_key=theater if isinstance(theater, str) else "",
            genre_key=genre if isinstance(genre, str) else "",
            seats_text=self.query_one("#seats", Input).value,
            window_seat=self.query_one("#window-seat", Checkbox).value,
            meal_included=self.query_one("#meal-included", Checkbox).value,
        )

    def _set_ticket_pane(self, details: str) -> None:
        self.ticket_text = details
        self._update_pane("#ticket-details", details, TICKET_PANE_TITLE)

    def _set_cloned_pane(self, details: str) -> None:
        self.cloned_text = details
        self._update_pane("#cloned-details", details, CLONED_PANE_TITLE)

    def _update_pane(self, selector: str, details: str, title: str) -> None:
        try:
            pane = self.query_one(selector, Static)
        except NoMatches:
            return
        pane.update(format_details(details) if details else pane_placeholder(title))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        text = Text()
        text.append("Ctrl+B book  Ctrl+R build  Ctrl+O clone  Ctrl+L clear", style="dim")
        text.append(f"  {status}")
        bar.update(text)
