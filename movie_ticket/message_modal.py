"""Message dialog screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static


class MessageModal(ModalScreen[None]):
    """Centered informational dialog dismissed with Enter or Escape."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = """
    MessageModal {
        align: center middle;
        background: $background 60%;
    }

    #message-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #message-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #message-body {
        color: white;
        margin-bottom: 1;
    }

    #message-help {
        color: #dddddd;
    }
    """

    def __init__(self, message: str, title: str = "Message") -> None:
        super().__init__()
        self.message = message
        self.title_text = title

    def compose(self) -> ComposeResult:
        with Container(id="message-dialog"):
            yield Static(self.title_text, id="message-title")
            yield Static(self.message, id="message-body", markup=False)
            yield Static("Enter / Esc / q to close", id="message-help")

    def action_close(self) -> None:
        self.dismiss()
