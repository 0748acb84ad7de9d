"""Rendering helpers for the ticket panes."""

from __future__ import annotations

from rich.text import Text

_PRICE_LABELS = {"Price", "Total Price"}


def badge_style(label: str) -> str:
    """Return a consistent style for a detail line label."""
    if label == "Feature":
        return "bold #0b1f0f on #5fbf72"
    if label in _PRICE_LABELS:
        return "bold #ffffff on #b23a48"
    return "bold"


def format_details(details: str) -> Text:
    """Render ``Label: value`` detail lines with styled labels."""
    text = Text()
    for idx, line in enumerate(details.splitlines()):
        if idx > 0:
            text.append("\n")
        label, sep, value = line.partition(": ")
        if not sep:
            text.append(line)
            continue
        if label == "Feature":
            text.append(f" {value} ", style=badge_style(label))
            continue
        text.append(f"{label}:", style=badge_style(label))
        text.append(f" {value}")
    return text


def pane_placeholder(title: str) -> Text:
    return Text(f"({title.lower()} will appear here)", style="dim")
