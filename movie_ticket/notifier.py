"""Fan-out of finalized bookings to registered listeners."""

from __future__ import annotations

from typing import Protocol

from movie_ticket.debug_log import log_debug


class BookingListener(Protocol):
    def receive(self, snapshot_details: str) -> None: ...


class BookingNotifier:
    """Delivers booking details to listeners in registration order."""

    def __init__(self) -> None:
        self._listeners: list[BookingListener] = []

    @property
    def listeners(self) -> tuple[BookingListener, ...]:
        return tuple(self._listeners)

    def register(self, listener: BookingListener) -> None:
        """Add a listener at the end of the delivery order; repeats are ignored."""
        if listener in self._listeners:
            return
        self._listeners.append(listener)

    def unregister(self, listener: BookingListener) -> None:
        """Remove a listener if it is registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, snapshot_details: str) -> None:
        """Deliver booking details to every registered listener, in order."""
        # Listeners may unregister themselves mid-round; iterate over a copy.
        listeners = list(self._listeners)
        log_debug(f"notifier_publish listeners={len(listeners)}")
        for listener in listeners:
            listener.receive(snapshot_details)
