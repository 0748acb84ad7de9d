"""Booking error codes."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Booking error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    NO_CURRENT_BOOKING = "NO_CURRENT_BOOKING"


class BookingError(Exception):
    """Base booking error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(BookingError):
    """Raised when a form value cannot be used to build a ticket."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)
        self.field = field


class CatalogKeyNotFoundError(BookingError):
    """Raised when a genre or theater key is not in the catalog."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=f"Unknown {kind}: {key!r}")
        self.kind = kind
        self.key = key


class NoCurrentBookingError(BookingError):
    """Raised when the last booking is requested before any booking exists."""

    def __init__(self, message: str = "No ticket booked yet!") -> None:
        super().__init__(code=ErrorCode.NO_CURRENT_BOOKING, message=message)
