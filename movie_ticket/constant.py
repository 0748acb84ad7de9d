"""Editable static catalog and pricing configuration."""

from __future__ import annotations

# Display name of each genre, keyed by enum member name.
GENRE_NAMES: dict[str, str] = {
    "ACTION": "Action",
    "COMEDY": "Comedy",
    "DRAMA": "Drama",
    "MAGIC": "Magic",
}

THEATER_NAMES: dict[str, str] = {
    "CINEMA_HALL": "Cinema Hall",
    "CINEMA_DRIVER": "Cinema Driver",
    "IMAX": "IMAX",
}

# Order in which the form offers the choices; the first entry is the default.
GENRE_OPTION_ORDER: list[str] = ["ACTION", "COMEDY", "DRAMA", "MAGIC"]
THEATER_OPTION_ORDER: list[str] = ["CINEMA_HALL", "IMAX", "CINEMA_DRIVER"]

UNIT_SEAT_PRICE = 10.0
# Largest seat count the form accepts (a signed 32-bit int).
MAX_SEAT_COUNT = 2**31 - 1
SEATS_ERROR_MESSAGE = "Please enter a valid number for seats."

WINDOW_SEAT_PRICE = 5.0
WINDOW_SEAT_LABEL = "Window Seat"

MEAL_INCLUDED_PRICE = 15.0
MEAL_INCLUDED_LABEL = "Meal Included"
