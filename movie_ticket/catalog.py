"""Genre and theater catalog lookups."""

from __future__ import annotations

from enum import Enum

from movie_ticket.constant import GENRE_NAMES, GENRE_OPTION_ORDER, THEATER_NAMES, THEATER_OPTION_ORDER
from movie_ticket.errors import CatalogKeyNotFoundError


class Genre(Enum):
    """Movie genre; the value is its display name."""

    ACTION = GENRE_NAMES["ACTION"]
    COMEDY = GENRE_NAMES["COMEDY"]
    DRAMA = GENRE_NAMES["DRAMA"]
    MAGIC = GENRE_NAMES["MAGIC"]

    @property
    def display_name(self) -> str:
        return self.value


class TheaterKind(Enum):
    """Theater type; the value is its display name."""

    CINEMA_HALL = THEATER_NAMES["CINEMA_HALL"]
    CINEMA_DRIVER = THEATER_NAMES["CINEMA_DRIVER"]
    IMAX = THEATER_NAMES["IMAX"]

    @property
    def display_name(self) -> str:
        return self.value


_GENRE_BY_KEY: dict[str, Genre] = {genre.value: genre for genre in Genre}
_THEATER_BY_KEY: dict[str, TheaterKind] = {theater.value: theater for theater in TheaterKind}


def resolve_genre(key: str) -> Genre:
    """Look up a genre by its display name."""
    genre = _GENRE_BY_KEY.get(key)
    if genre is None:
        raise CatalogKeyNotFoundError("genre", key)
    return genre


def resolve_theater(key: str) -> TheaterKind:
    """Look up a theater type by its display name."""
    theater = _THEATER_BY_KEY.get(key)
    if theater is None:
        raise CatalogKeyNotFoundError("theater", key)
    return theater


def genre_keys() -> list[str]:
    """Genre keys in the order the form offers them."""
    return [Genre[name].value for name in GENRE_OPTION_ORDER]


def theater_keys() -> list[str]:
    """Theater keys in the order the form offers them."""
    return [TheaterKind[name].value for name in THEATER_OPTION_ORDER]
