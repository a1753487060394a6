"""Records produced by the extractors."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Layout(StrEnum):
    """Ordering of a results page."""

    THEATER_FIRST = "theater-first"  # theaters, each listing its movies
    MOVIE_FIRST = "movie-first"  # movies, each listing its theaters


@dataclass
class TheaterListing:
    """A theater nested under a movie on a movie-first page."""

    id: str | None
    name: str
    address: str
    showtimes: list[str] = field(default_factory=list)
    showtime_tickets: dict[str, str] | None = None  # only when ticket links exist

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "showtimes": list(self.showtimes),
        }
        if self.showtime_tickets is not None:
            data["showtimeTickets"] = dict(self.showtime_tickets)
        return data


@dataclass
class Movie:
    """
    A movie as it appears on a results page.

    On theater-first pages the showtimes belong to the enclosing theater.
    On movie-first pages showtimes live on each entry of ``theaters`` and
    ``showtimes`` stays empty. ``director``, ``cast`` and ``description``
    are only filled for a single-movie lookup.
    """

    id: str | None
    name: str
    layout: Layout = Layout.THEATER_FIRST
    runtime: str | None = None
    rating: str | None = None
    genre: list[str] | None = None
    imdb_url: str | None = None
    trailer_url: str | None = None
    showtimes: list[str] = field(default_factory=list)
    showtime_tickets: dict[str, str] | None = None
    theaters: list[TheaterListing] = field(default_factory=list)
    more_theaters_available: bool = False
    director: str | None = None
    cast: list[str] | None = None
    description: str | None = None

    @property
    def has_details(self) -> bool:
        return any(v is not None for v in (self.director, self.cast, self.description))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "runtime": self.runtime,
            "rating": self.rating,
            "genre": list(self.genre) if self.genre is not None else None,
            "imdbUrl": self.imdb_url,
            "trailerUrl": self.trailer_url,
        }

        if self.layout is Layout.THEATER_FIRST:
            data["showtimes"] = list(self.showtimes)
            if self.showtime_tickets is not None:
                data["showtimeTickets"] = dict(self.showtime_tickets)
            return data

        data["theaters"] = [t.to_dict() for t in self.theaters]
        data["moreTheatersAvailable"] = self.more_theaters_available
        if self.has_details:
            data["director"] = self.director
            data["cast"] = list(self.cast) if self.cast is not None else None
            data["description"] = self.description
        return data


@dataclass
class Theater:
    """A theater on a theater-first page, with the movies it is showing."""

    id: str | None
    name: str
    address: str
    phone_number: str | None = None
    movies: list[Movie] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "phoneNumber": self.phone_number,
            "movies": [m.to_dict() for m in self.movies],
        }


@dataclass
class ShowtimesResult:
    """Final result of a lookup: page-level location and date plus the records."""

    location: str
    date: str
    data: list[Theater] | list[Movie] | Theater | Movie

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.data, list):
            payload: Any = [record.to_dict() for record in self.data]
        else:
            payload = self.data.to_dict()
        return {"location": self.location, "date": self.date, "data": payload}
