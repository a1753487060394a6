"""Movie showtime scraping for theaters and movies near a location."""

from showtimes.client import ShowtimesClient
from showtimes.config import ClientConfig, Settings, settings
from showtimes.exceptions import FetchError, PageParseError, ShowtimesError, UnexpectedStatusError
from showtimes.models import Layout, Movie, ShowtimesResult, Theater, TheaterListing

__all__ = [
    "ClientConfig",
    "FetchError",
    "Layout",
    "Movie",
    "PageParseError",
    "Settings",
    "ShowtimesClient",
    "ShowtimesError",
    "ShowtimesResult",
    "Theater",
    "TheaterListing",
    "UnexpectedStatusError",
    "settings",
]
