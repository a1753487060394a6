"""Errors raised by the showtimes client."""


class ShowtimesError(Exception):
    """Base class for every error raised by this package."""


class FetchError(ShowtimesError):
    """A results page could not be fetched."""


class UnexpectedStatusError(FetchError):
    """The showtime service answered with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Unknown error occurred while querying showtime data (HTTP {status_code})"
        )
        self.status_code = status_code


class PageParseError(ShowtimesError):
    """A results page did not have the structure the extractors rely on."""
