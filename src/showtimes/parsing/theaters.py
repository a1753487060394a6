"""Theater extraction for both page layouts."""

import logging

from showtimes.models import Layout, Theater, TheaterListing
from showtimes.parsing.fragment import Fragment
from showtimes.parsing.movies import parse_movie
from showtimes.parsing.page import ResultPage
from showtimes.parsing.times import parse_showtimes
from showtimes.utils.urls import query_param

logger = logging.getLogger(__name__)

INFO_SEPARATOR = " - "

_LINK_SELECTOR = {
    Layout.THEATER_FIRST: ".desc h2.name a",
    Layout.MOVIE_FIRST: ".name a",
}

NAME_SELECTOR = ".desc h2.name"
INFO_SELECTOR = ".desc .info"
NESTED_MOVIE_SELECTOR = ".showtimes .movie"
LISTING_NAME_SELECTOR = ".name"
LISTING_ADDRESS_SELECTOR = ".address"


def resolve_theater_id(page: ResultPage, theater: Fragment, layout: Layout) -> str | None:
    """
    Find the theater id in the theater's own link, falling back to the
    page sidebar.

    Returns:
        The "tid" query parameter, or None if no link carries one
    """
    href = theater.select_attr(_LINK_SELECTOR[layout], "href")
    if href is None:
        href = page.sidebar_link()
    return query_param(href, "tid")


def parse_theater(
    page: ResultPage,
    fragment: Fragment,
    theater_id: str | None = None,
) -> Theater:
    """
    Build a Theater, with its movies, from a theater-first fragment.

    A theater with an empty name is a placeholder; callers building a
    listing should drop it.
    """
    if theater_id is None:
        theater_id = resolve_theater_id(page, fragment, Layout.THEATER_FIRST)

    # Info line: ADDRESS - PHONE (phone is optional)
    info = fragment.select_text(INFO_SELECTOR).split(INFO_SEPARATOR)
    address = info[0].strip() if info else ""
    phone_number = info[1].strip() if len(info) > 1 and info[1].strip() else None

    movies = []
    for movie_fragment in fragment.iter(NESTED_MOVIE_SELECTOR):
        movie = parse_movie(page, movie_fragment, Layout.THEATER_FIRST)
        if movie is not None:
            movies.append(movie)

    return Theater(
        id=theater_id,
        name=fragment.select_text(NAME_SELECTOR).strip(),
        address=address,
        phone_number=phone_number,
        movies=movies,
    )


def parse_theater_listing(page: ResultPage, fragment: Fragment) -> TheaterListing:
    """Build a TheaterListing, with its showtimes, from a movie-first fragment."""
    showtimes, tickets = parse_showtimes(fragment)
    return TheaterListing(
        id=resolve_theater_id(page, fragment, Layout.MOVIE_FIRST),
        name=fragment.select_text(LISTING_NAME_SELECTOR).strip(),
        address=fragment.select_text(LISTING_ADDRESS_SELECTOR).strip(),
        showtimes=showtimes,
        showtime_tickets=tickets,
    )
