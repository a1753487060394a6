"""Movie extraction for both page layouts."""

import logging
import re
from dataclasses import dataclass

from showtimes.models import Layout, Movie
from showtimes.parsing.fragment import Fragment
from showtimes.parsing.page import ResultPage
from showtimes.parsing.times import parse_showtimes
from showtimes.utils.text import remove_non_ascii, split_tokens
from showtimes.utils.urls import query_param, uncloak_url

logger = logging.getLogger(__name__)

INFO_SEPARATOR = " - "

_RUNTIME_PATTERN = re.compile(r"(hr |min)")
_RATING_PATTERN = re.compile(r"Rated")
_LINK_LABEL_PATTERN = re.compile(r"(IMDB|Trailer)", re.IGNORECASE)

# Selectors that differ between the two layouts
_NAME_SELECTOR = {
    Layout.THEATER_FIRST: ".name",
    Layout.MOVIE_FIRST: "h2[itemprop=name]",
}
_LINK_SELECTOR = {
    Layout.THEATER_FIRST: ".name a",
    Layout.MOVIE_FIRST: ".header .desc h2[itemprop=name] a",
}

INFO_SELECTOR = ".info"
IMDB_LINK_SELECTOR = '.info a:-soup-contains("IMDb")'
TRAILER_LINK_SELECTOR = '.info a:-soup-contains("Trailer")'
DESCRIPTION_SELECTOR = 'span[itemprop="description"]'
SYNOPSIS_EXPANDED_SELECTOR = "#SynopsisSecond0"
NESTED_THEATER_SELECTOR = ".showtimes .theater"
SHOW_MORE_SELECTOR = ".showtimes p.show_more"


@dataclass
class MovieInfo:
    """Runtime, rating and genre parsed out of the info line."""

    runtime: str | None = None
    rating: str | None = None
    genre: list[str] | None = None


def _parse_genre(candidate: str | None) -> list[str] | None:
    if candidate is None or _LINK_LABEL_PATTERN.search(candidate):
        return None
    genre = split_tokens(remove_non_ascii(candidate), "/")
    return genre or None


def classify_info(tokens: list[str]) -> MovieInfo:
    """
    Classify the " - " separated tokens of a movie's info line.

    The line reads RUNTIME - RATING - GENRE - TRAILER - IMDB, but any of the
    parts may be missing, so each token is recognised by its shape.

    Examples:
        ["1 hr 45 min", "Rated PG-13", "Action/Adventure"]
            → runtime="1 hr 45 min", rating="PG-13", genre=["Action", "Adventure"]
        ["1 hr 45 min", "Trailer"] → runtime="1 hr 45 min", no rating, no genre
        ["Documentary"] → no runtime, no rating, genre=["Documentary"]
    """
    if not tokens:
        return MovieInfo()

    first = tokens[0]
    if not _RUNTIME_PATTERN.search(first):
        return MovieInfo(genre=_parse_genre(first))

    runtime = remove_non_ascii(first).strip()
    second = tokens[1] if len(tokens) > 1 else ""

    if _RATING_PATTERN.search(second):
        rating = remove_non_ascii(_RATING_PATTERN.sub("", second, count=1)).strip()
        third = tokens[2] if len(tokens) > 2 else None
        return MovieInfo(runtime=runtime, rating=rating or None, genre=_parse_genre(third))

    return MovieInfo(runtime=runtime, genre=_parse_genre(second))


def _info_tokens(movie: Fragment, layout: Layout) -> list[str]:
    if layout is Layout.THEATER_FIRST:
        return movie.select_text(INFO_SELECTOR).split(INFO_SEPARATOR)

    # Genre and director are separated by a line break here, not " - "
    info_blocks = movie.select(INFO_SELECTOR)
    if not info_blocks:
        return []
    return info_blocks[-1].text_with_first_break_as(INFO_SEPARATOR).split(INFO_SEPARATOR)


def _resolve_id(page: ResultPage, movie: Fragment, layout: Layout) -> str | None:
    href = movie.select_attr(_LINK_SELECTOR[layout], "href")
    if href is None:
        href = page.sidebar_link()
    return query_param(href, "mid")


def _parse_description(movie: Fragment) -> str:
    # Longer synopses continue in a collapsed panel ending in a more/less link
    description = movie.select_text(DESCRIPTION_SELECTOR)
    expanded = movie.select_one(SYNOPSIS_EXPANDED_SELECTOR)
    if expanded is not None:
        description += expanded.text_without_last_child()
    return description.strip()


def _apply_details(movie: Movie, fragment: Fragment, tokens: list[str]) -> None:
    for token in tokens:
        if "Director:" in token:
            movie.director = token.replace("Director:", "", 1).strip()
        elif "Cast:" in token:
            movie.cast = token.replace("Cast:", "", 1).strip().split(", ")
    movie.description = _parse_description(fragment)


def parse_movie(
    page: ResultPage,
    fragment: Fragment,
    layout: Layout = Layout.THEATER_FIRST,
    movie_id: str | None = None,
) -> Movie | None:
    """
    Build a Movie from a movie fragment.

    Args:
        page: Page the fragment belongs to (used for the sidebar id fallback)
        fragment: The ``.movie`` element
        layout: Layout of the page
        movie_id: Known id, set for a single-movie lookup

    Returns:
        The movie, or None if the fragment has no name (the theater is not
        showing anything)
    """
    name = fragment.select_text(_NAME_SELECTOR[layout]).strip()
    if not name:
        logger.debug("Skipping movie fragment without a name")
        return None

    lookup = movie_id is not None
    if movie_id is None:
        movie_id = _resolve_id(page, fragment, layout)

    tokens = _info_tokens(fragment, layout)
    info = classify_info(tokens)

    movie = Movie(
        id=movie_id,
        name=name,
        layout=layout,
        runtime=info.runtime,
        rating=info.rating,
        genre=info.genre,
        imdb_url=uncloak_url(fragment.select_attr(IMDB_LINK_SELECTOR, "href")),
        trailer_url=uncloak_url(fragment.select_attr(TRAILER_LINK_SELECTOR, "href")),
    )

    if layout is Layout.THEATER_FIRST:
        movie.showtimes, movie.showtime_tickets = parse_showtimes(fragment)
        return movie

    # Showtimes of a movie-first page sit on the nested theaters
    if lookup:
        _apply_details(movie, fragment, tokens)
    movie.more_theaters_available = fragment.exists(SHOW_MORE_SELECTOR)
    return movie


def nested_theaters(fragment: Fragment) -> list[Fragment]:
    """Theater fragments listed under a movie on a movie-first page."""
    return fragment.select(NESTED_THEATER_SELECTOR)
