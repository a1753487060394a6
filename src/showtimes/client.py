"""Public client for theater and movie showtime lookups."""

import logging

from showtimes.config import ClientConfig, Settings
from showtimes.fetcher import PageFetcher, decode_page
from showtimes.models import Layout, Movie, ShowtimesResult, Theater
from showtimes.paginator import Paginator
from showtimes.parsing.fragment import Fragment
from showtimes.parsing.movies import nested_theaters, parse_movie
from showtimes.parsing.page import ResultPage
from showtimes.parsing.theaters import parse_theater, parse_theater_listing

logger = logging.getLogger(__name__)


class ShowtimesClient:
    """
    Showtime lookups for one location and day.

    The client only holds static configuration, so a single instance can
    run several lookups concurrently.

    Every operation returns either a ShowtimesResult or, when the service
    found nothing, the page's own message as a plain string.
    """

    def __init__(
        self,
        location: str,
        date: int = 0,
        lang: str | None = None,
        page_limit: int | None = None,
        app_settings: Settings | None = None,
    ) -> None:
        """
        Args:
            location: Location to look up showtimes for, e.g. "Seattle, WA"
            date: Day offset from today (0 = today)
            lang: Language code (defaults to settings.default_lang)
            page_limit: Maximum pages fetched by listing operations (None = no limit)
            app_settings: Settings override (uses the global settings if not provided)
        """
        options: dict = {"location": location, "date": date, "page_limit": page_limit}
        if lang is not None:
            options["lang"] = lang
        self.config = ClientConfig(**options)
        self.fetcher = PageFetcher(self.config, app_settings)

    async def _load_page(self, page: int = 1, **params) -> ResultPage:
        raw = await self.fetcher.fetch(page, **params)
        return ResultPage.from_html(decode_page(raw, self.config.lang))

    def _extract_theater(self, page: ResultPage, fragment: Fragment) -> Theater | None:
        theater = parse_theater(page, fragment)
        if not theater.name:
            logger.debug("Skipping theater without a name")
            return None
        return theater

    def _extract_movie(
        self, page: ResultPage, fragment: Fragment, movie_id: str | None = None
    ) -> Movie | None:
        movie = parse_movie(page, fragment, Layout.MOVIE_FIRST, movie_id)
        if movie is None:
            return None
        movie.theaters = [parse_theater_listing(page, t) for t in nested_theaters(fragment)]
        return movie

    async def get_theaters(self, query: str | None = None) -> ShowtimesResult | str:
        """
        List theaters, with the movies they show, across all result pages.

        Args:
            query: Optional free-text filter (theater or movie name)
        """
        paginator = Paginator(self.config.page_limit)
        result = await paginator.collect(
            lambda number: self._load_page(number, q=query),
            ResultPage.theaters,
            self._extract_theater,
        )
        if isinstance(result, ShowtimesResult):
            logger.info(f"Found {len(result.data)} theaters near {result.location!r}")
        return result

    async def get_theater(self, theater_id: str) -> ShowtimesResult | str:
        """Look up a single theater by the id found in a listing."""
        page = await self._load_page(tid=theater_id)
        fragments = page.theaters()
        if not fragments:
            return page.results_text()

        theater = parse_theater(page, fragments[0], theater_id)
        return ShowtimesResult(location=page.location, date=page.date_label, data=theater)

    async def get_movies(self, query: str | None = None) -> ShowtimesResult | str:
        """
        List movies, with the theaters showing them, across all result pages.

        Args:
            query: Optional free-text filter (theater or movie name)
        """
        paginator = Paginator(self.config.page_limit)
        result = await paginator.collect(
            lambda number: self._load_page(number, sort=1, q=query),
            ResultPage.movies,
            self._extract_movie,
        )
        if isinstance(result, ShowtimesResult):
            logger.info(f"Found {len(result.data)} movies near {result.location!r}")
        return result

    async def get_movie(self, movie_id: str) -> ShowtimesResult | str:
        """Look up a single movie, including director, cast and description."""
        page = await self._load_page(mid=movie_id)
        fragments = page.movies()
        if not fragments:
            return page.results_text()

        movie = self._extract_movie(page, fragments[0], movie_id)
        if movie is None:
            return page.results_text()
        return ShowtimesResult(location=page.location, date=page.date_label, data=movie)
