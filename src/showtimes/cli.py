"""Command-line lookups: print theaters or movies near a location as JSON."""

import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from showtimes.client import ShowtimesClient
from showtimes.exceptions import ShowtimesError
from showtimes.models import ShowtimesResult

logger = logging.getLogger(__name__)


async def run_lookup(args: argparse.Namespace) -> ShowtimesResult | str:
    """Run the lookup selected on the command line."""
    client = ShowtimesClient(
        args.location,
        date=args.date,
        lang=args.lang,
        page_limit=args.page_limit,
    )

    if args.command == "theaters":
        return await client.get_theaters(args.query)
    if args.command == "theater":
        return await client.get_theater(args.theater_id)
    if args.command == "movies":
        return await client.get_movies(args.query)
    return await client.get_movie(args.movie_id)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Look up movie showtimes near a location."
    )
    parser.add_argument("--location", required=True, help="Location, e.g. 'Seattle, WA'")
    parser.add_argument(
        "--date",
        type=int,
        default=0,
        metavar="N",
        help="Day offset from today (default: 0)",
    )
    parser.add_argument("--lang", default=None, help="Language code (default: en)")
    parser.add_argument(
        "--page-limit",
        type=int,
        default=None,
        metavar="N",
        help="Maximum result pages to fetch for listings (default: no limit)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    theaters = subparsers.add_parser("theaters", help="List theaters and their movies")
    theaters.add_argument("--query", default=None, help="Filter by theater or movie name")

    theater = subparsers.add_parser("theater", help="Show one theater")
    theater.add_argument("theater_id")

    movies = subparsers.add_parser("movies", help="List movies and their theaters")
    movies.add_argument("--query", default=None, help="Filter by theater or movie name")

    movie = subparsers.add_parser("movie", help="Show one movie with its details")
    movie.add_argument("movie_id")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    try:
        result = asyncio.run(run_lookup(args))
    except (ShowtimesError, ValidationError) as e:
        logger.error(f"Lookup failed: {e}")
        return 1

    if isinstance(result, str):
        print(result.strip())
    else:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
