"""Extraction of theaters, movies and showtimes from results pages."""

from showtimes.parsing.fragment import Fragment
from showtimes.parsing.movies import classify_info, nested_theaters, parse_movie
from showtimes.parsing.page import ResultPage
from showtimes.parsing.theaters import parse_theater, parse_theater_listing
from showtimes.parsing.times import infer_meridiems, parse_showtimes

__all__ = [
    "Fragment",
    "ResultPage",
    "classify_info",
    "infer_meridiems",
    "nested_theaters",
    "parse_movie",
    "parse_showtimes",
    "parse_theater",
    "parse_theater_listing",
]
