"""Showtime extraction with AM/PM back-inference."""

import logging
import re
from collections.abc import Iterable

from showtimes.parsing.fragment import Fragment
from showtimes.utils.text import remove_non_ascii
from showtimes.utils.urls import uncloak_url

logger = logging.getLogger(__name__)

TIMES_SELECTOR = ".times"
TICKET_LINK_SELECTOR = ".times a.fl"

_MERIDIEM = re.compile(r"(am|pm)", re.IGNORECASE)


def _clean_time(raw_time: str) -> str:
    return re.sub(r"\s+", "", remove_non_ascii(raw_time))


def infer_meridiems(
    raw_times: Iterable[str],
    ticket_urls: Iterable[str | None] | None = None,
) -> tuple[list[str], dict[str, str] | None]:
    """
    Fill in missing AM/PM markers on a day's showtimes.

    The service only prints the meridiem on the last time of each run, e.g.
    "10:00 11:20am 1:00 2:20 6:50pm". Walking the times from latest to
    earliest, each unmarked time takes the marker of the nearest later time.

    Args:
        raw_times: Showtimes in source (chronological) order
        ticket_urls: Optional ticket URL for each showtime, same order

    Returns:
        (showtimes, tickets): resolved times in source order, and a mapping
        of resolved time → ticket URL when ticket_urls was given

    Example:
        ["10:00", "11:20am", "1:00", "2:20", "6:50pm"]
            → ["10:00am", "11:20am", "1:00pm", "2:20pm", "6:50pm"]
    """
    times = list(raw_times)
    urls = list(ticket_urls) if ticket_urls is not None else None
    tickets: dict[str, str] | None = {} if urls is not None else None

    meridiem: str | None = None
    resolved: list[str] = []
    for index in reversed(range(len(times))):
        showtime = _clean_time(times[index])
        if not showtime:
            continue

        match = _MERIDIEM.search(showtime)
        if match:
            meridiem = match.group(0)
        elif meridiem:
            showtime += meridiem

        if tickets is not None and urls is not None:
            url = urls[index] if index < len(urls) else None
            if url:
                tickets[showtime] = url
        resolved.append(showtime)

    resolved.reverse()
    return resolved, tickets


def parse_showtimes(fragment: Fragment) -> tuple[list[str], dict[str, str] | None]:
    """
    Extract the showtimes listed in a movie (theater-first) or theater
    (movie-first) fragment.

    Without ticket links the times come from the whitespace-separated text of
    ``.times``; with ticket links each ``a.fl`` anchor is one time, paired with
    the destination of its cloaked URL.
    """
    anchors = fragment.select(TICKET_LINK_SELECTOR)
    if not anchors:
        raw_times = " ".join(times.text() for times in fragment.select(TIMES_SELECTOR)).split()
        showtimes, _ = infer_meridiems(raw_times)
        return showtimes, None

    raw_times = [anchor.text() for anchor in anchors]
    ticket_urls = [uncloak_url(anchor.attr("href")) for anchor in anchors]
    showtimes, tickets = infer_meridiems(raw_times, ticket_urls)
    logger.debug(f"Parsed {len(showtimes)} showtimes with {len(tickets or {})} ticket links")
    return showtimes, tickets or None
