"""Page-level parsing of one results page."""

import logging
import re

from showtimes.exceptions import PageParseError
from showtimes.parsing.fragment import Fragment

logger = logging.getLogger(__name__)

TITLE_SELECTOR = "#title_bar"
BREADCRUMB_SELECTOR = "#left_nav .section div b"
SIDEBAR_LINK_SELECTOR = "#left_nav .section a"
RESULTS_SELECTOR = "#results"
NEXT_PAGE_SELECTOR = '#navbar td a:-soup-contains("Next")'

_TITLE_PATTERN = re.compile(r"^Showtimes for (.+)$")
_BREADCRUMB_PATTERN = re.compile(r"^›\s*(.+)$")


class ResultPage:
    """
    One results page loaded into a queryable tree.

    The location and date label are read lazily so an empty page can be
    answered with its results text without requiring a title bar.
    """

    def __init__(self, root: Fragment) -> None:
        self.root = root

    @classmethod
    def from_html(cls, markup: str | bytes) -> "ResultPage":
        return cls(Fragment.parse(markup))

    @property
    def location(self) -> str:
        """Location name from the "Showtimes for X" title bar."""
        title = self.root.select_text(TITLE_SELECTOR).strip()
        match = _TITLE_PATTERN.match(title)
        if not match:
            raise PageParseError(f"Title bar does not name a location: {title!r}")
        return match.group(1)

    @property
    def date_label(self) -> str:
        """Day label from the "› X" breadcrumb."""
        crumb = self.root.select_one(BREADCRUMB_SELECTOR)
        text = crumb.text().strip() if crumb is not None else ""
        match = _BREADCRUMB_PATTERN.match(text)
        if not match:
            raise PageParseError(f"Breadcrumb does not name a date: {text!r}")
        return match.group(1)

    def theaters(self) -> list[Fragment]:
        return self.root.select(".theater")

    def movies(self) -> list[Fragment]:
        return self.root.select(".movie")

    def results_text(self) -> str:
        """Human-readable text of the results area, e.g. "No showtimes were found"."""
        return self.root.select_text(RESULTS_SELECTOR)

    def has_next_page(self) -> bool:
        return self.root.exists(NEXT_PAGE_SELECTOR)

    def sidebar_link(self) -> str | None:
        """First sidebar link, which carries the tid/mid of single lookups."""
        return self.root.select_attr(SIDEBAR_LINK_SELECTOR, "href")
