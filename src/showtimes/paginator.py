"""Follows "Next" links across results pages and accumulates records."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from showtimes.models import ShowtimesResult
from showtimes.parsing.fragment import Fragment
from showtimes.parsing.page import ResultPage

logger = logging.getLogger(__name__)

FetchPage = Callable[[int], Awaitable[ResultPage]]
SelectFragments = Callable[[ResultPage], list[Fragment]]
ExtractRecord = Callable[[ResultPage, Fragment], Any]


@dataclass
class PageState:
    """Per-call pagination state: current page number and records so far."""

    number: int = 1
    records: list[Any] = field(default_factory=list)

    def next(self) -> "PageState":
        return PageState(number=self.number + 1, records=self.records)


class Paginator:
    """
    Drives fetch → parse → extract over consecutive pages.

    Holds only the page limit; everything that changes during a call lives
    in a PageState local to ``collect``.
    """

    def __init__(self, page_limit: int | None = None) -> None:
        self.page_limit = page_limit

    def _is_last(self, page: ResultPage, state: PageState) -> bool:
        if not page.has_next_page():
            return True
        return self.page_limit is not None and state.number >= self.page_limit

    async def collect(
        self,
        fetch_page: FetchPage,
        select_fragments: SelectFragments,
        extract: ExtractRecord,
    ) -> ShowtimesResult | str:
        """
        Collect records from every page until pagination ends.

        Args:
            fetch_page: Coroutine returning the parsed page for a page number
            select_fragments: Returns the record fragments of a page
            extract: Builds a record from a fragment, or None to skip it

        Returns:
            One ShowtimesResult for all pages, or the page's own results text
            if the first page has nothing to extract
        """
        state = PageState()
        location = date_label = ""

        while True:
            page = await fetch_page(state.number)
            fragments = select_fragments(page)

            if not fragments:
                if state.number == 1:
                    logger.info("No results on the first page")
                    return page.results_text()
                logger.warning(f"Page {state.number} has no results, stopping pagination")
                break

            location, date_label = page.location, page.date_label

            for fragment in fragments:
                record = extract(page, fragment)
                if record is not None:
                    state.records.append(record)

            logger.info(
                f"Page {state.number}: {len(fragments)} fragments, "
                f"{len(state.records)} records so far"
            )

            if self._is_last(page, state):
                break
            state = state.next()

        return ShowtimesResult(location=location, date=date_label, data=state.records)
