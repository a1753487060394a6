"""Shared test fixtures."""

import pytest

from showtimes.parsing.page import ResultPage
from tests.helpers import load_fixture


@pytest.fixture
def theaters_page() -> ResultPage:
    return ResultPage.from_html(load_fixture("theaters_page1.html"))


@pytest.fixture
def movies_page() -> ResultPage:
    return ResultPage.from_html(load_fixture("movies_page.html"))


@pytest.fixture
def movie_detail_page() -> ResultPage:
    return ResultPage.from_html(load_fixture("movie_detail.html"))
