"""Unit tests for movie extraction."""

from showtimes.models import Layout
from showtimes.parsing.fragment import Fragment
from showtimes.parsing.movies import classify_info, nested_theaters, parse_movie
from showtimes.parsing.page import ResultPage


# ---------------------------------------------------------------------------
# classify_info — pure token classification
# ---------------------------------------------------------------------------


class TestClassifyInfo:
    def test_runtime_rating_and_genre(self) -> None:
        info = classify_info("1 hr 45 min - Rated PG-13 - Action/Adventure".split(" - "))
        assert info.runtime == "1 hr 45 min"
        assert info.rating == "PG-13"
        assert info.genre == ["Action", "Adventure"]

    def test_runtime_followed_by_link_label(self) -> None:
        info = classify_info("1 hr 45 min - Trailer".split(" - "))
        assert info.runtime == "1 hr 45 min"
        assert info.rating is None
        assert info.genre is None

    def test_genre_only(self) -> None:
        info = classify_info(["Documentary"])
        assert info.runtime is None
        assert info.rating is None
        assert info.genre == ["Documentary"]

    def test_runtime_and_genre_without_rating(self) -> None:
        info = classify_info(["1 hr 46 min", "Drama", "IMDb"])
        assert info.runtime == "1 hr 46 min"
        assert info.rating is None
        assert info.genre == ["Drama"]

    def test_rating_followed_by_imdb_label(self) -> None:
        info = classify_info(["2 hr 6 min", "Rated R", "IMDb"])
        assert info.rating == "R"
        assert info.genre is None

    def test_runtime_in_minutes_only(self) -> None:
        assert classify_info(["95 min"]).runtime == "95 min"

    def test_runtime_alone(self) -> None:
        info = classify_info(["1 hr 30 min"])
        assert info.runtime == "1 hr 30 min"
        assert info.rating is None
        assert info.genre is None

    def test_strips_non_ascii(self) -> None:
        info = classify_info(["1 hr 45 min\xa0", "Rated PG\xa0", "Dram/Aşk"])
        assert info.runtime == "1 hr 45 min"
        assert info.rating == "PG"
        assert info.genre == ["Dram", "Ak"]

    def test_empty_info(self) -> None:
        info = classify_info([""])
        assert info.runtime is None
        assert info.rating is None
        assert info.genre is None


# ---------------------------------------------------------------------------
# parse_movie — theater-first layout
# ---------------------------------------------------------------------------


class TestParseMovieTheaterFirst:
    def _movies(self, page: ResultPage) -> list[Fragment]:
        return page.theaters()[0].select(".showtimes .movie")

    def test_parses_metadata(self, theaters_page: ResultPage) -> None:
        movie = parse_movie(theaters_page, self._movies(theaters_page)[0])
        assert movie is not None
        assert movie.id == "808b0a4a5fa3bdb4"
        assert movie.name == "Dune: Part Two"
        assert movie.runtime == "2 hr 46 min"
        assert movie.rating == "PG-13"
        assert movie.genre == ["Action", "Adventure"]

    def test_resolves_cloaked_links(self, theaters_page: ResultPage) -> None:
        movie = parse_movie(theaters_page, self._movies(theaters_page)[0])
        assert movie is not None
        assert movie.imdb_url == "http://www.imdb.com/title/tt15239678/"
        assert movie.trailer_url == "http://www.youtube.com/watch?v=Way9Dexny3w"

    def test_parses_showtimes_inline(self, theaters_page: ResultPage) -> None:
        movie = parse_movie(theaters_page, self._movies(theaters_page)[0])
        assert movie is not None
        assert movie.showtimes == ["10:00am", "11:20am", "1:00pm", "2:20pm", "6:50pm"]
        assert movie.showtime_tickets is None

    def test_parses_ticket_links(self, theaters_page: ResultPage) -> None:
        movie = parse_movie(theaters_page, self._movies(theaters_page)[1])
        assert movie is not None
        assert movie.showtimes == ["7:15pm", "9:45pm"]
        assert movie.showtime_tickets == {
            "7:15pm": "http://www.fandango.com/tix?id=1",
            "9:45pm": "http://www.fandango.com/tix?id=2",
        }
        assert movie.trailer_url is None

    def test_returns_none_for_nameless_fragment(self, theaters_page: ResultPage) -> None:
        placeholder = theaters_page.theaters()[2].select(".showtimes .movie")[0]
        assert parse_movie(theaters_page, placeholder) is None

    def test_has_no_detail_fields(self, theaters_page: ResultPage) -> None:
        movie = parse_movie(theaters_page, self._movies(theaters_page)[0], movie_id="x")
        assert movie is not None
        assert movie.director is None
        assert movie.description is None

    def test_falls_back_to_sidebar_link_for_id(self) -> None:
        page = ResultPage.from_html(
            '<div id="left_nav"><div class="section"><a href="/movies?mid=SIDE1">x</a></div></div>'
            '<div class="movie"><div class="name">Untitled</div></div>'
        )
        movie = parse_movie(page, page.movies()[0])
        assert movie is not None
        assert movie.id == "SIDE1"

    def test_id_is_none_without_any_link(self) -> None:
        page = ResultPage.from_html('<div class="movie"><div class="name">Untitled</div></div>')
        movie = parse_movie(page, page.movies()[0])
        assert movie is not None
        assert movie.id is None

    def test_parsing_twice_gives_equal_records(self, theaters_page: ResultPage) -> None:
        fragment = self._movies(theaters_page)[1]
        assert parse_movie(theaters_page, fragment) == parse_movie(theaters_page, fragment)


# ---------------------------------------------------------------------------
# parse_movie — movie-first layout
# ---------------------------------------------------------------------------


class TestParseMovieMovieFirst:
    def test_splits_genre_from_director_line(self, movies_page: ResultPage) -> None:
        movie = parse_movie(movies_page, movies_page.movies()[0], Layout.MOVIE_FIRST)
        assert movie is not None
        assert movie.id == "808b0a4a5fa3bdb4"
        assert movie.runtime == "2 hr 46 min"
        assert movie.rating == "PG-13"
        assert movie.genre == ["Science Fiction", "Adventure"]

    def test_leaves_showtimes_to_theaters(self, movies_page: ResultPage) -> None:
        movie = parse_movie(movies_page, movies_page.movies()[0], Layout.MOVIE_FIRST)
        assert movie is not None
        assert movie.showtimes == []
        assert movie.theaters == []

    def test_detects_more_theaters(self, movies_page: ResultPage) -> None:
        first, _, last = movies_page.movies()
        with_more = parse_movie(movies_page, first, Layout.MOVIE_FIRST)
        without_more = parse_movie(movies_page, last, Layout.MOVIE_FIRST)
        assert with_more is not None and with_more.more_theaters_available is True
        assert without_more is not None and without_more.more_theaters_available is False

    def test_listing_has_no_detail_fields(self, movies_page: ResultPage) -> None:
        movie = parse_movie(movies_page, movies_page.movies()[0], Layout.MOVIE_FIRST)
        assert movie is not None
        assert movie.director is None
        assert movie.cast is None
        assert movie.description is None

    def test_returns_none_for_nameless_fragment(self, movies_page: ResultPage) -> None:
        assert parse_movie(movies_page, movies_page.movies()[1], Layout.MOVIE_FIRST) is None

    def test_does_not_modify_the_page(self, movies_page: ResultPage) -> None:
        fragment = movies_page.movies()[0]
        first = parse_movie(movies_page, fragment, Layout.MOVIE_FIRST)
        assert len(fragment.select(".info br")) == 1
        assert parse_movie(movies_page, fragment, Layout.MOVIE_FIRST) == first

    def test_nested_theaters(self, movies_page: ResultPage) -> None:
        assert len(nested_theaters(movies_page.movies()[0])) == 2


class TestParseMovieLookup:
    def test_fills_detail_fields(self, movie_detail_page: ResultPage) -> None:
        movie = parse_movie(
            movie_detail_page,
            movie_detail_page.movies()[0],
            Layout.MOVIE_FIRST,
            movie_id="808b0a4a5fa3bdb4",
        )
        assert movie is not None
        assert movie.id == "808b0a4a5fa3bdb4"
        assert movie.director == "Denis Villeneuve"
        assert movie.cast == ["Timothée Chalamet", "Zendaya", "Rebecca Ferguson"]

    def test_joins_expanded_description(self, movie_detail_page: ResultPage) -> None:
        movie = parse_movie(
            movie_detail_page,
            movie_detail_page.movies()[0],
            Layout.MOVIE_FIRST,
            movie_id="808b0a4a5fa3bdb4",
        )
        assert movie is not None
        assert movie.description == (
            "Paul Atreides unites with Chani and the Fremen while seeking revenge "
            "against the conspirators who destroyed his family."
        )
        assert "less" not in movie.description
