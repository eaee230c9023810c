# test_app.py
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from streamlit.testing.v1 import AppTest

import controller
from controller import MovieController
from debounce import Debouncer

BATMAN = {"id": 268, "title": "Batman", "poster_path": "/bat.jpg", "vote_average": 7.2,
          "original_language": "en", "release_date": "1989-06-23"}


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


@pytest.fixture
def page():
    """
    Sobe o app.py com TMDB, armazenamento e campo de busca trocados por fakes.
    `keyup` controla o texto digitado; `advance` decide se a espera do debounce
    deixa o relógio andar.
    """
    fetch = MagicMock(return_value={"results": [BATMAN]})
    analytics = MagicMock()
    analytics.get_trending.return_value = []
    keyup = MagicMock(return_value="")
    clock = FakeClock()
    env = SimpleNamespace(fetch=fetch, analytics=analytics, keyup=keyup, clock=clock, advance=True, app=None)

    def sleep(seconds):
        if env.advance:
            clock.sleep(seconds)

    def make_controller():
        return MovieController(fetch=fetch, analytics=analytics)

    def make_debouncer(delay_ms):
        return Debouncer(delay_ms, clock=clock, sleep=sleep)

    with patch.object(controller, "MovieController", side_effect=make_controller), \
            patch("debounce.Debouncer", side_effect=make_debouncer), \
            patch("st_keyup.st_keyup", keyup), \
            patch("settings.DEBOUNCE_MS", 500):
        env.app = AppTest.from_file("app.py")
        yield env


def test_trending_loads_once_per_session(page):
    page.app.run()
    page.app.run()
    page.app.run()

    assert not page.app.exception
    assert page.analytics.get_trending.call_count == 1


def test_first_run_loads_popular_movies_once(page):
    page.app.run()
    page.app.run()

    page.fetch.assert_called_once_with("")


def test_keystrokes_reach_the_controller(page):
    page.app.run()
    page.advance = False

    for typed in ["b", "ba", "bat"]:
        page.keyup.return_value = typed
        page.app.run()

    c = page.app.session_state["controller"]
    assert c.state.search_term == "bat"
    # nenhum termo assentou ainda: só o discover inicial
    page.fetch.assert_called_once_with("")


def test_settled_term_triggers_exactly_one_search(page):
    page.app.run()

    page.keyup.return_value = "batman"
    page.app.run()
    page.app.run()

    assert [call.args for call in page.fetch.call_args_list] == [("",), ("batman",)]
    page.analytics.record_search.assert_called_once()
    c = page.app.session_state["controller"]
    assert c.state.debounced_term == "batman"
    assert [m.title for m in c.state.movies] == ["Batman"]
