# controller.py
from typing import Callable, Optional

import requests

import app_state
import tmdb_client
from app_state import AppState
from logger_conf import get_logger
from models import Movie
from trending import TrendingStore

logger = get_logger(__name__)

API_ERROR_FALLBACK = "Failed to fetch movies"
FETCH_ERROR_MESSAGE = "Failed to fetch movies. Please try again later."


class MovieController:
    """
    Dono do AppState. Orquestra as chamadas ao TMDB e ao armazenamento de
    buscas em alta e aplica os resultados com as transições de app_state.
    """

    def __init__(
        self,
        fetch: Callable[[str], dict] = tmdb_client.fetch_movies,
        analytics: Optional[TrendingStore] = None,
        state: Optional[AppState] = None,
    ):
        self._fetch = fetch
        self.analytics = analytics if analytics is not None else TrendingStore()
        self.state = state if state is not None else AppState()

    # ---------- termo de busca ----------
    def update_search_term(self, term: str) -> None:
        self.state = app_state.set_search_term(self.state, term)

    def settle_search_term(self, term: str) -> bool:
        """Guarda o termo debounced. True se ele mudou e uma busca é devida."""
        if term == self.state.debounced_term:
            return False
        self.state = app_state.set_debounced_term(self.state, term)
        return True

    # ---------- filmes ----------
    def start_fetch(self) -> int:
        self.state = app_state.begin_fetch(self.state)
        return self.state.request_seq

    def finish_fetch(self, seq: int, query: str = "") -> AppState:
        """
        Executa a busca `seq` e aplica o resultado. Se outra busca foi emitida
        nesse meio tempo, a resposta é descartada.
        """
        try:
            data = self._fetch(query)
            if not isinstance(data, dict):
                raise ValueError(f"resposta inesperada do TMDB: {type(data).__name__}")
            if data.get("Response") == "False":
                self.state = app_state.fail_fetch(self.state, seq, data.get("Error") or API_ERROR_FALLBACK)
                return self.state
            results = data.get("results") or []
            if not isinstance(results, list) or not all(isinstance(item, dict) for item in results):
                raise ValueError("campo results fora do formato esperado")
            movies = [Movie.from_api(item) for item in results]
        except (tmdb_client.CatalogError, requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching movies: {e}")
            self.state = app_state.fail_fetch(self.state, seq, FETCH_ERROR_MESSAGE)
            return self.state

        if not app_state.is_current(self.state, seq):
            logger.debug(f"Descartando resposta da busca {seq} (atual: {self.state.request_seq})")
            return self.state

        self.state = app_state.complete_fetch(self.state, seq, movies)
        logger.info(f"{len(movies)} filmes carregados para '{query}'" if query else f"{len(movies)} filmes populares carregados")

        if query and movies:
            self._record_search(query, movies[0])
        return self.state

    def fetch_movies(self, query: str = "") -> AppState:
        return self.finish_fetch(self.start_fetch(), query)

    def _record_search(self, query: str, movie: Movie) -> None:
        # canal secundário: falha aqui nunca derruba a busca
        try:
            self.analytics.record_search(query, movie)
        except Exception as e:
            logger.warning(f"Não foi possível registrar a busca '{query}': {e}")

    # ---------- em alta ----------
    def load_trending_movies(self) -> AppState:
        try:
            entries = self.analytics.get_trending()
        except Exception as e:
            logger.warning(f"Error fetching trending movies: {e}")
            return self.state
        self.state = app_state.set_trending(self.state, entries)
        return self.state
