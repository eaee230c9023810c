# app_state.py
"""
Estado da aplicação e as transições que o alteram.

Todas as funções aqui são puras: recebem um AppState e devolvem outro,
sem rede nem I/O. O controller chama a rede e aplica o resultado com elas.
"""
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from models import Movie, TrendingEntry


@dataclass(frozen=True)
class AppState:
    search_term: str = ""
    debounced_term: Optional[str] = None  # None até o primeiro termo assentar
    error_message: str = ""
    movies: Tuple[Movie, ...] = ()
    is_loading: bool = False
    trending: Tuple[TrendingEntry, ...] = ()
    request_seq: int = 0  # id da busca mais recente emitida


def set_search_term(state: AppState, term: str) -> AppState:
    return replace(state, search_term=term)

def set_debounced_term(state: AppState, term: str) -> AppState:
    return replace(state, debounced_term=term)

def begin_fetch(state: AppState) -> AppState:
    """Emite uma nova busca: liga o loading, limpa o erro e avança a sequência."""
    return replace(state, is_loading=True, error_message="", request_seq=state.request_seq + 1)

def is_current(state: AppState, seq: int) -> bool:
    return seq == state.request_seq

def complete_fetch(state: AppState, seq: int, movies: Iterable[Movie]) -> AppState:
    """Aplica resultados; respostas de buscas já superadas são ignoradas."""
    if not is_current(state, seq):
        return state
    return replace(state, movies=tuple(movies), is_loading=False, error_message="")

def fail_fetch(state: AppState, seq: int, message: str) -> AppState:
    if not is_current(state, seq):
        return state
    return replace(state, movies=(), is_loading=False, error_message=message)

def set_trending(state: AppState, entries: Iterable[TrendingEntry]) -> AppState:
    return replace(state, trending=tuple(entries))
