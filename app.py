import os

import streamlit as st
from st_keyup import st_keyup

import settings
from controller import MovieController
from debounce import Debouncer
from logger_conf import get_logger
from models import Movie
from movie_card import PLACEHOLDER_POSTER, build_card

logger = get_logger("movie-finder.app")

# ---------------------- CONFIG BÁSICA ---------------------- #

st.set_page_config(
    page_title="Movie Finder",
    page_icon="🎬",
    layout="wide",
)

# CSS simples para dar uma cara de app
st.markdown(
    """
    <style>
    .main-title {
        font-size: 2.3rem;
        font-weight: 700;
        text-align: center;
        margin-bottom: 1.2rem;
    }
    .section-header {
        font-size: 1.3rem;
        font-weight: 600;
        margin-top: 0.5rem;
        margin-bottom: 0.3rem;
    }
    .movie-meta {
        font-size: 0.9rem;
        color: #cccccc;
    }
    .trend-rank {
        font-size: 2.4rem;
        font-weight: 800;
        color: #aaaaaa;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------------------- ESTADO INICIAL ---------------------- #

if "controller" not in st.session_state:
    if not settings.TMDB_API_KEY:
        logger.warning("TMDB_API_KEY não configurado; as chamadas ao TMDB vão falhar.")
    controller = MovieController()
    # carrega as buscas em alta uma única vez por sessão
    controller.load_trending_movies()
    st.session_state["controller"] = controller
    st.session_state["debouncer"] = Debouncer(settings.DEBOUNCE_MS)

controller: MovieController = st.session_state["controller"]
debouncer: Debouncer = st.session_state["debouncer"]

# ---------------------- COMPONENTES ---------------------- #

def render_search() -> str:
    """Campo de busca; cada tecla devolve o texto inteiro (sem debounce aqui)."""
    term = st_keyup(
        "Search",
        key="search_input",
        placeholder="Search Movies",
        label_visibility="collapsed",
    )
    return term or ""


def render_movie_card(movie: Movie, container) -> None:
    card = build_card(movie)
    if card.poster == PLACEHOLDER_POSTER and not os.path.exists(PLACEHOLDER_POSTER):
        container.write("🎞️\n(no poster)")
    else:
        container.image(card.poster, width="stretch")
    container.markdown(f"**{card.title}**")
    container.markdown(
        f'<div class="movie-meta">⭐ {card.rating} · {card.language} · {card.year}</div>',
        unsafe_allow_html=True,
    )


def render_trending(entries) -> None:
    st.markdown('<div class="section-header">Trending Movies</div>', unsafe_allow_html=True)
    cols = st.columns(len(entries))
    for index, (col, entry) in enumerate(zip(cols, entries), start=1):
        col.markdown(f'<div class="trend-rank">{index}</div>', unsafe_allow_html=True)
        if entry.poster_url and entry.poster_url != PLACEHOLDER_POSTER:
            col.image(entry.poster_url, caption=entry.title or entry.search_term, width="stretch")


def render_movies(state, columns: int = 4) -> None:
    st.markdown('<div class="section-header">All movies</div>', unsafe_allow_html=True)
    if state.error_message:
        st.error(state.error_message)
        return
    if not state.movies:
        st.info("No movies found.")
        return
    movies = list(state.movies)
    for start in range(0, len(movies), columns):
        row = st.columns(columns)
        for col, movie in zip(row, movies[start:start + columns]):
            render_movie_card(movie, col)

# ---------------------- PÁGINA ---------------------- #

st.markdown(
    '<div class="main-title">Find Movies You\'ll Enjoy Without the Hassle</div>',
    unsafe_allow_html=True,
)
term = render_search()
if term != controller.state.search_term:
    controller.update_search_term(term)
    debouncer.push(term)

# espera o termo assentar; uma tecla nova interrompe esta execução e reinicia o timer
settled = debouncer.wait()
if controller.settle_search_term(settled):
    with st.spinner("Loading movies..."):
        controller.fetch_movies(settled)

state = controller.state

if state.trending:
    render_trending(state.trending)

render_movies(state)
