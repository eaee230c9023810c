# movie_card.py
from dataclasses import dataclass
from typing import Optional

from models import Movie

POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"
PLACEHOLDER_POSTER = "no-movie.png"
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class MovieCard:
    title: str
    poster: str
    rating: str
    language: str
    year: str


def poster_url(poster_path: Optional[str]) -> str:
    if not poster_path:
        return PLACEHOLDER_POSTER
    return f"{POSTER_BASE_URL}/{poster_path.lstrip('/')}"

def format_rating(vote_average: Optional[float]) -> str:
    # 0 conta como "sem nota", o TMDB usa 0 para filmes sem votos
    if not vote_average:
        return NOT_AVAILABLE
    return f"{float(vote_average):.1f}"

def release_year(release_date: Optional[str]) -> str:
    if not release_date:
        return NOT_AVAILABLE
    return release_date[:4]

def build_card(movie: Movie) -> MovieCard:
    """Tudo que o card precisa para ser desenhado, já formatado."""
    return MovieCard(
        title=movie.title or "Untitled",
        poster=poster_url(movie.poster_path),
        rating=format_rating(movie.vote_average),
        language=movie.original_language or NOT_AVAILABLE,
        year=release_year(movie.release_date),
    )
