# models.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Movie:
    """Snapshot de um filme vindo do TMDB (um item de `results`)."""
    id: Optional[int]
    title: Optional[str]
    poster_path: Optional[str] = None
    vote_average: Optional[float] = None
    original_language: Optional[str] = None
    release_date: Optional[str] = None

    @classmethod
    def from_api(cls, item: dict) -> "Movie":
        return cls(
            id=item.get("id"),
            title=item.get("title") or item.get("name"),
            poster_path=item.get("poster_path"),
            vote_average=item.get("vote_average"),
            original_language=item.get("original_language"),
            release_date=item.get("release_date"),
        )


@dataclass(frozen=True)
class TrendingEntry:
    """Registro agregado de popularidade, chaveado pelo termo exato buscado."""
    id: str
    search_term: str
    count: int
    movie_id: Optional[int] = None
    poster_url: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_record(cls, record: dict) -> "TrendingEntry":
        return cls(
            id=record.get("id", ""),
            search_term=record.get("searchTerm", ""),
            count=int(record.get("count", 0) or 0),
            movie_id=record.get("movie_id"),
            poster_url=record.get("poster_url"),
            title=record.get("title"),
        )
