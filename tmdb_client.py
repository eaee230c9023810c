# tmdb_client.py
from typing import Dict, Optional
from urllib.parse import quote

import requests

import settings
from logger_conf import get_logger

logger = get_logger(__name__)

BASE_URL = settings.TMDB_BASE_URL
# mesmos caracteres que o encodeURIComponent deixa sem escapar
QUERY_SAFE_CHARS = "!'()*"


class CatalogError(Exception):
    """Resposta HTTP fora de 2xx vinda do TMDB."""

    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Failed to fetch movies: {status_code}")


# ---------- utilitários ----------
def build_headers(token: Optional[str] = None) -> Dict[str, str]:
    token = token if token is not None else settings.TMDB_API_KEY
    headers = {"accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers

def build_endpoint(query: str = "") -> str:
    """
    Escolhe o endpoint: /search/movie quando há termo, senão /discover/movie
    ordenado por popularidade. O termo vai codificado na URL.
    """
    if query:
        return f"{BASE_URL}/search/movie?query={quote(query, safe=QUERY_SAFE_CHARS)}"
    return f"{BASE_URL}/discover/movie?sort_by=popularity.desc"

def _get_json(url: str, token: Optional[str] = None) -> dict:
    logger.debug(f"GET {url}")
    resp = requests.get(url, headers=build_headers(token), timeout=settings.REQUEST_TIMEOUT)
    if not resp.ok:
        logger.warning(f"Erro na API: status {resp.status_code} — {resp.text[:200]}")
        raise CatalogError(resp.status_code, resp.text[:200])
    return resp.json()

# ---------- funções principais ----------
def search_movie(query: str, token: Optional[str] = None) -> dict:
    """
    Busca filmes por texto (/search/movie).
    Levanta CatalogError em status != 2xx; erros de rede (requests) e de JSON
    (ValueError) sobem para quem chamou.
    """
    if not query:
        raise ValueError("search_movie precisa de um termo não vazio")
    return _get_json(build_endpoint(query), token)

def discover_movies(token: Optional[str] = None) -> dict:
    """Filmes populares (/discover/movie?sort_by=popularity.desc)."""
    return _get_json(build_endpoint(""), token)

def fetch_movies(query: str = "", token: Optional[str] = None) -> dict:
    """Busca por termo se houver um, senão cai no discover."""
    if query:
        return search_movie(query, token)
    return discover_movies(token)


# ---------- quick smoke test quando executado diretamente ----------
if __name__ == "__main__":
    print("tmdb_client quick test (não faz chamadas se o token não estiver configurado).")
    if not settings.TMDB_API_KEY:
        print("Nenhuma credencial TMDB encontrada em ambiente (.env). Configure TMDB_API_KEY.")
    else:
        data = discover_movies()
        print(f"discover retornou {len(data.get('results', []))} filmes.")
