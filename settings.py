# settings.py
import os
from dotenv import load_dotenv

# Carrega .env
load_dotenv()


def _int_env(name: str, default: int) -> int:
    """Lê um inteiro do ambiente; valor ausente ou inválido volta ao padrão."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Bearer token (v4) do TMDB
TMDB_API_KEY = os.getenv("TMDB_API_KEY")
TMDB_BASE_URL = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")

DEBOUNCE_MS = max(0, _int_env("DEBOUNCE_MS", 500))
TRENDING_LIMIT = max(0, _int_env("TRENDING_LIMIT", 5))
REQUEST_TIMEOUT = _int_env("REQUEST_TIMEOUT", 10)

TRENDING_FILE = os.getenv(
    "TRENDING_FILE",
    os.path.join(os.path.dirname(__file__), "trending.json"),
)

# LOG_FILE vazio desliga o log em arquivo
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv(
    "LOG_FILE",
    os.path.join(os.path.dirname(__file__), "movie_finder.log"),
)
