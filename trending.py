# trending.py
import json
import os
import tempfile
import threading
import uuid
from typing import Dict, List, Optional

import settings
from logger_conf import get_logger
from models import Movie, TrendingEntry
from movie_card import poster_url

logger = get_logger(__name__)

# o Streamlit roda cada sessão numa thread do mesmo processo
_LOCK = threading.Lock()


class TrendingStoreError(RuntimeError):
    """Falha de leitura/gravação no arquivo de buscas em alta."""


def _check_record(record, path: str) -> Dict:
    if not isinstance(record, dict) or not isinstance(record.get("searchTerm"), str):
        raise TrendingStoreError(f"Registro inválido em {path}: {record!r}")
    try:
        record["count"] = int(record.get("count", 0) or 0)
    except (TypeError, ValueError) as e:
        raise TrendingStoreError(f"Contagem inválida para '{record['searchTerm']}' em {path}") from e
    return record

def _find_record(records: List[Dict], search_term: str) -> Optional[Dict]:
    for record in records:
        if record["searchTerm"] == search_term:
            return record
    return None


class TrendingStore:
    """
    Coleção de documentos (arquivo JSON) com a contagem de buscas por termo.
    Cada registro: {id, searchTerm, count, movie_id, poster_url, title}.
    Erros sobem como TrendingStoreError; quem chama decide o que fazer.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or settings.TRENDING_FILE

    def _ensure_file(self):
        """Garante que o arquivo exista e seja um JSON array."""
        if not os.path.exists(self.path):
            self._write([])

    def _read(self) -> List[Dict]:
        self._ensure_file()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f) or []
        except ValueError as e:
            # arquivo corrompido: renomeia e recomeça vazio
            backup = self.path + ".corrupt"
            try:
                os.replace(self.path, backup)
            except OSError as move_error:
                raise TrendingStoreError(f"Erro lendo {self.path} e movendo para {backup}: {move_error}") from e
            self._write([])
            raise TrendingStoreError(f"Erro lendo {self.path}. Arquivo renomeado para {backup}. Detalhe: {e}") from e
        except OSError as e:
            raise TrendingStoreError(f"Erro lendo {self.path}: {e}") from e
        if not isinstance(data, list):
            raise TrendingStoreError(f"{self.path} não contém uma lista de registros")
        return [_check_record(r, self.path) for r in data]

    def _write(self, data: List[Dict]):
        # temporário único no mesmo diretório, trocado de forma atômica
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise TrendingStoreError(f"Erro ao gravar {self.path}: {e}") from e

    def record_search(self, query: str, movie: Movie) -> Dict:
        """
        Incrementa o contador do termo se ele já existe; senão cria o registro
        com count=1 apontando para o filme (o primeiro resultado da busca).
        """
        with _LOCK:
            records = self._read()
            record = _find_record(records, query)
            if record is not None:
                record["count"] += 1
                self._write(records)
                logger.debug(f"Busca '{query}' agora com {record['count']} ocorrências")
                return record

            record = {
                "id": uuid.uuid4().hex,
                "searchTerm": query,
                "count": 1,
                "movie_id": movie.id,
                "poster_url": poster_url(movie.poster_path),
                "title": movie.title,
            }
            records.append(record)
            self._write(records)
        logger.info(f"Novo termo em alta registrado: '{query}' -> {movie.title} ({movie.id})")
        return record

    def get_trending(self, limit: Optional[int] = None) -> List[TrendingEntry]:
        """Até `limit` registros por contagem decrescente; empates mantêm a ordem do arquivo."""
        limit = max(0, settings.TRENDING_LIMIT if limit is None else limit)
        with _LOCK:
            records = self._read()
        ranked = sorted(records, key=lambda r: r["count"], reverse=True)
        return [TrendingEntry.from_record(r) for r in ranked[:limit]]
