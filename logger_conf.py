# logger_conf.py
import logging

import settings

ROOT_LOGGER = "movie-finder"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if root.handlers:
        return root
    root.setLevel(logging.DEBUG)
    root.propagate = False

    # console no nível de LOG_LEVEL (INFO se o valor for desconhecido)
    level = logging.getLevelName(settings.LOG_LEVEL)
    console = logging.StreamHandler()
    console.setLevel(level if isinstance(level, int) else logging.INFO)
    console.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    root.addHandler(console)

    if settings.LOG_FILE:
        fh = logging.FileHandler(settings.LOG_FILE, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        root.addHandler(fh)
    return root


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Logger do projeto; módulos viram filhos de `movie-finder` e herdam os handlers."""
    root = _configure_root()
    if name == ROOT_LOGGER:
        return root
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
