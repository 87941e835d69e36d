"""Configuração de logging"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from liga_stats.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Bibliotecas que só interessam em caso de problema
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "celery", "multipart")


def _file_handler() -> logging.Handler:
    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")


def setup_logging() -> logging.Logger:
    """
    Configura o logging da aplicação e das tasks.

    Sempre loga no stdout; em produção (sem DEBUG) e com ``LOG_TO_FILE`` também
    grava em ``LOG_FILE`` com rotação.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_TO_FILE and not settings.DEBUG:
        handlers.append(_file_handler())

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger("liga_stats")
    logger.info(f"Logging configurado (nível {settings.LOG_LEVEL}, ambiente {settings.ENVIRONMENT})")
    return logger
