"""Core modules - configurações principais"""
from liga_stats.core.config import settings
from liga_stats.core.database import get_db, Base, SessionLocal, atomic
from liga_stats.core.exceptions import LigaStatsError, NotFoundError, ValidationError, ConsistencyError
from liga_stats.core.logging_config import setup_logging

__all__ = [
    "settings",
    "get_db",
    "Base",
    "SessionLocal",
    "atomic",
    "LigaStatsError",
    "NotFoundError",
    "ValidationError",
    "ConsistencyError",
    "setup_logging",
]
