"""Configuração do banco de dados"""
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from typing import Iterator
from contextlib import contextmanager
from liga_stats.core.config import settings
import logging

logger = logging.getLogger(__name__)

# Base para modelos SQLAlchemy
Base = declarative_base()


def get_sync_database_url() -> str:
    """Normaliza a URL para o driver psycopg2"""
    url = settings.database_url
    if url.startswith("postgresql+asyncpg://"):
        return url.replace("postgresql+asyncpg://", "postgresql+psycopg2://")
    elif url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg2://")
    return url


def _engine_options(url: str) -> dict:
    """Opções do engine conforme o banco"""
    if url.startswith("sqlite"):
        # SQLite (testes e desenvolvimento local): uma conexão compartilhada entre threads
        options = {"connect_args": {"check_same_thread": False}, "echo": settings.DEBUG}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": 10,
        "max_overflow": 5,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "echo": settings.DEBUG,
    }


database_url = get_sync_database_url()
engine = create_engine(database_url, **_engine_options(database_url))


if database_url.startswith("sqlite"):
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Session factory (uma sessão por requisição / task)
SessionLocal = sessionmaker(
    bind=engine,
    class_=Session,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


def get_db() -> Iterator[Session]:
    """
    Dependency para obter sessão do banco de dados.
    Uso: db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db():
    """Inicializa o banco de dados criando todas as tabelas"""
    import liga_stats.models  # noqa: F401  registra os modelos no metadata
    Base.metadata.create_all(bind=engine)
    logger.info("Banco de dados inicializado")


def close_db():
    """Fecha todas as conexões do banco"""
    engine.dispose()
    logger.info("Conexões do banco de dados fechadas")


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """Executa o bloco numa única transação: commit no fim, rollback em erro"""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
