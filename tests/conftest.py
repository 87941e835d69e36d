"""Configuração do pytest e fixtures"""
import os
from datetime import datetime, timedelta, timezone

# Banco SQLite em memória e logs só no stdout durante os testes
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient

from liga_stats.core.database import Base, SessionLocal, engine
import liga_stats.models  # noqa: F401
from liga_stats.models import Team, Player, Match, Goal, Card

BASE_DATE = datetime(2024, 3, 1, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def base_date():
    """Data de referência das partidas criadas por make_match"""
    return BASE_DATE


@pytest.fixture
def db():
    """Sessão com tabelas recriadas a cada teste"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    from liga_stats.main import app
    return TestClient(app)


@pytest.fixture
def make_team(db):
    def _make(name, logo=None):
        team = Team(name=name, logo=logo)
        db.add(team)
        db.commit()
        return team
    return _make


@pytest.fixture
def make_player(db):
    def _make(team, name, position="Atacante", number=None):
        player = Player(team_id=team.id, name=name, position=position, number=number)
        db.add(player)
        db.commit()
        return player
    return _make


@pytest.fixture
def make_match(db):
    def _make(home, away, days=0, finished=False, home_score=0, away_score=0):
        match = Match(
            home_team_id=home.id,
            away_team_id=away.id,
            match_date=BASE_DATE + timedelta(days=days),
            finished=finished,
            home_score=home_score,
            away_score=away_score,
        )
        db.add(match)
        db.commit()
        return match
    return _make


@pytest.fixture
def league(make_team, make_player):
    """Três times com elenco básico"""
    a = make_team("Alvorada")
    b = make_team("Bandeirantes")
    c = make_team("Cruzeirinho")
    players = {
        "a_gk": make_player(a, "Goleiro A", "Goleiro", 1),
        "a_fw": make_player(a, "Atacante A", "Atacante", 9),
        "a_mf": make_player(a, "Meia A", "Meio-campo", 10),
        "b_gk": make_player(b, "Goleiro B", "Goleiro", 1),
        "b_fw": make_player(b, "Atacante B", "Atacante", 9),
        "c_gk": make_player(c, "Goleiro C", "Goleiro", 1),
        "c_fw": make_player(c, "Atacante C", "Atacante", 9),
    }
    return {"A": a, "B": b, "C": c, **players}
