"""Service de partidas"""
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from liga_stats.core.database import atomic
from liga_stats.core.exceptions import NotFoundError, ValidationError
from liga_stats.models.match import Match
from liga_stats.repositories.match_repository import MatchRepository
from liga_stats.repositories.team_repository import TeamRepository
from liga_stats.services.validation import as_utc

logger = logging.getLogger(__name__)

SCHEDULED = "scheduled"
LIVE = "live"
COMPLETED = "completed"


def match_status(match, now: Optional[datetime] = None) -> str:
    """
    Status de exibição da partida, nunca gravado no banco.

    ``completed`` se finalizada; ``live`` se a data já chegou mas a partida
    não foi finalizada; ``scheduled`` caso contrário.
    """
    if match.finished:
        return COMPLETED
    now = as_utc(now or datetime.now(timezone.utc))
    if as_utc(match.match_date) <= now:
        return LIVE
    return SCHEDULED


class MatchService:
    """Service para operações com partidas"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = MatchRepository(db)
        self.teams = TeamRepository(db)

    def create_match(self, home_team_id: int, away_team_id: int, match_date: datetime) -> Match:
        """Cria partida não finalizada com placar 0-0"""
        if home_team_id == away_team_id:
            raise ValidationError("Time mandante e visitante não podem ser o mesmo")
        if match_date is None:
            raise ValidationError("Data da partida é obrigatória")

        with atomic(self.db):
            for team_id in (home_team_id, away_team_id):
                if not self.teams.get_by_id(team_id):
                    raise NotFoundError("Time", team_id)
            match = self.repository.create({
                "home_team_id": home_team_id,
                "away_team_id": away_team_id,
                "match_date": as_utc(match_date),
                "finished": False,
                "home_score": 0,
                "away_score": 0,
            })

        logger.info(f"Partida {match.id} criada: {home_team_id} x {away_team_id}")
        return self.repository.get_detailed(match.id)

    def get_matches(self) -> List[Match]:
        """Todas as partidas, mais recentes primeiro"""
        return self.repository.list_detailed()

    def get_upcoming_matches(self, now: Optional[datetime] = None) -> List[Match]:
        """Partidas não finalizadas a partir de agora, mais próximas primeiro"""
        now = as_utc(now or datetime.now(timezone.utc))
        return self.repository.list_detailed(finished=False, date_from=now, ascending=True)

    def get_finished_matches(self) -> List[Match]:
        """Partidas finalizadas, mais recentes primeiro"""
        return self.repository.list_detailed(finished=True)

    def get_match(self, match_id: int) -> Match:
        match = self.repository.get_detailed(match_id)
        if not match:
            raise NotFoundError("Partida", match_id)
        return match

    def delete_match(self, match_id: int) -> None:
        """Remove a partida com seus gols e cartões"""
        with atomic(self.db):
            if not self.repository.get_by_id(match_id):
                raise NotFoundError("Partida", match_id)
            self.repository.delete_many([match_id])
        logger.info(f"Partida {match_id} removida")
