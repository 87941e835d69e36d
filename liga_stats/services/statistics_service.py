"""Service de estatísticas

Carrega as entidades do banco e delega o cálculo às funções puras de
``standings`` e ``player_rankings``. Não há cache: cada chamada recalcula a
partir dos dados atuais.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from liga_stats.core.config import settings
from liga_stats.repositories.card_repository import CardRepository
from liga_stats.repositories.goal_repository import GoalRepository
from liga_stats.repositories.match_repository import MatchRepository
from liga_stats.repositories.player_repository import PlayerRepository
from liga_stats.repositories.team_repository import TeamRepository
from liga_stats.services import player_rankings
from liga_stats.services.standings import TeamStats, calculate_standings


class StatisticsService:
    """Service de classificação e rankings"""

    def __init__(self, db: Session):
        self.db = db
        self.teams = TeamRepository(db)
        self.players = PlayerRepository(db)
        self.matches = MatchRepository(db)
        self.goals = GoalRepository(db)
        self.cards = CardRepository(db)

    @staticmethod
    def _limit(limit: Optional[int]) -> int:
        return settings.RANKING_DEFAULT_LIMIT if limit is None else limit

    def compute_standings(self) -> List[TeamStats]:
        """Tabela de classificação"""
        return calculate_standings(
            self.teams.get_all(),
            self.matches.get_finished(),
            form_games=settings.FORM_GAMES,
        )

    def compute_top_scorers(self, limit: Optional[int] = None):
        return player_rankings.top_scorers(
            self.players.get_all(),
            self.teams.get_all(),
            self.matches.get_all(),
            self.goals.get_all(),
            limit=self._limit(limit),
        )

    def compute_top_assists(self, limit: Optional[int] = None):
        return player_rankings.top_assists(
            self.players.get_all(),
            self.teams.get_all(),
            self.matches.get_all(),
            self.goals.get_all(),
            limit=self._limit(limit),
        )

    def compute_card_stats(self, limit: Optional[int] = None):
        return player_rankings.card_stats(
            self.players.get_all(),
            self.teams.get_all(),
            self.matches.get_all(),
            self.cards.get_all(),
            limit=self._limit(limit),
        )

    def compute_best_goalkeepers(self, limit: Optional[int] = None):
        return player_rankings.best_goalkeepers(
            self.players.get_all(),
            self.teams.get_all(),
            self.matches.get_finished(),
            limit=self._limit(limit),
        )
