"""Service de jogadores"""
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from liga_stats.core.database import atomic
from liga_stats.core.exceptions import NotFoundError, ValidationError
from liga_stats.models.player import Player
from liga_stats.repositories.card_repository import CardRepository
from liga_stats.repositories.goal_repository import GoalRepository
from liga_stats.repositories.player_repository import PlayerRepository
from liga_stats.repositories.team_repository import TeamRepository
from liga_stats.services.match_result_service import MatchResultService
from liga_stats.services.validation import require_text

logger = logging.getLogger(__name__)


class PlayerService:
    """Service para operações com jogadores"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = PlayerRepository(db)
        self.teams = TeamRepository(db)

    def _ensure_number_free(self, team_id: int, number: Optional[int], exclude_id: Optional[int] = None):
        if number is None:
            return
        if number < 0:
            raise ValidationError("Número da camisa não pode ser negativo")
        if self.repository.find_by_number(team_id, number, exclude_id=exclude_id):
            raise ValidationError(f"Número {number} já existe neste time")

    def get_players(self, team_id: Optional[int] = None) -> List[Player]:
        return self.repository.get_all(team_id=team_id)

    def get_player(self, player_id: int) -> Player:
        player = self.repository.get_by_id(player_id)
        if not player:
            raise NotFoundError("Jogador", player_id)
        return player

    def create_player(self, player_data: dict) -> Player:
        """Cria jogador num time existente"""
        name = require_text(player_data.get("name"), "Nome")
        position = require_text(player_data.get("position"), "Posição")
        team_id = player_data.get("team_id")
        number = player_data.get("number")

        with atomic(self.db):
            if team_id is None or not self.teams.get_by_id(team_id):
                raise NotFoundError("Time", team_id)
            self._ensure_number_free(team_id, number)
            player = self.repository.create({
                "name": name,
                "position": position,
                "number": number,
                "team_id": team_id,
            })

        logger.info(f"Jogador {player.id} ({name}) criado no time {team_id}")
        return player

    def update_player(self, player_id: int, player_data: dict) -> Player:
        """Atualiza nome, posição e número (o time não muda)"""
        name = require_text(player_data.get("name"), "Nome")
        position = require_text(player_data.get("position"), "Posição")
        number = player_data.get("number")

        with atomic(self.db):
            player = self.get_player(player_id)
            self._ensure_number_free(player.team_id, number, exclude_id=player.id)
            player = self.repository.update(player, {
                "name": name,
                "position": position,
                "number": number,
            })

        logger.info(f"Jogador {player_id} atualizado")
        return player

    def remove_players(self, player_ids: List[int]) -> None:
        """
        Remove jogadores sem commit: apaga os gols que marcaram e os cartões
        que receberam, limpa as assistências e recalcula os placares afetados.
        """
        if not player_ids:
            return
        goals = GoalRepository(self.db)
        affected = goals.get_match_ids_for_players(player_ids)
        goals.delete_by_scorers(player_ids)
        goals.clear_assistants(player_ids)
        CardRepository(self.db).delete_by_players(player_ids)
        self.repository.delete_many(player_ids)
        MatchResultService(self.db).refresh_scores(affected)

    def delete_player(self, player_id: int) -> None:
        with atomic(self.db):
            self.get_player(player_id)
            self.remove_players([player_id])
        logger.info(f"Jogador {player_id} removido")
