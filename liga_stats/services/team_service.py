"""Service de times"""
from typing import List
from sqlalchemy.orm import Session
import logging

from liga_stats.core.database import atomic
from liga_stats.core.exceptions import NotFoundError, ValidationError
from liga_stats.models.team import Team
from liga_stats.repositories.match_repository import MatchRepository
from liga_stats.repositories.player_repository import PlayerRepository
from liga_stats.repositories.team_repository import TeamRepository
from liga_stats.services.player_service import PlayerService
from liga_stats.services.validation import require_text

logger = logging.getLogger(__name__)


class TeamService:
    """Service para operações com times"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = TeamRepository(db)

    def get_teams(self) -> List[Team]:
        """Times por nome, com elenco"""
        return self.repository.get_all_with_players()

    def get_team(self, team_id: int) -> Team:
        team = self.repository.get_by_id(team_id)
        if not team:
            raise NotFoundError("Time", team_id)
        return team

    def _validate_roster(self, roster: List[dict]) -> List[dict]:
        """Valida o elenco informado: nomes, posições e camisas únicas e não negativas"""
        numbers = [p.get("number") for p in roster if p.get("number") is not None]
        if any(number < 0 for number in numbers):
            raise ValidationError("Número da camisa não pode ser negativo")
        if len(numbers) != len(set(numbers)):
            raise ValidationError("Números de camisa repetidos no elenco")
        return [
            {
                "name": require_text(player.get("name"), "Nome"),
                "position": require_text(player.get("position"), "Posição"),
                "number": player.get("number"),
            }
            for player in roster
        ]

    def _create_roster(self, team_id: int, roster: List[dict]) -> None:
        players = PlayerRepository(self.db)
        for player in roster:
            players.create({**player, "team_id": team_id})

    def create_team(self, team_data: dict) -> Team:
        """Cria time, opcionalmente com elenco inicial"""
        name = require_text(team_data.get("name"), "Nome do time")
        roster = self._validate_roster(team_data.get("players") or [])

        with atomic(self.db):
            team = self.repository.create({"name": name, "logo": team_data.get("logo")})
            self._create_roster(team.id, roster)

        logger.info(f"Time {team.id} ({name}) criado com {len(roster)} jogadores")
        self.db.expire(team)
        return self.get_team(team.id)

    def update_team(self, team_id: int, team_data: dict) -> Team:
        """
        Atualiza nome e escudo.

        Com ``players`` informado, o elenco inteiro é substituído: os jogadores
        atuais saem (com seus gols e cartões, recalculando os placares) e o
        novo elenco é criado.
        """
        changes = {}
        if team_data.get("name") is not None:
            changes["name"] = require_text(team_data["name"], "Nome do time")
        if "logo" in team_data:
            changes["logo"] = team_data["logo"]
        roster = None
        if team_data.get("players") is not None:
            roster = self._validate_roster(team_data["players"])

        with atomic(self.db):
            team = self.get_team(team_id)
            self.repository.update(team, changes)
            if roster is not None:
                player_ids = PlayerRepository(self.db).get_ids_by_team(team_id)
                PlayerService(self.db).remove_players(player_ids)
                self._create_roster(team_id, roster)

        if roster is not None:
            logger.info(f"Time {team_id} atualizado com novo elenco de {len(roster)} jogadores")
            self.db.expire(team)
            return self.get_team(team_id)
        logger.info(f"Time {team_id} atualizado")
        return team

    def delete_team(self, team_id: int) -> None:
        """
        Remove o time: primeiro todas as partidas em que joga (com gols e
        cartões), depois os jogadores, depois o próprio time.
        """
        with atomic(self.db):
            self.get_team(team_id)
            matches = MatchRepository(self.db)
            match_ids = matches.get_ids_by_team(team_id)
            matches.delete_many(match_ids)

            player_ids = PlayerRepository(self.db).get_ids_by_team(team_id)
            PlayerService(self.db).remove_players(player_ids)
            self.repository.delete(team_id)

        logger.info(
            f"Time {team_id} removido ({len(match_ids)} partidas, {len(player_ids)} jogadores)"
        )
