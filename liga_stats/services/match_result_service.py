"""Service de resultado de partidas

Mantém ``home_score``/``away_score`` iguais à contagem de gols de cada lado.
Toda escrita de gol recalcula o placar na mesma transação, com a linha da
partida travada (``SELECT ... FOR UPDATE``) para serializar escritas
concorrentes na mesma partida.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from liga_stats.core.database import atomic
from liga_stats.core.exceptions import NotFoundError, ValidationError
from liga_stats.models.goal import Goal
from liga_stats.models.match import Match
from liga_stats.models.player import Player
from liga_stats.repositories.card_repository import CardRepository
from liga_stats.repositories.goal_repository import GoalRepository
from liga_stats.repositories.match_repository import MatchRepository
from liga_stats.repositories.player_repository import PlayerRepository
from liga_stats.services.validation import (
    as_utc,
    ensure_team_in_match,
    normalize_card_type,
    validate_minute,
    validate_score,
)

logger = logging.getLogger(__name__)


@dataclass
class MatchScore:
    match_id: int
    home_score: int
    away_score: int


class MatchResultService:
    """Gols, substituição de resultado e reparo de placares"""

    def __init__(self, db: Session):
        self.db = db
        self.matches = MatchRepository(db)
        self.goals = GoalRepository(db)
        self.cards = CardRepository(db)
        self.players = PlayerRepository(db)

    # ------------------------------------------------------------------
    # Auxiliares
    # ------------------------------------------------------------------

    def _get_match(self, match_id: int, for_update: bool = True) -> Match:
        match = self.matches.get_by_id(match_id, for_update=for_update)
        if not match:
            raise NotFoundError("Partida", match_id)
        return match

    def _get_player(self, player_id: int) -> Player:
        player = self.players.get_by_id(player_id)
        if not player:
            raise NotFoundError("Jogador", player_id)
        return player

    def _validate_goal(self, match: Match, data: dict) -> dict:
        """Valida um gol da partida e devolve os campos a gravar"""
        scorer_id = data.get("scorer_id")
        assistant_id = data.get("assistant_id")
        team_id = data.get("team_id")
        if scorer_id is None or team_id is None:
            raise ValidationError("Autor do gol e time são obrigatórios")

        minute = validate_minute(data.get("minute"), required=True)
        ensure_team_in_match(match, team_id)
        scorer = self._get_player(scorer_id)

        if assistant_id is not None:
            if assistant_id == scorer_id:
                raise ValidationError("Assistente não pode ser o autor do gol")
            assistant = self._get_player(assistant_id)
            if assistant.team_id != scorer.team_id:
                raise ValidationError("Assistente deve ser do mesmo time do autor do gol")

        return {
            "match_id": match.id,
            "scorer_id": scorer_id,
            "assistant_id": assistant_id,
            "team_id": team_id,
            "minute": minute,
        }

    def validate_card(self, match: Match, data: dict) -> dict:
        """Valida um cartão da partida e devolve os campos a gravar"""
        player_id = data.get("player_id")
        team_id = data.get("team_id")
        if player_id is None or team_id is None:
            raise ValidationError("Jogador e time são obrigatórios")

        card_type = normalize_card_type(data.get("type"))
        minute = validate_minute(data.get("minute"), required=False)
        ensure_team_in_match(match, team_id)
        self._get_player(player_id)

        return {
            "match_id": match.id,
            "player_id": player_id,
            "team_id": team_id,
            "type": card_type,
            "minute": minute,
        }

    def _apply_score(self, match: Match) -> MatchScore:
        """Recalcula o placar a partir dos gols gravados"""
        counts = self.goals.count_by_team(match.id)
        match.home_score = counts.get(match.home_team_id, 0)
        match.away_score = counts.get(match.away_team_id, 0)
        self.db.flush()
        return MatchScore(match.id, match.home_score, match.away_score)

    def refresh_scores(self, match_ids: Iterable[int]) -> List[MatchScore]:
        """Recalcula o placar das partidas que ainda existem (sem commit)"""
        scores = []
        for match_id in sorted(set(match_ids)):
            match = self.matches.get_by_id(match_id, for_update=True)
            if match is not None:
                scores.append(self._apply_score(match))
        return scores

    # ------------------------------------------------------------------
    # Gols
    # ------------------------------------------------------------------

    def record_goal(self, match_id: int, scorer_id: int, team_id: int, minute: int,
                    assistant_id: Optional[int] = None) -> Tuple[Goal, MatchScore]:
        """Registra um gol e atualiza o placar"""
        with atomic(self.db):
            match = self._get_match(match_id)
            goal_data = self._validate_goal(match, {
                "scorer_id": scorer_id,
                "assistant_id": assistant_id,
                "team_id": team_id,
                "minute": minute,
            })
            goal = self.goals.create(goal_data)
            score = self._apply_score(match)

        logger.info(
            f"Gol registrado na partida {match_id} (jogador {scorer_id}, {minute}'): "
            f"{score.home_score}-{score.away_score}"
        )
        return goal, score

    def update_goal(self, goal_id: int, scorer_id: int, team_id: int, minute: int,
                    assistant_id: Optional[int] = None) -> Tuple[Goal, MatchScore]:
        """Edita um gol e atualiza o placar"""
        with atomic(self.db):
            goal = self.goals.get_by_id(goal_id)
            if not goal:
                raise NotFoundError("Gol", goal_id)
            match = self._get_match(goal.match_id)
            goal_data = self._validate_goal(match, {
                "scorer_id": scorer_id,
                "assistant_id": assistant_id,
                "team_id": team_id,
                "minute": minute,
            })
            goal = self.goals.update(goal, goal_data)
            score = self._apply_score(match)

        logger.info(f"Gol {goal_id} atualizado: {score.home_score}-{score.away_score}")
        return goal, score

    def remove_goal(self, goal_id: int) -> MatchScore:
        """Remove um gol e atualiza o placar"""
        with atomic(self.db):
            goal = self.goals.get_by_id(goal_id)
            if not goal:
                raise NotFoundError("Gol", goal_id)
            match = self._get_match(goal.match_id)
            self.goals.delete(goal)
            score = self._apply_score(match)

        logger.info(f"Gol {goal_id} removido: {score.home_score}-{score.away_score}")
        return score

    # ------------------------------------------------------------------
    # Resultado completo
    # ------------------------------------------------------------------

    def replace_match_result(self, match_id: int, home_score: Optional[int] = None,
                             away_score: Optional[int] = None, finished: Optional[bool] = None,
                             match_date: Optional[datetime] = None,
                             goals: Optional[List[dict]] = None,
                             cards: Optional[List[dict]] = None) -> Match:
        """
        Atualiza o resultado de uma partida numa única transação.

        Com ``goals``: apaga todos os gols e cartões, grava os informados e
        calcula o placar pela contagem. Sem ``goals``: edição simples em que
        ``home_score``/``away_score`` explícitos são gravados e os gols ficam
        como estão (``cards``, se vier, ainda substitui os cartões).
        """
        with atomic(self.db):
            match = self._get_match(match_id)

            # Valida tudo antes de apagar qualquer coisa
            goals_data = None
            if goals is not None:
                goals_data = [self._validate_goal(match, goal) for goal in goals]
            cards_data = None
            if cards is not None or goals is not None:
                cards_data = [self.validate_card(match, card) for card in (cards or [])]

            changes = {}
            if finished is not None:
                changes["finished"] = finished
            if match_date is not None:
                changes["match_date"] = as_utc(match_date)

            if goals_data is not None:
                self.goals.delete_by_match(match.id)
                self.goals.create_many(goals_data)
                self.matches.update(match, changes)
                score = self._apply_score(match)
                explicit = (home_score, away_score)
                if explicit != (None, None) and explicit != (score.home_score, score.away_score):
                    logger.warning(
                        f"Placar informado {home_score}-{away_score} difere dos gols da partida "
                        f"{match.id}; usando {score.home_score}-{score.away_score}"
                    )
            else:
                if validate_score(home_score, "Placar do mandante") is not None:
                    changes["home_score"] = home_score
                if validate_score(away_score, "Placar do visitante") is not None:
                    changes["away_score"] = away_score
                self.matches.update(match, changes)

            if cards_data is not None:
                self.cards.delete_by_match(match.id)
                self.cards.create_many(cards_data)

        logger.info(
            f"Resultado da partida {match_id} atualizado: {match.home_score}-{match.away_score} "
            f"(finalizada={match.finished})"
        )
        self.db.expire_all()
        return self.matches.get_detailed(match_id)

    # ------------------------------------------------------------------
    # Reparo
    # ------------------------------------------------------------------

    def recompute_score(self, match_id: int) -> MatchScore:
        """Recalcula o placar de uma partida a partir dos gols"""
        with atomic(self.db):
            match = self._get_match(match_id)
            before = (match.home_score, match.away_score)
            score = self._apply_score(match)

        if before != (score.home_score, score.away_score):
            logger.warning(
                f"Placar da partida {match_id} corrigido: {before[0]}-{before[1]} -> "
                f"{score.home_score}-{score.away_score}"
            )
        return score

    def repair_all_scores(self) -> List[Dict]:
        """Corrige todas as partidas cujo placar divergiu da contagem de gols"""
        repaired = []
        with atomic(self.db):
            for match in self.matches.get_all():
                before = (match.home_score, match.away_score)
                score = self._apply_score(match)
                if before != (score.home_score, score.away_score):
                    repaired.append({
                        "match_id": match.id,
                        "before": f"{before[0]}-{before[1]}",
                        "after": f"{score.home_score}-{score.away_score}",
                    })

        if repaired:
            logger.warning(f"{len(repaired)} placares corrigidos")
        return repaired
