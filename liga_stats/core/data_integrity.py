"""Sistema de validação e integridade de dados"""
from sqlalchemy.orm import Session
from sqlalchemy import func
from collections import Counter, defaultdict
from typing import Optional, Dict, Any
from datetime import datetime, timezone
import logging
from liga_stats.models.match import Match
from liga_stats.models.goal import Goal
from liga_stats.models.card import Card, CARD_TYPES
from liga_stats.models.player import Player

logger = logging.getLogger(__name__)


class DataIntegrityChecker:
    """Classe para verificar e garantir integridade dos dados"""

    def __init__(self, db: Session):
        self.db = db

    def validate_match(self, match: Match, goal_counts: Dict[int, int]) -> tuple[bool, Optional[str]]:
        """Valida integridade de uma partida"""
        if match.home_team_id == match.away_team_id:
            return False, "Time mandante e visitante não podem ser o mesmo"

        if match.home_score < 0 or match.away_score < 0:
            return False, "Placar não pode ser negativo"

        home_goals = goal_counts.get(match.home_team_id, 0)
        away_goals = goal_counts.get(match.away_team_id, 0)
        if (match.home_score, match.away_score) != (home_goals, away_goals):
            return False, (
                f"Placar {match.home_score}-{match.away_score} diverge dos gols "
                f"registrados ({home_goals}-{away_goals})"
            )

        return True, None

    def validate_goal(self, goal: Goal, match: Optional[Match]) -> tuple[bool, Optional[str]]:
        """Valida integridade de um gol"""
        if match is None:
            return False, "Partida do gol não existe"

        if goal.team_id not in (match.home_team_id, match.away_team_id):
            return False, "Time do gol não participa da partida"

        if goal.assistant_id is not None and goal.assistant_id == goal.scorer_id:
            return False, "Assistente igual ao autor do gol"

        return True, None

    def validate_card(self, card: Card, match: Optional[Match]) -> tuple[bool, Optional[str]]:
        """Valida integridade de um cartão"""
        if match is None:
            return False, "Partida do cartão não existe"

        if card.team_id not in (match.home_team_id, match.away_team_id):
            return False, "Time do cartão não participa da partida"

        if card.type not in CARD_TYPES:
            return False, f"Tipo de cartão inválido: {card.type}"

        return True, None

    def _goal_counts(self) -> Dict[int, Dict[int, int]]:
        """Gols por partida e por time"""
        rows = (
            self.db.query(Goal.match_id, Goal.team_id, func.count(Goal.id))
            .group_by(Goal.match_id, Goal.team_id)
            .all()
        )
        counts: Dict[int, Dict[int, int]] = defaultdict(dict)
        for match_id, team_id, count in rows:
            counts[match_id][team_id] = count
        return counts

    def check_data_consistency(self) -> Dict[str, Any]:
        """Verifica consistência geral dos dados no banco"""
        issues = []

        matches = {m.id: m for m in self.db.query(Match).order_by(Match.id).all()}
        goal_counts = self._goal_counts()
        for match in matches.values():
            valid, error = self.validate_match(match, goal_counts.get(match.id, {}))
            if not valid:
                issues.append(f"Partida {match.id}: {error}")

        for goal in self.db.query(Goal).order_by(Goal.id).all():
            valid, error = self.validate_goal(goal, matches.get(goal.match_id))
            if not valid:
                issues.append(f"Gol {goal.id}: {error}")

        for card in self.db.query(Card).order_by(Card.id).all():
            valid, error = self.validate_card(card, matches.get(card.match_id))
            if not valid:
                issues.append(f"Cartão {card.id}: {error}")

        numbers = Counter(
            (team_id, number)
            for team_id, number in self.db.query(Player.team_id, Player.number)
            .filter(Player.number.isnot(None))
            .all()
        )
        for (team_id, number), count in sorted(numbers.items()):
            if count > 1:
                issues.append(f"Time {team_id}: número {number} usado por {count} jogadores")

        if issues:
            logger.warning(f"Verificação de integridade encontrou {len(issues)} problemas")

        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "issues_found": len(issues),
            "issues": issues,
            "status": "ok" if len(issues) == 0 else "issues_found"
        }

    def repair_scores(self) -> Dict[str, Any]:
        """Recalcula placares divergentes"""
        from liga_stats.services.match_result_service import MatchResultService

        repaired = MatchResultService(self.db).repair_all_scores()
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "repaired": len(repaired),
            "matches": repaired,
        }
