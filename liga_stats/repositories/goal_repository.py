"""Repository de Goal"""
from sqlalchemy.orm import Session
from sqlalchemy import select, delete, update, func
from typing import Dict, List, Optional
from liga_stats.models.goal import Goal


class GoalRepository:
    """Repository para operações de banco com Goal"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Goal]:
        result = self.db.execute(select(Goal).order_by(Goal.id))
        return list(result.scalars().all())

    def get_by_id(self, goal_id: int) -> Optional[Goal]:
        result = self.db.execute(select(Goal).filter(Goal.id == goal_id))
        return result.scalar_one_or_none()

    def count_by_team(self, match_id: int) -> Dict[int, int]:
        """Quantidade de gols por time numa partida"""
        result = self.db.execute(
            select(Goal.team_id, func.count(Goal.id))
            .filter(Goal.match_id == match_id)
            .group_by(Goal.team_id)
        )
        return {team_id: count for team_id, count in result.all()}

    def get_match_ids_for_players(self, player_ids: List[int]) -> List[int]:
        """Partidas com gols marcados pelos jogadores"""
        if not player_ids:
            return []
        result = self.db.execute(
            select(Goal.match_id).filter(Goal.scorer_id.in_(player_ids)).distinct()
        )
        return list(result.scalars().all())

    def create(self, goal_data: dict) -> Goal:
        goal = Goal(**goal_data)
        self.db.add(goal)
        self.db.flush()
        return goal

    def create_many(self, goals_data: List[dict]) -> List[Goal]:
        goals = [Goal(**data) for data in goals_data]
        self.db.add_all(goals)
        self.db.flush()
        return goals

    def update(self, goal: Goal, goal_data: dict) -> Goal:
        for key, value in goal_data.items():
            setattr(goal, key, value)
        self.db.flush()
        return goal

    def delete(self, goal: Goal) -> None:
        self.db.delete(goal)
        self.db.flush()

    def delete_by_match(self, match_id: int) -> int:
        result = self.db.execute(delete(Goal).where(Goal.match_id == match_id))
        return result.rowcount

    def delete_by_scorers(self, player_ids: List[int]) -> int:
        if not player_ids:
            return 0
        result = self.db.execute(delete(Goal).where(Goal.scorer_id.in_(player_ids)))
        return result.rowcount

    def clear_assistants(self, player_ids: List[int]) -> int:
        """Remove a assistência dos jogadores informados"""
        if not player_ids:
            return 0
        result = self.db.execute(
            update(Goal).where(Goal.assistant_id.in_(player_ids)).values(assistant_id=None)
        )
        return result.rowcount
