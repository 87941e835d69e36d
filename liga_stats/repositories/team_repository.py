"""Repository de Team"""
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, delete
from typing import List, Optional
from liga_stats.models.team import Team


class TeamRepository:
    """Repository para operações de banco com Team"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Team]:
        """Obtém todos os times (ordem de criação)"""
        result = self.db.execute(select(Team).order_by(Team.id))
        return list(result.scalars().all())

    def get_all_with_players(self) -> List[Team]:
        """Obtém todos os times com elenco, ordenados por nome"""
        result = self.db.execute(
            select(Team).options(selectinload(Team.players)).order_by(Team.name, Team.id)
        )
        return list(result.scalars().all())

    def get_by_id(self, team_id: int) -> Optional[Team]:
        """Obtém time por ID"""
        result = self.db.execute(
            select(Team).options(selectinload(Team.players)).filter(Team.id == team_id)
        )
        return result.scalar_one_or_none()

    def create(self, team_data: dict) -> Team:
        """Cria novo time"""
        team = Team(**team_data)
        self.db.add(team)
        self.db.flush()
        return team

    def update(self, team: Team, team_data: dict) -> Team:
        """Atualiza time"""
        for key, value in team_data.items():
            setattr(team, key, value)
        self.db.flush()
        return team

    def delete(self, team_id: int) -> None:
        """Deleta time"""
        self.db.execute(delete(Team).where(Team.id == team_id))
