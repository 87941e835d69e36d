"""Repository de Match"""
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, delete, or_
from datetime import datetime
from typing import List, Optional
from liga_stats.models.match import Match
from liga_stats.models.goal import Goal
from liga_stats.models.card import Card


def _with_details(query):
    """Inclui times, gols e cartões com seus jogadores"""
    return query.options(
        selectinload(Match.home_team),
        selectinload(Match.away_team),
        selectinload(Match.goals).selectinload(Goal.scorer),
        selectinload(Match.goals).selectinload(Goal.assistant),
        selectinload(Match.cards).selectinload(Card.player),
    )


class MatchRepository:
    """Repository para operações de banco com Match"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Match]:
        """Obtém todas as partidas (ordem de criação), sem relações"""
        result = self.db.execute(select(Match).order_by(Match.id))
        return list(result.scalars().all())

    def get_finished(self) -> List[Match]:
        """Partidas finalizadas (ordem de criação)"""
        result = self.db.execute(
            select(Match).filter(Match.finished.is_(True)).order_by(Match.id)
        )
        return list(result.scalars().all())

    def list_detailed(self, finished: Optional[bool] = None, date_from: Optional[datetime] = None,
                      ascending: bool = False) -> List[Match]:
        """Lista partidas com detalhes, por data"""
        query = _with_details(select(Match))
        if finished is not None:
            query = query.filter(Match.finished.is_(finished))
        if date_from is not None:
            query = query.filter(Match.match_date >= date_from)
        order = Match.match_date.asc() if ascending else Match.match_date.desc()
        result = self.db.execute(query.order_by(order, Match.id))
        return list(result.scalars().all())

    def get_by_id(self, match_id: int, for_update: bool = False) -> Optional[Match]:
        """Obtém partida por ID; ``for_update`` trava a linha até o commit"""
        query = select(Match).filter(Match.id == match_id)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)
        result = self.db.execute(query)
        return result.scalar_one_or_none()

    def get_detailed(self, match_id: int) -> Optional[Match]:
        result = self.db.execute(_with_details(select(Match)).filter(Match.id == match_id))
        return result.scalar_one_or_none()

    def get_ids_by_team(self, team_id: int) -> List[int]:
        result = self.db.execute(
            select(Match.id).filter(or_(Match.home_team_id == team_id, Match.away_team_id == team_id))
        )
        return list(result.scalars().all())

    def create(self, match_data: dict) -> Match:
        """Cria nova partida"""
        match = Match(**match_data)
        self.db.add(match)
        self.db.flush()
        return match

    def update(self, match: Match, match_data: dict) -> Match:
        """Atualiza partida"""
        for key, value in match_data.items():
            setattr(match, key, value)
        self.db.flush()
        return match

    def delete_many(self, match_ids: List[int]) -> int:
        """Deleta partidas junto com gols e cartões"""
        if not match_ids:
            return 0
        self.db.execute(delete(Goal).where(Goal.match_id.in_(match_ids)))
        self.db.execute(delete(Card).where(Card.match_id.in_(match_ids)))
        result = self.db.execute(delete(Match).where(Match.id.in_(match_ids)))
        return result.rowcount
