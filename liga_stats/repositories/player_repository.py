"""Repository de Player"""
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, delete
from typing import List, Optional
from liga_stats.models.player import Player


class PlayerRepository:
    """Repository para operações de banco com Player"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self, team_id: Optional[int] = None) -> List[Player]:
        """Obtém jogadores (ordem de criação), opcionalmente de um time"""
        query = select(Player).options(selectinload(Player.team)).order_by(Player.id)
        if team_id is not None:
            query = query.filter(Player.team_id == team_id)
        result = self.db.execute(query)
        return list(result.scalars().all())

    def get_by_id(self, player_id: int) -> Optional[Player]:
        """Obtém jogador por ID"""
        result = self.db.execute(
            select(Player).options(selectinload(Player.team)).filter(Player.id == player_id)
        )
        return result.scalar_one_or_none()

    def get_ids_by_team(self, team_id: int) -> List[int]:
        result = self.db.execute(select(Player.id).filter(Player.team_id == team_id))
        return list(result.scalars().all())

    def find_by_number(self, team_id: int, number: int, exclude_id: Optional[int] = None) -> Optional[Player]:
        """Busca jogador do time com a camisa informada"""
        query = select(Player).filter(Player.team_id == team_id, Player.number == number)
        if exclude_id is not None:
            query = query.filter(Player.id != exclude_id)
        result = self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    def create(self, player_data: dict) -> Player:
        """Cria novo jogador"""
        player = Player(**player_data)
        self.db.add(player)
        self.db.flush()
        return player

    def update(self, player: Player, player_data: dict) -> Player:
        """Atualiza jogador"""
        for key, value in player_data.items():
            setattr(player, key, value)
        self.db.flush()
        return player

    def delete_many(self, player_ids: List[int]) -> int:
        """Deleta jogadores"""
        if not player_ids:
            return 0
        result = self.db.execute(delete(Player).where(Player.id.in_(player_ids)))
        return result.rowcount
